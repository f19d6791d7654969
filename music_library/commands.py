from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

QUOTED_RE = re.compile(r'"([^"]*)"')
QUIT_RE = re.compile(r"q|Q|quit|Quit")


class Verb(str, Enum):
    ADD = "add"
    PLAY = "play"
    SHOW = "show"
    QUIT = "quit"
    HELP = "HELP"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class Command:
    verb: Verb
    raw: str
    title: Optional[str] = None
    artist: Optional[str] = None
    show_artist: Optional[str] = None
    unplayed_only: bool = False


def parse_album_info(raw: str) -> List[str]:
    return QUOTED_RE.findall(raw)


def classify(token: Optional[str]) -> Verb:
    if token is None:
        return Verb.UNKNOWN
    if token == "add":
        return Verb.ADD
    if token == "play":
        return Verb.PLAY
    if token == "show":
        return Verb.SHOW
    # Any token containing a q counts, e.g. "quit", "Q!" or "request".
    if QUIT_RE.search(token):
        return Verb.QUIT
    if token == "HELP":
        return Verb.HELP
    return Verb.UNKNOWN


def parse_command(raw: str) -> Command:
    """Split one prompt line into a verb plus its quoted arguments.

    Only the first word picks the verb. ``show`` reads its artist filter
    from the first quoted string whenever "by" appears anywhere in the
    line, and switches to unplayed-only whenever "unplayed" does.
    """
    quoted = parse_album_info(raw)
    tokens = raw.split()
    verb = classify(tokens[0] if tokens else None)
    title = quoted[0] if quoted else None
    artist = quoted[1] if len(quoted) > 1 else None
    if verb is not Verb.SHOW:
        return Command(verb=verb, raw=raw, title=title, artist=artist)
    return Command(
        verb=verb,
        raw=raw,
        title=title,
        artist=artist,
        show_artist=title if "by" in raw else None,
        unplayed_only="unplayed" in raw,
    )
