from __future__ import annotations

import logging
from typing import List, Optional

from . import messages
from .models import Album, capitalize_first
from .prompt_io import ConsolePromptIO, PromptIO, print_lines

logger = logging.getLogger(__name__)


class MusicLibrary:
    """In-memory album collection, kept in insertion order.

    Lookups match on title OR artist, not on the pair. Adding "Licensed to
    Ill" by Beastie Boys after "Pauls Boutique" by Beastie Boys is reported
    as already added, and an artist filter also matches album titles equal
    to the filter string.
    """

    def __init__(self, prompt_io: Optional[PromptIO] = None) -> None:
        self.prompt_io: PromptIO = prompt_io or ConsolePromptIO()
        self.albums: List[Album] = []

    def __len__(self) -> int:
        return len(self.albums)

    def clear(self) -> None:
        self.albums = []

    def find_albums(self, title: Optional[str], artist: Optional[str]) -> List[Album]:
        # Empty queries never match, so a missing title can't pick up untitled albums.
        return [
            album
            for album in self.albums
            if (title and album.title == title) or (artist and album.artist == artist)
        ]

    def add_album(self, title: str, artist: str) -> bool:
        if self.find_albums(title, artist):
            logger.debug("Skipping duplicate album %r by %r", title, artist)
            self.prompt_io.print(messages.ALREADY_ADDED)
            return False
        self.albums.append(Album(title, artist))
        logger.debug("Added album %r by %r (%d total)", title, artist, len(self.albums))
        self.prompt_io.print(
            messages.ADDED.format(
                title=capitalize_first(title), artist=capitalize_first(artist)
            )
        )
        return True

    def play_album(self, title: Optional[str], artist: Optional[str]) -> Optional[Album]:
        if not self.albums:
            self.prompt_io.print(messages.NOTHING_TO_PLAY)
            return None
        matches = self.find_albums(title, artist)
        if not matches:
            logger.debug("No album matches %r / %r", title, artist)
            self.prompt_io.print(messages.NOT_FOUND.format(title=title or ""))
            return None
        album = matches[0]
        album.played = True
        logger.debug("Marked %r by %r as played", album.title, album.artist)
        self.prompt_io.print(messages.NOW_PLAYING.format(title=title or ""))
        return album

    def display_albums(
        self,
        artist: Optional[str] = None,
        show_unplayed_only: bool = False,
    ) -> List[str]:
        albums = self.albums
        if artist is not None:
            albums = self.find_albums(artist, artist)
        if show_unplayed_only:
            albums = [album for album in albums if not album.played]
        lines = [album.render(with_state=not show_unplayed_only) for album in albums]
        if not lines:
            self.prompt_io.print(messages.NOTHING_TO_SHOW)
        else:
            print_lines(self.prompt_io, lines)
        return lines
