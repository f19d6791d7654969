from __future__ import annotations

from dataclasses import dataclass


def capitalize_first(text: str) -> str:
    """Upper-case the first character only; the rest is left as stored."""
    return text[:1].upper() + text[1:]


@dataclass(slots=True)
class Album:
    title: str
    artist: str
    played: bool = False

    def render(self, *, with_state: bool = True) -> str:
        line = f'"{capitalize_first(self.title)}" by {capitalize_first(self.artist)}'
        if not with_state:
            return line
        return f"{line} (played)" if self.played else f"{line} (unplayed)"
