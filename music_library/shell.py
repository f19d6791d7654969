from __future__ import annotations

import logging

from . import messages
from .commands import Verb, parse_command
from .library import MusicLibrary
from .prompt_io import PromptIO, print_lines

logger = logging.getLogger(__name__)


class LibraryShell:
    def __init__(
        self,
        library: MusicLibrary,
        prompt_io: PromptIO,
        *,
        prompt: str = "",
        show_welcome: bool = True,
    ) -> None:
        self.library = library
        self.prompt_io = prompt_io
        self.prompt = prompt
        self.show_welcome = show_welcome

    def greet(self) -> None:
        print_lines(self.prompt_io, (messages.WELCOME, messages.WELCOME_HINT))

    def run(self) -> int:
        logger.debug("Session started")
        if self.show_welcome:
            self.greet()
        while True:
            try:
                raw = self.prompt_io.input(self.prompt)
            except (EOFError, KeyboardInterrupt):
                logger.debug("Input closed; ending session")
                break
            if not self.handle_line(raw):
                break
        logger.debug("Session ended with %d album(s)", len(self.library))
        return 0

    def handle_line(self, raw: str) -> bool:
        """Dispatch one line; False means the user confirmed quitting."""
        command = parse_command(raw.rstrip("\r\n"))
        logger.debug("Parsed %r as %s", raw, command.verb.name)
        match command.verb:
            case Verb.ADD:
                self.library.add_album(command.title or "", command.artist or "")
            case Verb.PLAY:
                self.library.play_album(command.title, command.artist)
            case Verb.SHOW:
                self.library.display_albums(
                    artist=command.show_artist,
                    show_unplayed_only=command.unplayed_only,
                )
            case Verb.QUIT:
                return not self._confirm_quit()
            case Verb.HELP:
                print_lines(self.prompt_io, messages.HELP_LINES)
            case _:
                self.prompt_io.print(messages.NOT_UNDERSTOOD)
        return True

    def _confirm_quit(self) -> bool:
        self.prompt_io.print(messages.CONFIRM_QUIT)
        try:
            response = self.prompt_io.input(self.prompt)
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed during quit confirmation")
            return True
        if response.rstrip("\r\n") == "y":
            self.prompt_io.print(messages.GOODBYE)
            return True
        self.prompt_io.print(messages.STAYING)
        return False
