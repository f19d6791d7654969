from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import Settings, find_config
from .library import MusicLibrary
from .prompt_io import ConsolePromptIO
from .shell import LibraryShell

LOG_FORMAT = "%(levelname).1s | %(name)s | %(message)s"

C_RESET = "\033[0m"
LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",  # Cyan
    logging.INFO: "\033[37m",  # Light gray
    logging.WARNING: "\033[33m",  # Yellow
    logging.ERROR: "\033[31m",  # Red
    logging.CRITICAL: "\033[35m",  # Magenta
}


class ColorFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = LEVEL_COLORS.get(record.levelno)
        if not color:
            return message
        return f"{color}{message}{C_RESET}"


def configure_logging(level_name: str, *, color: bool = True) -> None:
    level = getattr(logging, level_name.upper(), logging.WARNING)
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(level)
    # stderr keeps log lines out of the collection listing on stdout.
    handler = logging.StreamHandler(sys.stderr)
    formatter_cls = ColorFormatter if color else logging.Formatter
    handler.setFormatter(formatter_cls(LOG_FORMAT))
    root_logger.addHandler(handler)


def load_settings(explicit_path: Optional[Path]) -> Settings:
    config_path = find_config(explicit_path)
    if config_path is None:
        return Settings()
    if not config_path.exists():
        raise SystemExit(f"Config file not found: {config_path}")
    return Settings.load(config_path)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Keep track of your albums and what you've played")
    parser.add_argument("--config", type=Path, help="Path to music-library.yaml")
    parser.add_argument("--log-level", default=None, help="Python logging level (overrides config)")
    parser.add_argument(
        "--no-welcome",
        action="store_true",
        help="Skip the greeting shown at startup",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = load_settings(args.config)
    configure_logging(
        args.log_level or settings.logging.level,
        color=settings.logging.color,
    )
    prompt_io = ConsolePromptIO()
    shell = LibraryShell(
        MusicLibrary(prompt_io),
        prompt_io,
        prompt=settings.shell.prompt,
        show_welcome=settings.shell.show_welcome and not args.no_welcome,
    )
    return shell.run()
