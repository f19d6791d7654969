from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, field_validator

CONFIG_NAMES = ("music-library.yaml", "music-library.yml")


class ShellSettings(BaseModel):
    prompt: str = ""
    show_welcome: bool = True


class LoggingSettings(BaseModel):
    level: str = "WARNING"
    color: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def _normalise_level(cls, value: str) -> str:
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown logging level: {value}")
        return level


class Settings(BaseModel):
    shell: ShellSettings = ShellSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Optional[Path]:
    if explicit_path:
        return explicit_path
    cwd = Path.cwd()
    for name in CONFIG_NAMES:
        candidate = cwd / name
        if candidate.exists():
            return candidate
    return None
