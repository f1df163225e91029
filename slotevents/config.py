"""Runtime settings, read from ``SLOTEVENTS_*`` environment variables."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from pydantic import BaseModel, Field, field_validator

ENV_PREFIX = "SLOTEVENTS_"


class Settings(BaseModel):
    log_level: str = "INFO"
    log_dir: Path | None = None
    max_log_files: int = Field(default=5, ge=1)
    title: str = "Slot Events Sample"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level {value!r}")
        return level

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> Settings:
        """Build settings from *environ* (defaults to ``os.environ``).

        Only variables that are set override the defaults.
        """
        environ = os.environ if environ is None else environ
        values = {}
        for field in cls.model_fields:
            raw = environ.get(ENV_PREFIX + field.upper())
            if raw is not None and raw != "":
                values[field] = raw
        return cls(**values)
