"""Configuration models for schedulsy."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class DisplayConfig(BaseModel):
    """Configuration for dashboard rendering."""

    title: str = "Schedulsy"
    show_descriptions: bool = True
    max_title_length: int = Field(default=60, ge=10)
    progress_bar_width: int = Field(default=40, ge=10)


class LoggingConfig(BaseModel):
    """Configuration for log output."""

    level: LogLevel = "DEBUG"
    console_level: LogLevel = "WARNING"
    file_enabled: bool = False
    directory: str = ".schedulsy/logs"
    filename: str = "schedulsy.log"


class StoreConfig(BaseModel):
    """Configuration for the in-memory task store."""

    id_strategy: Literal["uuid", "timestamp"] = "uuid"


class SchedulsyConfig(BaseModel):
    """Main configuration for schedulsy."""

    display: DisplayConfig = Field(default_factory=DisplayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    store: StoreConfig = Field(default_factory=StoreConfig)

    @classmethod
    def load(cls, path: Path | None = None) -> SchedulsyConfig:
        """Load configuration from file or return defaults."""
        if path is None:
            path = CONFIG_FILE

        if not path.exists():
            return cls()

        with open(path) as f:
            data = json.load(f)

        return cls.model_validate(data)

    def save(self, path: Path | None = None) -> None:
        """Save configuration to file."""
        if path is None:
            path = CONFIG_FILE

        path.parent.mkdir(parents=True, exist_ok=True)

        with open(path, "w") as f:
            json.dump(self.model_dump(exclude_none=True), f, indent=2)


# Default config directory
SCHEDULSY_DIR = Path(".schedulsy")
CONFIG_FILE = SCHEDULSY_DIR / "config.json"
