from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FileRotationSettings(BaseModel):
    """
    Date-based rotation settings (daily).

    Maps to the standard library TimedRotatingFileHandler.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    backup_count: int = 5


class FileLoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    path: str = "data/logs/landscape-settings.log"
    rotation: FileRotationSettings = Field(default_factory=FileRotationSettings)


class LoggingSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    level: str = "INFO"
    file: Optional[FileLoggingSettings] = None


class FetchSettings(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    timeout_seconds: float = 30


class AppConfig(BaseModel):
    """Effective runtime configuration of the tool after applying all precedence rules."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    fetch: FetchSettings = Field(default_factory=FetchSettings)


@dataclass(frozen=True, slots=True)
class ConfigLoadRequest:
    """
    Inputs controlling where the runtime configuration is read from.

    yaml_path is optional; without it only defaults and environment overrides apply.
    """

    yaml_path: Optional[str] = None
    env_prefix: str = "LANDSCAPE__"
    dotenv_path: Optional[str] = ".env"
