from __future__ import annotations

import logging
from typing import Optional

import yaml
from pydantic import ValidationError

from landscape_settings.settings.errors import SettingsParseError
from landscape_settings.settings.models import LandscapeSettings
from landscape_settings.settings.source import SettingsSource, read_settings_source
from landscape_settings.settings.validation import validate_settings

logger = logging.getLogger(__name__)


def parse_settings(raw: str) -> LandscapeSettings:
    """
    Deserialize a YAML settings document.

    The result has not been validated. Callers outside this module go through
    load_settings or load_settings_from_text, which only return validated settings.
    """
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise SettingsParseError("settings document is not valid yaml") from e

    if not isinstance(data, dict):
        kind = "empty document" if data is None else type(data).__name__
        raise SettingsParseError(f"settings document must be a mapping, got: {kind}")

    try:
        return LandscapeSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsParseError("settings document does not match the expected shape") from e


def load_settings_from_text(raw: str) -> LandscapeSettings:
    settings = parse_settings(raw)
    validate_settings(settings)
    return settings


async def load_settings(source: SettingsSource, *, timeout_seconds: Optional[float] = None) -> LandscapeSettings:
    """
    Get landscape settings from the source provided, returning them only once
    they have been validated.
    """
    raw = await read_settings_source(source, timeout_seconds=timeout_seconds)
    settings = load_settings_from_text(raw)
    logger.info(
        "Landscape settings loaded. foundation=%s categories=%s groups=%s featured_items=%s",
        settings.foundation,
        len(settings.categories or []),
        len(settings.groups or []),
        len(settings.featured_items or []),
    )
    return settings
