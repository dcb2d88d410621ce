"""Landscape settings: source reading, parsing and validation."""

from landscape_settings.settings.errors import (
    SettingsDecodeError,
    SettingsError,
    SettingsFetchError,
    SettingsParseError,
    SettingsReadError,
    SettingsRuleError,
    SettingsSourceError,
    SettingsSourceNotProvidedError,
    SettingsValidationError,
    UnexpectedStatusError,
    format_error_chain,
)
from landscape_settings.settings.loader import load_settings, load_settings_from_text
from landscape_settings.settings.models import (
    Category,
    Colors,
    FeaturedItemRule,
    FeaturedItemRuleOption,
    GridItemsSize,
    Group,
    Images,
    LandscapeSettings,
    SocialNetworks,
)
from landscape_settings.settings.source import SettingsSource, read_settings_source
from landscape_settings.settings.validation import validate_settings

__all__ = [
    "Category",
    "Colors",
    "FeaturedItemRule",
    "FeaturedItemRuleOption",
    "GridItemsSize",
    "Group",
    "Images",
    "LandscapeSettings",
    "SettingsDecodeError",
    "SettingsError",
    "SettingsFetchError",
    "SettingsParseError",
    "SettingsReadError",
    "SettingsRuleError",
    "SettingsSource",
    "SettingsSourceError",
    "SettingsSourceNotProvidedError",
    "SettingsValidationError",
    "UnexpectedStatusError",
    "format_error_chain",
    "load_settings",
    "load_settings_from_text",
    "read_settings_source",
    "validate_settings",
]
