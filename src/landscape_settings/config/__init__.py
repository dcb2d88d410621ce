"""Runtime configuration of the landscape settings tool."""

from landscape_settings.config.loader import YamlConfigLoader
from landscape_settings.config.models import AppConfig, ConfigLoadRequest

__all__ = ["AppConfig", "ConfigLoadRequest", "YamlConfigLoader"]
