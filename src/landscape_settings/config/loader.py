from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional, get_args

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel

from landscape_settings.config.models import AppConfig, ConfigLoadRequest


def _read_config_file(path: Path) -> dict[str, Any]:
    if not path.is_file():
        raise FileNotFoundError(f"Config file not found: {path}")

    data = yaml.safe_load(path.read_text(encoding="utf-8"))
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Top-level YAML must be a mapping, got: {type(data).__name__}")
    return data


def _section_model(annotation: Any) -> Optional[type[BaseModel]]:
    # Optional[Section] is a section too.
    for candidate in (annotation, *get_args(annotation)):
        if isinstance(candidate, type) and issubclass(candidate, BaseModel):
            return candidate
    return None


def _apply_override(config: dict[str, Any], env_name: str, prefix: str, value: str) -> None:
    """
    Set the value named by LANDSCAPE__SECTION__KEY in the raw config mapping.

    The key path is resolved against the AppConfig schema, so sections left unset
    in the YAML (or unset by default, like logging.file) are created on the way.
    Values are kept as strings and converted when AppConfig is validated.
    """
    segments = [p.lower() for p in env_name[len(prefix) :].split("__") if p]
    dotted = ".".join(segments)
    if not segments:
        raise ValueError(f"Invalid environment variable override name: {env_name}")

    model: type[BaseModel] = AppConfig
    section = config
    for segment in segments[:-1]:
        field = model.model_fields.get(segment)
        if field is None:
            raise KeyError(f"Unknown configuration key path: {dotted}")
        nested = _section_model(field.annotation)
        if nested is None:
            raise TypeError(f"Configuration key path does not point to a section: {dotted}")
        current = section.get(segment)
        if current is None:
            section[segment] = {}
        elif not isinstance(current, dict):
            raise TypeError(f"Configuration key path does not point to a mapping: {dotted}")
        section = section[segment]
        model = nested

    leaf = segments[-1]
    field = model.model_fields.get(leaf)
    if field is None:
        raise KeyError(f"Unknown configuration key path: {dotted}")
    if _section_model(field.annotation) is not None:
        raise TypeError(f"Environment variable overrides must name a value, '{dotted}' is a section.")
    section[leaf] = value


class YamlConfigLoader:
    """
    Loads the runtime configuration of the tool.

    Precedence, lowest first: model defaults, the YAML file (when given),
    environment variables (a .env file only fills variables not already set).
    """

    async def load(self, request: ConfigLoadRequest = ConfigLoadRequest()) -> AppConfig:
        config: dict[str, Any] = {}
        if request.yaml_path is not None:
            config = _read_config_file(Path(request.yaml_path))

        if request.dotenv_path is not None and Path(request.dotenv_path).is_file():
            load_dotenv(dotenv_path=request.dotenv_path, override=False)

        for name in sorted(os.environ):
            if name.startswith(request.env_prefix):
                _apply_override(config, name, request.env_prefix, os.environ[name])

        return AppConfig.model_validate(config)
