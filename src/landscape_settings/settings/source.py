from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import aiohttp

from landscape_settings.settings.errors import (
    SettingsDecodeError,
    SettingsFetchError,
    SettingsReadError,
    SettingsSourceNotProvidedError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SettingsSource:
    """
    Where to get the landscape settings from.

    When both are set the file takes priority and the url is never contacted.
    """

    settings_file: Optional[Union[str, Path]] = None
    settings_url: Optional[str] = None


async def read_settings_source(source: SettingsSource, *, timeout_seconds: Optional[float] = None) -> str:
    if source.settings_file is not None:
        logger.debug("Getting landscape settings from file. path=%s", source.settings_file)
        return _read_file(Path(source.settings_file))

    if source.settings_url is not None:
        logger.debug("Getting landscape settings from url. url=%s", source.settings_url)
        return await _fetch_url(source.settings_url, timeout_seconds=timeout_seconds)

    raise SettingsSourceNotProvidedError("settings file or url not provided")


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise SettingsReadError(f"settings file not found: {path}") from e
    except PermissionError as e:
        raise SettingsReadError(f"permission denied reading settings file: {path}") from e
    except UnicodeDecodeError as e:
        raise SettingsDecodeError(f"settings file is not valid utf-8 text: {path}") from e
    except OSError as e:
        raise SettingsReadError(f"error reading settings file: {path}") from e


async def _fetch_url(url: str, *, timeout_seconds: Optional[float]) -> str:
    timeout = aiohttp.ClientTimeout(total=timeout_seconds)
    try:
        async with aiohttp.ClientSession(timeout=timeout) as session:
            async with session.get(url) as response:
                if response.status != 200:
                    logger.warning("Unexpected landscape settings status. url=%s status=%s", url, response.status)
                    raise UnexpectedStatusError(response.status, url)
                try:
                    return await response.text()
                except (UnicodeDecodeError, LookupError) as e:
                    raise SettingsDecodeError(f"settings response body is not valid text: {url}") from e
    except asyncio.TimeoutError as e:
        raise SettingsFetchError(f"timed out getting landscape settings: {url}") from e
    except aiohttp.ClientError as e:
        raise SettingsFetchError(f"error getting landscape settings: {url}") from e
