from __future__ import annotations

import asyncio
import logging

from landscape_settings.config import YamlConfigLoader
from landscape_settings.logging import init_logging
from landscape_settings.settings import SettingsSource, load_settings


async def main() -> None:
    config = await YamlConfigLoader().load()
    init_logging(config.logging)

    settings = await load_settings(SettingsSource(settings_file="examples/settings.yml"))

    logger = logging.getLogger("smoke")
    logger.info("Settings loaded foundation=%s", settings.foundation)
    logger.info("Grid items size=%s", settings.grid_items_size)


if __name__ == "__main__":
    asyncio.run(main())
