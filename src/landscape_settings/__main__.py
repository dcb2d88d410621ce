from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Optional, Sequence

from landscape_settings.config import AppConfig, ConfigLoadRequest, YamlConfigLoader
from landscape_settings.logging import init_logging
from landscape_settings.settings import (
    SettingsError,
    SettingsSource,
    format_error_chain,
    load_settings,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="landscape-settings", description="Landscape settings tools")
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the tool's own config.yaml (optional)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Override the configured logging level (e.g. DEBUG)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command to run")

    # Command: validate
    validate_parser = subparsers.add_parser("validate", help="Validate a landscape settings file")
    validate_parser.add_argument(
        "--settings-file",
        default=None,
        help="Landscape settings file local path. Takes priority over --settings-url.",
    )
    validate_parser.add_argument(
        "--settings-url",
        default=None,
        help="Landscape settings file url",
    )

    return parser


async def _load_config(args: argparse.Namespace) -> AppConfig:
    loader = YamlConfigLoader()
    request = ConfigLoadRequest(
        yaml_path=args.config,
    )
    return await loader.load(request)


async def _validate(args: argparse.Namespace, config: AppConfig) -> int:
    source = SettingsSource(settings_file=args.settings_file, settings_url=args.settings_url)
    try:
        await load_settings(source, timeout_seconds=config.fetch.timeout_seconds)
    except SettingsError as e:
        print(f"could not get landscape settings: {format_error_chain(e)}", file=sys.stderr)
        return 1

    logger.info("Landscape settings validated.")
    print("settings are valid")
    return 0


async def _main_async(args: argparse.Namespace) -> int:
    config = await _load_config(args)
    if args.log_level is not None:
        config = config.model_copy(
            update={"logging": config.logging.model_copy(update={"level": args.log_level})}
        )
    init_logging(config.logging)

    if args.command == "validate":
        return await _validate(args, config)
    return 2


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.log_level is not None and not isinstance(logging.getLevelName(args.log_level.upper()), int):
        parser.error(f"unknown log level: {args.log_level}")

    try:
        return asyncio.run(_main_async(args))
    except KeyboardInterrupt:
        logger.info("Interrupted by user.")
        return 130


if __name__ == "__main__":
    sys.exit(main())
