#!/usr/bin/env python3
"""
QoL plugin entry point.

The modloader calls ``version`` with the game's version string, then ``init``
once at startup. Run as a script to inspect or regenerate the config:

  python plugin.py --show             # print resolved settings and feature plan
  python plugin.py --reset            # rewrite qol.json with defaults
"""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from config.config_loader import ConfigLoader, Settings
from helpers.game_version import DEFAULT_BUILD, GameBuild, is_supported, resolve_build
from services.feature_service import FeatureHooks, FeatureService
from utils.errors import WriteFailure
from utils.logging import setup_logging

logger = logging.getLogger(__name__)


def version(game_version: str, build: str | GameBuild | None = None) -> bool:
    """Modloader handshake: True if this plugin supports ``game_version``."""
    try:
        target = resolve_build(build)
    except ValueError as e:
        logger.error("%s; refusing to load", e)
        return False
    return is_supported(game_version, target)


def init(
    config_path: str | os.PathLike[str] | None = None,
    hooks: FeatureHooks | None = None,
    build: str | GameBuild | None = None,
    configure_logging: bool = True,
) -> bool:
    """
    Load the settings and apply the enabled features.

    Always returns True: a broken config degrades to defaults and never stops
    the host from starting.
    """
    if configure_logging:
        setup_logging()

    loader = ConfigLoader(config_path)
    settings = loader.load()
    status = loader.get_config_status()
    logger.info(
        "Config status: %s",
        status["config_status"],
        extra={"config_path": status["config_path"]},
    )

    try:
        target = resolve_build(build)
    except ValueError as e:
        logger.error("%s; assuming %s", e, DEFAULT_BUILD.label)
        target = DEFAULT_BUILD

    FeatureService(settings, target).apply(hooks)
    return True


def _describe(loader: ConfigLoader, settings: Settings, build: GameBuild) -> dict:
    plans = FeatureService(settings, build).plan()
    return {
        "status": loader.get_config_status(),
        "build": build.label,
        "settings": settings.to_dict(),
        "features": [
            {"name": p.name, "enabled": p.enabled, "applied": p.applied, "note": p.note}
            for p in plans
        ],
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Inspect or regenerate the QoL plugin config",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Config file (default: QOL_CONFIG_PATH or Modloader/config/qol.json)",
    )
    parser.add_argument(
        "--build",
        choices=[b.value for b in GameBuild],
        help="Target game build (default: QOL_GAME_BUILD or 1_163)",
    )
    parser.add_argument(
        "--show", action="store_true", help="Print resolved settings and feature plan"
    )
    parser.add_argument(
        "--reset", action="store_true", help="Overwrite the config with defaults"
    )
    parser.add_argument("--log-level", help="Logging level (default: QOL_LOG_LEVEL or INFO)")
    args = parser.parse_args(argv)

    setup_logging(args.log_level, log_file=None)

    try:
        build = resolve_build(args.build)
    except ValueError as e:
        parser.error(str(e))

    loader = ConfigLoader(args.config)

    if args.reset:
        try:
            loader.save(Settings())
        except WriteFailure as e:
            print(f"Failed to write defaults: {e}", file=sys.stderr)
            return 1
        print(f"Default config written to {loader.config_path}")

    settings = loader.load()

    if args.show or not args.reset:
        print(json.dumps(_describe(loader, settings, build), indent=2))

    return 0


if __name__ == "__main__":
    sys.exit(main())
