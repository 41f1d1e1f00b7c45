"""
Supported host game builds and the modloader version handshake.
"""

from __future__ import annotations

import logging
import os
from enum import Enum

logger = logging.getLogger(__name__)

GAME_BUILD_ENV = "QOL_GAME_BUILD"


class GameBuild(Enum):
    """A host game release the plugin targets."""

    STEAM_1_151 = "1_151"
    STEAM_1_163 = "1_163"

    @property
    def label(self) -> str:
        """Version string the modloader reports for this build."""
        return {
            GameBuild.STEAM_1_151: "Steam 1.151",
            GameBuild.STEAM_1_163: "Steam 1.163",
        }[self]


DEFAULT_BUILD = GameBuild.STEAM_1_163
UNSUPPORTED_GOG = "Gog 1.163"


def resolve_build(build: str | GameBuild | None = None) -> GameBuild:
    """Resolve the target build: explicit arg > QOL_GAME_BUILD env > 1.163.

    Raises:
        ValueError: if an explicit or environment value names no known build.
    """
    if isinstance(build, GameBuild):
        return build

    value = build or os.environ.get(GAME_BUILD_ENV)
    if not value:
        return DEFAULT_BUILD

    try:
        return GameBuild(value)
    except ValueError:
        known = ", ".join(b.value for b in GameBuild)
        raise ValueError(f"Unknown game build '{value}' (expected one of: {known})") from None


def is_supported(game_version: str, build: GameBuild = DEFAULT_BUILD) -> bool:
    """Return True if the modloader-reported version matches the target build."""
    if game_version == build.label:
        return True

    if game_version == UNSUPPORTED_GOG:
        logger.error("Gog 1.163 detected", extra={"game_version": game_version})
        logger.error(
            "Your game will crash. The QoL plugin only supports Steam versions of the game."
        )
        return False

    logger.debug(
        "Game version %r does not match target build %r",
        game_version,
        build.label,
        extra={"game_version": game_version},
    )
    return False
