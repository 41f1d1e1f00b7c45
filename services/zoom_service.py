"""
Zoom service: arcade zoom bounds and per-level magnification.
"""

from collections.abc import Callable

from config.config_loader import Settings

from .base import BaseService

# Magnification used when the host asks for a level outside zoom_levels
FALLBACK_ZOOM = 1.0


class ZoomService(BaseService):
    """Answers the camera system's zoom queries from the resolved settings."""

    def __init__(self, settings: Settings) -> None:
        super().__init__("zoom", settings)

    def _initialize_impl(self) -> None:
        min_level, max_level = self.bounds()
        self.logger.debug(
            "Zoom bounds %s..%s over %s levels",
            min_level,
            max_level,
            len(self.settings.zoom_levels),
        )

    def bounds(self) -> tuple[int, int]:
        """Return (min_zoom_level, max_zoom_level)."""
        return self.settings.min_zoom_level, self.settings.max_zoom_level

    @property
    def levels(self) -> tuple[float, ...]:
        return self.settings.zoom_levels

    def zoom_value(
        self,
        level: int,
        in_arcade: bool = True,
        native: Callable[[], float] | None = None,
    ) -> float:
        """
        Magnification for ``level``.

        Outside arcade mode the host's own calculation (``native``) is always
        used. An index outside zoom_levels yields 1.0.

        Raises:
            ValueError: ``in_arcade`` is False and no ``native`` was given.
        """
        if not in_arcade:
            if native is None:
                raise ValueError("native zoom calculation required outside arcade mode")
            return native()

        if 0 <= level < len(self.settings.zoom_levels):
            return self.settings.zoom_levels[level]

        self.logger.debug("Zoom level %s out of range; using %s", level, FALLBACK_ZOOM)
        return FALLBACK_ZOOM
