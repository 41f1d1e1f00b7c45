"""
Feature service deciding which host patches apply and dispatching them.

The patches themselves live in the host process; they are represented here as
hook callables so the decisions can be made (and tested) without it.
"""

from collections.abc import Callable
from dataclasses import dataclass

from config.config_loader import Settings
from helpers.game_version import DEFAULT_BUILD, GameBuild

from .base import BaseService
from .zoom_service import ZoomService

ANTI_WOBBLE = "anti_wobble"
REDUCED_SHAKE = "reduced_shake"
ARCADE_ZOOM = "arcade_zoom"
UNBLOCKED_GUNS = "unblocked_guns"

FEATURE_LABELS = {
    ANTI_WOBBLE: "Anti-wobble",
    REDUCED_SHAKE: "Reduced shake",
    ARCADE_ZOOM: "Arcade zoom",
    UNBLOCKED_GUNS: "Unblocked guns",
}

# The host ships five zoom levels; fewer can make it unstable
HOST_ZOOM_LEVEL_COUNT = 5


@dataclass(frozen=True)
class FeaturePlan:
    """Outcome for one feature: requested by config, and actually patched."""

    name: str
    enabled: bool
    applied: bool
    note: str = ""


@dataclass
class FeatureHooks:
    """Host-side patch entry points. Missing hooks are skipped."""

    anti_wobble: Callable[[], None] | None = None
    reduced_shake: Callable[[], None] | None = None
    arcade_zoom: Callable[[ZoomService], None] | None = None
    unblocked_guns: Callable[[], None] | None = None


class FeatureService(BaseService):
    """Maps the resolved settings onto the feature patches for one build."""

    def __init__(self, settings: Settings, build: GameBuild = DEFAULT_BUILD) -> None:
        super().__init__("features", settings)
        self.build = build
        self.zoom = ZoomService(settings)

    def _initialize_impl(self) -> None:
        self.zoom.initialize()

    def _enabled(self) -> dict[str, bool]:
        s = self.settings
        return {
            ANTI_WOBBLE: s.enable_anti_wobble,
            REDUCED_SHAKE: s.enable_reduced_shake,
            ARCADE_ZOOM: s.enable_arcade_zoom,
            UNBLOCKED_GUNS: s.enable_unblocked_guns,
        }

    def plan(self) -> list[FeaturePlan]:
        """Which features are requested and which would actually be patched."""
        plans = []
        for name, enabled in self._enabled().items():
            applied = enabled
            note = ""
            if name == UNBLOCKED_GUNS and self.build is GameBuild.STEAM_1_163:
                # Gun arcs are already unblocked in 1.163
                applied = False
                note = f"no-op on {self.build.label}"
            elif name == ARCADE_ZOOM and enabled:
                min_level, max_level = self.zoom.bounds()
                note = f"min zoom level {min_level}, max zoom level {max_level}"
            plans.append(FeaturePlan(name, enabled, applied, note))
        return plans

    def zoom_warnings(self) -> list[str]:
        """Stability warnings for the configured zoom levels."""
        warnings = []
        count = len(self.settings.zoom_levels)
        if count < HOST_ZOOM_LEVEL_COUNT:
            warnings.append(
                f"The game by default specifies {HOST_ZOOM_LEVEL_COUNT} zoom levels "
                f"but only {count} are configured. The game may be unstable."
            )
        return warnings

    def apply(self, hooks: FeatureHooks | None = None) -> list[FeaturePlan]:
        """
        Run the hook of every enabled, applicable feature and log the outcome.

        A hook that raises is logged and reported as not applied; it never
        propagates to the host.
        """
        self.initialize()
        hooks = hooks or FeatureHooks()
        results = []

        for plan in self.plan():
            label = FEATURE_LABELS[plan.name]
            extra = {"feature": plan.name}

            if not plan.enabled:
                self.logger.info(f"{label} disabled", extra=extra)
                results.append(plan)
                continue

            if plan.applied:
                hook = getattr(hooks, plan.name)
                if hook is not None:
                    try:
                        if plan.name == ARCADE_ZOOM:
                            hook(self.zoom)
                        else:
                            hook()
                    except Exception as e:
                        self.logger.exception("Failed to apply %s", label, exc_info=e, extra=extra)
                        plan = FeaturePlan(plan.name, True, False, f"hook failed: {e}")

            if plan.note:
                self.logger.info(f"{label} enabled ({plan.note})", extra=extra)
            else:
                self.logger.info(f"{label} enabled", extra=extra)

            if plan.name == ARCADE_ZOOM:
                for msg in self.zoom_warnings():
                    self.logger.warning(msg, extra=extra)

            results.append(plan)

        return results
