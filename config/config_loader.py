# config/config_loader.py

import json
import logging
import os
from dataclasses import asdict, dataclass, fields, replace
from pathlib import Path
from typing import Any, Mapping

from helpers.atomic_write import atomic_write_json
from helpers.schema_validation import SchemaValidator
from utils.errors import ConfigMalformed, ConfigMissing, WriteFailure

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "Modloader/config/qol.json"
CONFIG_PATH_ENV = "QOL_CONFIG_PATH"

DEFAULT_ZOOM_LEVELS: tuple[float, ...] = (14.0, 7.0, 1.0, 0.7, 0.5, 0.3)


@dataclass(frozen=True)
class Settings:
    """Resolved plugin settings, immutable once loaded."""

    enable_anti_wobble: bool = False
    enable_unblocked_guns: bool = False
    enable_reduced_shake: bool = False
    enable_arcade_zoom: bool = True
    max_zoom_level: int = 5
    min_zoom_level: int = 3
    zoom_levels: tuple[float, ...] = DEFAULT_ZOOM_LEVELS

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> "Settings":
        """Merge a parsed document with the defaults, field by field.

        Missing keys keep their default, unknown keys are ignored. Zoom
        levels are coerced to int (JSON ``4.0`` is a valid integer) and
        zoom values to float.

        Raises:
            OverflowError: a zoom value too large for a float.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            logger.debug("Ignoring unknown config keys: %s", unknown)

        values = {name: raw[name] for name in known if name in raw}
        for name in ("max_zoom_level", "min_zoom_level"):
            if name in values:
                values[name] = int(values[name])
        if "zoom_levels" in values:
            values["zoom_levels"] = tuple(float(v) for v in values["zoom_levels"])
        return cls(**values)

    def to_dict(self) -> dict[str, Any]:
        """Serialize in field order, with ``zoom_levels`` as a JSON list."""
        data = asdict(self)
        data["zoom_levels"] = list(self.zoom_levels)
        return data


def normalize_zoom_bounds(settings: Settings) -> tuple[Settings, list[str]]:
    """
    Clamp zoom bounds so every index the host may use is valid.

    Rules:
        - max_zoom_level above the last index of zoom_levels -> last index
        - min_zoom_level above max_zoom_level -> max_zoom_level

    Returns:
        Tuple of (normalized_settings, warnings).
    """
    warnings: list[str] = []
    last_index = len(settings.zoom_levels) - 1
    max_level = settings.max_zoom_level
    min_level = settings.min_zoom_level

    if max_level > last_index:
        warnings.append(
            f"max_zoom_level {max_level} exceeds the last zoom level index "
            f"{last_index}; clamped to {last_index}"
        )
        max_level = last_index

    if min_level > max_level:
        warnings.append(
            f"min_zoom_level {min_level} is greater than max_zoom_level "
            f"{max_level}; clamped to {max_level}"
        )
        min_level = max_level

    for msg in warnings:
        logger.warning(msg)

    if warnings:
        settings = replace(settings, max_zoom_level=max_level, min_zoom_level=min_level)
    return settings, warnings


def resolve_config_path(config_path: str | os.PathLike[str] | None = None) -> Path:
    """Resolve the config path: explicit arg > QOL_CONFIG_PATH env > default."""
    if config_path is None:
        config_path = os.environ.get(CONFIG_PATH_ENV)
        if config_path:
            logger.info("Config path overridden via %s env: %s", CONFIG_PATH_ENV, config_path)

    if not config_path:
        config_path = DEFAULT_CONFIG_PATH

    return Path(config_path)


class ConfigLoader:
    """
    Loads ``qol.json`` into a :class:`Settings` value.

    Never raises: a missing file is replaced with defaults, anything unreadable
    or invalid falls back to in-memory defaults.

    Observability:
        - Logs INFO on successful load or default generation
        - Logs WARNING when defaults are used because the file is unusable
        - Tracks config_status for reporting
    """

    def __init__(
        self,
        config_path: str | os.PathLike[str] | None = None,
        validator: SchemaValidator | None = None,
    ) -> None:
        self.config_path = resolve_config_path(config_path)
        self._validator = validator or SchemaValidator()
        self._settings: Settings | None = None
        self._config_status = "not_loaded"  # "ok", "created", "degraded", "error"
        self._warnings: list[str] = []

    def load(self) -> Settings:
        """Load the settings, generating the default file when it is missing."""
        self._warnings = []
        try:
            settings = self._parse(self._read())
            settings, self._warnings = normalize_zoom_bounds(settings)
            self._config_status = "ok"
            logger.info(
                "Configuration loaded successfully from %s",
                self.config_path,
                extra={"config_path": str(self.config_path)},
            )
        except ConfigMissing:
            settings = Settings()
            logger.info("Config file not found at %s; generating defaults", self.config_path)
            try:
                self.save(settings)
                self._config_status = "created"
                logger.info("Default config saved to %s", self.config_path)
            except WriteFailure as e:
                self._config_status = "degraded"
                self._warnings.append(str(e))
                logger.warning(
                    "Failed to save default config: %s; using in-memory defaults", e
                )
        except ConfigMalformed as e:
            settings = Settings()
            self._config_status = "error"
            self._warnings.extend([str(e), *e.errors])
            logger.warning(
                "Failed to load config: %s; using default config (file left untouched)", e
            )
            for err in e.errors:
                logger.warning(err)

        self._settings = settings
        return settings

    def _read(self) -> dict[str, Any]:
        """Read and validate the raw document.

        Raises:
            ConfigMissing: the file does not exist.
            ConfigMalformed: the file is unreadable, not JSON, or fails the schema.
        """
        try:
            with self.config_path.open(encoding="utf-8") as file:
                raw = json.load(file)
        except FileNotFoundError as e:
            raise ConfigMissing(f"Config file not found: {self.config_path}") from e
        except ValueError as e:
            # JSONDecodeError, UnicodeDecodeError and the int digit limit
            raise ConfigMalformed(f"Error parsing config JSON at {self.config_path}: {e}") from e
        except OSError as e:
            raise ConfigMalformed(f"Error reading config at {self.config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise ConfigMalformed(
                f"Config file {self.config_path} didn't contain a JSON object"
            )

        is_valid, errors = self._validator.validate(raw, "qol_config")
        if not is_valid:
            raise ConfigMalformed(
                f"Config file {self.config_path} does not match the schema", errors
            )
        return raw

    def _parse(self, raw: dict[str, Any]) -> Settings:
        """Merge a validated document into Settings, raising ConfigMalformed on bad values."""
        try:
            return Settings.from_mapping(raw)
        except (TypeError, ValueError, OverflowError) as e:
            raise ConfigMalformed(
                f"Config file {self.config_path} has unusable values: {e}"
            ) from e

    def save(self, settings: Settings) -> None:
        """Persist settings atomically. Raises WriteFailure on failure."""
        atomic_write_json(self.config_path, settings.to_dict())

    @property
    def settings(self) -> Settings:
        """The settings from the last load(); raises if load() was never called."""
        if self._settings is None:
            raise RuntimeError("Config not loaded. Call load() first.")
        return self._settings

    def get_config_status(self) -> dict[str, Any]:
        """Return config status for reporting.

        Returns:
            Dict with config_status, config_path, config_loaded and warnings.
        """
        return {
            "config_status": self._config_status,
            "config_path": str(self.config_path),
            "config_loaded": self._settings is not None,
            "warnings": list(self._warnings),
        }


def load(config_path: str | os.PathLike[str] | None = None) -> Settings:
    """Load settings from ``config_path`` (see :class:`ConfigLoader`)."""
    return ConfigLoader(config_path).load()
