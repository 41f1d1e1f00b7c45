from .config_loader import (
    DEFAULT_CONFIG_PATH,
    ConfigLoader,
    Settings,
    load,
    normalize_zoom_bounds,
)

# NOTE: nothing is loaded at import time. The plugin entry point loads the
# settings once and passes them to each service explicitly.

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ConfigLoader",
    "Settings",
    "load",
    "normalize_zoom_bounds",
]
