import logging
import sys
from pathlib import Path

import pytest

# Ensure project root is on sys.path for CI environments where
# Python might not automatically include it (e.g., some GitHub
# Actions runners invoking pytest differently).
PROJECT_ROOT = Path(__file__).parent.parent.resolve()
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from config.config_loader import Settings
from utils.logging import shutdown_logging


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep QOL_* overrides from the developer shell out of tests."""
    for name in ("QOL_CONFIG_PATH", "QOL_GAME_BUILD", "QOL_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def _reset_logging():
    """Undo setup_logging() so each test starts with pytest's own handlers."""
    root = logging.getLogger()
    level = root.level
    yield
    shutdown_logging()
    root.setLevel(level)


@pytest.fixture
def default_settings() -> Settings:
    return Settings()


@pytest.fixture
def config_path(tmp_path) -> Path:
    """Path where a modloader install would keep qol.json (not created)."""
    return tmp_path / "Modloader" / "config" / "qol.json"
