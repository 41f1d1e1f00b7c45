"""
Tests for structured logging setup.
"""

import json
import logging
import logging.handlers

from utils import logging as qol_logging
from utils.logging import CustomJsonFormatter, resolve_log_level, setup_logging, shutdown_logging


def _record(msg="hello", **extra):
    record = logging.LogRecord("plugin", logging.INFO, __file__, 10, msg, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestCustomJsonFormatter:
    def test_formats_json(self):
        data = json.loads(CustomJsonFormatter().format(_record()))

        assert data["level"] == "INFO"
        assert data["module"] == "plugin"
        assert data["message"] == "hello"
        assert data["lineno"] == 10

    def test_includes_extras(self):
        data = json.loads(
            CustomJsonFormatter().format(
                _record(feature="arcade_zoom", config_path="qol.json")
            )
        )

        assert data["feature"] == "arcade_zoom"
        assert data["config_path"] == "qol.json"
        assert "game_version" not in data


class TestResolveLogLevel:
    def test_default_info(self):
        assert resolve_log_level() == logging.INFO

    def test_explicit(self):
        assert resolve_log_level("debug") == logging.DEBUG

    def test_env(self, monkeypatch):
        monkeypatch.setenv("QOL_LOG_LEVEL", "WARNING")

        assert resolve_log_level() == logging.WARNING

    def test_invalid_falls_back(self):
        assert resolve_log_level("SUPER_DEBUG") == logging.INFO


class TestSetupLogging:
    def test_writes_json_lines_to_file(self, tmp_path):
        log_file = tmp_path / "logs" / "qol.log"

        setup_logging("INFO", str(log_file))
        logging.getLogger("tests.logging").info("Arcade zoom enabled")
        shutdown_logging()

        lines = log_file.read_text(encoding="utf-8").splitlines()
        assert json.loads(lines[-1])["message"] == "Arcade zoom enabled"

    def test_repeated_setup_installs_one_handler(self):
        setup_logging("INFO", None)
        setup_logging("INFO", None)

        queue_handlers = [
            h for h in logging.getLogger().handlers
            if isinstance(h, logging.handlers.QueueHandler)
        ]
        assert len(queue_handlers) == 1

    def test_shutdown_detaches_handler(self):
        setup_logging("INFO", None)
        shutdown_logging()

        assert qol_logging._queue_listener is None
        assert not any(
            isinstance(h, logging.handlers.QueueHandler) for h in logging.getLogger().handlers
        )

    def test_unopenable_log_file_falls_back_to_console(self, tmp_path):
        blocker = tmp_path / "logs"
        blocker.write_text("", encoding="utf-8")

        setup_logging("INFO", str(blocker / "qol.log"))

        assert len(qol_logging._queue_listener.handlers) == 1
