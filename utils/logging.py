import atexit
import json
import logging
import logging.handlers
import os
import queue
from pathlib import Path

DEFAULT_LOG_FILE = "Modloader/logs/qol.log"
LOG_LEVEL_ENV = "QOL_LOG_LEVEL"
VALID_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_queue_listener: logging.handlers.QueueListener | None = None
_queue_handler: logging.handlers.QueueHandler | None = None
_atexit_registered = False


class CustomJsonFormatter(logging.Formatter):
    def __init__(self, datefmt: str | None = None) -> None:
        super().__init__(datefmt=datefmt)

    def format(self, record: logging.LogRecord) -> str:
        record_dict = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "module": record.name,
            "funcName": record.funcName,
            "lineno": record.lineno,
            "message": record.getMessage(),
        }

        # Include standard extra fields
        if hasattr(record, "feature"):
            record_dict["feature"] = record.feature  # type: ignore[attr-defined]
        if hasattr(record, "config_path"):
            record_dict["config_path"] = record.config_path  # type: ignore[attr-defined]
        if hasattr(record, "game_version"):
            record_dict["game_version"] = record.game_version  # type: ignore[attr-defined]

        if record.exc_info:
            record_dict["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(record_dict, ensure_ascii=False)


def resolve_log_level(level: str | None = None) -> int:
    """Resolve a level name from the argument or QOL_LOG_LEVEL, defaulting to INFO."""
    level_name = (level or os.environ.get(LOG_LEVEL_ENV) or "INFO").upper()
    if level_name not in VALID_LEVELS:
        logging.getLogger(__name__).warning(
            "Invalid logging level '%s'. Defaulting to 'INFO'.", level_name
        )
        level_name = "INFO"
    return getattr(logging, level_name)


def setup_logging(level: str | None = None, log_file: str | None = DEFAULT_LOG_FILE) -> None:
    """
    Setup structured logging with JSON formatting, queue-based handling
    and daily log rotation.

    Safe to call more than once; the previous listener is stopped and only
    the handler installed by this module is replaced.

    Args:
        level: Level name; falls back to QOL_LOG_LEVEL, then INFO
        log_file: Path to the log file, or None for console only
    """
    global _queue_listener, _queue_handler

    log_level = resolve_log_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    # Stop any existing listener before creating a new one (e.g., during tests)
    shutdown_logging()

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(maxsize=1000)
    queue_listener = _build_queue_listener(log_queue, log_level, log_file)

    queue_handler = logging.handlers.QueueHandler(log_queue)
    queue_handler.setLevel(log_level)
    root_logger.addHandler(queue_handler)

    queue_listener.start()
    _queue_listener = queue_listener
    _queue_handler = queue_handler

    _register_logging_shutdown()


def _build_queue_listener(
    log_queue: queue.Queue, log_level: int, log_file: str | None
) -> logging.handlers.QueueListener:
    """
    Creates a QueueListener that will dispatch logs from the queue
    to the console and, when a path is given, a rotating file.

    If the log directory cannot be created the file handler is skipped;
    logging must never stop the host from starting.
    """
    formatter = CustomJsonFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    console_handler = logging.StreamHandler()
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        try:
            Path(log_file).parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.TimedRotatingFileHandler(
                filename=log_file,
                when="midnight",
                interval=1,
                backupCount=7,
                utc=True,
                encoding="utf-8",
            )
        except OSError as e:
            logging.getLogger(__name__).warning(
                "Cannot open log file %s: %s; logging to console only", log_file, e
            )
        else:
            file_handler.suffix = "%Y-%m-%d"
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            handlers.append(file_handler)

    return logging.handlers.QueueListener(
        log_queue,
        *handlers,
        respect_handler_level=True,
    )


def shutdown_logging() -> None:
    """Detach the queue handler and stop the listener, flushing pending records."""
    global _queue_listener, _queue_handler
    if _queue_handler is not None:
        logging.getLogger().removeHandler(_queue_handler)
        _queue_handler = None
    if _queue_listener:
        _queue_listener.stop()
        for handler in _queue_listener.handlers:
            handler.close()
        _queue_listener = None


def _register_logging_shutdown() -> None:
    """Ensure the queue listener is stopped during interpreter shutdown."""

    global _atexit_registered

    if _atexit_registered:
        return

    atexit.register(shutdown_logging)
    _atexit_registered = True


def get_logger(name: str) -> logging.Logger:
    """
    Convenience method for retrieving a logger
    """
    return logging.getLogger(name)
