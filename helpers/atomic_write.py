"""
Atomic file write utilities.

Provides safe, atomic file writing operations using the temp-file-and-rename
pattern so the modloader never sees a half-written config file.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from utils.errors import WriteFailure

logger = logging.getLogger(__name__)


def atomic_write_text(
    filepath: Path | str,
    content: str,
    *,
    encoding: str = "utf-8",
    mode: int = 0o644,
) -> None:
    """
    Write text content atomically using temp-file-and-rename pattern.

    Either the complete new content is written, or the original file remains
    unchanged. Missing parent directories are created.

    Args:
        filepath: Destination file path.
        content: Text content to write.
        encoding: Text encoding (default UTF-8).
        mode: File permission mode (default 0o644).

    Raises:
        WriteFailure: If creating the directory, writing or renaming fails.
    """
    filepath = Path(filepath)
    parent_dir = filepath.parent

    try:
        parent_dir.mkdir(parents=True, exist_ok=True)

        # Temp file must live in the same directory for the rename to be atomic
        fd, temp_path = tempfile.mkstemp(
            dir=parent_dir,
            prefix=f".{filepath.name}.",
            suffix=".tmp",
        )
        temp_path_obj = Path(temp_path)

        try:
            with os.fdopen(fd, "w", encoding=encoding) as f:
                f.write(content)

            temp_path_obj.chmod(mode)
            temp_path_obj.replace(filepath)

            logger.debug("Atomic write completed: %s", filepath)

        except Exception:
            try:
                temp_path_obj.unlink(missing_ok=True)
            except OSError:
                pass
            raise

    except Exception as e:
        error_msg = f"Atomic write failed for {filepath}: {e}"
        logger.warning(error_msg)
        raise WriteFailure(error_msg) from e


def atomic_write_json(
    filepath: Path | str,
    data: dict[str, Any],
    *,
    indent: int = 4,
) -> None:
    """
    Write JSON data atomically.

    Args:
        filepath: Destination file path.
        data: Dictionary to serialize as JSON.
        indent: JSON indentation level.

    Raises:
        WriteFailure: If serialization or write fails.
    """
    try:
        content = json.dumps(data, indent=indent, ensure_ascii=False)
    except (TypeError, ValueError) as e:
        error_msg = f"JSON serialization failed for {filepath}: {e}"
        logger.warning(error_msg)
        raise WriteFailure(error_msg) from e

    atomic_write_text(filepath, content + "\n")
