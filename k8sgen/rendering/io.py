"""File I/O operations for generation."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> None:
    """Create ``path`` and any missing parents."""
    path.mkdir(parents=True, exist_ok=True)


def remove_stale(path: Path) -> None:
    """Remove a previously generated file, if any.

    Args:
        path: File to remove; a missing file is not an error
    """
    if path.exists() or path.is_symlink():
        logger.debug(f"Removing stale output: {path}")
    path.unlink(missing_ok=True)


def write_synced(path: Path, text: str, mode: int = 0o644) -> None:
    """Replace ``path`` with ``text`` and sync it to disk.

    Args:
        path: Destination file path
        text: Text content to write
        mode: File permissions (octal)
    """
    ensure_dir(path.parent)
    remove_stale(path)

    with path.open("w", encoding="utf-8") as handle:
        handle.write(text)
        handle.flush()
        os.fsync(handle.fileno())
    os.chmod(path, mode)
