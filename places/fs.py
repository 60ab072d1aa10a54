"""Directory creation used by the write/dir operations."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def ensure_directory(path: Path) -> Path:
    """Create *path* and any missing parents. Existing directories are fine.

    OSError from mkdir (permissions, a file in the way, ...) propagates.
    """
    if not path.is_dir():
        path.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory %s", path)
    return path
