"""
Commit Marker — Last synced infra commit, stored in the target repo.

The marker is a single line of UTF-8 text at the target root. A missing
file means the target has never been synced.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..config import DEFAULT_MARKER_NAME
from ..errors import SyncIOError

logger = logging.getLogger(__name__)


def marker_path(target_path: Path, marker_name: str = DEFAULT_MARKER_NAME) -> Path:
    return Path(target_path) / marker_name


def read_commit_marker(
    target_path: Path,
    marker_name: str = DEFAULT_MARKER_NAME,
) -> Optional[str]:
    """
    Read the last synced commit from the target repository.

    Returns:
        The trimmed marker contents, or None if the marker does not exist

    Raises:
        SyncIOError: If the marker exists but cannot be read
    """
    path = marker_path(target_path, marker_name)
    if not path.exists():
        logger.debug(f"No commit marker at {path}")
        return None

    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SyncIOError("Failed to read commit marker", path) from e

    return content.strip()


def write_commit_marker(
    target_path: Path,
    commit: str,
    marker_name: str = DEFAULT_MARKER_NAME,
) -> None:
    """
    Write the current commit to the target repository marker file.

    Raises:
        SyncIOError: If the marker cannot be written
    """
    path = marker_path(target_path, marker_name)
    try:
        path.write_text(f"{commit}\n", encoding="utf-8")
    except OSError as e:
        raise SyncIOError("Failed to write commit marker", path) from e

    logger.info(f"Commit marker updated: {commit}", extra={"commit": commit, "path": path})
