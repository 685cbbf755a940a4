"""
File Operations — Remove deleted files and mirror the common tree.

Symlinks under the source are recreated as links in the target, never
followed. Any symlink already in the target is replaced rather than
written through.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import List

from ..errors import SyncIOError

logger = logging.getLogger(__name__)


def remove_file(file_path: Path) -> bool:
    """
    Remove a file or symlink if it exists.

    Missing paths and directories are left alone.

    Returns:
        True if something was removed
    """
    if not (file_path.is_symlink() or file_path.is_file()):
        return False

    try:
        file_path.unlink()
    except OSError as e:
        raise SyncIOError("Failed to remove file", file_path) from e

    logger.info(f"  Removed: {file_path}", extra={"path": file_path})
    return True


def sync_directory(source: Path, target: Path) -> int:
    """
    Copy every file and symlink under source into target, overwriting on
    collision.

    Files already in target that are absent from source are kept.

    Returns:
        Number of files and symlinks copied
    """
    copied = 0

    def _prepare_links(src: str, names: List[str]) -> List[str]:
        # Called by copytree once per directory, before its entries are
        # copied. os.symlink refuses to replace an existing path.
        nonlocal copied
        src_dir = Path(src)
        dst_dir = target / src_dir.relative_to(source)
        for name in names:
            src_entry = src_dir / name
            if not src_entry.is_symlink():
                continue
            dst_entry = dst_dir / name
            if dst_entry.is_symlink() or dst_entry.is_file():
                dst_entry.unlink()
            copied += 1
            logger.debug(f"  {src_entry.relative_to(source)} -> {os.readlink(src_entry)}")
        return []

    def _copy(src: str, dst: str) -> str:
        nonlocal copied
        if os.path.islink(dst):
            os.unlink(dst)
        result = shutil.copy2(src, dst)
        copied += 1
        logger.debug(f"  {Path(src).relative_to(source)}")
        return result

    logger.debug(f"Copying {source}/ → {target}")
    try:
        shutil.copytree(
            source,
            target,
            symlinks=True,
            ignore=_prepare_links,
            copy_function=_copy,
            dirs_exist_ok=True,
        )
    except OSError as e:
        raise SyncIOError(f"Failed to sync directory {source}", target) from e

    logger.info(f"Copied {copied} file(s) into {target}")
    return copied
