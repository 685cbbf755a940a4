"""
Common File Syncer — Orchestrate a sync of common/ into a target repo.

Flow:
    read marker
      → no marker:  copy everything                      (initial sync)
      → marker:     diff previous..current under common/,
                    remove deleted files, copy the tree  (incremental sync)
    → write marker

Only files reported deleted between the marker commit and the current
commit are removed. Files that drifted before the marker commit are not
reconciled.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..config import SyncSettings
from ..errors import CommonDirectoryNotFoundError
from . import file_ops, git_ops
from .marker import marker_path, read_commit_marker, write_commit_marker

logger = logging.getLogger(__name__)


class CommonFileSyncer:
    """Syncs the common directory from an infra repo into a target repo."""

    def __init__(self, settings: Optional[SyncSettings] = None):
        self.settings = settings or SyncSettings()

    def sync(self, infra_path: Path, target_path: Path, current_commit: str) -> bool:
        """
        Sync common files from infra to target repository.

        Args:
            infra_path: Checkout of the infra repository
            target_path: Root of the repository receiving the files
            current_commit: Infra commit being synced; recorded in the marker

        Returns:
            True if files were copied, False if nothing changed

        Raises:
            CommonDirectoryNotFoundError: If infra_path has no common directory
            GitCommandError: If a git query fails
            SyncIOError: If a file cannot be read, written or removed
        """
        infra_path = Path(infra_path)
        target_path = Path(target_path)

        common_path = infra_path / self.settings.common_dir
        if not common_path.is_dir():
            raise CommonDirectoryNotFoundError(common_path)

        previous_commit = read_commit_marker(target_path, self.settings.marker_name)

        if not previous_commit:
            if previous_commit is not None:
                logger.warning(
                    f"Commit marker {marker_path(target_path, self.settings.marker_name)} "
                    "is empty, ignoring it and running a first sync"
                )
            return self._sync_initial(target_path, common_path, current_commit)

        return self._sync_incremental(
            infra_path,
            target_path,
            common_path,
            previous_commit,
            current_commit,
        )

    def _sync_incremental(
        self,
        infra_path: Path,
        target_path: Path,
        common_path: Path,
        previous_commit: str,
        current_commit: str,
    ) -> bool:
        """Handle incremental sync when a previous sync exists."""
        prefix = self.settings.common_prefix
        timeout = self.settings.git_timeout

        logger.info(f"Previous sync: {previous_commit}", extra={"commit": previous_commit})
        logger.info(f"Current commit: {current_commit}", extra={"commit": current_commit})

        if not git_ops.has_changes(
            infra_path, previous_commit, current_commit, prefix, timeout=timeout
        ):
            logger.info(f"No changes in {prefix} directory, skipping")
            return False

        logger.info(f"Syncing changes from {prefix} directory")

        deleted_files = git_ops.get_deleted_files(
            infra_path, previous_commit, current_commit, prefix, timeout=timeout
        )
        for file_path in deleted_files:
            if not file_path.startswith(prefix):
                logger.debug(f"Skipping deleted path outside {prefix}: {file_path}")
                continue
            rel_path = file_path[len(prefix):]
            file_ops.remove_file(target_path / rel_path)

        file_ops.sync_directory(common_path, target_path)
        write_commit_marker(target_path, current_commit, self.settings.marker_name)
        return True

    def _sync_initial(self, target_path: Path, common_path: Path, current_commit: str) -> bool:
        """Handle initial sync when no previous sync exists."""
        logger.info("First sync - copying all files")

        file_ops.sync_directory(common_path, target_path)
        write_commit_marker(target_path, current_commit, self.settings.marker_name)
        return True


def sync(
    infra_path: Path,
    target_path: Path,
    current_commit: str,
    settings: Optional[SyncSettings] = None,
) -> bool:
    """Run a sync with the given (or default) settings."""
    return CommonFileSyncer(settings).sync(infra_path, target_path, current_commit)
