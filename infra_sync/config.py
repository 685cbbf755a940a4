"""
Sync Configuration — Parse INFRA_SYNC_* environment variables.

Defaults match the layout every target repository expects, so no variable
needs to be set for a normal run.

    INFRA_SYNC_COMMON_DIR=common
    INFRA_SYNC_MARKER=.bootc-dev-infra-commit.txt
    INFRA_SYNC_GIT_TIMEOUT=60

A ``.env`` file in the working directory is loaded by the CLI before these
are read.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_COMMON_DIR = "common"
DEFAULT_MARKER_NAME = ".bootc-dev-infra-commit.txt"
DEFAULT_GIT_TIMEOUT = 60


@dataclass(frozen=True)
class SyncSettings:
    """Settings for a single sync run."""

    common_dir: str = DEFAULT_COMMON_DIR
    marker_name: str = DEFAULT_MARKER_NAME
    git_timeout: int = DEFAULT_GIT_TIMEOUT

    def __post_init__(self) -> None:
        # The marker always lives directly in the target root
        name = self.marker_name
        if not name or name in (".", "..") or Path(name).name != name:
            raise ConfigurationError(
                f"INFRA_SYNC_MARKER must be a plain file name, got: {name!r}"
            )

    @property
    def common_prefix(self) -> str:
        """Path prefix used for git pathspecs, e.g. ``common/``."""
        return f"{self.common_dir.rstrip('/')}/"

    @classmethod
    def from_env(cls) -> "SyncSettings":
        """Build settings from environment variables."""
        common_dir = os.environ.get("INFRA_SYNC_COMMON_DIR", "").strip() or DEFAULT_COMMON_DIR
        marker_name = os.environ.get("INFRA_SYNC_MARKER", "").strip() or DEFAULT_MARKER_NAME

        raw_timeout = os.environ.get("INFRA_SYNC_GIT_TIMEOUT", "").strip()
        if raw_timeout:
            try:
                git_timeout = int(raw_timeout)
            except ValueError:
                raise ConfigurationError(
                    f"INFRA_SYNC_GIT_TIMEOUT must be an integer, got: {raw_timeout}"
                )
            if git_timeout <= 0:
                raise ConfigurationError(
                    f"INFRA_SYNC_GIT_TIMEOUT must be positive, got: {git_timeout}"
                )
        else:
            git_timeout = DEFAULT_GIT_TIMEOUT

        settings = cls(
            common_dir=common_dir.strip("/") or DEFAULT_COMMON_DIR,
            marker_name=marker_name,
            git_timeout=git_timeout,
        )
        logger.debug(
            f"Sync settings: common_dir={settings.common_dir}, "
            f"marker={settings.marker_name}, git_timeout={settings.git_timeout}s"
        )
        return settings
