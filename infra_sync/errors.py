"""
Errors — Exception hierarchy for sync failures.

Every exception carries the operation that failed in its message. When an
underlying error caused it, that error is chained as ``__cause__`` so the
CLI can print the whole chain.

## Usage

    from infra_sync.errors import SyncError

    try:
        syncer.sync(infra, target, commit)
    except SyncError as e:
        print(format_error_chain(e))
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence


class SyncError(Exception):
    """Base class for every failure raised by a sync run."""


class CommonDirectoryNotFoundError(SyncError):
    """Raised when the infra repository has no common directory."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"Common directory not found: {path}")


class GitCommandError(SyncError):
    """Raised when a git command exits with an unexpected status."""

    def __init__(
        self,
        message: str,
        command: Sequence[str],
        returncode: Optional[int] = None,
        stderr: str = "",
    ):
        self.message = message
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        detail = " ".join(self.command)
        if self.returncode is not None:
            detail = f"{detail} (exit {self.returncode})"
        if self.stderr:
            detail = f"{detail}: {self.stderr}"
        return f"{self.message}: {detail}"


class SyncIOError(SyncError):
    """Raised when reading, writing or removing a file fails."""

    def __init__(self, message: str, path: Path):
        self.path = path
        super().__init__(f"{message}: {path}")


class ConfigurationError(Exception):
    """Raised when configuration is missing or invalid."""
    pass


def format_error_chain(error: BaseException) -> str:
    """Render an exception and its causes as ``msg: cause: cause``."""
    parts: List[str] = []
    current: Optional[BaseException] = error
    while current is not None:
        text = str(current) or type(current).__name__
        if not parts or parts[-1] != text:
            parts.append(text)
        current = current.__cause__
    return ": ".join(parts)
