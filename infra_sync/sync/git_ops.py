"""
Git Operations — Query infra repository history.

All queries shell out to the ``git`` binary in the repository directory.
Unexpected exit statuses are raised as GitCommandError with the command
and git's stderr attached.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List

from ..config import DEFAULT_GIT_TIMEOUT
from ..errors import GitCommandError

logger = logging.getLogger(__name__)


def _git(repo: Path, *args: str, timeout: int = DEFAULT_GIT_TIMEOUT) -> subprocess.CompletedProcess:
    """Run a git command in the repo directory."""
    cmd = ["git"] + list(args)
    logger.debug(f"Running: {' '.join(cmd)} (in {repo})")
    try:
        return subprocess.run(
            cmd,
            cwd=str(repo),
            capture_output=True,
            text=True,
            timeout=timeout,
        )
    except FileNotFoundError as e:
        raise GitCommandError("Failed to run git", cmd) from e
    except subprocess.TimeoutExpired as e:
        raise GitCommandError(f"git timed out after {timeout}s", cmd) from e


def _check(result: subprocess.CompletedProcess, message: str) -> str:
    """Return stdout of a successful command, raise otherwise."""
    if result.returncode != 0:
        raise GitCommandError(
            message,
            result.args,
            returncode=result.returncode,
            stderr=(result.stderr or "").strip(),
        )
    return result.stdout


def get_deleted_files(
    repo_path: Path,
    old_commit: str,
    new_commit: str,
    prefix: str,
    timeout: int = DEFAULT_GIT_TIMEOUT,
) -> List[str]:
    """
    Get files deleted between two commits under a path prefix.

    Paths are repo-relative and keep the prefix (``common/foo.txt``),
    in the order git reports them. Rename detection is off, so the
    old side of a rename counts as deleted.
    """
    result = _git(
        repo_path,
        "diff", "--name-only", "-z", "--no-renames", "--diff-filter=D",
        old_commit, new_commit, "--", prefix,
        timeout=timeout,
    )
    output = _check(result, "Failed to list deleted files")
    return [name for name in output.split("\0") if name.strip()]


def has_changes(
    repo_path: Path,
    old_commit: str,
    new_commit: str,
    prefix: str,
    timeout: int = DEFAULT_GIT_TIMEOUT,
) -> bool:
    """
    Check whether two commits differ under a path prefix.

    ``git diff --quiet`` exits 1 when there are differences; anything
    other than 0 or 1 is a failure.
    """
    result = _git(
        repo_path,
        "diff", "--quiet", old_commit, new_commit, "--", prefix,
        timeout=timeout,
    )
    if result.returncode not in (0, 1):
        _check(result, "Failed to diff commits")
    return result.returncode == 1


def rev_parse(repo_path: Path, ref: str = "HEAD", timeout: int = DEFAULT_GIT_TIMEOUT) -> str:
    """Resolve a ref to a full commit id."""
    result = _git(repo_path, "rev-parse", "--verify", f"{ref}^{{commit}}", timeout=timeout)
    return _check(result, f"Failed to resolve {ref}").strip()


def show_toplevel(path: Path) -> Path | None:
    """Return the work tree root containing ``path``, or None outside git."""
    try:
        result = _git(path, "rev-parse", "--show-toplevel", timeout=5)
    except GitCommandError:
        return None
    if result.returncode != 0:
        return None
    return Path(result.stdout.strip())
