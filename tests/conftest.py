"""
Shared fixtures for sync tests.

Provides throwaway infra repositories (real git, committed common/ tree)
and empty target directories. Tests that need git are skipped when the
binary is not on PATH.
"""

from __future__ import annotations

import shutil
import subprocess
from pathlib import Path

import pytest

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


def git(repo: Path, *args: str) -> str:
    """Run a git command in repo and return stripped stdout."""
    result = subprocess.run(
        [
            "git",
            "-c", "user.email=test@example.com",
            "-c", "user.name=Test User",
            "-c", "commit.gpgsign=false",
            *args,
        ],
        cwd=str(repo),
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


def commit_all(repo: Path, message: str) -> str:
    """Stage everything, commit, and return the new HEAD."""
    git(repo, "add", "-A")
    git(repo, "commit", "-q", "-m", message)
    return git(repo, "rev-parse", "HEAD")


@pytest.fixture
def infra_repo(tmp_path: Path) -> Path:
    """Infra repo with common/file1.txt and common/file2.txt committed."""
    repo = tmp_path / "infra"
    repo.mkdir()
    git(repo, "init", "-q")

    common = repo / "common"
    common.mkdir()
    (common / "file1.txt").write_text("content1")
    (common / "file2.txt").write_text("content2")
    (repo / "README.md").write_text("infra\n")

    commit_all(repo, "Initial commit")
    return repo


@pytest.fixture
def initial_commit(infra_repo: Path) -> str:
    return git(infra_repo, "rev-parse", "HEAD")


@pytest.fixture
def target_dir(tmp_path: Path) -> Path:
    target = tmp_path / "target"
    target.mkdir()
    return target
