"""
Tests for the task registry scaffold.
"""

from __future__ import annotations

import os
from pathlib import Path
from unittest import mock

import pytest

from conftest import requires_git
from infra_sync.tasks import registry
from infra_sync.tasks.registry import TASKS, get_task, print_help, run_task


class TestRegistry:

    def test_ships_empty(self):
        assert dict(TASKS) == {}

    def test_is_read_only(self):
        with pytest.raises(TypeError):
            TASKS["new"] = lambda: None  # type: ignore[index]

    def test_missing_name_is_help(self):
        assert get_task(None) is print_help
        assert get_task("") is print_help

    def test_unknown_name_is_help(self):
        assert get_task("lint") is print_help

    def test_known_name(self):
        def lint() -> None:
            pass

        assert get_task("lint", {"lint": lint}) is lint


class TestPrintHelp:

    def test_lists_names(self, capsys):
        with mock.patch.object(registry, "TASKS", {"build": lambda: None, "lint": lambda: None}):
            print_help()

        assert capsys.readouterr().out == "Available tasks:\n  build\n  lint\n"


class TestRunTask:

    def test_runs_task(self):
        calls = []
        with mock.patch.object(registry, "enter_toplevel"):
            run_task("build", {"build": lambda: calls.append("build")})

        assert calls == ["build"]

    def test_unknown_prints_help(self, capsys):
        with mock.patch.object(registry, "enter_toplevel"):
            run_task("nope", {"build": lambda: None})

        assert "Available tasks:" in capsys.readouterr().out

    def test_task_errors_propagate(self):
        def broken() -> None:
            raise RuntimeError("boom")

        with mock.patch.object(registry, "enter_toplevel"):
            with pytest.raises(RuntimeError, match="boom"):
                run_task("broken", {"broken": broken})


class TestEnterToplevel:

    @requires_git
    def test_changes_to_toplevel(self, infra_repo: Path, monkeypatch):
        monkeypatch.chdir(infra_repo / "common")

        toplevel = registry.enter_toplevel()

        assert toplevel is not None
        assert Path(os.getcwd()).resolve() == infra_repo.resolve()

    def test_outside_repo_stays_put(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with mock.patch.object(registry, "show_toplevel", return_value=None):
            assert registry.enter_toplevel() is None

        assert Path(os.getcwd()) == tmp_path
