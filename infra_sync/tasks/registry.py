"""
Task Registry — Lookup tasks by name.

The registry is built once at import time and never mutated. Add a task
by defining a function and listing it in ``_TASKS``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, Mapping, Optional

import click

from ..sync.git_ops import show_toplevel

logger = logging.getLogger(__name__)

TaskFn = Callable[[], None]

_TASKS: Dict[str, TaskFn] = {}

TASKS: Mapping[str, TaskFn] = MappingProxyType(_TASKS)


def print_help() -> None:
    """List the available tasks."""
    click.echo("Available tasks:")
    for name in TASKS:
        click.echo(f"  {name}")


def enter_toplevel() -> Optional[Path]:
    """Change to the git toplevel if the cwd is inside a work tree."""
    toplevel = show_toplevel(Path.cwd())
    if toplevel is None:
        logger.debug("Not inside a git work tree, staying in cwd")
        return None
    os.chdir(toplevel)
    logger.debug(f"Changed to toplevel: {toplevel}")
    return toplevel


def get_task(name: Optional[str], tasks: Mapping[str, TaskFn] = TASKS) -> TaskFn:
    """Return the task for ``name``, or print_help if there is none."""
    if not name:
        return print_help
    return tasks.get(name, print_help)


def run_task(name: Optional[str], tasks: Mapping[str, TaskFn] = TASKS) -> None:
    """Run a task from the repository toplevel."""
    enter_toplevel()
    task = get_task(name, tasks)
    if task is print_help and name:
        logger.debug(f"Unknown task: {name}")
    task()
