"""
CLI task command — run a registered automation task.

Usage:
    infra-sync task [NAME]
"""

from __future__ import annotations

from typing import Optional

import click


@click.command("task")
@click.argument("name", required=False)
def task_cmd(name: Optional[str]) -> None:
    """Run task NAME from the repository toplevel, or list available tasks."""
    from ..tasks.registry import run_task

    run_task(name)
