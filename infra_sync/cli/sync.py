"""
CLI sync command — mirror common/ from an infra repo into a target repo.

Usage:
    infra-sync sync <infra-path> <target-path> <current-commit> [--resolve]
    sync-common <infra-path> <target-path> <current-commit>
"""

from __future__ import annotations

from pathlib import Path

import click

from ..config import SyncSettings
from ..errors import SyncError, format_error_chain


@click.command("sync")
@click.argument("infra_path", type=click.Path(path_type=Path))
@click.argument("target_path", type=click.Path(path_type=Path))
@click.argument("current_commit")
@click.option("--resolve", is_flag=True, help="Resolve CURRENT_COMMIT with git rev-parse in the infra repo")
@click.pass_context
def sync_cmd(
    ctx: click.Context,
    infra_path: Path,
    target_path: Path,
    current_commit: str,
    resolve: bool,
) -> None:
    """Sync the common directory of INFRA_PATH into TARGET_PATH.

    CURRENT_COMMIT is recorded in the target's commit marker and used as
    the upper bound when diffing against the previously synced commit.
    """
    from ..sync import git_ops
    from ..sync.syncer import CommonFileSyncer

    ctx.ensure_object(dict)
    settings: SyncSettings = ctx.obj.get("settings") or SyncSettings()

    try:
        if resolve:
            current_commit = git_ops.rev_parse(
                infra_path, current_commit, timeout=settings.git_timeout
            )
        changed = CommonFileSyncer(settings).sync(infra_path, target_path, current_commit)
    except SyncError as e:
        click.secho(f"error: {format_error_chain(e)}", fg="red", err=True)
        raise SystemExit(1)

    if changed:
        click.echo(f"Synced common files at {current_commit}")
    else:
        click.echo("No changes to sync")
