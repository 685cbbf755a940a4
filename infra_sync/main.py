"""
infra-sync — CLI Entry Point

Usage:
    infra-sync [--log-level LEVEL] [--log-format text|json] sync <infra> <target> <commit>
    infra-sync task [NAME]
    sync-common <infra-path> <target-path> <current-commit>
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from .cli.sync import sync_cmd
from .cli.tasks import task_cmd
from .config import SyncSettings
from .errors import ConfigurationError
from .logging_config import setup_logging


def load_env() -> None:
    """Load a .env file from the working directory, if present."""
    env_file = Path.cwd() / ".env"
    if env_file.exists():
        load_dotenv(env_file)


def load_settings() -> SyncSettings:
    try:
        return SyncSettings.from_env()
    except ConfigurationError as e:
        raise click.ClickException(str(e))


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level (default: LOG_LEVEL or INFO)",
)
@click.option(
    "--log-format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default=None,
    help="Log format (default: LOG_FORMAT or text)",
)
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str], log_format: Optional[str]) -> None:
    """infra-sync — Keep shared infra files in sync across repositories."""
    load_env()
    setup_logging(log_level, log_format)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = load_settings()


cli.add_command(sync_cmd)
cli.add_command(task_cmd)


def sync_common() -> None:
    """Standalone ``sync-common`` entry point."""
    load_env()
    setup_logging()
    try:
        settings = load_settings()
    except click.ClickException as e:
        e.show()
        raise SystemExit(e.exit_code)
    sync_cmd.main(prog_name="sync-common", obj={"settings": settings})


if __name__ == "__main__":
    cli()
