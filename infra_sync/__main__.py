"""
Run the CLI directly.

Usage:
    python -m infra_sync sync <infra-path> <target-path> <current-commit>
"""

from .main import cli

if __name__ == "__main__":
    cli()
