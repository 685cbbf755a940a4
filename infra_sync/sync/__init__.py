"""
Common-file sync — Mirror an infra repo's common/ tree into a target repo.

The last synced infra commit is recorded in a marker file at the target
root so later runs only propagate what changed since then.
"""

from .syncer import CommonFileSyncer, sync

__all__ = ["CommonFileSyncer", "sync"]
