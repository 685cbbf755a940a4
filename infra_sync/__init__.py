"""
infra-sync — Mirror an infra repository's common/ tree into target repos.
"""

__version__ = "0.1.0"
