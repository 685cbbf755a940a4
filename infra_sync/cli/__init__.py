"""
CLI commands — registered on the group in infra_sync.main.
"""
