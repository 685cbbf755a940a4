"""
Task runner — Named automation tasks run from the repository toplevel.
"""
