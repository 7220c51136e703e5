"""Visualization client for the woods entity simulation."""

__all__ = [
    "assets",
    "commands",
    "components",
    "constants",
    "entities",
    "errors",
    "input",
    "main",
    "network",
    "projection",
    "protocol",
    "render",
    "sync",
]
