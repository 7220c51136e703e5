"""Broadcast hub connecting woods viewers and the simulation worker."""

__all__ = [
    "constants",
    "hub",
    "main",
]
