"""Exceptions raised by the client."""


class DecodeError(ValueError):
    """Raised when an inbound payload does not match the wire schema."""


class MountError(RuntimeError):
    """Raised when the view cannot be attached to a display."""
