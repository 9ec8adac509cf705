"""tablegen exception hierarchy."""

from __future__ import annotations


class TableGenError(Exception):
    """Base class for every error raised by tablegen."""


class InvalidArgumentError(TableGenError, ValueError):
    """A call received arguments it cannot accept. Nothing was mutated."""


class ConfigurationError(TableGenError):
    """The table configuration cannot be rendered.

    Raised from ``render()`` rather than when the configuration is set,
    since columns may be freely reconfigured between renders.
    """


class WidthExceededError(ConfigurationError):
    """No combination of collapsed columns fits the width budget."""

    def __init__(self, width: int, overflow: int) -> None:
        super().__init__("insufficient width to generate the table")
        self.width = width
        self.overflow = overflow
