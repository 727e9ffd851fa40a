"""Domain errors raised by catalog lookup and pricing.

Both abort statement generation; callers never receive a partial statement.
"""

from __future__ import annotations


class PlaybillError(Exception):
    """Base class for statement-generation failures."""


class UnknownPlayTypeError(PlaybillError):
    """A play's genre is not one of the supported :class:`Genre` values."""

    def __init__(self, play_type: str) -> None:
        super().__init__(f"unknown type: {play_type}")
        self.play_type = play_type


class UnknownPlayError(PlaybillError):
    """A performance references a play ID missing from the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(f"unknown play: {play_id}")
        self.play_id = play_id
