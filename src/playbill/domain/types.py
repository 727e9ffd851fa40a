"""Play genres.

The genre set is closed: every pricing table is keyed by :class:`Genre`
and must cover each member.
"""

from __future__ import annotations

from enum import StrEnum


class Genre(StrEnum):
    """Genres a play can be billed under."""

    TRAGEDY = "tragedy"
    COMEDY = "comedy"
