"""Plays, performances, invoices, and the play catalog.

All models are frozen. Field aliases follow the JSON data files
(``playID``), while Python code uses snake_case names.
"""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, Field

from playbill.domain.errors import UnknownPlayError, UnknownPlayTypeError
from playbill.domain.types import Genre


class Play(BaseModel):
    """Catalog entry for a play.

    ``type`` holds the raw genre string from the catalog so that a catalog
    with an unsupported genre still loads; :attr:`genre` resolves it.
    """

    model_config = {"frozen": True}

    name: str
    type: str

    @property
    def genre(self) -> Genre:
        """The play's genre.

        Raises:
            UnknownPlayTypeError: If ``type`` is not a supported genre.
        """
        try:
            return Genre(self.type)
        except ValueError:
            raise UnknownPlayTypeError(self.type) from None


class Performance(BaseModel):
    """One staging of a play with its audience size."""

    model_config = {"frozen": True, "populate_by_name": True}

    play_id: str = Field(alias="playID")
    audience: int = Field(ge=0)


class Invoice(BaseModel):
    """A customer's bill; performance order is the statement line order."""

    model_config = {"frozen": True}

    customer: str
    performances: tuple[Performance, ...] = ()


Catalog = Mapping[str, Play]


def resolve_play(catalog: Catalog, performance: Performance) -> Play:
    """Look up the play a performance refers to.

    Raises:
        UnknownPlayError: If the play ID is not in the catalog.
    """
    try:
        return catalog[performance.play_id]
    except KeyError:
        raise UnknownPlayError(performance.play_id) from None
