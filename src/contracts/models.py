from enum import Enum

from pydantic import Field

from utils.pydantic_tools import BaseModelWithMethods

"""
These are the shapes shared with the frontend. Every upstream is normalized
into CatalogItem, and every catalog endpoint answers with CatalogResult.
"""


class MCSources(str, Enum):
    DOUBAN = "douban"
    WWZY = "wwzy"


class MCType(str, Enum):
    """Content kinds the catalog endpoints accept."""

    MOVIE = "movie"
    TV_SERIES = "tv"


class CatalogItem(BaseModelWithMethods):
    """Normalized catalog entry. Every field is a string, empty when unknown."""

    id: str
    title: str = ""
    poster: str = ""
    rate: str = ""
    year: str = ""


class CatalogResult(BaseModelWithMethods):
    """
    Result of a catalog lookup.

    On the wire a success is {code, message, list}. error/details are only
    set when the lookup failed, in which case status_code is the HTTP status
    to answer with.
    """

    status_code: int = Field(default=200, serialization_alias="code")
    message: str = ""
    items: list[CatalogItem] = Field(default_factory=list, serialization_alias="list")
    source: MCSources | None = Field(default=None, exclude=True)

    error: str | None = Field(default=None, exclude=True)
    details: str | None = Field(default=None, exclude=True)

    def error_body(self) -> "CatalogErrorResponse":
        return CatalogErrorResponse(error=self.error or "Unknown error", details=self.details)


class CatalogErrorResponse(BaseModelWithMethods):
    """Error body for 4xx/5xx answers."""

    error: str
    details: str | None = None
