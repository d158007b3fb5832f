"""
Douban Models - Pydantic models for the Douban recent_hot API and for the
validated query of the categories endpoint.
"""

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Protocol

from pydantic import Field

from contracts.models import CatalogItem, MCType
from utils.pydantic_tools import BaseModelWithMethods

# Category that selects the short drama listing instead of Douban
SHORT_DRAMA_CATEGORY = "duanju"

DEFAULT_KIND = MCType.MOVIE.value
DEFAULT_LIMIT = 20
DEFAULT_START = 0
MIN_LIMIT = 1
MAX_LIMIT = 100

_YEAR_PATTERN = re.compile(r"(\d{4})")
_INT_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)


class QueryArgs(Protocol):
    """Anything with a dict-like .get, such as werkzeug's request.args."""

    def get(self, key: str, default: Any = None) -> Any: ...


# ============================================================================
# Raw Douban API Response Models
# ============================================================================


class DoubanPic(BaseModelWithMethods):
    large: str | None = None
    normal: str | None = None


class DoubanRating(BaseModelWithMethods):
    value: float | None = None
    count: int | None = None
    max: int | None = None


class DoubanSubject(BaseModelWithMethods):
    """A single entry of a recent_hot listing."""

    id: str
    title: str | None = None
    card_subtitle: str | None = None
    pic: DoubanPic | None = None
    rating: DoubanRating | None = None

    def poster_url(self) -> str:
        if not self.pic:
            return ""
        return self.pic.normal or self.pic.large or ""

    def formatted_rating(self) -> str:
        """Rating with one decimal, rounding half away from zero; empty when unrated."""
        if not self.rating or not self.rating.value or not math.isfinite(self.rating.value):
            return ""
        return str(Decimal(self.rating.value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    def release_year(self) -> str:
        """First four-digit run of card_subtitle, e.g. '美国 / 2021 / 剧情' -> '2021'."""
        if not self.card_subtitle:
            return ""
        match = _YEAR_PATTERN.search(self.card_subtitle)
        return match.group(1) if match else ""

    def to_catalog_item(self) -> CatalogItem:
        return CatalogItem(
            id=self.id,
            title=self.title or "",
            poster=self.poster_url(),
            rate=self.formatted_rating(),
            year=self.release_year(),
        )


class DoubanRecentHotResponse(BaseModelWithMethods):
    """Response of /subject/recent_hot/{kind}."""

    total: int = 0
    items: list[DoubanSubject] = Field(default_factory=list)


# ============================================================================
# Categories endpoint request
# ============================================================================


class CatalogRoute(str, Enum):
    """Upstream selected for a request."""

    DOUBAN = "douban"
    SHORT_DRAMA = "short_drama"


class CategoryRequest(BaseModelWithMethods):
    """Validated query of the categories endpoint."""

    kind: str = DEFAULT_KIND
    category: str
    type: str | None = None
    limit: int = DEFAULT_LIMIT
    start: int = DEFAULT_START

    @property
    def route(self) -> CatalogRoute:
        if self.kind == MCType.TV_SERIES.value and self.category == SHORT_DRAMA_CATEGORY:
            return CatalogRoute.SHORT_DRAMA
        return CatalogRoute.DOUBAN

    @property
    def page(self) -> int:
        """1-based page number for page/pagesize style upstreams."""
        return self.start // self.limit + 1

    @classmethod
    def from_args(cls, args: QueryArgs) -> "CategoryRequest":
        """
        Validate raw query arguments.

        Checks run in order and stop at the first failure.

        Raises:
            ValueError: With a message suitable for a 400 response
        """
        kind = args.get("kind") or DEFAULT_KIND
        category = args.get("category")
        type_ = args.get("type")

        is_short_drama = kind == MCType.TV_SERIES.value and category == SHORT_DRAMA_CATEGORY
        if not kind or not category or (not type_ and not is_short_drama):
            raise ValueError("Missing required parameters: kind, category or type")

        limit = _parse_int(args.get("limit"), DEFAULT_LIMIT)
        if limit is None or limit < MIN_LIMIT or limit > MAX_LIMIT:
            raise ValueError(f"limit must be an integer between {MIN_LIMIT} and {MAX_LIMIT}")

        start = _parse_int(args.get("start"), DEFAULT_START)
        if start is None or start < 0:
            raise ValueError("start must be an integer not less than 0")

        if not is_short_drama and kind not in (MCType.MOVIE.value, MCType.TV_SERIES.value):
            raise ValueError("kind must be either tv or movie")

        return cls(kind=kind, category=category, type=type_ or None, limit=limit, start=start)


def _parse_int(raw: str | None, default: int) -> int | None:
    """Parse a query value as an integer; None when it is not one."""
    if raw is None or raw == "":
        return default
    text = str(raw).strip()
    if not _INT_PATTERN.fullmatch(text):
        return None
    return int(text)
