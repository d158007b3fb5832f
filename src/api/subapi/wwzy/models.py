"""
WWZY Models - Pydantic models for the WWZY (旺旺短剧) vod provider API.
Follows Pydantic 2.0 patterns with full type safety.
"""

from pydantic import Field

from contracts.models import CatalogItem
from utils.pydantic_tools import BaseModelWithMethods


class WwzyVideo(BaseModelWithMethods):
    """Model for a single entry of ac=videolist."""

    vod_id: str
    vod_name: str | None = None
    vod_pic: str | None = None
    vod_score: str | None = None
    vod_year: str | None = None
    type_id: int | None = None
    type_name: str | None = None
    vod_remarks: str | None = None

    def to_catalog_item(self) -> CatalogItem:
        return CatalogItem(
            id=self.vod_id,
            title=self.vod_name or "",
            poster=self.vod_pic or "",
            rate=self.vod_score or "",
            year=self.vod_year or "",
        )


class WwzyVideoListResponse(BaseModelWithMethods):
    """Response of api.php/provide/vod?ac=videolist."""

    code: int = 1
    msg: str = ""
    page: int = 1
    pagecount: int = 0
    limit: int = 0
    total: int = 0
    videos: list[WwzyVideo] = Field(default_factory=list, alias="list")
