"""
Douban Async Wrappers - Firebase Functions compatible async wrapper functions.
Routes a validated categories request to Douban or to the short drama provider
and normalizes the upstream items into CatalogResult.
"""

from api.douban.core import douban_service
from api.douban.models import CatalogRoute, CategoryRequest
from api.subapi.wwzy.core import wwzy_service
from contracts.models import CatalogItem, CatalogResult, MCSources
from utils.base_api_client import UpstreamError
from utils.get_logger import get_logger

logger = get_logger(__name__)

SUCCESS_MESSAGE = "success"


class DoubanWrapper:
    def __init__(self):
        self.service = douban_service
        self.short_drama_service = wwzy_service

    async def get_categories(self, request: CategoryRequest) -> CatalogResult:
        """
        Async wrapper function to get one page of a category listing.

        Exactly one upstream is called, chosen by request.route.

        Args:
            request: Validated categories request

        Returns:
            CatalogResult: items on success, or status_code 500 with error/details
        """
        if request.route is CatalogRoute.SHORT_DRAMA:
            return await self._get_short_drama(request)
        return await self._get_douban_category(request)

    async def _get_douban_category(self, request: CategoryRequest) -> CatalogResult:
        try:
            response = await self.service.get_recent_hot(
                kind=request.kind,
                category=request.category,
                type=request.type or "",
                start=request.start,
                limit=request.limit,
            )
            items = [subject.to_catalog_item() for subject in response.items]
            return _success(items, MCSources.DOUBAN)

        except UpstreamError as e:
            logger.error(f"Error fetching Douban {request.kind}/{request.category}: {e}")
            return _failure("Failed to fetch Douban data", e, MCSources.DOUBAN)

    async def _get_short_drama(self, request: CategoryRequest) -> CatalogResult:
        try:
            response = await self.short_drama_service.get_video_list(
                page=request.page, page_size=request.limit
            )
            items = [video.to_catalog_item() for video in response.videos]
            return _success(items, MCSources.WWZY)

        except UpstreamError as e:
            logger.error(f"Error fetching short drama page {request.page}: {e}")
            return _failure("Failed to fetch short drama data", e, MCSources.WWZY)


def _success(items: list[CatalogItem], source: MCSources) -> CatalogResult:
    return CatalogResult(status_code=200, message=SUCCESS_MESSAGE, items=items, source=source)


def _failure(summary: str, error: Exception, source: MCSources) -> CatalogResult:
    return CatalogResult(
        status_code=500,
        message=summary,
        error=summary,
        details=str(error),
        source=source,
    )


douban_wrapper = DoubanWrapper()
