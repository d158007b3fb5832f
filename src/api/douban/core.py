"""
Douban Core Service - Base service for the Douban rexxar API.
Handles the recent_hot listing used by the categories endpoint.
"""

from pydantic import ValidationError

from api.douban.models import DoubanRecentHotResponse
from utils.base_api_client import BaseAPIClient, UpstreamError
from utils.get_logger import get_logger

logger = get_logger(__name__)

# Douban rejects requests that do not look like they come from its own site
DOUBAN_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/121.0.0.0 Safari/537.36"
    ),
    "Referer": "https://movie.douban.com/",
    "Accept": "application/json, text/plain, */*",
    "Origin": "https://movie.douban.com",
}

DOUBAN_TIMEOUT = 10  # seconds


class DoubanService(BaseAPIClient):
    """
    Core Douban service for API communication.
    """

    def __init__(self):
        self.base_url = "https://m.douban.com/rexxar/api/v2"

    async def get_recent_hot(
        self,
        kind: str,
        category: str,
        type: str,
        start: int = 0,
        limit: int = 20,
    ) -> DoubanRecentHotResponse:
        """Get a page of the recent_hot listing for a kind/category/type.

        Args:
            kind: 'movie' or 'tv'
            category: Douban category (e.g. '热门')
            type: Douban type filter (e.g. '全部')
            start: Offset of the first item
            limit: Page size

        Returns:
            DoubanRecentHotResponse with items in upstream order

        Raises:
            UpstreamError: If the request fails or the payload is not a recent_hot listing
        """
        url = f"{self.base_url}/subject/recent_hot/{kind}"
        params = {
            "start": str(start),
            "limit": str(limit),
            "category": category,
            "type": type,
        }

        data = await self._core_async_request(
            url=url,
            params=params,
            headers=DOUBAN_HEADERS,
            timeout=DOUBAN_TIMEOUT,
        )

        try:
            response = DoubanRecentHotResponse.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Error validating Douban response: {e}")
            raise UpstreamError(f"Unexpected Douban response: {e}", url=url) from e

        logger.info(
            f"Douban recent_hot/{kind} category={category} type={type} "
            f"returned {len(response.items)} items"
        )
        return response


douban_service = DoubanService()
