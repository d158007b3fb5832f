"""
WWZY Core Service - Service for the WWZY short drama listing.
Handles page/pagesize requests against the provider's vod API.
"""

from pydantic import ValidationError

from api.subapi.wwzy.models import WwzyVideoListResponse
from utils.base_api_client import BaseAPIClient, UpstreamError
from utils.get_logger import get_logger

logger = get_logger(__name__)

# Provider type id of the short drama category
SHORT_DRAMA_TYPE_ID = 1

WWZY_TIMEOUT = 10  # seconds


class WwzyService(BaseAPIClient):
    """
    WWZY service for short drama listings.
    """

    def __init__(self):
        self.base_url = "https://wwzy.tv/api.php/provide/vod"

    async def get_video_list(self, page: int = 1, page_size: int = 20) -> WwzyVideoListResponse:
        """Get one page of the short drama video list.

        Args:
            page: 1-based page number
            page_size: Number of videos per page

        Returns:
            WwzyVideoListResponse with videos in upstream order

        Raises:
            UpstreamError: If the request fails or the payload is not a video list
        """
        params = {
            "ac": "videolist",
            "pg": str(page),
            "pagesize": str(page_size),
            "t": str(SHORT_DRAMA_TYPE_ID),
        }

        data = await self._core_async_request(
            url=self.base_url, params=params, timeout=WWZY_TIMEOUT
        )

        try:
            response = WwzyVideoListResponse.model_validate(data)
        except ValidationError as e:
            logger.warning(f"Error validating WWZY response: {e}")
            raise UpstreamError(f"Unexpected WWZY response: {e}", url=self.base_url) from e

        logger.info(
            f"WWZY videolist page={page} pagesize={page_size} "
            f"returned {len(response.videos)} videos"
        )
        return response


wwzy_service = WwzyService()
