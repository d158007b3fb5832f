"""
Douban categories Firebase Functions handler.

Validates the query, delegates to douban_wrapper and renders the JSON answer
with a Cache-Control header on success.
"""

import asyncio
import json
from typing import Protocol

from firebase_functions import https_fn

from api.douban.models import CategoryRequest
from api.douban.wrappers import DoubanWrapper, douban_wrapper
from contracts.models import CatalogErrorResponse
from utils.app_config import app_config
from utils.get_logger import get_logger

logger = get_logger(__name__)

JSON_HEADERS = {"Content-Type": "application/json"}


class CacheConfig(Protocol):
    def get_cache_seconds(self) -> int: ...


class DoubanHandler:
    """
    Firebase Functions handler for the catalog categories endpoint.

    All upstream work goes through the wrapper, never the core services.
    """

    def __init__(self, wrapper: DoubanWrapper = douban_wrapper, config: CacheConfig = app_config):
        self.wrapper = wrapper
        self.config = config

    async def get_categories(self, req: https_fn.Request) -> https_fn.Response:
        """
        Get one page of a Douban category, or of the short drama listing.

        Usage:
        GET /douban_categories?kind=movie&category=热门&type=全部
        GET /douban_categories?kind=tv&category=tv&type=tv_domestic&limit=20&start=40
        GET /douban_categories?kind=tv&category=duanju&limit=20&start=0

        Query Parameters:
        - kind: movie or tv (default: movie)
        - category: Douban category, or duanju with kind=tv for short dramas
        - type: Douban type filter (not needed for short dramas)
        - limit: Page size, 1-100 (default: 20)
        - start: Offset of the first item (default: 0)

        Returns:
            200 {code, message, list} with Cache-Control, 400 {error} or 500 {error, details}
        """
        try:
            try:
                request = CategoryRequest.from_args(req.args)
            except ValueError as e:
                logger.warning(f"Rejected categories request: {e}")
                return _json_response(CatalogErrorResponse(error=str(e)), status=400)

            logger.info(
                f"Getting categories kind={request.kind} category={request.category} "
                f"type={request.type} start={request.start} limit={request.limit}"
            )

            result = await self.wrapper.get_categories(request)

            if result.status_code != 200 or result.error:
                return _json_response(result.error_body(), status=result.status_code)

            cache_time = self.config.get_cache_seconds()
            return https_fn.Response(
                result.to_json(),
                status=200,
                headers={
                    **JSON_HEADERS,
                    "Cache-Control": f"public, max-age={cache_time}",
                },
            )

        except Exception as e:
            logger.error(f"Error in get_categories: {e}")
            return _json_response(
                CatalogErrorResponse(error="Internal server error", details=str(e)), status=500
            )

    def create_categories_function(self):
        """Create the douban_categories Firebase function."""

        @https_fn.on_request()
        def douban_categories(req: https_fn.Request) -> https_fn.Response:
            return asyncio.run(self.get_categories(req))

        return douban_categories


def _json_response(body: CatalogErrorResponse, status: int) -> https_fn.Response:
    return https_fn.Response(
        json.dumps(body.to_dict(exclude_none=True), ensure_ascii=False),
        status=status,
        headers=JSON_HEADERS,
    )
