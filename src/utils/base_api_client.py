"""
Base API Client - Shared upstream request handling for the catalog services.
All upstream services should inherit from this and use its _core_async_request method.
"""

from typing import Any

import aiohttp

from utils.get_logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10  # seconds


class UpstreamError(Exception):
    """
    Raised when an upstream catalog call does not yield usable JSON.

    This covers:
    - Non-2xx HTTP status (status_code is set)
    - Timeout (timed_out is True)
    - Network/connection failures
    - Malformed or unexpected JSON payloads
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str | None = None,
        timed_out: bool = False,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.timed_out = timed_out


class BaseAPIClient:
    """
    Base class for upstream API clients.

    Each call is a single GET bounded by a total timeout. There is no retry
    and no shared state between calls; the session, the response and the
    timeout are all released by their context managers on every exit path.
    """

    async def _core_async_request(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> Any:
        """
        Core async HTTP GET request.

        Args:
            url: Full URL to request
            params: Optional query parameters (URL-encoded by aiohttp)
            headers: Optional HTTP headers
            timeout: Total request timeout in seconds (default: 10)

        Returns:
            Parsed JSON response (dict, list, or other JSON type)

        Raises:
            UpstreamError: On timeout, network failure, non-2xx status or invalid JSON
        """
        request_timeout = aiohttp.ClientTimeout(total=timeout)

        try:
            async with (  # noqa: SIM117
                aiohttp.ClientSession() as session,
                session.get(
                    url,
                    params=params,
                    headers=headers,
                    timeout=request_timeout,
                ) as response,
            ):
                status = response.status
                if not 200 <= status < 300:
                    logger.warning(f"API returned status {status} for {url}")
                    raise UpstreamError(
                        f"HTTP error! Status: {status}", status_code=status, url=url
                    )

                # Some upstreams label JSON as text/html, so skip the content-type check
                return await response.json(content_type=None)

        except UpstreamError:
            raise
        except TimeoutError as e:
            logger.error(f"Request to {url} timed out after {timeout}s")
            raise UpstreamError(
                f"Request timed out after {timeout}s", url=url, timed_out=True
            ) from e
        except ValueError as e:
            # JSONDecodeError and UnicodeDecodeError from a body that is not UTF-8 JSON
            logger.error(f"Invalid JSON from {url}: {e}")
            raise UpstreamError(f"Invalid JSON response: {e}", url=url) from e
        except aiohttp.ClientError as e:
            logger.error(f"Error making request to {url}: {e}")
            detail = str(e) or type(e).__name__
            raise UpstreamError(f"Request failed: {detail}", url=url) from e
