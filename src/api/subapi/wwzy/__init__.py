"""
WWZY Service Package - Short drama listings from the WWZY vod provider.

This package provides:
- WwzyService: Core service for the videolist endpoint
- Models: Pydantic models for the provider payload
"""

from api.subapi.wwzy.core import WwzyService, wwzy_service
from api.subapi.wwzy.models import WwzyVideo, WwzyVideoListResponse

__all__ = [
    # Core
    "WwzyService",
    "wwzy_service",
    # Models
    "WwzyVideo",
    "WwzyVideoListResponse",
]
