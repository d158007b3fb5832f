"""
Douban Service Package - Catalog categories backed by Douban.

This package provides:
- DoubanService: Core service for the recent_hot API
- Models: Pydantic models for Douban payloads and the categories query
- Wrappers: Routing between Douban and the short drama provider
- Handlers: Firebase Functions HTTP endpoint
"""

from api.douban.core import DoubanService, douban_service
from api.douban.handlers import DoubanHandler
from api.douban.models import (
    CatalogRoute,
    CategoryRequest,
    DoubanPic,
    DoubanRating,
    DoubanRecentHotResponse,
    DoubanSubject,
)
from api.douban.wrappers import DoubanWrapper, douban_wrapper

__all__ = [
    # Core
    "DoubanService",
    "douban_service",
    # Handlers
    "DoubanHandler",
    # Models
    "CatalogRoute",
    "CategoryRequest",
    "DoubanPic",
    "DoubanRating",
    "DoubanSubject",
    "DoubanRecentHotResponse",
    # Wrappers
    "DoubanWrapper",
    "douban_wrapper",
]
