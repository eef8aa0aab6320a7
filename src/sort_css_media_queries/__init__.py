"""
Sort CSS Media Queries

Mobile-first and desktop-first comparators for media-query-merging build tools.
"""

__version__ = "1.1.1"

from .sorting import (
    SortPolicy,
    desktop_first,
    get_comparator,
    media_query_sort_key,
    mobile_first,
    sort_media_queries,
)
from .utils.config_loader import Config, SortConfig, configure_logging

__all__ = [
    "SortPolicy",
    "desktop_first",
    "get_comparator",
    "media_query_sort_key",
    "mobile_first",
    "sort_media_queries",
    "Config",
    "SortConfig",
    "configure_logging",
    "__version__",
]
