"""
Media query classification and ordering.

- Feature classifier: min/max bound detection per axis
- Length extractor: first length in a query, normalized to px
- Comparator: mobile-first and desktop-first ordering
"""

from .feature_classifier import (
    QueryFeatures,
    classify_query,
    has_max_bound,
    has_min_bound,
    is_max_height,
    is_max_width,
    is_min_height,
    is_min_width,
)
from .length_extractor import (
    UNIT_CONVERSIONS,
    UNMEASURABLE_LENGTH,
    get_query_length,
    is_measurable,
)
from .comparator import (
    SortPolicy,
    desktop_first,
    get_comparator,
    locale_compare,
    media_query_sort_key,
    mobile_first,
    sort_media_queries,
)

__all__ = [
    # Feature classifier
    "QueryFeatures",
    "classify_query",
    "has_max_bound",
    "has_min_bound",
    "is_max_height",
    "is_max_width",
    "is_min_height",
    "is_min_width",
    # Length extractor
    "UNIT_CONVERSIONS",
    "UNMEASURABLE_LENGTH",
    "get_query_length",
    "is_measurable",
    # Comparator
    "SortPolicy",
    "desktop_first",
    "get_comparator",
    "locale_compare",
    "media_query_sort_key",
    "mobile_first",
    "sort_media_queries",
]
