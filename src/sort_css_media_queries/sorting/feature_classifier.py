"""
Feature classification for media query strings.

Decides whether a query expresses a minimum-bound and/or maximum-bound
dimensional feature. Classification is a heuristic over raw text, not a
parse: each axis predicate first tries the two ordered "min...max" and
"max...min" patterns and only falls back to a single-sided mention when
neither matches.

Device-prefixed features (``min-device-width`` etc.) classify exactly like
their unprefixed counterparts.

Typical usage example:
    >>> features = classify_query("screen and (min-width: 320px)")
    >>> features.min_bound, features.max_bound
    (True, False)
"""

import re
from dataclasses import dataclass
from typing import Callable


# Width patterns
MIN_MAX_WIDTH = re.compile(r"(!?\(\s*min(-device)?-width).+\(\s*max(-device)?-width")
MIN_WIDTH = re.compile(r"\(\s*min(-device)?-width")
MAX_MIN_WIDTH = re.compile(r"(!?\(\s*max(-device)?-width).+\(\s*min(-device)?-width")
MAX_WIDTH = re.compile(r"\(\s*max(-device)?-width")

# Height patterns
MIN_MAX_HEIGHT = re.compile(
    r"(!?\(\s*min(-device)?-height).+\(\s*max(-device)?-height"
)
MIN_HEIGHT = re.compile(r"\(\s*min(-device)?-height")
MAX_MIN_HEIGHT = re.compile(
    r"(!?\(\s*max(-device)?-height).+\(\s*min(-device)?-height"
)
MAX_HEIGHT = re.compile(r"\(\s*max(-device)?-height")


def _query_test(
    double_test_true: re.Pattern, double_test_false: re.Pattern, single_test: re.Pattern
) -> Callable[[str], bool]:
    """
    Build a predicate from an ordered pair of combined patterns.

    Args:
        double_test_true: Combined pattern whose match means True
        double_test_false: Combined pattern whose match means False
        single_test: Fallback pattern used when neither combined one matches

    Returns:
        Predicate taking a query string
    """

    def test(query: str) -> bool:
        if double_test_true.search(query):
            return True
        if double_test_false.search(query):
            return False
        return single_test.search(query) is not None

    return test


is_min_width = _query_test(MIN_MAX_WIDTH, MAX_MIN_WIDTH, MIN_WIDTH)
is_max_width = _query_test(MAX_MIN_WIDTH, MIN_MAX_WIDTH, MAX_WIDTH)

is_min_height = _query_test(MIN_MAX_HEIGHT, MAX_MIN_HEIGHT, MIN_HEIGHT)
is_max_height = _query_test(MAX_MIN_HEIGHT, MIN_MAX_HEIGHT, MAX_HEIGHT)


def has_min_bound(query: str) -> bool:
    """Check if query constrains width or height from below."""
    return is_min_width(query) or is_min_height(query)


def has_max_bound(query: str) -> bool:
    """Check if query constrains width or height from above."""
    return is_max_width(query) or is_max_height(query)


@dataclass(frozen=True)
class QueryFeatures:
    """
    Dimensional features detected in a single query.

    Attributes:
        min_width: Query is min-width dominant
        max_width: Query is max-width dominant
        min_height: Query is min-height dominant
        max_height: Query is max-height dominant
    """

    min_width: bool
    max_width: bool
    min_height: bool
    max_height: bool

    @property
    def min_bound(self) -> bool:
        return self.min_width or self.min_height

    @property
    def max_bound(self) -> bool:
        return self.max_width or self.max_height


def classify_query(query: str) -> QueryFeatures:
    """
    Classify a query by the dimensional features it constrains.

    Args:
        query: Media query text

    Returns:
        QueryFeatures with one flag per axis predicate
    """
    return QueryFeatures(
        min_width=is_min_width(query),
        max_width=is_max_width(query),
        min_height=is_min_height(query),
        max_height=is_max_height(query),
    )
