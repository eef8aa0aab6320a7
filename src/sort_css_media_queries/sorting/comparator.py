"""
Media query comparators for mobile-first and desktop-first ordering.

Both policies share one tie-break ladder:

1. Priority: a min-bound query against a max-bound query is decided by
   category alone (mobile-first puts minimums first, desktop-first
   maximums first).
2. Unmeasurable queries sort after measurable ones; two unmeasurable
   queries compare lexicographically.
3. Different lengths: min-bound queries ascend, max-bound queries descend.
4. Equal lengths: lexicographic tie-break (reversed for desktop-first).

Only steps 1 and 4 depend on the policy.

Threading Safety:
    All functions are pure and read only precompiled pattern constants.

Typical usage example:
    >>> sort_media_queries(["print", "(max-width: 767px)", "(min-width: 320px)"])
    ['(min-width: 320px)', '(max-width: 767px)', 'print']
"""

import functools
import logging
from enum import Enum
from typing import TYPE_CHECKING, Callable, Iterable, List, Optional, Union

from pyuca import Collator

from ..utils.error_handlers import ConfigurationError
from .feature_classifier import classify_query
from .length_extractor import get_query_length, is_measurable

if TYPE_CHECKING:
    from ..utils.config_loader import SortConfig

logger = logging.getLogger(__name__)

# Root (locale-neutral) Unicode collation, shared by every comparison
COLLATOR = Collator()

Comparator = Callable[[str, str], int]


class SortPolicy(Enum):
    """Ordering policy for media queries."""

    MOBILE_FIRST = "mobile-first"
    DESKTOP_FIRST = "desktop-first"

    @classmethod
    def from_string(cls, s: str) -> "SortPolicy":
        """
        Parse policy from its name.

        Accepts "mobile-first", "mobile_first", "desktop-first", etc.,
        case-insensitively.

        Raises:
            ConfigurationError: If the name is not a known policy
        """
        normalized = str(s).strip().lower().replace("_", "-")
        for policy in cls:
            if policy.value == normalized:
                return policy
        raise ConfigurationError(
            f"Unknown sort policy: {s!r}", config_key="sorting.policy"
        )


def locale_compare(a: str, b: str) -> int:
    """
    Locale-aware lexicographic comparison.

    Uses the Unicode Collation Algorithm with the default table, so letters
    compare alphabetically before case is considered ('all' < 'Print')
    and lowercase sorts before uppercase on otherwise equal strings.

    Returns:
        -1, 0 or 1
    """
    key_a = COLLATOR.sort_key(a)
    key_b = COLLATOR.sort_key(b)
    return (key_a > key_b) - (key_a < key_b)


def _compare(a: str, b: str, desktop: bool) -> int:
    direction = -1 if desktop else 1

    features_a = classify_query(a)
    features_b = classify_query(b)

    if features_a.min_bound and features_b.max_bound:
        return -direction
    if features_a.max_bound and features_b.min_bound:
        return direction

    length_a = get_query_length(a)
    length_b = get_query_length(b)

    measurable_a = is_measurable(length_a)
    measurable_b = is_measurable(length_b)

    if not measurable_a and not measurable_b:
        return locale_compare(a, b)
    if not measurable_a:
        return 1
    if not measurable_b:
        return -1

    # max-bound queries descend
    if length_a > length_b:
        return -1 if features_a.max_bound else 1
    if length_a < length_b:
        return 1 if features_a.max_bound else -1

    return direction * locale_compare(a, b)


def mobile_first(a: str, b: str) -> int:
    """
    Compare two media queries by the mobile-first methodology.

    Minimum-bound queries come first in ascending order, then
    maximum-bound queries in descending order, then queries without a
    measurable length.

    Args:
        a: First media query
        b: Second media query

    Returns:
        -1 if a sorts first, 1 if b sorts first, 0 if equivalent
    """
    return _compare(a, b, desktop=False)


def desktop_first(a: str, b: str) -> int:
    """
    Compare two media queries by the desktop-first methodology.

    Maximum-bound queries come first in descending order, then
    minimum-bound queries in ascending order, then queries without a
    measurable length.

    Args:
        a: First media query
        b: Second media query

    Returns:
        -1 if a sorts first, 1 if b sorts first, 0 if equivalent
    """
    return _compare(a, b, desktop=True)


_COMPARATORS = {
    SortPolicy.MOBILE_FIRST: mobile_first,
    SortPolicy.DESKTOP_FIRST: desktop_first,
}


def get_comparator(
    policy: Union[str, SortPolicy] = SortPolicy.MOBILE_FIRST,
) -> Comparator:
    """
    Resolve a policy to its two-argument comparator.

    Args:
        policy: SortPolicy member or policy name

    Returns:
        mobile_first or desktop_first

    Raises:
        ConfigurationError: If the policy name is unknown
    """
    if not isinstance(policy, SortPolicy):
        policy = SortPolicy.from_string(policy)
    return _COMPARATORS[policy]


def media_query_sort_key(policy: Union[str, SortPolicy] = SortPolicy.MOBILE_FIRST):
    """Key function for ``sorted``/``list.sort`` under the given policy."""
    return functools.cmp_to_key(get_comparator(policy))


def sort_media_queries(
    queries: Iterable[str],
    policy: Union[str, SortPolicy] = SortPolicy.MOBILE_FIRST,
    config: Optional["SortConfig"] = None,
) -> List[str]:
    """
    Sort media queries under a policy.

    Args:
        queries: Media query strings, typically the distinct @media
            params collected by a build tool
        policy: Policy name or member; ignored when config is given
        config: Loaded SortConfig whose sorting.policy takes precedence

    Returns:
        New sorted list; the input is left untouched

    Raises:
        ConfigurationError: If the policy name is unknown
    """
    if config is not None:
        policy = config.policy

    comparator = get_comparator(policy)
    result = sorted(queries, key=functools.cmp_to_key(comparator))

    logger.debug(f"Sorted {len(result)} media queries with {comparator.__name__}")
    return result
