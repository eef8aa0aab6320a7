"""
Length extraction for media query strings.

Finds the first number immediately followed by a supported CSS unit and
converts it to pixels. Queries without such a pair are unmeasurable and get
a sentinel length that compares larger than any real length.
"""

import re
import sys


# Unit conversion constants (to px)
UNIT_CONVERSIONS = {
    "ch": 8.8984375,
    "em": 16.0,
    "ex": 8.296875,
    "px": 1.0,
    "rem": 16.0,
}

# Largest finite float, so unmeasurable queries always sort last
UNMEASURABLE_LENGTH = sys.float_info.max

LENGTH_PATTERN = re.compile(r"(-?\d*\.?\d+)(ch|em|ex|px|rem)", re.ASCII)


def get_query_length(query: str) -> float:
    """
    Obtain the length of a media query in pixels.

    Only the first number+unit pair is measured, so a range query is
    measured by whichever bound it mentions first.

    Args:
        query: Media query text (e.g., "screen and (min-width: 20em)")

    Returns:
        Pixel length, or UNMEASURABLE_LENGTH if no length is found

    Examples:
        >>> get_query_length("(min-width: 20em)")
        320.0
        >>> get_query_length("print") == UNMEASURABLE_LENGTH
        True
    """
    match = LENGTH_PATTERN.search(query)
    if match is None:
        return UNMEASURABLE_LENGTH

    value, unit = match.groups()
    return float(value) * UNIT_CONVERSIONS[unit]


def is_measurable(length: float) -> bool:
    """Check whether a length came from the query rather than the sentinel."""
    return length != UNMEASURABLE_LENGTH
