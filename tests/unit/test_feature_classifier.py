"""
Unit tests for feature_classifier module.
"""

import pytest

from sort_css_media_queries.sorting.feature_classifier import (
    QueryFeatures,
    classify_query,
    has_max_bound,
    has_min_bound,
    is_max_height,
    is_max_width,
    is_min_height,
    is_min_width,
)


class TestWidthPredicates:
    """Tests for is_min_width and is_max_width."""

    def test_min_width(self):
        """Test plain min-width query."""
        query = "screen and (min-width: 320px)"

        assert is_min_width(query)
        assert not is_max_width(query)

    def test_max_width(self):
        """Test plain max-width query."""
        query = "screen and (max-width: 767px)"

        assert is_max_width(query)
        assert not is_min_width(query)

    @pytest.mark.parametrize(
        "query",
        ["(min-device-width: 320px)", "( min-width: 320px)", "(min-width:320px)"],
    )
    def test_min_width_variants(self, query):
        """Test device prefix and inner whitespace still classify as min-width."""
        assert is_min_width(query)

    def test_max_device_width(self):
        """Test device-prefixed max-width."""
        assert is_max_width("only screen and (max-device-width: 480px)")

    def test_requires_parenthesis(self):
        """Test feature names outside a parenthesis are ignored."""
        assert not is_min_width("min-width: 320px")

    def test_case_sensitive(self):
        """Test uppercase feature names are not recognized."""
        assert not is_min_width("(MIN-WIDTH: 320px)")


class TestRangeDisambiguation:
    """Tests for queries mentioning both a min and a max bound on one axis."""

    def test_min_then_max_is_min(self):
        """Test min mentioned first makes the query min-dominant."""
        query = "(min-width: 320px) and (max-width: 767px)"

        assert is_min_width(query)
        assert not is_max_width(query)

    def test_max_then_min_is_max(self):
        """Test max mentioned first makes the query max-dominant."""
        query = "(max-width: 767px) and (min-width: 320px)"

        assert is_max_width(query)
        assert not is_min_width(query)

    def test_device_range(self):
        """Test device-prefixed range behaves like the plain range."""
        query = "(min-device-width: 320px) and (max-device-width: 767px)"

        assert is_min_width(query)
        assert not is_max_width(query)

    def test_height_range(self):
        """Test height axis uses the same ordering rule."""
        query = "(max-height: 900px) and (min-height: 400px)"

        assert is_max_height(query)
        assert not is_min_height(query)

    def test_negation_marker_has_no_effect(self):
        """Test a leading '!' does not change classification."""
        plain = "(min-width: 320px) and (max-width: 767px)"
        negated = "!(min-width: 320px) and (max-width: 767px)"

        assert is_min_width(negated) == is_min_width(plain)
        assert is_max_width(negated) == is_max_width(plain)

    def test_separate_lines_fall_back_to_single_test(self):
        """Test combined patterns do not match across newlines."""
        query = "(min-width: 320px)\n(max-width: 767px)"

        assert is_min_width(query)
        assert is_max_width(query)


class TestHeightPredicates:
    """Tests for is_min_height and is_max_height."""

    def test_min_height(self):
        """Test min-height query."""
        assert is_min_height("(min-height: 480px)")
        assert not is_max_height("(min-height: 480px)")

    def test_max_device_height(self):
        """Test device-prefixed max-height query."""
        assert is_max_height("(max-device-height: 600px)")

    def test_width_is_not_height(self):
        """Test width features do not classify as height."""
        assert not is_min_height("(min-width: 320px)")
        assert not is_max_height("(max-width: 767px)")


class TestBounds:
    """Tests for has_min_bound, has_max_bound and classify_query."""

    def test_combines_axes(self):
        """Test width and height predicates are OR-combined."""
        assert has_min_bound("(min-height: 480px)")
        assert has_max_bound("(max-width: 767px)")

    def test_no_features(self):
        """Test query without dimensional features."""
        assert not has_min_bound("print")
        assert not has_max_bound("print")

    def test_both_bounds_on_different_axes(self):
        """Test a query may be min-bound and max-bound at once."""
        features = classify_query("(min-width: 320px) and (max-height: 500px)")

        assert features == QueryFeatures(
            min_width=True, max_width=False, min_height=False, max_height=True
        )
        assert features.min_bound
        assert features.max_bound

    def test_classify_matches_predicates(self):
        """Test classify_query agrees with the bound helpers."""
        query = "screen and (max-width: 1023px)"
        features = classify_query(query)

        assert features.min_bound == has_min_bound(query)
        assert features.max_bound == has_max_bound(query)
