"""Tests for Interval boundary semantics and algebra."""

import pytest

from vers.interval import Interval
from vers.models import Scheme


class TestIntervalContains:
    """Test Interval.contains against direct bound inspection."""

    @pytest.mark.parametrize("min_inclusive", [True, False])
    @pytest.mark.parametrize("max_inclusive", [True, False])
    def test_bounds(self, min_inclusive, max_inclusive):
        interval = Interval("1.0.0", "2.0.0", min_inclusive, max_inclusive)
        assert not interval.contains("0.9.9")
        assert interval.contains("1.0.0") is min_inclusive
        assert interval.contains("1.5.0")
        assert interval.contains("2.0.0") is max_inclusive
        assert not interval.contains("2.0.1")

    def test_half_open(self):
        assert Interval.greater_than("1.0.0").contains("99.0.0")
        assert not Interval.greater_than("1.0.0").contains("1.0.0")
        assert Interval.greater_than("1.0.0", True).contains("1.0.0")
        assert Interval.less_than("1.0.0").contains("0.0.1")
        assert not Interval.less_than("1.0.0").contains("1.0.0")

    def test_exact(self):
        interval = Interval.exact("1.2.3")
        assert interval.is_exact()
        assert interval.contains("1.2.3")
        assert not interval.contains("1.2.4")

    def test_unbounded_and_empty(self):
        assert Interval.unbounded().contains("0.0.0")
        assert Interval.unbounded().is_unbounded()
        assert Interval.empty().is_empty()
        assert not Interval.empty().contains("1")

    def test_scheme_ordering_applies(self):
        interval = Interval("1.0", "2.0", True, False, Scheme.MAVEN)
        assert interval.contains("1.0-sp")
        assert not Interval("1.0", "2.0", True, False).contains("1.0-sp")


class TestIntervalEmptiness:
    """Test is_empty edge cases."""

    def test_min_above_max(self):
        assert Interval("2.0.0", "1.0.0", True, True).is_empty()

    def test_equal_bounds_need_both_inclusive(self):
        assert not Interval("1.0.0", "1.0.0", True, True).is_empty()
        assert Interval("1.0.0", "1.0.0", True, False).is_empty()
        assert Interval("1.0.0", "1.0.0", False, True).is_empty()


class TestIntervalIntersect:
    """Test Interval.intersect."""

    def test_takes_inner_bounds(self):
        result = Interval("1.0.0", "3.0.0", True, True).intersect(
            Interval("2.0.0", "4.0.0", False, False))
        assert result == Interval("2.0.0", "3.0.0", False, True)

    def test_tie_keeps_exclusive(self):
        result = Interval("1.0.0", "2.0.0", True, True).intersect(
            Interval("1.0.0", "2.0.0", False, False))
        assert result == Interval("1.0.0", "2.0.0", False, False)

    def test_absent_bound_adopts_other(self):
        result = Interval.greater_than("1.0.0", True).intersect(Interval.less_than("2.0.0"))
        assert result == Interval("1.0.0", "2.0.0", True, False)

    def test_disjoint_is_empty(self):
        result = Interval.less_than("1.0.0").intersect(Interval.greater_than("2.0.0"))
        assert result.is_empty()

    def test_with_empty(self):
        assert Interval.unbounded().intersect(Interval.empty()).is_empty()


class TestIntervalUnion:
    """Test Interval.union, overlaps and adjacent."""

    def test_overlapping(self):
        result = Interval("1.0.0", "2.0.0", True, False).union(
            Interval("1.5.0", "3.0.0", True, True))
        assert result == Interval("1.0.0", "3.0.0", True, True)

    def test_adjacent_merges(self):
        left = Interval("1.0.0", "2.0.0", True, False)
        right = Interval("2.0.0", "3.0.0", True, False)
        assert left.adjacent(right)
        assert right.adjacent(left)
        assert left.union(right) == Interval("1.0.0", "3.0.0", True, False)

    def test_both_exclusive_at_boundary_cannot_merge(self):
        left = Interval("1.0.0", "2.0.0", True, False)
        right = Interval("2.0.0", "3.0.0", False, False)
        assert not left.adjacent(right)
        assert left.union(right) is None

    def test_disjoint_cannot_merge(self):
        assert Interval.less_than("1.0.0").union(Interval.greater_than("2.0.0")) is None

    def test_unbounded_side_wins(self):
        result = Interval.greater_than("1.0.0", True).union(Interval("0.5.0", "2.0.0", True, True))
        assert result == Interval.greater_than("0.5.0", True)

    def test_tie_ors_inclusivity(self):
        result = Interval("1.0.0", "2.0.0", False, False).union(
            Interval("1.0.0", "2.0.0", True, False))
        assert result.min_inclusive

    def test_overlaps(self):
        assert Interval("1.0.0", "2.0.0", True, True).overlaps(Interval("2.0.0", "3.0.0", True, True))
        assert not Interval("1.0.0", "2.0.0", True, False).overlaps(
            Interval("2.0.0", "3.0.0", True, True))

    def test_union_with_empty_returns_other(self):
        interval = Interval.exact("1.0.0")
        assert Interval.empty().union(interval) == interval


class TestIntervalStr:
    """Test mathematical rendering."""

    def test_rendering(self):
        assert str(Interval("1.0.0", "2.0.0", True, False)) == "[1.0.0,2.0.0)"
        assert str(Interval.greater_than("1.0.0")) == "(1.0.0,+inf)"
        assert str(Interval.less_than("1.0.0", True)) == "(-inf,1.0.0]"
        assert str(Interval.unbounded()) == "(-inf,+inf)"
        assert str(Interval.empty()) == "empty"
