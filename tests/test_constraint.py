"""Tests for single clauses and the generic ``|``-separated grammar."""

import pytest

from vers.constraint import Constraint, pair_intervals, parse_constraint, parse_constraints
from vers.exceptions import InvalidConstraint
from vers.interval import Interval
from vers.models import Scheme


class TestParseConstraint:
    """Test the shared single-clause parser."""

    @pytest.mark.parametrize("text,operator,version", [
        (">=1.0.0", ">=", "1.0.0"),
        ("<=1.0.0", "<=", "1.0.0"),
        ("!=1.0.0", "!=", "1.0.0"),
        (">1.0.0", ">", "1.0.0"),
        ("<1.0.0", "<", "1.0.0"),
        ("=1.0.0", "=", "1.0.0"),
        ("1.0.0", "=", "1.0.0"),
        (">= 1.0.0", ">=", "1.0.0"),
        ("  <2.0  ", "<", "2.0"),
    ])
    def test_operators(self, text, operator, version):
        assert parse_constraint(text) == Constraint(operator, version)

    def test_strips_v_prefix(self):
        assert parse_constraint(">=v1.2.3", "npm").version == "1.2.3"
        assert parse_constraint("V1.2.3").version == "1.2.3"

    def test_go_keeps_v_prefix(self):
        assert parse_constraint(">=v1.2.3", "golang").version == "v1.2.3"

    @pytest.mark.parametrize("text", ["", "   ", ">=", "!=", "< "])
    def test_invalid(self, text):
        with pytest.raises(InvalidConstraint):
            parse_constraint(text)

    def test_to_interval(self):
        assert parse_constraint("=1.0").to_interval() == Interval.exact("1.0")
        assert parse_constraint(">1.0").to_interval() == Interval.greater_than("1.0")
        assert parse_constraint("<=1.0").to_interval() == Interval.less_than("1.0", True)
        assert parse_constraint("!=1.0").to_interval() is None

    def test_satisfies(self):
        assert Constraint(">=", "1.0").satisfies("1.0.0")
        assert Constraint("!=", "1.0").satisfies("1.1")
        assert Constraint("<", "1.0-sp").satisfies("1.0", Scheme.MAVEN)
        assert not Constraint("<", "1.0-sp").satisfies("1.0")

    def test_str(self):
        assert str(Constraint(">=", "1.0.0")) == ">=1.0.0"


class TestPairIntervals:
    """Test lower/upper pairing of consecutive clauses."""

    def test_lower_then_upper(self):
        paired = pair_intervals([Interval.greater_than("1.0.0", True), Interval.less_than("2.0.0")])
        assert paired == [Interval("1.0.0", "2.0.0", True, False)]

    def test_upper_then_lower(self):
        paired = pair_intervals([Interval.less_than("2.0.0"), Interval.greater_than("1.0.0", True)])
        assert paired == [Interval("1.0.0", "2.0.0", True, False)]

    def test_disjoint_pair_stays_separate(self):
        intervals = [Interval.less_than("1.0.0"), Interval.greater_than("2.0.0", True)]
        assert pair_intervals(intervals) == intervals

    def test_exact_does_not_pair(self):
        intervals = [Interval.exact("1.0.0"), Interval.less_than("2.0.0")]
        assert pair_intervals(intervals) == intervals


class TestParseConstraints:
    """Test the generic multi-clause parser."""

    def test_closed_open_range(self):
        range_ = parse_constraints(">=1.0.0|<2.0.0")
        assert range_.intervals == (Interval("1.0.0", "2.0.0", True, False),)
        assert range_.contains("1.5.0")
        assert not range_.contains("2.0.0")
        assert not range_.contains("0.9.0")

    def test_exclusions_collected(self):
        range_ = parse_constraints(">=1.0.0|!=1.5.0")
        assert range_.exclusions == ("1.5.0",)
        assert not range_.contains("1.5.0")
        assert range_.contains("1.6.0")

    def test_only_exclusions_is_universal_minus(self):
        range_ = parse_constraints("!=1.0.0|!=2.0.0")
        assert range_.contains("1.5.0")
        assert not range_.contains("1.0.0")
        assert not range_.contains("2.0.0")

    def test_no_clauses_is_empty(self):
        assert parse_constraints("").is_empty()
        assert parse_constraints(" | ").is_empty()

    def test_exact_union(self):
        range_ = parse_constraints("1.0.0|2.0.0")
        assert range_.contains("1.0.0")
        assert range_.contains("2.0.0")
        assert not range_.contains("1.5.0")

    def test_multiple_bounded_members(self):
        range_ = parse_constraints(">=1.0.0|<2.0.0|>=3.0.0|<4.0.0")
        assert len(range_.intervals) == 2
        assert range_.contains("3.5.0")
        assert not range_.contains("2.5.0")

    def test_scheme_carried(self):
        assert parse_constraints(">=1.0", "maven").scheme is Scheme.MAVEN

    def test_invalid_clause(self):
        with pytest.raises(InvalidConstraint):
            parse_constraints(">=1.0.0|<")


class TestClauseOrderSensitivity:
    """Pairing only looks at neighbors, so clause order changes meaning."""

    def test_adjacent_pairs_form_bounded_interval(self):
        range_ = parse_constraints(">=1.0.0|<2.0.0|>=3.0.0")
        assert not range_.contains("2.5.0")
        assert range_.contains("3.5.0")

    def test_separated_bounds_union_instead(self):
        range_ = parse_constraints(">=1.0.0|>=3.0.0|<2.0.0")
        # <2.0.0 cannot pair with >=3.0.0, so all three members are unioned
        assert range_.contains("2.5.0")
        assert range_.contains("0.5.0")
