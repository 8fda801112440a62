"""Tests for the npm and Cargo range grammars."""

import pytest

from vers.exceptions import InvalidConstraint
from vers.interval import Interval
from vers.models import Scheme
from vers.translators import CargoTranslator, NpmTranslator


@pytest.fixture
def npm():
    return NpmTranslator()


@pytest.fixture
def cargo():
    return CargoTranslator()


def assert_membership(range_, inside=(), outside=()):
    """Check a range against versions that must and must not match."""
    for version in inside:
        assert range_.contains(version), f"{version} should be in {range_}"
    for version in outside:
        assert not range_.contains(version), f"{version} should not be in {range_}"


class TestCaret:
    """Test ^ ranges."""

    def test_major(self, npm):
        range_ = npm.parse("^1.2.3")
        assert range_.intervals == (Interval("1.2.3", "2.0.0", True, False),)
        assert_membership(range_, inside=["1.2.3", "1.9.0"], outside=["2.0.0", "1.2.2"])

    def test_zero_major(self, npm):
        assert_membership(npm.parse("^0.2.3"), inside=["0.2.9"], outside=["0.3.0"])

    def test_zero_major_and_minor(self, npm):
        assert_membership(npm.parse("^0.0.3"), inside=["0.0.3"], outside=["0.0.4"])

    def test_partial_versions(self, npm):
        assert_membership(npm.parse("^1"), inside=["1.0.0", "1.99.0"], outside=["2.0.0"])
        assert_membership(npm.parse("^0.0"), inside=["0.0.0"], outside=["0.0.1", "0.0.5"])
        assert_membership(npm.parse("^0"), inside=["0.0.0"], outside=["0.0.1", "1.0.0"])
        assert_membership(npm.parse("^1.x"), inside=["1.5.0"], outside=["2.0.0"])

    def test_operator_with_space(self, npm):
        assert npm.parse("^ 1.2.3") == npm.parse("^1.2.3")

    def test_scheme(self, npm):
        assert npm.parse("^1.2.3").scheme is Scheme.NPM


class TestTilde:
    """Test ~ and ~> ranges."""

    def test_patch_level(self, npm):
        assert_membership(npm.parse("~1.2.0"), inside=["1.2.0", "1.2.9"], outside=["1.3.0"])
        assert_membership(npm.parse("~1.2.3"), inside=["1.2.5"], outside=["1.2.2", "1.3.0"])

    def test_minor_only(self, npm):
        assert_membership(npm.parse("~1.2"), inside=["1.2.0", "1.2.99"], outside=["1.3.0"])

    def test_major_only(self, npm):
        assert_membership(npm.parse("~1"), inside=["1.0.0", "1.9.0"], outside=["2.0.0"])

    def test_zero_minor_and_patch_allows_next_minor(self, npm):
        range_ = npm.parse("~1.0.0")
        assert range_.intervals == (Interval("1.0.0", "2.0.0", True, False),)
        assert_membership(range_, inside=["1.0.5", "1.1.0", "1.9.9"], outside=["2.0.0"])
        assert_membership(npm.parse("~1.0"), inside=["1.1.0"], outside=["2.0.0"])

    def test_nonzero_patch_stops_at_next_minor(self, npm):
        assert_membership(npm.parse("~1.0.1"), inside=["1.0.9"], outside=["1.1.0"])

    def test_ruby_style_alias(self, npm):
        assert npm.parse("~>1.2.3") == npm.parse("~1.2.3")

    def test_prerelease_splits_in_two(self, npm):
        range_ = npm.parse("~1.2.3-beta.2")
        assert range_.intervals == (
            Interval("1.2.3-beta.2", "1.2.3", True, False),
            Interval("1.2.3", "1.2.4", True, False),
        )
        assert_membership(
            range_,
            inside=["1.2.3-beta.2", "1.2.3-beta.3", "1.2.3"],
            outside=["1.2.3-beta.1", "1.2.4", "1.2.5", "1.3.0"],
        )


class TestXRanges:
    """Test wildcard and unbounded forms."""

    @pytest.mark.parametrize("text", ["", "*", "x", "X", "  "])
    def test_unbounded(self, npm, text):
        assert npm.parse(text).is_unbounded()

    def test_major_wildcard(self, npm):
        range_ = npm.parse("1.x")
        assert range_.intervals == (Interval("1.0.0", "2.0.0", True, False),)

    def test_minor_wildcard(self, npm):
        assert_membership(npm.parse("1.2.*"), inside=["1.2.0", "1.2.7"], outside=["1.3.0", "1.1.9"])

    def test_trailing_wildcards(self, npm):
        assert npm.parse("1.x.x") == npm.parse("1.x")

    def test_wildcard_term_in_branch(self, npm):
        assert npm.parse(">=1.0.0 *") == npm.parse(">=1.0.0")


class TestComposition:
    """Test AND, OR and hyphen composition."""

    def test_and(self, npm):
        range_ = npm.parse(">=1.0.0 <2.0.0")
        assert range_.intervals == (Interval("1.0.0", "2.0.0", True, False),)

    def test_lone_operators_glue(self, npm):
        assert npm.parse(">= 1.0.0 < 2.0.0") == npm.parse(">=1.0.0 <2.0.0")

    def test_or(self, npm):
        range_ = npm.parse("<1.0.0 || >=2.0.0")
        assert_membership(range_, inside=["0.5.0", "2.5.0"], outside=["1.5.0"])

    def test_or_of_ands(self, npm):
        range_ = npm.parse(">=1.0.0 <1.5.0 || >=2.0.0 <2.5.0")
        assert len(range_.intervals) == 2
        assert_membership(range_, inside=["1.2.0", "2.2.0"], outside=["1.7.0", "2.7.0"])

    def test_empty_branch_is_unbounded(self, npm):
        assert npm.parse("1.0.0 ||").is_unbounded()

    def test_hyphen(self, npm):
        range_ = npm.parse("1.0.0 - 2.0.0")
        assert range_.intervals == (Interval("1.0.0", "2.0.0", True, True),)

    def test_hyphen_with_other_terms(self, npm):
        range_ = npm.parse("1.0.0 - 2.0.0 !=1.5.0")
        assert_membership(range_, inside=["2.0.0"], outside=["1.5.0", "2.0.1"])

    def test_exact_and_v_prefix(self, npm):
        assert_membership(npm.parse("v1.2.3"), inside=["1.2.3"], outside=["1.2.4"])
        assert_membership(npm.parse("=1.2.3"), inside=["1.2.3"], outside=["1.2.4"])


class TestNpmErrors:
    """Test malformed npm ranges."""

    @pytest.mark.parametrize("text", ["^", ">=", "1.0.0 -", "^abc", "~", "a.x", ">=1.0.0 <"])
    def test_invalid(self, npm, text):
        with pytest.raises(InvalidConstraint):
            npm.parse(text)


class TestCargo:
    """Test Cargo requirements."""

    def test_comma_is_and(self, cargo):
        range_ = cargo.parse(">=1.0.0, <2.0.0")
        assert range_.intervals == (Interval("1.0.0", "2.0.0", True, False),)
        assert range_.scheme is Scheme.CARGO

    def test_caret_and_tilde(self, cargo):
        assert_membership(cargo.parse("^1.2.3"), inside=["1.9.9"], outside=["2.0.0"])
        assert_membership(cargo.parse("~1.2"), inside=["1.2.9"], outside=["1.3.0"])

    def test_mixed(self, cargo):
        assert_membership(cargo.parse("^1.2, <1.5"), inside=["1.4.9"], outside=["1.5.0", "1.1.0"])

    def test_bare_version_is_exact(self, cargo):
        assert_membership(cargo.parse("1.2.3"), inside=["1.2.3"], outside=["1.2.4"])

    def test_wildcard(self, cargo):
        assert cargo.parse("*").is_unbounded()
