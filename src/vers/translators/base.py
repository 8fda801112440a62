"""Base class and shared building blocks for native range grammars."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from functools import reduce
from typing import Iterable, List, Tuple

from ..constraint import parse_constraint
from ..exceptions import InvalidConstraint, InvalidVersion
from ..interval import Interval
from ..models import Scheme
from ..ranges import Range
from ..versioning.compare import strip_v_prefix
from ..versioning.version import Version, parse_version

WILDCARDS = ("x", "X", "*")

_RELEASE_SPLIT_RE = re.compile(r"[-+]")


class RangeTranslator(ABC):
    """Turns one ecosystem's native constraint syntax into a Range."""

    @property
    @abstractmethod
    def scheme(self) -> Scheme:
        """Scheme whose grammar and ordering this translator implements."""
        raise NotImplementedError

    @abstractmethod
    def parse(self, constraint: str) -> Range:
        """Parse a native constraint string.

        Raises:
            InvalidConstraint: if the constraint is malformed.
        """
        raise NotImplementedError

    def clause_range(self, text: str) -> Range:
        """Lower a single operator/version clause into a Range."""
        constraint = parse_constraint(text, self.scheme)
        if constraint.is_exclusion():
            return Range.unbounded(self.scheme).exclude(constraint.version)
        return Range((constraint.to_interval(self.scheme),), scheme=self.scheme)

    def interval_range(self, *intervals: Interval) -> Range:
        """Wrap intervals in a Range ordered by this translator's scheme."""
        return Range.of(intervals, scheme=self.scheme)

    def pessimistic_range(self, text: str) -> Range:
        """``~> X`` / ``~= X``: at least X, below the next breaking boundary.

        With three or more stated segments the boundary is the next minor,
        otherwise the next major.
        """
        text = strip_v_prefix(text.strip())
        version = parse_version_or_fail(text)
        if stated_segments(text) >= 3:
            upper = version.increment_minor()
        else:
            upper = version.increment_major()
        return self.interval_range(Interval(text, str(upper), True, False))


def parse_version_or_fail(text: str) -> Version:
    """Parse a version inside a constraint, reporting failures as InvalidConstraint."""
    try:
        return parse_version(text)
    except InvalidVersion as exc:
        raise InvalidConstraint(f"invalid version in constraint: {text!r}", text) from exc


def stated_segments(text: str) -> int:
    """Count the dot-separated release segments actually written."""
    release = _RELEASE_SPLIT_RE.split(text, 1)[0]
    return len([part for part in release.split(".") if part != ""])


def split_wildcard(text: str) -> Tuple[List[str], bool]:
    """Split a partial version at its first wildcard segment.

    Returns the numeric prefix and whether a wildcard was present.
    """
    parts = text.split(".")
    for i, part in enumerate(parts):
        if part in WILDCARDS:
            return parts[:i], True
    return parts, False


def prefix_bounds(prefix: List[str], original: str) -> Tuple[str, str]:
    """Return ``(lower, upper)`` covering every version starting with ``prefix``.

    ``["1", "2"]`` gives ``("1.2.0", "1.3.0")``.
    """
    if not prefix or len(prefix) > 3 or not all(p.isascii() and p.isdigit() for p in prefix):
        raise InvalidConstraint(f"invalid wildcard version: {original!r}", original)
    numbers = [int(p) for p in prefix]
    bumped = numbers[:-1] + [numbers[-1] + 1]
    pad = [0] * (3 - len(numbers))
    lower = ".".join(str(n) for n in numbers + pad)
    upper = ".".join(str(n) for n in bumped + pad)
    return lower, upper


def intersect_all(ranges: Iterable[Range]) -> Range:
    """AND together a non-empty sequence of ranges."""
    return reduce(lambda acc, r: acc.intersect(r), ranges)


def union_all(ranges: Iterable[Range]) -> Range:
    """OR together a non-empty sequence of ranges."""
    return reduce(lambda acc, r: acc.union(r), ranges)
