"""Version ranges: a union of intervals minus a set of excluded versions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from .interval import Interval
from .models import Scheme, SchemeLike
from .versioning.compare import compare_with_scheme


def merge_intervals(intervals: Iterable[Interval]) -> Tuple[Interval, ...]:
    """Fold intervals into a disjoint-ish cover.

    Each interval is merged into the first already-placed interval it can be
    unioned with, otherwise appended. Empty intervals are dropped. This is a
    single left-to-right pass, not a minimal partition.
    """
    result: List[Interval] = []
    for interval in intervals:
        if interval.is_empty():
            continue
        for i, existing in enumerate(result):
            merged = existing.union(interval)
            if merged is not None:
                result[i] = merged
                break
        else:
            result.append(interval)
    return tuple(result)


@dataclass(frozen=True)
class Range:
    """A version range.

    Multiple intervals represent a union (OR). A version is contained when it
    matches no exclusion and falls in at least one interval. Ranges are
    immutable; every combinator returns a new Range.
    """
    intervals: Tuple[Interval, ...] = ()
    exclusions: Tuple[str, ...] = ()
    scheme: Scheme = field(default=Scheme.OTHER, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "intervals", tuple(self.intervals))
        object.__setattr__(self, "exclusions", tuple(self.exclusions))
        object.__setattr__(self, "scheme", Scheme.from_tag(self.scheme))

    @classmethod
    def of(cls, intervals: Iterable[Interval], exclusions: Iterable[str] = (),
           scheme: SchemeLike = None) -> "Range":
        """Build a range whose intervals all use the given scheme's ordering."""
        scheme = Scheme.from_tag(scheme)
        return cls(tuple(i.with_scheme(scheme) for i in intervals), tuple(exclusions), scheme)

    @classmethod
    def exact(cls, version: str, scheme: SchemeLike = None) -> "Range":
        """A range that matches only the given version."""
        return cls.of([Interval.exact(version)], scheme=scheme)

    @classmethod
    def greater_than(cls, version: str, inclusive: bool = False,
                     scheme: SchemeLike = None) -> "Range":
        return cls.of([Interval.greater_than(version, inclusive)], scheme=scheme)

    @classmethod
    def less_than(cls, version: str, inclusive: bool = False,
                  scheme: SchemeLike = None) -> "Range":
        return cls.of([Interval.less_than(version, inclusive)], scheme=scheme)

    @classmethod
    def unbounded(cls, scheme: SchemeLike = None) -> "Range":
        """A range that matches every version."""
        return cls.of([Interval.unbounded()], scheme=scheme)

    @classmethod
    def empty(cls, scheme: SchemeLike = None) -> "Range":
        """A range that matches no versions."""
        return cls.of([Interval.empty()], scheme=scheme)

    def _combined_scheme(self, other: "Range") -> Scheme:
        return self.scheme if self.scheme is not Scheme.OTHER else other.scheme

    def with_scheme(self, scheme: SchemeLike) -> "Range":
        """Return a copy whose intervals are ordered by another scheme."""
        return Range.of(self.intervals, self.exclusions, scheme)

    def is_excluded(self, version: str) -> bool:
        """Return True if the version equals one of the exclusions."""
        return any(
            compare_with_scheme(version, excluded, self.scheme) == 0
            for excluded in self.exclusions
        )

    def contains(self, version: str) -> bool:
        """Check whether the range contains the given version."""
        if self.is_excluded(version):
            return False
        return any(interval.contains(version) for interval in self.intervals)

    def __contains__(self, version: str) -> bool:
        return self.contains(version)

    def is_empty(self) -> bool:
        """Return True if this range matches no versions."""
        return all(interval.is_empty() for interval in self.intervals)

    def is_unbounded(self) -> bool:
        """Return True if this range matches all versions; exclusions rule that out."""
        if self.exclusions:
            return False
        return any(interval.is_unbounded() for interval in self.intervals)

    def union(self, other: "Range") -> "Range":
        """Return a range matching versions in either range.

        Only versions excluded by both operands stay excluded.
        """
        if self.is_empty():
            return other
        if other.is_empty():
            return self

        scheme = self._combined_scheme(other)
        merged = merge_intervals(
            i.with_scheme(scheme) for i in self.intervals + other.intervals
        )
        exclusions = tuple(e for e in self.exclusions if e in other.exclusions)
        return Range(merged, exclusions, scheme)

    def intersect(self, other: "Range") -> "Range":
        """Return a range matching versions in both ranges.

        Exclusions from either operand are kept.
        """
        scheme = self._combined_scheme(other)
        if self.is_empty() or other.is_empty():
            return Range(scheme=scheme)

        pieces = []
        for left in self.intervals:
            for right in other.intervals:
                piece = left.with_scheme(scheme).intersect(right.with_scheme(scheme))
                if not piece.is_empty():
                    pieces.append(piece)

        exclusions = list(self.exclusions)
        for excluded in other.exclusions:
            if excluded not in exclusions:
                exclusions.append(excluded)
        return Range(merge_intervals(pieces), tuple(exclusions), scheme)

    def exclude(self, version: str) -> "Range":
        """Return a new range that additionally excludes the given version."""
        return Range(self.intervals, self.exclusions + (version,), self.scheme)

    def __str__(self) -> str:
        if self.is_empty():
            return "empty"
        if self.is_unbounded():
            return "*"
        result = " | ".join(str(interval) for interval in self.intervals)
        if self.exclusions:
            result += " excluding " + ", ".join(self.exclusions)
        return result
