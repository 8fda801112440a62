"""Contiguous spans of versions with independent inclusive/exclusive bounds."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .models import Scheme, SchemeLike
from .versioning.compare import compare_with_scheme


@dataclass(frozen=True)
class Interval:
    """A mathematical interval of versions.

    For example ``Interval("1.0.0", "2.0.0", True, False)`` is
    ``[1.0.0,2.0.0)``. A bound of None means unbounded on that side. The
    scheme selects the ordering used for every comparison.
    """
    min: Optional[str] = None
    max: Optional[str] = None
    min_inclusive: bool = False
    max_inclusive: bool = False
    scheme: Scheme = field(default=Scheme.OTHER, compare=False)

    @classmethod
    def empty(cls, scheme: SchemeLike = None) -> "Interval":
        """An interval that matches no versions."""
        return cls("1", "0", True, True, Scheme.from_tag(scheme))

    @classmethod
    def unbounded(cls, scheme: SchemeLike = None) -> "Interval":
        """An interval that matches all versions."""
        return cls(scheme=Scheme.from_tag(scheme))

    @classmethod
    def exact(cls, version: str, scheme: SchemeLike = None) -> "Interval":
        return cls(version, version, True, True, Scheme.from_tag(scheme))

    @classmethod
    def greater_than(cls, version: str, inclusive: bool = False,
                     scheme: SchemeLike = None) -> "Interval":
        return cls(min=version, min_inclusive=inclusive, scheme=Scheme.from_tag(scheme))

    @classmethod
    def less_than(cls, version: str, inclusive: bool = False,
                  scheme: SchemeLike = None) -> "Interval":
        return cls(max=version, max_inclusive=inclusive, scheme=Scheme.from_tag(scheme))

    def _compare(self, left: str, right: str) -> int:
        return compare_with_scheme(left, right, self.scheme)

    def _combined_scheme(self, other: "Interval") -> Scheme:
        return self.scheme if self.scheme is not Scheme.OTHER else other.scheme

    def with_scheme(self, scheme: SchemeLike) -> "Interval":
        """Return a copy ordered by another scheme."""
        return Interval(self.min, self.max, self.min_inclusive, self.max_inclusive,
                        Scheme.from_tag(scheme))

    def is_empty(self) -> bool:
        """Return True if this interval matches no versions."""
        if self.min is not None and self.max is not None:
            cmp = self._compare(self.min, self.max)
            if cmp > 0:
                return True
            if cmp == 0 and not (self.min_inclusive and self.max_inclusive):
                return True
        return False

    def is_unbounded(self) -> bool:
        """Return True if this interval matches all versions."""
        return self.min is None and self.max is None

    def is_exact(self) -> bool:
        """Return True if this interval matches exactly one version."""
        return (self.min is not None and self.min == self.max
                and self.min_inclusive and self.max_inclusive)

    def contains(self, version: str) -> bool:
        """Check whether the interval contains the given version."""
        if self.is_empty():
            return False
        if self.is_unbounded():
            return True

        if self.min is not None:
            cmp = self._compare(version, self.min)
            if cmp < 0 or (cmp == 0 and not self.min_inclusive):
                return False

        if self.max is not None:
            cmp = self._compare(version, self.max)
            if cmp > 0 or (cmp == 0 and not self.max_inclusive):
                return False

        return True

    def intersect(self, other: "Interval") -> "Interval":
        """Return the intersection of two intervals."""
        scheme = self._combined_scheme(other)
        if self.is_empty() or other.is_empty():
            return Interval.empty(scheme)

        new_min, min_inclusive = self.min, self.min_inclusive
        if self.min is not None and other.min is not None:
            cmp = compare_with_scheme(self.min, other.min, scheme)
            if cmp < 0:
                new_min, min_inclusive = other.min, other.min_inclusive
            elif cmp == 0:
                min_inclusive = self.min_inclusive and other.min_inclusive
        elif other.min is not None:
            new_min, min_inclusive = other.min, other.min_inclusive

        new_max, max_inclusive = self.max, self.max_inclusive
        if self.max is not None and other.max is not None:
            cmp = compare_with_scheme(self.max, other.max, scheme)
            if cmp > 0:
                new_max, max_inclusive = other.max, other.max_inclusive
            elif cmp == 0:
                max_inclusive = self.max_inclusive and other.max_inclusive
        elif other.max is not None:
            new_max, max_inclusive = other.max, other.max_inclusive

        if new_min is None:
            min_inclusive = False
        if new_max is None:
            max_inclusive = False
        return Interval(new_min, new_max, min_inclusive, max_inclusive, scheme)

    def overlaps(self, other: "Interval") -> bool:
        """Return True if the two intervals share at least one version."""
        if self.is_empty() or other.is_empty():
            return False
        return not self.intersect(other).is_empty()

    def adjacent(self, other: "Interval") -> bool:
        """Return True if the intervals touch at a boundary inclusive on exactly one side."""
        if self.is_empty() or other.is_empty():
            return False
        scheme = self._combined_scheme(other)

        if (self.max is not None and other.min is not None
                and compare_with_scheme(self.max, other.min, scheme) == 0):
            return self.max_inclusive != other.min_inclusive

        if (self.min is not None and other.max is not None
                and compare_with_scheme(self.min, other.max, scheme) == 0):
            return self.min_inclusive != other.max_inclusive

        return False

    def union(self, other: "Interval") -> Optional["Interval"]:
        """Return the union of two intervals, or None if they cannot be merged."""
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        if not self.overlaps(other) and not self.adjacent(other):
            return None

        scheme = self._combined_scheme(other)

        if self.min is None or other.min is None:
            new_min, min_inclusive = None, False
        else:
            cmp = compare_with_scheme(self.min, other.min, scheme)
            if cmp < 0:
                new_min, min_inclusive = self.min, self.min_inclusive
            elif cmp > 0:
                new_min, min_inclusive = other.min, other.min_inclusive
            else:
                new_min, min_inclusive = self.min, self.min_inclusive or other.min_inclusive

        if self.max is None or other.max is None:
            new_max, max_inclusive = None, False
        else:
            cmp = compare_with_scheme(self.max, other.max, scheme)
            if cmp > 0:
                new_max, max_inclusive = self.max, self.max_inclusive
            elif cmp < 0:
                new_max, max_inclusive = other.max, other.max_inclusive
            else:
                new_max, max_inclusive = self.max, self.max_inclusive or other.max_inclusive

        return Interval(new_min, new_max, min_inclusive, max_inclusive, scheme)

    def __str__(self) -> str:
        if self.is_empty():
            return "empty"
        if self.is_unbounded():
            return "(-inf,+inf)"
        left = "[" if self.min_inclusive else "("
        right = "]" if self.max_inclusive else ")"
        low = self.min if self.min is not None else "-inf"
        high = self.max if self.max is not None else "+inf"
        return f"{left}{low},{high}{right}"
