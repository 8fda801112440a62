"""Maven and NuGet bracket range grammar: ``[1.0,2.0)``, ``(,1.5]``, ``[1.2]``."""

from __future__ import annotations

import re
from typing import List

from ..constraint import parse_constraints
from ..exceptions import InvalidConstraint
from ..interval import Interval
from ..models import Scheme
from ..ranges import Range
from .base import RangeTranslator, union_all

_NUMERIC_START_RE = re.compile(r"^[0-9]")
_BRACKETS = "[]()"


class MavenTranslator(RangeTranslator):
    """Translator for Maven version ranges.

    A bare version is a soft requirement and acts as a minimum. Several
    bracket sets separated by commas form a union.
    """

    @property
    def scheme(self) -> Scheme:
        return Scheme.MAVEN

    def parse(self, constraint: str) -> Range:
        text = constraint.strip()
        if not text:
            raise InvalidConstraint("empty version range", constraint)

        if text[0] in "[(":
            return union_all(self._parse_bracket_set(s) for s in self.split_sets(text))

        if any(char in _BRACKETS for char in text):
            raise InvalidConstraint(f"unbalanced brackets in {constraint!r}", constraint)

        if _NUMERIC_START_RE.match(text):
            return self.interval_range(Interval.greater_than(text, True))

        return parse_constraints(text, self.scheme)

    def split_sets(self, range_spec: str) -> List[str]:
        """Split ``[1.0,2.0),[3.0,4.0]`` into its bracket sets."""
        ranges: List[str] = []
        current = ""
        depth = 0

        for char in range_spec:
            if char in "[(":
                if depth:
                    raise InvalidConstraint(f"nested brackets in {range_spec!r}", range_spec)
                if current.strip(" ,"):
                    raise InvalidConstraint(
                        f"unexpected text {current.strip()!r} in {range_spec!r}", range_spec
                    )
                current = char
                depth = 1
            elif char in "])":
                if not depth:
                    raise InvalidConstraint(f"unbalanced brackets in {range_spec!r}", range_spec)
                ranges.append(current + char)
                current = ""
                depth = 0
            else:
                current += char

        if depth or current.strip(" ,"):
            raise InvalidConstraint(f"unbalanced brackets in {range_spec!r}", range_spec)
        return ranges

    def _parse_bracket_set(self, text: str) -> Range:
        min_inclusive = text[0] == "["
        max_inclusive = text[-1] == "]"
        inner = text[1:-1]

        if "," not in inner:
            version = inner.strip()
            if not version:
                raise InvalidConstraint(f"empty version in {text!r}", text)
            return Range.exact(version, self.scheme)

        parts = inner.split(",")
        if len(parts) != 2:
            raise InvalidConstraint(f"too many bounds in {text!r}", text)
        low = parts[0].strip() or None
        high = parts[1].strip() or None

        return self.interval_range(Interval(
            low,
            high,
            min_inclusive if low is not None else False,
            max_inclusive if high is not None else False,
        ))


class NuGetTranslator(MavenTranslator):
    """NuGet version ranges use Maven's bracket notation."""

    @property
    def scheme(self) -> Scheme:
        return Scheme.NUGET
