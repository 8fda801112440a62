"""Single-clause constraints and the generic ``|``-separated grammar."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from .constants import Constants
from .exceptions import InvalidConstraint
from .interval import Interval
from .models import Scheme, SchemeLike
from .ranges import Range, merge_intervals
from .versioning.compare import compare_with_scheme, strip_v_prefix

logger = logging.getLogger(__name__)

# Valid constraint operators, longest match first.
VALID_OPERATORS = ("!=", ">=", "<=", ">", "<", "=")

_OPERATOR_RE = re.compile(r"^(!=|>=|<=|[<>=])")


@dataclass(frozen=True)
class Constraint:
    """A single version constraint such as ``>=1.2.3``."""
    operator: str
    version: str

    def is_exclusion(self) -> bool:
        """Return True for ``!=`` clauses."""
        return self.operator == "!="

    def to_interval(self, scheme: SchemeLike = None) -> Optional[Interval]:
        """Convert to an interval; None for exclusions."""
        if self.operator == "=":
            return Interval.exact(self.version, scheme)
        if self.operator in (">", ">="):
            return Interval.greater_than(self.version, self.operator == ">=", scheme)
        if self.operator in ("<", "<="):
            return Interval.less_than(self.version, self.operator == "<=", scheme)
        return None

    def satisfies(self, version: str, scheme: SchemeLike = None) -> bool:
        """Check a version against this single constraint."""
        cmp = compare_with_scheme(version, self.version, scheme)
        return {
            "=": cmp == 0,
            "!=": cmp != 0,
            ">": cmp > 0,
            ">=": cmp >= 0,
            "<": cmp < 0,
            "<=": cmp <= 0,
        }[self.operator]

    def __str__(self) -> str:
        return self.operator + self.version


def parse_constraint(text: str, scheme: SchemeLike = None) -> Constraint:
    """Parse one clause into a Constraint.

    A missing operator means ``=``. A leading ``v``/``V`` on the version is
    dropped except for Go, which keeps it verbatim.

    Raises:
        InvalidConstraint: for an empty clause or an operator without a version.
    """
    text = text.strip()
    if not text:
        raise InvalidConstraint("empty constraint", text)

    keep_prefix = Scheme.from_tag(scheme).preserves_v_prefix

    match = _OPERATOR_RE.match(text)
    if match:
        operator = match.group(1)
        version = text[len(operator):].strip()
        if not version:
            raise InvalidConstraint(f"invalid constraint format: {text}", text)
    else:
        operator, version = "=", text

    if not keep_prefix:
        version = strip_v_prefix(version)
    return Constraint(operator, version)


def _is_lower_only(interval: Interval) -> bool:
    return interval.min is not None and interval.max is None


def _is_upper_only(interval: Interval) -> bool:
    return interval.max is not None and interval.min is None


def pair_intervals(intervals: List[Interval]) -> List[Interval]:
    """Combine a lower-only interval with an immediately following upper-only one.

    ``>=1.0.0`` then ``<2.0.0`` (or the reverse order) becomes ``[1.0.0,2.0.0)``.
    A pair whose intersection is empty, such as ``<1.0.0`` then ``>=2.0.0``, is
    left as two separate members. Anything that cannot pair stands alone.
    """
    result: List[Interval] = []
    i = 0
    while i < len(intervals):
        current = intervals[i]
        if i + 1 < len(intervals):
            following = intervals[i + 1]
            complementary = (
                (_is_lower_only(current) and _is_upper_only(following))
                or (_is_upper_only(current) and _is_lower_only(following))
            )
            if complementary:
                bounded = current.intersect(following)
                if not bounded.is_empty():
                    result.append(bounded)
                    i += 2
                    continue
        result.append(current)
        i += 1
    return result


def parse_constraints(text: str, scheme: SchemeLike = None) -> Range:
    """Parse ``|``-separated clauses into a Range.

    ``!=`` clauses become exclusions. The remaining clauses become intervals,
    paired by pair_intervals and unioned. Only exclusions yields the universal
    range minus those versions; no clauses at all yields the empty range.
    """
    scheme = Scheme.from_tag(scheme)
    intervals: List[Interval] = []
    exclusions: List[str] = []

    for part in text.split(Constants.CLAUSE_SEPARATOR):
        part = part.strip()
        if not part:
            continue
        constraint = parse_constraint(part, scheme)
        if constraint.is_exclusion():
            exclusions.append(constraint.version)
        else:
            intervals.append(constraint.to_interval(scheme))

    logger.debug(
        "Parsed %d interval clause(s) and %d exclusion(s) for scheme %s",
        len(intervals), len(exclusions), scheme.value,
    )

    if not intervals:
        if exclusions:
            return Range((Interval.unbounded(scheme),), tuple(exclusions), scheme)
        return Range(scheme=scheme)

    return Range(merge_intervals(pair_intervals(intervals)), tuple(exclusions), scheme)
