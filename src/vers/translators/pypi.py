"""Python (PEP 440) specifier grammar: ``>=1.0,<2.0``, ``~=1.4.2``, ``==1.4.*``."""

from __future__ import annotations

import logging

from packaging.specifiers import InvalidSpecifier, Specifier

from ..exceptions import InvalidConstraint
from ..interval import Interval
from ..models import Scheme
from ..ranges import Range
from ..versioning.compare import strip_v_prefix
from .base import RangeTranslator, intersect_all, prefix_bounds

logger = logging.getLogger(__name__)


class PypiTranslator(RangeTranslator):
    """Translator for PEP 440 version specifiers.

    Clauses are comma-separated and must all hold. Each clause is tokenized by
    ``packaging``; clauses it rejects (non-PEP 440 versions, bare versions)
    go through the shared clause parser instead.
    """

    @property
    def scheme(self) -> Scheme:
        return Scheme.PYPI

    def parse(self, constraint: str) -> Range:
        text = constraint.strip()
        if not text:
            # An empty specifier set allows any version
            return Range.unbounded(self.scheme)

        clauses = [clause.strip() for clause in text.split(",")]
        if any(not clause for clause in clauses):
            raise InvalidConstraint(f"empty clause in {constraint!r}", constraint)
        return intersect_all(self.parse_clause(clause) for clause in clauses)

    def parse_clause(self, clause: str) -> Range:
        """Lower one PEP 440 clause."""
        try:
            spec = Specifier(clause)
        except InvalidSpecifier:
            logger.debug("Not a PEP 440 specifier, using generic clause rules: %s", clause)
            if clause.startswith("~="):
                return self.pessimistic_range(clause[2:])
            if clause.startswith("=="):
                return self.clause_range("=" + clause.lstrip("="))
            return self.clause_range(clause)

        operator = spec.operator
        version = strip_v_prefix(spec.version)

        if operator == "~=":
            return self.pessimistic_range(version)
        if operator in ("==", "==="):
            if version.endswith(".*"):
                return self._prefix_range(version)
            return Range.exact(version, self.scheme)
        if operator == "!=":
            if version.endswith(".*"):
                lower, upper = prefix_bounds(version[:-2].split("."), clause)
                return self.interval_range(
                    Interval.less_than(lower, False),
                    Interval.greater_than(upper, True),
                )
            return Range.unbounded(self.scheme).exclude(version)
        return self.clause_range(operator + version)

    def _prefix_range(self, version: str) -> Range:
        lower, upper = prefix_bounds(version[:-2].split("."), version)
        return self.interval_range(Interval(lower, upper, True, False))
