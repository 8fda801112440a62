"""Go module constraints: ``>=v1.0.0, <v2.0.0``."""

from __future__ import annotations

from ..constraint import parse_constraints
from ..models import Scheme
from ..ranges import Range
from .base import RangeTranslator, intersect_all


class GoTranslator(RangeTranslator):
    """Comma-separated clauses must all hold; the ``v`` prefix is kept verbatim."""

    @property
    def scheme(self) -> Scheme:
        return Scheme.GO

    def parse(self, constraint: str) -> Range:
        if "," in constraint:
            return intersect_all(self.clause_range(part) for part in constraint.split(","))
        return parse_constraints(constraint, self.scheme)
