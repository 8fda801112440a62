"""RubyGems requirement grammar: ``~> 1.2``, ``>= 1.0, < 2.0``."""

from __future__ import annotations

from ..constraint import parse_constraints
from ..exceptions import InvalidConstraint
from ..models import Scheme
from ..ranges import Range
from .base import RangeTranslator, intersect_all


class GemTranslator(RangeTranslator):
    """Translator for RubyGems requirements."""

    @property
    def scheme(self) -> Scheme:
        return Scheme.GEM

    def parse(self, constraint: str) -> Range:
        text = constraint.strip()

        # Comma-separated requirements must all hold
        if "," in text:
            parts = [part.strip() for part in text.split(",")]
            if any(not part for part in parts):
                raise InvalidConstraint(f"empty requirement in {constraint!r}", constraint)
            return intersect_all(self.parse(part) for part in parts)

        if text.startswith("~>"):
            return self.pessimistic_range(text[2:])

        return parse_constraints(text, self.scheme)
