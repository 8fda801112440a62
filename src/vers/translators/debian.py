"""Debian, RPM and fallback grammars built on the generic ``|`` clause list."""

from __future__ import annotations

from ..constraint import parse_constraints
from ..models import Scheme
from ..ranges import Range
from .base import RangeTranslator


class GenericTranslator(RangeTranslator):
    """``|``-separated clauses, one operator per clause."""

    def __init__(self, scheme: Scheme = Scheme.OTHER):
        self._scheme = scheme

    @property
    def scheme(self) -> Scheme:
        return self._scheme

    def parse(self, constraint: str) -> Range:
        return parse_constraints(constraint, self.scheme)


class RpmTranslator(GenericTranslator):
    """RPM dependency versions: ``>= 1.0, <= 2.0``."""

    def __init__(self):
        super().__init__(Scheme.RPM)

    def parse(self, constraint: str) -> Range:
        return super().parse(constraint.replace(",", "|"))


class DebianTranslator(GenericTranslator):
    """Debian relations; ``>>`` and ``<<`` are the strict operators."""

    def __init__(self):
        super().__init__(Scheme.DEB)

    def parse(self, constraint: str) -> Range:
        text = constraint.replace(">>", ">").replace("<<", "<")
        return super().parse(text.replace(",", "|"))
