"""npm and Cargo range grammar.

Precedence, loosest first:

    range   := branch ( "||" branch )*          union
    branch  := term ( WS term )*                intersection
    term    := partial " - " partial            hyphen range, closed
             | "^" partial | "~" partial | "~>" partial
             | x-range                           1.x, 1.2.*, *
             | [op] version                      shared clause
"""

from __future__ import annotations

from typing import List

from ..exceptions import InvalidConstraint
from ..interval import Interval
from ..models import Scheme
from ..ranges import Range
from ..versioning.compare import strip_v_prefix
from .base import (
    WILDCARDS,
    RangeTranslator,
    intersect_all,
    parse_version_or_fail,
    prefix_bounds,
    split_wildcard,
    union_all,
)

# Operators that may be separated from their version by whitespace
_GLUE_OPERATORS = ("!=", ">=", "<=", ">", "<", "=", "^", "~", "~>")

_UNBOUNDED_TOKENS = ("", "*", "x", "X")


class NpmTranslator(RangeTranslator):
    """Translator for npm semver ranges."""

    @property
    def scheme(self) -> Scheme:
        return Scheme.NPM

    def parse(self, constraint: str) -> Range:
        text = constraint.strip()
        if text in _UNBOUNDED_TOKENS:
            return Range.unbounded(self.scheme)
        branches = [self._parse_branch(branch.strip()) for branch in text.split("||")]
        return union_all(branches)

    def tokenize(self, branch: str) -> List[str]:
        """Split an AND branch on whitespace, gluing lone operators to their operand."""
        raw = branch.split()
        tokens: List[str] = []
        i = 0
        while i < len(raw):
            token = raw[i]
            if token in _GLUE_OPERATORS:
                if i + 1 >= len(raw):
                    raise InvalidConstraint(f"operator without version: {branch!r}", branch)
                token += raw[i + 1]
                i += 1
            tokens.append(token)
            i += 1
        return tokens

    def _parse_branch(self, branch: str) -> Range:
        if branch in _UNBOUNDED_TOKENS:
            return Range.unbounded(self.scheme)

        tokens = self.tokenize(branch)
        terms: List[Range] = []
        i = 0
        while i < len(tokens):
            if i + 1 < len(tokens) and tokens[i + 1] == "-":
                if i + 2 >= len(tokens):
                    raise InvalidConstraint(f"incomplete hyphen range: {branch!r}", branch)
                terms.append(self.hyphen_range(tokens[i], tokens[i + 2]))
                i += 3
                continue
            terms.append(self.parse_term(tokens[i]))
            i += 1
        return intersect_all(terms)

    def parse_term(self, term: str) -> Range:
        """Parse one whitespace-free term of an AND branch."""
        if term.startswith("^"):
            return self.caret_range(term[1:])
        if term.startswith("~>"):
            return self.tilde_range(term[2:])
        if term.startswith("~"):
            return self.tilde_range(term[1:])
        if term in WILDCARDS:
            return Range.unbounded(self.scheme)
        if term[0] not in "<>=!" and split_wildcard(strip_v_prefix(term))[1]:
            return self.x_range(term)
        return self.clause_range(term)

    def hyphen_range(self, low: str, high: str) -> Range:
        """``A - B`` is the closed interval ``[A,B]``."""
        return self.interval_range(
            Interval(strip_v_prefix(low), strip_v_prefix(high), True, True)
        )

    def _base_version(self, text: str) -> str:
        text = strip_v_prefix(text.strip())
        if not text:
            raise InvalidConstraint("missing version after range operator", text)
        prefix, wildcard = split_wildcard(text)
        if wildcard:
            if not prefix:
                raise InvalidConstraint(f"wildcard needs a major version: {text!r}", text)
            return ".".join(prefix)
        return text

    def caret_range(self, text: str) -> Range:
        """``^X``: allow changes that do not modify the left-most non-zero part."""
        base = self._base_version(text)
        version = parse_version_or_fail(base)

        if version.major > 0:
            upper = version.increment_major()
        elif version.minor > 0:
            upper = version.increment_minor()
        else:
            upper = version.increment_patch()
        return self.interval_range(Interval(base, str(upper), True, False))

    def tilde_range(self, text: str) -> Range:
        """``~X``: up to the next minor, or the next major when minor and patch are 0.

        A prerelease lower bound yields two members: the prerelease run up to
        its release, and the release up to the next patch.
        """
        base = self._base_version(text)
        version = parse_version_or_fail(base)

        if version.is_prerelease():
            release = f"{version.major}.{version.minor}.{version.patch}"
            return self.interval_range(
                Interval(base, release, True, False),
                Interval(release, str(version.increment_patch()), True, False),
            )

        if version.minor == 0 and version.patch == 0:
            upper = version.increment_major()
        else:
            upper = version.increment_minor()
        return self.interval_range(Interval(base, str(upper), True, False))

    def x_range(self, text: str) -> Range:
        """``1.x`` / ``1.2.*``: every version sharing the stated prefix."""
        prefix, _ = split_wildcard(strip_v_prefix(text))
        if not prefix:
            return Range.unbounded(self.scheme)
        lower, upper = prefix_bounds(prefix, text)
        return self.interval_range(Interval(lower, upper, True, False))


class CargoTranslator(NpmTranslator):
    """Cargo requirements share npm's operators; commas also separate AND terms."""

    @property
    def scheme(self) -> Scheme:
        return Scheme.CARGO

    def parse(self, constraint: str) -> Range:
        return super().parse(constraint.replace(",", " "))
