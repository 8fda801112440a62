"""The ``vers:<scheme>/<constraints>`` wire format and native-grammar dispatch."""

from __future__ import annotations

import logging
import re
from functools import cmp_to_key
from typing import List, Optional, Tuple

from .constants import Constants
from .constraint import parse_constraints
from .exceptions import InvalidURI
from .models import Scheme, SchemeLike
from .ranges import Range
from .translators import get_translator
from .versioning.compare import compare_with_scheme

logger = logging.getLogger(__name__)

_SEMVER_PAD_RE = re.compile(r"\d+(\.\d+){0,2}", re.ASCII)

# Ties at one version: upper bounds, then exact/exclusion clauses, then lower
# bounds, so that pairing on re-parse sees each member's bounds back to back.
_RANK_UPPER = 0
_RANK_POINT = 1
_RANK_LOWER = 2

Clause = Tuple[str, int, str]


def parse(uri: str) -> Range:
    """Parse a vers URI into a Range.

    Raises:
        InvalidURI: if the prefix, the ``/`` separator or the scheme is missing.
        InvalidConstraint: if a clause is malformed.
    """
    if not uri.startswith(Constants.VERS_PREFIX):
        raise InvalidURI(f"vers URI must start with {Constants.VERS_PREFIX!r}", uri)

    remainder = uri[len(Constants.VERS_PREFIX):]
    if "/" not in remainder:
        raise InvalidURI("vers URI is missing the '/' after the scheme", uri)

    scheme_tag, constraints = remainder.split("/", 1)
    if not scheme_tag.strip():
        raise InvalidURI("vers URI has an empty scheme", uri)

    scheme = Scheme.from_tag(scheme_tag)
    constraints = constraints.strip()
    if constraints in ("", Constants.WILDCARD):
        return Range.unbounded(scheme)
    return parse_constraints(constraints, scheme)


def parse_native(constraint: str, scheme: SchemeLike) -> Range:
    """Parse a constraint written in the native grammar of ``scheme``."""
    translator = get_translator(scheme)
    logger.debug("Parsing %r with %s", constraint, type(translator).__name__)
    return translator.parse(constraint)


def _format_version(version: str, scheme: Scheme) -> str:
    if scheme.is_semver and _SEMVER_PAD_RE.fullmatch(version):
        parts = version.split(".")
        return ".".join(parts + ["0"] * (3 - len(parts)))
    return version


def _clauses(range_: Range, scheme: Scheme) -> List[Clause]:
    clauses: List[Clause] = []
    for interval in range_.intervals:
        if interval.is_empty():
            continue
        if interval.is_exact():
            clauses.append((interval.min, _RANK_POINT, "=" + _format_version(interval.min, scheme)))
            continue
        if interval.min is not None:
            op = ">=" if interval.min_inclusive else ">"
            clauses.append((interval.min, _RANK_LOWER, op + _format_version(interval.min, scheme)))
        if interval.max is not None:
            op = "<=" if interval.max_inclusive else "<"
            clauses.append((interval.max, _RANK_UPPER, op + _format_version(interval.max, scheme)))

    for excluded in range_.exclusions:
        clauses.append((excluded, _RANK_POINT, "!=" + _format_version(excluded, scheme)))
    return clauses


def to_vers_string(range_: Range, scheme: Optional[SchemeLike] = None) -> str:
    """Serialize a Range as a vers URI.

    Clauses are sorted by version under the scheme's ordering. The scheme tag
    is written as given; when omitted the range's own scheme is used.
    """
    if scheme is None:
        scheme = range_.scheme
    tag = scheme.value if isinstance(scheme, Scheme) else scheme
    resolved = Scheme.from_tag(scheme)
    prefix = f"{Constants.VERS_PREFIX}{tag}/"

    if range_.is_unbounded():
        return prefix + Constants.WILDCARD
    if range_.is_empty():
        return prefix

    def by_version(left: Clause, right: Clause) -> int:
        cmp = compare_with_scheme(left[0], right[0], resolved)
        if cmp:
            return cmp
        return left[1] - right[1]

    clauses = sorted(_clauses(range_, resolved), key=cmp_to_key(by_version))
    return prefix + Constants.CLAUSE_SEPARATOR.join(text for _, _, text in clauses)
