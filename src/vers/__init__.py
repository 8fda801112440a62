"""Parse, compare and combine version ranges across package ecosystems.

Ranges are written either natively (``^1.2.3`` for npm, ``[1.0,2.0)`` for
Maven, ``~> 2.1`` for RubyGems, ...) or as ``vers:<scheme>/<constraints>``
URIs, and both forms lower into the same :class:`Range` algebra.
"""

from typing import Optional

from .constraint import Constraint, parse_constraint, parse_constraints
from .exceptions import InvalidConstraint, InvalidURI, InvalidVersion, VersError
from .interval import Interval
from .models import Scheme, SchemeLike
from .parser import parse, parse_native, to_vers_string
from .ranges import Range
from .versioning import (
    Version,
    compare_versions,
    compare_with_scheme,
    get_version_cache,
    parse_version,
    set_version_cache,
)

__version__ = "0.3.0"


def contains(range_: Range, version: str) -> bool:
    """Check whether ``version`` falls inside ``range_``."""
    return range_.contains(version)


def satisfies(version: str, constraint: str, scheme: Optional[SchemeLike] = "") -> bool:
    """Check a version against a constraint.

    With no scheme the constraint is read as a vers URI, otherwise in the
    scheme's native grammar.
    """
    if not scheme:
        range_ = parse(constraint)
    else:
        range_ = parse_native(constraint, scheme)
    return range_.contains(version)


def compare(left: str, right: str) -> int:
    """Compare two versions with the generic ordering; returns -1, 0 or 1."""
    return compare_versions(left, right)


def valid(version: str) -> bool:
    """Return True if the version string parses."""
    try:
        parse_version(version)
    except InvalidVersion:
        return False
    return True


def normalize(version: str) -> str:
    """Render a version as ``major.minor.patch[-prerelease]``."""
    return str(parse_version(version))


def exact(version: str) -> Range:
    return Range.exact(version)


def greater_than(version: str, inclusive: bool = False) -> Range:
    return Range.greater_than(version, inclusive)


def less_than(version: str, inclusive: bool = False) -> Range:
    return Range.less_than(version, inclusive)


def unbounded() -> Range:
    return Range.unbounded()


def empty() -> Range:
    return Range.empty()


__all__ = [
    "Constraint",
    "Interval",
    "Range",
    "Scheme",
    "Version",
    "VersError",
    "InvalidVersion",
    "InvalidConstraint",
    "InvalidURI",
    "parse",
    "parse_native",
    "parse_constraint",
    "parse_constraints",
    "parse_version",
    "to_vers_string",
    "contains",
    "satisfies",
    "compare",
    "compare_with_scheme",
    "valid",
    "normalize",
    "exact",
    "greater_than",
    "less_than",
    "unbounded",
    "empty",
    "set_version_cache",
    "get_version_cache",
]
