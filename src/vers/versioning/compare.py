"""Scheme-aware version comparison."""

from __future__ import annotations

from typing import Callable, Dict

from ..models import Scheme, SchemeLike
from .maven import compare_maven
from .nuget import compare_nuget
from .version import compare_versions

Comparator = Callable[[str, str], int]


def strip_v_prefix(version: str) -> str:
    """Remove a single leading ``v``/``V`` from a version string."""
    if len(version) > 1 and version[0] in "vV":
        return version[1:]
    return version


def compare_go(left: str, right: str) -> int:
    """Go module versions carry a ``v`` prefix; order them by the generic model."""
    return compare_versions(strip_v_prefix(left), strip_v_prefix(right))


_COMPARATORS: Dict[Scheme, Comparator] = {
    Scheme.MAVEN: compare_maven,
    Scheme.NUGET: compare_nuget,
    Scheme.GO: compare_go,
}


def comparator_for(scheme: SchemeLike) -> Comparator:
    """Return the ordering function for a scheme; generic for everything else."""
    return _COMPARATORS.get(Scheme.from_tag(scheme), compare_versions)


def compare_with_scheme(left: str, right: str, scheme: SchemeLike) -> int:
    """Compare two version strings using scheme-specific rules.

    Returns -1 if left < right, 0 if equal, 1 if left > right.
    """
    if left == right:
        return 0
    if left == "":
        return -1
    if right == "":
        return 1
    return comparator_for(scheme)(left, right)
