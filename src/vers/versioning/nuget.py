"""NuGet version ordering.

NuGet versions have up to four numeric parts (missing parts are 0), build
metadata after ``+`` is ignored, and prerelease labels compare
case-insensitively.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .version import atoi, compare_segments


@dataclass(frozen=True)
class NuGetVersion:
    numeric: Tuple[int, int, int, int] = (0, 0, 0, 0)
    prerelease: str = ""


def parse_nuget_version(text: str) -> NuGetVersion:
    """Split a NuGet version into four numeric parts and a prerelease label."""
    text = text.split("+", 1)[0]
    prerelease = ""
    if "-" in text:
        text, prerelease = text.split("-", 1)

    parts = text.split(".")[:4]
    numeric = [atoi(part) for part in parts]
    numeric.extend([0] * (4 - len(numeric)))
    return NuGetVersion(numeric=tuple(numeric), prerelease=prerelease)


def compare_nuget(left: str, right: str) -> int:
    """Compare two NuGet version strings; returns -1, 0 or 1."""
    version_a = parse_nuget_version(left)
    version_b = parse_nuget_version(right)

    if version_a.numeric != version_b.numeric:
        return -1 if version_a.numeric < version_b.numeric else 1

    if not version_a.prerelease and version_b.prerelease:
        return 1
    if version_a.prerelease and not version_b.prerelease:
        return -1
    if not version_a.prerelease and not version_b.prerelease:
        return 0

    return compare_segments(
        version_a.prerelease.lower().split("."),
        version_b.prerelease.lower().split("."),
    )
