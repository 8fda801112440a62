"""Generic version model: parsing into components and total ordering."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import List, Optional

from ..cache import BoundedCache
from ..exceptions import InvalidVersion

logger = logging.getLogger(__name__)

SEMANTIC_VERSION_RE = re.compile(
    r"^(\d+)(?:\.(\d+))?(?:\.(\d+))?(?:-([^+]+))?(?:\+(.+))?$", re.ASCII
)
_SIMPLE_NUMERIC_RE = re.compile(r"^\d+$", re.ASCII)
_INTEGER_RE = re.compile(r"^[+-]?\d+$", re.ASCII)

_version_cache: Optional[BoundedCache] = BoundedCache()


def set_version_cache(cache: Optional[BoundedCache]) -> None:
    """Install the memoization cache used by parse_version; None disables it."""
    global _version_cache  # pylint: disable=global-statement
    _version_cache = cache


def get_version_cache() -> Optional[BoundedCache]:
    """Return the memoization cache currently in use, if any."""
    return _version_cache


def atoi(text: str) -> int:
    """Read a release component; anything but unsigned digits counts as 0."""
    if _SIMPLE_NUMERIC_RE.fullmatch(text):
        return int(text)
    return 0


def parse_int(text: str) -> Optional[int]:
    """Return the integer value of a prerelease segment, or None if not numeric."""
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    return None


@dataclass(frozen=True)
class Version:
    """A parsed version with its numeric and textual components."""
    major: int = 0
    minor: int = 0
    patch: int = 0
    prerelease: str = ""
    build: str = ""
    original: str = ""

    def __str__(self) -> str:
        result = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            result += "-" + self.prerelease
        return result

    def is_stable(self) -> bool:
        """Return True if this is a release (no prerelease)."""
        return not self.prerelease

    def is_prerelease(self) -> bool:
        """Return True if this version carries a prerelease tag."""
        return bool(self.prerelease)

    def increment_major(self) -> "Version":
        return Version(major=self.major + 1)

    def increment_minor(self) -> "Version":
        return Version(major=self.major, minor=self.minor + 1)

    def increment_patch(self) -> "Version":
        return Version(major=self.major, minor=self.minor, patch=self.patch + 1)

    def compare(self, other: "Version") -> int:
        """Compare against another parsed version; returns -1, 0 or 1."""
        left = (self.major, self.minor, self.patch)
        right = (other.major, other.minor, other.patch)
        if left != right:
            return -1 if left < right else 1

        # A release sorts above any of its prereleases
        if not self.prerelease and other.prerelease:
            return 1
        if self.prerelease and not other.prerelease:
            return -1
        if not self.prerelease and not other.prerelease:
            return 0
        return compare_prerelease(self.prerelease, other.prerelease)


def _parse_uncached(text: str) -> Version:
    if _SIMPLE_NUMERIC_RE.fullmatch(text):
        return Version(major=int(text), original=text)

    match = SEMANTIC_VERSION_RE.fullmatch(text)
    if match:
        major, minor, patch, prerelease, build = match.groups()
        return Version(
            major=int(major),
            minor=int(minor) if minor else 0,
            patch=int(patch) if patch else 0,
            prerelease=prerelease or "",
            build=build or "",
            original=text,
        )

    if "." in text:
        parts = text.split(".")
        major = atoi(parts[0])
        minor = atoi(parts[1]) if len(parts) >= 2 and "-" not in parts[1] else 0
        patch = 0
        prerelease = ""
        if len(parts) >= 3:
            if "-" in parts[2]:
                patch_text, prerelease = parts[2].split("-", 1)
                patch = atoi(patch_text)
            else:
                patch = atoi(parts[2])
        if len(parts) > 3 and not prerelease:
            prerelease = ".".join(parts[3:])
        return Version(major=major, minor=minor, patch=patch,
                       prerelease=prerelease, original=text)

    if "-" in text:
        major_text, prerelease = text.split("-", 1)
        return Version(major=atoi(major_text), prerelease=prerelease, original=text)

    raise InvalidVersion(f"invalid version format: {text}", text)


def parse_version(text: str) -> Version:
    """Parse a version string into its components.

    Accepts plain integers, one to three dot-separated numeric parts with an
    optional ``-prerelease`` and ``+build`` suffix, looser dotted forms, and
    ``major-prerelease`` strings.

    Raises:
        InvalidVersion: if the string is empty or has no recognizable structure.
    """
    if not text:
        raise InvalidVersion("empty version string", text)

    cache = _version_cache
    if cache is not None:
        cached = cache.get(text)
        if cached is not None:
            return cached

    version = _parse_uncached(text)
    if cache is not None:
        cache.set(text, version)
    return version


def try_parse_version(text: str) -> Optional[Version]:
    """Parse a version string, returning None instead of raising."""
    try:
        return parse_version(text)
    except InvalidVersion:
        return None


def compare_segments(left: List[str], right: List[str]) -> int:
    """Compare dot-separated identifier lists.

    Segments compare numerically when both are integers and lexicographically
    otherwise; a list that runs out first sorts lower.
    """
    for i in range(max(len(left), len(right))):
        part_a = left[i] if i < len(left) else ""
        part_b = right[i] if i < len(right) else ""

        if part_a == "":
            return -1
        if part_b == "":
            return 1

        num_a = parse_int(part_a)
        num_b = parse_int(part_b)
        if num_a is not None and num_b is not None:
            if num_a != num_b:
                return -1 if num_a < num_b else 1
        elif part_a != part_b:
            return -1 if part_a < part_b else 1
    return 0


def compare_prerelease(left: str, right: str) -> int:
    """Compare two prerelease strings segment by segment."""
    return compare_segments(left.split("."), right.split("."))


def compare_versions(left: str, right: str) -> int:
    """Compare two version strings with the generic ordering.

    Returns -1 if left < right, 0 if equal, 1 if left > right. A parseable
    version always sorts above an unparseable one; two unparseable strings
    compare lexicographically.
    """
    if left == right:
        return 0
    if left == "":
        return -1
    if right == "":
        return 1

    version_a = try_parse_version(left)
    version_b = try_parse_version(right)

    if version_a is None and version_b is None:
        logger.debug("Comparing unparseable versions %s and %s as strings", left, right)
        return -1 if left < right else 1
    if version_a is None:
        return -1
    if version_b is None:
        return 1
    return version_a.compare(version_b)
