"""Data models shared by the version, range and grammar layers."""

from __future__ import annotations

from enum import Enum
from typing import Union

from .constants import Constants


class Scheme(Enum):
    """Supported version schemes; anything else maps to OTHER."""
    NPM = "npm"
    GEM = "gem"
    PYPI = "pypi"
    MAVEN = "maven"
    NUGET = "nuget"
    CARGO = "cargo"
    GO = "go"
    DEB = "deb"
    RPM = "rpm"
    OTHER = "other"

    @classmethod
    def from_tag(cls, tag: Union[str, "Scheme", None]) -> "Scheme":
        """Resolve a scheme tag (including aliases) to a Scheme member."""
        if isinstance(tag, Scheme):
            return tag
        if not tag:
            return cls.OTHER
        key = tag.strip().lower()
        key = Constants.SCHEME_ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            return cls.OTHER

    @property
    def preserves_v_prefix(self) -> bool:
        """Go versions keep their leading ``v`` verbatim."""
        return self is Scheme.GO

    @property
    def is_semver(self) -> bool:
        """Whether serialized versions are padded to three numeric segments."""
        return self.value in Constants.SEMVER_SCHEMES


SchemeLike = Union[str, Scheme, None]
