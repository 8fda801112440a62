"""Version parsing and per-scheme ordering."""

from .version import (
    Version,
    parse_version,
    try_parse_version,
    compare_versions,
    set_version_cache,
    get_version_cache,
)
from .maven import compare_maven
from .nuget import compare_nuget
from .compare import compare_with_scheme, comparator_for, strip_v_prefix

__all__ = [
    "Version",
    "parse_version",
    "try_parse_version",
    "compare_versions",
    "set_version_cache",
    "get_version_cache",
    "compare_maven",
    "compare_nuget",
    "compare_with_scheme",
    "comparator_for",
    "strip_v_prefix",
]
