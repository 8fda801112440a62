"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the command line interface.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    NOT_CONTAINED = 1
    INVALID_INPUT = 2


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    VERS_PREFIX = "vers:"
    WILDCARD = "*"
    CLAUSE_SEPARATOR = "|"

    # Parsed versions are memoized up to this many entries, then the cache is wiped.
    VERSION_CACHE_MAX_ENTRIES = 10000

    # Schemes whose serialized versions are padded to three numeric segments
    SEMVER_SCHEMES = ("npm", "cargo")

    SCHEME_ALIASES = {
        "rubygems": "gem",
        "golang": "go",
        "debian": "deb",
    }

    # Maven qualifier ordering; unknown qualifiers rank after "sp"
    MAVEN_QUALIFIER_ORDER = {
        "alpha": 1,
        "beta": 2,
        "milestone": 3,
        "rc": 4,
        "snapshot": 5,
        "": 6,
        "sp": 7,
    }
    MAVEN_UNKNOWN_QUALIFIER_ORDER = 8
    MAVEN_QUALIFIER_ALIASES = {
        "cr": "rc",
        "ga": "",
        "final": "",
        "release": "",
    }
    MAVEN_SHORT_QUALIFIERS = {
        "a": "alpha",
        "b": "beta",
        "m": "milestone",
    }

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
