"""Native range grammars, one translator per scheme."""

import logging
from typing import Dict

from ..models import Scheme, SchemeLike
from .base import RangeTranslator
from .debian import DebianTranslator, GenericTranslator, RpmTranslator
from .gem import GemTranslator
from .golang import GoTranslator
from .maven import MavenTranslator, NuGetTranslator
from .npm import CargoTranslator, NpmTranslator
from .pypi import PypiTranslator

logger = logging.getLogger(__name__)

_TRANSLATORS: Dict[Scheme, RangeTranslator] = {
    Scheme.NPM: NpmTranslator(),
    Scheme.CARGO: CargoTranslator(),
    Scheme.GEM: GemTranslator(),
    Scheme.PYPI: PypiTranslator(),
    Scheme.MAVEN: MavenTranslator(),
    Scheme.NUGET: NuGetTranslator(),
    Scheme.GO: GoTranslator(),
    Scheme.DEB: DebianTranslator(),
    Scheme.RPM: RpmTranslator(),
    Scheme.OTHER: GenericTranslator(),
}


def get_translator(scheme: SchemeLike) -> RangeTranslator:
    """Return the translator for a scheme tag; unknown tags get the generic grammar."""
    resolved = Scheme.from_tag(scheme)
    if resolved is Scheme.OTHER:
        logger.debug("Unrecognized scheme %r; using generic grammar", scheme)
    return _TRANSLATORS[resolved]


__all__ = [
    "RangeTranslator",
    "NpmTranslator",
    "CargoTranslator",
    "GemTranslator",
    "PypiTranslator",
    "MavenTranslator",
    "NuGetTranslator",
    "GoTranslator",
    "DebianTranslator",
    "RpmTranslator",
    "GenericTranslator",
    "get_translator",
]
