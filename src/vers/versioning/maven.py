"""Maven version ordering (ComparableVersion semantics).

Versions are lowercased and split at ``.``, ``-`` and digit/letter
transitions. A component introduced by ``-`` or by a transition sits in a
nested "sublist"; a component introduced by ``.`` does not. Ordering rules:

- qualifiers: alpha < beta < milestone < rc < snapshot < "" (release) < sp
  < unknown qualifiers (lexicographic among themselves) < numbers
- a missing trailing component ("null") equals 0 and the release qualifier
- a sublist component is less than a direct number and greater than a direct
  qualifier at the same position
- trailing zeros are dropped from the base portion (before the first
  sublist), or from the end when there is no sublist at all
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..constants import Constants


@dataclass(frozen=True)
class MavenComponent:
    """One token of a Maven version."""
    numeric: Optional[int] = None
    qualifier: str = ""
    sublist: bool = False

    @property
    def is_numeric(self) -> bool:
        return self.numeric is not None


def _is_digits(text: str) -> bool:
    return text.isascii() and text.isdigit()


def qualifier_order(qualifier: str) -> Tuple[int, bool]:
    """Return (rank, known) for a qualifier."""
    order = Constants.MAVEN_QUALIFIER_ORDER.get(qualifier.lower())
    if order is not None:
        return order, True
    return Constants.MAVEN_UNKNOWN_QUALIFIER_ORDER, False


def split_tokens(text: str) -> Tuple[List[str], List[bool]]:
    """Split a lowercased version into tokens and their sublist flags."""
    parts: List[str] = []
    flags: List[bool] = []
    current = ""
    sublist = False
    last_was_digit = False

    for char in text:
        if char in ".-":
            if current:
                parts.append(current)
                flags.append(sublist)
                current = ""
            sublist = char == "-"
            continue

        is_digit = "0" <= char <= "9"
        if current and is_digit != last_was_digit:
            parts.append(current)
            flags.append(sublist)
            current = ""
            sublist = True

        current += char
        last_was_digit = is_digit

    if current:
        parts.append(current)
        flags.append(sublist)
    return parts, flags


def _normalize_qualifier(token: str, next_is_digit: bool) -> str:
    if next_is_digit and token in Constants.MAVEN_SHORT_QUALIFIERS:
        return Constants.MAVEN_SHORT_QUALIFIERS[token]
    return Constants.MAVEN_QUALIFIER_ALIASES.get(token, token)


def _trim_trailing_zeros(components: List[MavenComponent]) -> List[MavenComponent]:
    first_sublist = next(
        (i for i, comp in enumerate(components) if comp.sublist), -1
    )

    if first_sublist > 0:
        base_end = first_sublist
        while base_end > 1 and components[base_end - 1].numeric == 0:
            base_end -= 1
        return components[:base_end] + components[first_sublist:]

    if first_sublist == -1:
        while components and components[-1].numeric == 0:
            components = components[:-1]
    return components


def parse_maven_version(text: str) -> List[MavenComponent]:
    """Tokenize a Maven version into normalized components."""
    parts, flags = split_tokens(text.lower())
    components: List[MavenComponent] = []

    for i, part in enumerate(parts):
        next_is_digit = i + 1 < len(parts) and _is_digits(parts[i + 1])
        token = _normalize_qualifier(part, next_is_digit)
        if token == "":
            # ga/final/release mean the same as no qualifier
            continue
        if _is_digits(token):
            components.append(MavenComponent(numeric=int(token), sublist=flags[i]))
        else:
            components.append(MavenComponent(qualifier=token, sublist=flags[i]))

    return _trim_trailing_zeros(components)


def _compare_to_null(comp: MavenComponent) -> int:
    if comp.is_numeric:
        return 1 if comp.numeric > 0 else 0
    order, _ = qualifier_order(comp.qualifier)
    release, _ = qualifier_order("")
    if order < release:
        return -1
    if order > release:
        return 1
    return 0


def compare_components(left: Optional[MavenComponent], right: Optional[MavenComponent]) -> int:
    """Compare two components; None stands for a missing trailing component."""
    if left is None and right is None:
        return 0
    if left is None:
        return -_compare_to_null(right)
    if right is None:
        return _compare_to_null(left)

    if left.sublist != right.sublist:
        if left.sublist:
            return -1 if right.is_numeric else 1
        return 1 if left.is_numeric else -1

    if left.is_numeric and right.is_numeric:
        if left.numeric == right.numeric:
            return 0
        return -1 if left.numeric < right.numeric else 1
    if left.is_numeric:
        return 1
    if right.is_numeric:
        return -1

    order_a, known_a = qualifier_order(left.qualifier)
    order_b, known_b = qualifier_order(right.qualifier)
    if order_a != order_b:
        return -1 if order_a < order_b else 1
    if not known_a and not known_b and left.qualifier != right.qualifier:
        return -1 if left.qualifier < right.qualifier else 1
    return 0


def compare_maven(left: str, right: str) -> int:
    """Compare two Maven version strings; returns -1, 0 or 1."""
    parts_a = parse_maven_version(left)
    parts_b = parse_maven_version(right)

    for i in range(max(len(parts_a), len(parts_b))):
        comp_a = parts_a[i] if i < len(parts_a) else None
        comp_b = parts_b[i] if i < len(parts_b) else None
        result = compare_components(comp_a, comp_b)
        if result != 0:
            return result
    return 0
