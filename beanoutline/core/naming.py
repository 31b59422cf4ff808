"""Naming Conventions: pure translation of raw identifiers to display names.

Invariants:
    - camel_case and snake_case of the same raw fragment always name the same words
    - Type names keep their leading capital under camelCase (TestBeanClass stays as-is)
    - Pluralization works on the display name, after the convention is applied
    - Digits never start a word: get_item_2 and getItem2 both name the property item2

Design Decisions:
    - Acronym-aware snake_case (URLValue → url_value) rather than one underscore per capital
    - Frozen dataclass per convention: hashable, so it can be part of a cache key
"""

import re
from dataclasses import dataclass
from typing import Callable

from beanoutline.core.domain_types import ConventionKind, parse_convention_kind


Pluralizer = Callable[[str], str]

_WORD_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")
_SIBILANT_ENDINGS = ("s", "x", "z", "ch", "sh")


def decapitalize(fragment: str) -> str:
    """Lower-case the first character unless the fragment opens with an acronym."""
    if not fragment:
        return fragment
    if len(fragment) > 1 and fragment[0].isupper() and fragment[1].isupper():
        return fragment
    return fragment[0].lower() + fragment[1:]


def camel_case(text: str) -> str:
    if "_" not in text:
        return text
    parts = [part for part in text.split("_") if part]
    if not parts:
        return text
    head, *rest = parts
    return head + "".join(part[0].upper() + part[1:] for part in rest)


def snake_case(text: str) -> str:
    return _WORD_BOUNDARY.sub("_", text).lower()


def default_pluralize(name: str) -> str:
    """Default English rule: 'es' after a trailing sibilant, otherwise 's'."""
    if name.lower().endswith(_SIBILANT_ENDINGS):
        return name + "es"
    return name + "s"


@dataclass(frozen=True)
class NamingConvention:
    """A display-name derivation policy bound to an Outline at build time."""

    kind: ConventionKind
    pluralizer: Pluralizer = default_pluralize

    def to_display_name(self, raw: str) -> str:
        if self.kind is ConventionKind.SNAKE:
            return snake_case(raw)
        return camel_case(raw)

    def to_plural_display_name(self, display_name: str) -> str:
        return self.pluralizer(display_name)

    def normalize(self, name: str) -> str:
        """Project any spelling of a name onto this convention."""
        return self.to_display_name(camel_case(name))


CAMEL_CASE = NamingConvention(ConventionKind.CAMEL)
SNAKE_CASE = NamingConvention(ConventionKind.SNAKE)


def convention_for(kind: ConventionKind | str, pluralizer: Pluralizer | None = None) -> NamingConvention:
    return NamingConvention(parse_convention_kind(kind), pluralizer or default_pluralize)
