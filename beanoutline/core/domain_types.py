"""Domain Types: type tags and enums shared across the outline engine.

Invariants:
    - Sized numeric tags wrap int/float/str: a bean annotates with them to pin a width
    - VOID is the single source of truth for "returns nothing"
    - All classification states encoded as Enums: no raw string matching

Design Decisions:
    - NewType over wrapper classes: zero runtime cost, annotations stay introspectable
    - str Enums: summaries serialize without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Type Tags ───────────────────────────────────────────────────

Byte = NewType("Byte", int)        # 8-bit signed
Short = NewType("Short", int)      # 16-bit signed
Int = NewType("Int", int)          # 32-bit signed
Long = NewType("Long", int)        # 64-bit signed
Float = NewType("Float", float)    # single precision
Double = NewType("Double", float)  # double precision
Char = NewType("Char", str)        # exactly one character

VOID = type(None)

INTEGER_RANGES: dict = {
    Byte: (-(2 ** 7), 2 ** 7 - 1),
    Short: (-(2 ** 15), 2 ** 15 - 1),
    Int: (-(2 ** 31), 2 ** 31 - 1),
    Long: (-(2 ** 63), 2 ** 63 - 1),
}


# ─── Enums ───────────────────────────────────────────────────────

class AccessorKind(str, Enum):
    """How a catalogued method participates in the property model."""
    GETTER = "getter"
    SETTER = "setter"
    NONE = "none"


class ConventionKind(str, Enum):
    """Built-in naming conventions an Outline can be bound to."""
    CAMEL = "camel"
    SNAKE = "snake"


def type_label(tag) -> str:
    """Readable name for a type tag (NewType, class or typing construct)."""
    return getattr(tag, "__name__", None) or repr(tag)


def parse_convention_kind(value: ConventionKind | str) -> ConventionKind:
    """Accept 'camelCase' / 'snake_case' spellings as well as 'camel' / 'snake'."""
    if isinstance(value, ConventionKind):
        return value
    lowered = str(value).strip().lower()
    if lowered.startswith("camel"):
        return ConventionKind.CAMEL
    if lowered.startswith("snake"):
        return ConventionKind.SNAKE
    raise ValueError(f"Unknown naming convention {value!r}: expected 'camel' or 'snake'")
