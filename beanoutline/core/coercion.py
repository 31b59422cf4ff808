"""Coercion: dispatch a generic value to a property's native type.

Invariants:
    - Parsing belongs to Value; this module only picks the conversion for a target type
    - Sized integers are range-checked; Float is rounded to single precision
    - Every failure surfaces as TypeCoercionError naming target type and offending input
    - None passes through to str and other reference types, never to a primitive
    - coerce() is PURE: the caller applies the result only after it returns
"""

import struct
import types
import typing
from typing import Any, Union

from beanoutline.core.domain_types import (
    INTEGER_RANGES, Byte, Char, Double, Float, Int, Long, Short, VOID, type_label,
)
from beanoutline.core.errors import ErrorContext, TypeCoercionError
from beanoutline.core.values import ObjectValue, StringValue, Value

_PRIMITIVES = (bool, int, float, Float, Double, Char)


def to_value(value: Any) -> Value:
    if isinstance(value, Value):
        return value
    if isinstance(value, str):
        return StringValue(value)
    return ObjectValue(value)


def coerce(value: Any, target: Any, context: ErrorContext | None = None) -> Any:
    """Convert value (native, text or Value) into an instance of target."""
    if target is Any:
        return value.as_object() if isinstance(value, Value) else value

    origin = typing.get_origin(target)
    if origin is Union or origin is types.UnionType:
        return _coerce_union(value, target, context)

    if _raw(value) is None:
        if target in _PRIMITIVES or target in INTEGER_RANGES:
            raise TypeCoercionError(type_label(target), None, "primitive type cannot hold None", context)
        return None

    boxed = to_value(value)
    try:
        if target is bool:
            return boxed.to_boolean()
        if target in INTEGER_RANGES:
            return _in_range(boxed.to_long() if target is Long else boxed.to_integer(), target)
        if target is int:
            return boxed.to_integer()
        if target is Float:
            return struct.unpack("f", struct.pack("f", boxed.to_float()))[0]
        if target is float or target is Double:
            return boxed.to_double()
        if target is Char:
            return boxed.to_character()
        if target is str:
            return boxed.as_string()
    except (ValueError, OverflowError) as e:
        raise TypeCoercionError(type_label(target), _raw(value), str(e), context) from e

    raw = _raw(value)
    if isinstance(target, type) and isinstance(raw, target):
        return raw
    raise TypeCoercionError(type_label(target), raw, "unsupported conversion", context)


def _coerce_union(value: Any, target: Any, context: ErrorContext | None) -> Any:
    raw = _raw(value)
    members = typing.get_args(target)
    if raw is None and VOID in members:
        return None
    non_null = [m for m in members if m is not VOID]
    if len(non_null) == 1:
        return coerce(value, non_null[0], context)
    for member in non_null:
        if isinstance(member, type) and isinstance(raw, member):
            return raw
    raise TypeCoercionError(type_label(target), raw, "no union member matches", context)


def _in_range(number: int, target: Any) -> int:
    low, high = INTEGER_RANGES[target]
    if not low <= number <= high:
        raise ValueError(f"{number} outside {type_label(target)} range [{low}, {high}]")
    return number


def _raw(value: Any) -> Any:
    return value.as_object() if isinstance(value, Value) else value
