"""Values: generic boxed/textual values that the coercion layer converts from.

Invariants:
    - A Value never knows the property it is destined for; it only answers to_* requests
    - Parse failures raise ValueError: mapping to TypeCoercionError is the caller's job

Design Decisions:
    - Small class hierarchy rather than a registry: one subclass per source representation
"""

from typing import Any


_TRUE = "true"
_FALSE = "false"


class Value:
    """A value whose native type is decided by the consumer."""

    def as_object(self) -> Any:
        raise NotImplementedError

    def as_string(self) -> str:
        return str(self.as_object())

    def to_boolean(self) -> bool:
        raise NotImplementedError

    def to_integer(self) -> int:
        raise NotImplementedError

    def to_long(self) -> int:
        return self.to_integer()

    def to_float(self) -> float:
        raise NotImplementedError

    def to_double(self) -> float:
        return self.to_float()

    def to_character(self) -> str:
        text = self.as_string()
        if not text:
            raise ValueError("empty value has no first character")
        return text[0]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Value):
            return type(self) is type(other) and self.as_object() == other.as_object()
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self), self.as_object()))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.as_object()!r})"


class StringValue(Value):
    """A value carried as text, parsed on demand."""

    def __init__(self, text: str):
        self._text = text

    def as_object(self) -> str:
        return self._text

    def as_string(self) -> str:
        return self._text

    def to_boolean(self) -> bool:
        lowered = self._text.strip().lower()
        if lowered == _TRUE:
            return True
        if lowered == _FALSE:
            return False
        raise ValueError(f"expected 'true' or 'false', got {self._text!r}")

    def to_integer(self) -> int:
        return int(self._text.strip(), 10)

    def to_float(self) -> float:
        return float(self._text.strip())


class ObjectValue(Value):
    """A value carried as an already-native Python object."""

    def __init__(self, obj: Any):
        self._obj = obj

    def as_object(self) -> Any:
        return self._obj

    def to_boolean(self) -> bool:
        if isinstance(self._obj, bool):
            return self._obj
        return StringValue(self.as_string()).to_boolean()

    def to_integer(self) -> int:
        if isinstance(self._obj, bool):
            raise ValueError(f"boolean {self._obj!r} is not an integer")
        if isinstance(self._obj, int):
            return self._obj
        if isinstance(self._obj, float):
            if not self._obj.is_integer():
                raise ValueError(f"{self._obj!r} has a fractional part")
            return int(self._obj)
        return StringValue(self.as_string()).to_integer()

    def to_float(self) -> float:
        if isinstance(self._obj, bool):
            raise ValueError(f"boolean {self._obj!r} is not a number")
        if isinstance(self._obj, (int, float)):
            return float(self._obj)
        return StringValue(self.as_string()).to_float()
