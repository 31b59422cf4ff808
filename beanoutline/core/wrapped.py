"""Wrapped: get/set access to one concrete bean through its Outline.

Invariants:
    - The wrapper borrows the instance: unwrap() returns the identical object
    - set() coerces BEFORE invoking the setter: a failed coercion leaves the bean untouched
    - Each get/set invokes the real accessor exactly once

Design Decisions:
    - Not thread-safe: concurrent access to one bean is the caller's concern
"""

import logging
from typing import TYPE_CHECKING, Any

from beanoutline.core.coercion import coerce
from beanoutline.core.errors import ErrorContext, NoGetterError, NoSetterError

if TYPE_CHECKING:
    from beanoutline.core.outline import Member, Outline

logger = logging.getLogger(__name__)


class Wrapped:
    """An Outline bound to one instance of its type."""

    __slots__ = ("_outline", "_instance")

    def __init__(self, outline: "Outline", instance: Any):
        self._outline = outline
        self._instance = instance

    @property
    def outline(self) -> "Outline":
        return self._outline

    def get(self, member: "Member") -> Any:
        prop = self._outline.property(member)
        if prop.getter is None:
            raise NoGetterError(prop.name, self._context(prop.name))
        return getattr(self._instance, prop.getter.name)()

    def set(self, member: "Member", value: Any) -> "Wrapped":
        prop = self._outline.property(member)
        if prop.setter is None:
            raise NoSetterError(prop.name, self._context(prop.name))
        native = coerce(value, prop.type, self._context(prop.name))
        logger.debug(
            f"Setting {self._outline.type.__name__}.{prop.name}",
            extra={"type_name": self._outline.type.__name__, "member_name": prop.name},
        )
        getattr(self._instance, prop.setter.name)(native)
        return self

    def unwrap(self) -> Any:
        return self._instance

    def _context(self, member_name: str) -> ErrorContext:
        return ErrorContext(type_name=self._outline.type.__name__, member_name=member_name)

    def __repr__(self) -> str:
        return f"Wrapped({self._instance!r})"
