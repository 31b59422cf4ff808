"""Outline: immutable facade over the property model of one bean type.

Invariants:
    - Built once per (type, convention, pluralizer) and never mutated afterwards
    - camel_cased_name / snake_cased_name ignore the bound convention: both project
      from the property's raw name, so either spelling names the same property
    - Member resolution is by method identity (name + signature), never by fuzzy match

Design Decisions:
    - A member is a MemberHandle, a one-argument function run against a fresh proxy,
      or a property/method name in any spelling: all three resolve through _handle()
"""

from typing import Any, Callable, Union

from beanoutline.core.errors import ErrorContext, UnknownMemberError
from beanoutline.core.members import MemberHandle, MemberProxy, capture, synthesize_member_proxy
from beanoutline.core.method_catalog import MethodCatalog, MethodDescriptor
from beanoutline.core.naming import NamingConvention, camel_case, snake_case
from beanoutline.core.property_model import PropertyDescriptor, PropertyModel
from beanoutline.core.wrapped import Wrapped
from beanoutline.schemas.outline import MethodSummary, OutlineSummary, PropertySummary


Member = Union[MemberHandle, Callable[[Any], Any], str]


class Outline:
    """Structural model of a bean type: properties, methods and access paths."""

    __slots__ = (
        "_type", "_convention", "_methods", "_model",
        "_methods_by_name", "_members_type",
    )

    def __init__(
        self,
        cls: type,
        convention: NamingConvention,
        catalog: MethodCatalog,
        model: PropertyModel,
    ):
        self._type = cls
        self._convention = convention
        self._methods = catalog.methods
        self._model = model
        self._methods_by_name = {m.name: m for m in catalog.methods}
        self._members_type = synthesize_member_proxy(
            cls.__name__, catalog.methods, model.by_method,
        )

    @property
    def type(self) -> type:
        return self._type

    @property
    def convention(self) -> NamingConvention:
        return self._convention

    @property
    def name(self) -> str:
        return self._convention.to_display_name(self._type.__name__)

    @property
    def plural_name(self) -> str:
        return self._convention.to_plural_display_name(self.name)

    # ─── Type Names ──────────────────────────────────────────────

    def camel_cased_name(self, member: Member | None = None) -> str:
        if member is None:
            return camel_case(self._type.__name__)
        return self.property(member).camel_cased_name

    def camel_cased_plural_name(self) -> str:
        return self._convention.to_plural_display_name(self.camel_cased_name())

    def snake_cased_name(self, member: Member | None = None) -> str:
        if member is None:
            return snake_case(self._type.__name__)
        return self.property(member).snake_cased_name

    def snake_cased_plural_name(self) -> str:
        return self._convention.to_plural_display_name(self.snake_cased_name())

    # ─── Queries ─────────────────────────────────────────────────

    def property_names(self) -> frozenset[str]:
        return frozenset(p.name for p in self._model.properties)

    def properties(self) -> tuple[PropertyDescriptor, ...]:
        return self._model.properties

    def methods(self) -> tuple[MethodDescriptor, ...]:
        return self._methods

    def members(self) -> MemberProxy:
        """Fresh stand-in whose accessor calls return handles instead of values."""
        return self._members_type()

    def method(self, member: Member) -> MethodDescriptor:
        return self._handle(member).method

    def wrap(self, instance: Any) -> Wrapped:
        if not isinstance(instance, self._type):
            raise TypeError(
                f"Cannot wrap {type(instance).__name__} with outline of {self._type.__name__}"
            )
        return Wrapped(self, instance)

    def describe(self) -> OutlineSummary:
        """Serializable summary of this outline."""
        return OutlineSummary(
            type_name=self.name,
            plural_type_name=self.plural_name,
            convention=self._convention.kind,
            properties=[PropertySummary.from_descriptor(p) for p in self._model.properties],
            methods=[MethodSummary.from_descriptor(m) for m in self._methods],
        )

    def property(self, member: Member) -> PropertyDescriptor:
        """Resolve a member to its PropertyDescriptor, or raise UnknownMemberError."""
        if isinstance(member, str):
            found = self._model.find(member)
            if found is not None:
                return found
        handle = self._handle(member)
        found = self._model.by_method.get(handle.method)
        if found is None:
            raise UnknownMemberError(handle.method.name, self._context())
        return found

    # ─── Resolution ──────────────────────────────────────────────

    def _handle(self, member: Member) -> MemberHandle:
        if isinstance(member, MemberHandle):
            known = self._methods_by_name.get(member.method.name)
            if known != member.method:
                raise UnknownMemberError(member.method.name, self._context())
            return member
        if isinstance(member, str):
            known = self._methods_by_name.get(member)
            if known is None:
                raise UnknownMemberError(member, self._context())
            return MemberHandle(known, self._model.by_method.get(known))
        if callable(member):
            return capture(self._members_type, member)
        raise UnknownMemberError(repr(member), self._context())

    def _context(self) -> ErrorContext:
        return ErrorContext(type_name=self._type.__name__)

    def __repr__(self) -> str:
        return (
            f"Outline({self._type.__name__}, convention={self._convention.kind.value}, "
            f"properties={len(self._model.properties)})"
        )
