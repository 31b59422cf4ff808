"""Property Model: reconciles getter/setter pairs into named properties.

Invariants:
    - One PropertyDescriptor per raw name, in discovery order of its first accessor
    - At most one getter and one setter per property, else ModelConflictError
    - Annotated getter return type == annotated setter parameter type, else ModelConflictError
    - camelCase, snake_case and display-name lookups all land on the same descriptor

Design Decisions:
    - Exact type equality: an assignment-compatible pair (int getter, float setter,
      Optional[int] vs int) is a conflict, not a silent widening
    - An unannotated side (Any) defers to the annotated side
    - raw_name stored alongside the display name so any convention can be projected later
"""

from dataclasses import dataclass, field
from typing import Any

from beanoutline.core.domain_types import AccessorKind, type_label
from beanoutline.core.errors import ErrorContext, ModelConflictError
from beanoutline.core.method_catalog import CatalogEntry, MethodCatalog, MethodDescriptor
from beanoutline.core.naming import NamingConvention, camel_case, snake_case


@dataclass(frozen=True)
class PropertyDescriptor:
    """A logical property derived from bean-style accessors."""
    name: str
    raw_name: str
    type: Any
    getter: MethodDescriptor | None = None
    setter: MethodDescriptor | None = None

    @property
    def camel_cased_name(self) -> str:
        return camel_case(self.raw_name)

    @property
    def snake_cased_name(self) -> str:
        return snake_case(self.raw_name)

    @property
    def readable(self) -> bool:
        return self.getter is not None

    @property
    def writable(self) -> bool:
        return self.setter is not None


@dataclass(frozen=True)
class PropertyModel:
    """Properties of one type plus the indices used to resolve them."""
    properties: tuple[PropertyDescriptor, ...]
    by_name: dict[str, PropertyDescriptor] = field(default_factory=dict)
    by_method: dict[MethodDescriptor, PropertyDescriptor] = field(default_factory=dict)

    def find(self, name: str) -> PropertyDescriptor | None:
        """Look up by display, camelCase or snake_case name."""
        return self.by_name.get(name) or self.by_name.get(snake_case(camel_case(name)))


def build_property_model(catalog: MethodCatalog, convention: NamingConvention) -> PropertyModel:
    """Group accessor candidates by raw name and reconcile each group."""
    groups: dict[str, dict[AccessorKind, CatalogEntry]] = {}
    for entry in catalog.accessors:
        group = groups.setdefault(entry.raw_name, {})
        existing = group.get(entry.kind)
        if existing is not None:
            raise ModelConflictError(
                f"Property '{entry.raw_name}' has two {entry.kind.value}s: "
                f"{existing.method.name} and {entry.method.name}",
                entry.raw_name,
                ErrorContext(type_name=catalog.type_name),
            )
        group[entry.kind] = entry

    properties = tuple(
        _reconcile(catalog.type_name, raw_name, group, convention)
        for raw_name, group in groups.items()
    )

    by_name: dict[str, PropertyDescriptor] = {}
    by_method: dict[MethodDescriptor, PropertyDescriptor] = {}
    for prop in properties:
        by_name[prop.name] = prop
        by_name.setdefault(prop.camel_cased_name, prop)
        by_name.setdefault(prop.snake_cased_name, prop)
        for accessor in (prop.getter, prop.setter):
            if accessor is not None:
                by_method[accessor] = prop
    return PropertyModel(properties, by_name, by_method)


def _reconcile(
    type_name: str,
    raw_name: str,
    group: dict[AccessorKind, CatalogEntry],
    convention: NamingConvention,
) -> PropertyDescriptor:
    getter = group.get(AccessorKind.GETTER)
    setter = group.get(AccessorKind.SETTER)
    getter_type = getter.method.return_type if getter else Any
    setter_type = setter.method.parameter_types[0] if setter else Any

    if getter_type is not Any and setter_type is not Any and getter_type != setter_type:
        raise ModelConflictError(
            f"Property '{raw_name}' getter returns {type_label(getter_type)} "
            f"but setter accepts {type_label(setter_type)}",
            raw_name,
            ErrorContext(
                type_name=type_name,
                debug_info={
                    "getter": getter.method.name,
                    "setter": setter.method.name,
                },
            ),
        )

    return PropertyDescriptor(
        name=convention.to_display_name(raw_name),
        raw_name=raw_name,
        type=getter_type if getter_type is not Any else setter_type,
        getter=getter.method if getter else None,
        setter=setter.method if setter else None,
    )
