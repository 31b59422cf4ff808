"""Method Catalog: one-time reflection over a bean type's public methods.

Invariants:
    - Every public method appears exactly once, in discovery order (base classes first)
    - An override keeps the position of the method it overrides
    - Reserved names are checked BEFORE pattern matching: they stay methods, never accessors
    - MethodDescriptor is a frozen value: equality and hashing by name + signature

Design Decisions:
    - Walk the MRO namespaces instead of inspect.getmembers: keeps definition order
    - Resolved hints via typing.get_type_hints, raw annotations only when resolution fails
"""

import inspect
import logging
import re
import typing
from dataclasses import dataclass
from typing import Any

from beanoutline.core.domain_types import AccessorKind, VOID
from beanoutline.core.naming import camel_case, decapitalize

logger = logging.getLogger(__name__)

_ACCESSOR_NAME = re.compile(
    r"^(?P<prefix>get|is|set)"
    r"(?:_(?P<snake>[a-z0-9][a-z0-9_]*)|(?P<camel>[A-Z]\w*))$"
)
_PLAIN_PARAMETERS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


@dataclass(frozen=True)
class MethodDescriptor:
    """Name and declared signature of one public method."""
    name: str
    parameter_types: tuple = ()
    return_type: Any = Any

    @property
    def arity(self) -> int:
        return len(self.parameter_types)

    @property
    def returns_void(self) -> bool:
        return self.return_type is VOID


@dataclass(frozen=True)
class CatalogEntry:
    """A catalogued method with its accessor classification."""
    method: MethodDescriptor
    kind: AccessorKind = AccessorKind.NONE
    raw_name: str | None = None


@dataclass(frozen=True)
class MethodCatalog:
    """All public methods of one type, classified."""
    type_name: str
    entries: tuple[CatalogEntry, ...]

    @property
    def methods(self) -> tuple[MethodDescriptor, ...]:
        return tuple(entry.method for entry in self.entries)

    @property
    def accessors(self) -> tuple[CatalogEntry, ...]:
        return tuple(e for e in self.entries if e.kind is not AccessorKind.NONE)


def catalog_methods(cls: type, reserved: frozenset[str] = frozenset()) -> MethodCatalog:
    """Enumerate and classify the public methods of cls."""
    entries = []
    for name, (func, binding) in _public_functions(cls).items():
        method, plain = _describe(name, func, binding)
        if name in reserved or binding != "instance" or not plain:
            entries.append(CatalogEntry(method))
            continue
        entries.append(_classify(method))
    return MethodCatalog(cls.__name__, tuple(entries))


# ─── Reflection ─────────────────────────────────────────────────

def _public_functions(cls: type) -> dict[str, tuple[Any, str]]:
    """Map name → (function, binding) across the MRO, base first."""
    namespace: dict[str, tuple[Any, str]] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        for name, attr in vars(klass).items():
            if name.startswith("_"):
                continue
            if isinstance(attr, staticmethod):
                namespace[name] = (attr.__func__, "static")
            elif isinstance(attr, classmethod):
                namespace[name] = (attr.__func__, "class")
            elif inspect.isfunction(attr):
                namespace[name] = (attr, "instance")
            else:
                # Shadowed by a non-method attribute
                namespace.pop(name, None)
    return namespace


def _describe(name: str, func: Any, binding: str) -> tuple[MethodDescriptor, bool]:
    signature = inspect.signature(func)
    hints = _type_hints(func, signature)
    parameters = list(signature.parameters.values())
    if binding != "static":
        parameters = parameters[1:]
    plain = all(p.kind in _PLAIN_PARAMETERS for p in parameters)
    method = MethodDescriptor(
        name=name,
        parameter_types=tuple(_tag(hints.get(p.name, p.empty)) for p in parameters),
        return_type=_tag(hints.get("return", signature.return_annotation)),
    )
    return method, plain


def _type_hints(func: Any, signature: inspect.Signature) -> dict[str, Any]:
    try:
        return typing.get_type_hints(func)
    except (NameError, TypeError) as e:
        logger.debug(f"Falling back to raw annotations for {func.__qualname__}: {e}")
        raw = {p.name: p.annotation for p in signature.parameters.values()}
        raw["return"] = signature.return_annotation
        return raw


def _tag(annotation: Any) -> Any:
    if annotation is inspect.Parameter.empty:
        return Any
    if annotation is None or annotation == "None":
        return VOID
    return annotation


# ─── Classification ─────────────────────────────────────────────

def _classify(method: MethodDescriptor) -> CatalogEntry:
    match = _ACCESSOR_NAME.match(method.name)
    if match is None:
        return CatalogEntry(method)

    prefix = match.group("prefix")
    if match.group("camel"):
        raw_name = decapitalize(match.group("camel"))
    else:
        raw_name = camel_case(match.group("snake"))

    if prefix == "set":
        if method.arity == 1 and method.return_type in (VOID, Any):
            return CatalogEntry(method, AccessorKind.SETTER, raw_name)
        return CatalogEntry(method)

    if method.arity != 0 or method.returns_void:
        return CatalogEntry(method)
    if prefix == "is" and method.return_type is not bool:
        return CatalogEntry(method)
    return CatalogEntry(method, AccessorKind.GETTER, raw_name)
