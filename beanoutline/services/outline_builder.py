"""Outline Builder: cached construction of Outlines per (type, convention).

Invariants:
    - Same (type, convention, pluralizer, reserved names) → the identical Outline instance
    - Check-then-insert runs under one lock: concurrent first builds yield one Outline
    - Entries are never evicted (pure immutable metadata, lives as long as the process)
    - ModelConflictError is the only build-time failure; nothing is cached when it fires

Design Decisions:
    - Double-checked lookup: cache hits never take the lock
    - Fluent OutlineBuilder kept thin: all work happens in build_outline()
"""

import logging
import threading

from beanoutline.config import get_settings
from beanoutline.core.domain_types import ConventionKind, parse_convention_kind
from beanoutline.core.errors import ModelConflictError
from beanoutline.core.method_catalog import catalog_methods
from beanoutline.core.naming import Pluralizer, convention_for
from beanoutline.core.outline import Outline
from beanoutline.core.property_model import build_property_model

logger = logging.getLogger(__name__)

_outlines: dict[tuple, Outline] = {}
_outlines_lock = threading.Lock()


def build_outline(
    cls: type,
    convention: ConventionKind | str | None = None,
    pluralizer: Pluralizer | None = None,
) -> Outline:
    """Return the cached Outline for cls, building it on first request."""
    if not isinstance(cls, type):
        raise TypeError(f"Expected a class, got {cls!r}")

    settings = get_settings()
    kind = parse_convention_kind(convention or settings.default_convention)
    reserved = frozenset(settings.reserved_member_names)
    key = (cls, kind, pluralizer, reserved)

    outline = _outlines.get(key)
    if outline is not None:
        return outline

    with _outlines_lock:
        outline = _outlines.get(key)
        if outline is None:
            outline = _construct(cls, kind, pluralizer, reserved)
            _outlines[key] = outline
    return outline


def cached_outline_count() -> int:
    with _outlines_lock:
        return len(_outlines)


def _construct(
    cls: type,
    kind: ConventionKind,
    pluralizer: Pluralizer | None,
    reserved: frozenset[str],
) -> Outline:
    convention = convention_for(kind, pluralizer)
    catalog = catalog_methods(cls, reserved)
    try:
        model = build_property_model(catalog, convention)
    except ModelConflictError as e:
        logger.warning(
            f"Outline build failed for {cls.__name__}: {e.message}",
            extra={"type_name": cls.__name__, "error_code": e.code},
        )
        raise
    logger.debug(
        f"Built outline for {cls.__name__}",
        extra={
            "type_name": cls.__name__,
            "convention": kind.value,
            "property_count": len(model.properties),
        },
    )
    return Outline(cls, convention, catalog, model)


class OutlineBuilder:
    """Fluent front-end: OutlineBuilder(Bean).default_snake_cased().build()."""

    def __init__(self, cls: type):
        self._cls = cls
        self._convention: ConventionKind | None = None
        self._pluralizer: Pluralizer | None = None

    def default_camel_cased(self) -> "OutlineBuilder":
        self._convention = ConventionKind.CAMEL
        return self

    def default_snake_cased(self) -> "OutlineBuilder":
        self._convention = ConventionKind.SNAKE
        return self

    def with_convention(self, convention: ConventionKind | str) -> "OutlineBuilder":
        self._convention = parse_convention_kind(convention)
        return self

    def with_pluralizer(self, pluralizer: Pluralizer) -> "OutlineBuilder":
        self._pluralizer = pluralizer
        return self

    def build(self) -> Outline:
        return build_outline(self._cls, self._convention, self._pluralizer)
