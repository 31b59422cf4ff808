"""Outline Schemas: Pydantic summaries of a built Outline.

Invariants:
    - Type tags are rendered as readable strings, never as live type objects
    - Summaries are snapshots: mutating one never touches the Outline

Design Decisions:
    - Separate from core descriptors: descriptors carry live types for coercion,
      summaries are for logging, debugging and downstream mapping layers
"""

from typing import Any

from pydantic import BaseModel

from beanoutline.core.domain_types import ConventionKind, type_label


class MethodSummary(BaseModel):
    """One public method of the outlined type."""
    name: str
    parameter_types: list[str] = []
    return_type: str

    @classmethod
    def from_descriptor(cls, method: Any) -> "MethodSummary":
        return cls(
            name=method.name,
            parameter_types=[type_label(t) for t in method.parameter_types],
            return_type=type_label(method.return_type),
        )


class PropertySummary(BaseModel):
    """One property with its names under both conventions."""
    name: str
    raw_name: str
    camel_cased_name: str
    snake_cased_name: str
    type: str
    readable: bool
    writable: bool

    @classmethod
    def from_descriptor(cls, prop: Any) -> "PropertySummary":
        return cls(
            name=prop.name,
            raw_name=prop.raw_name,
            camel_cased_name=prop.camel_cased_name,
            snake_cased_name=prop.snake_cased_name,
            type=type_label(prop.type),
            readable=prop.readable,
            writable=prop.writable,
        )


class OutlineSummary(BaseModel):
    """Whole-type summary returned by Outline.describe()."""
    type_name: str
    plural_type_name: str
    convention: ConventionKind
    properties: list[PropertySummary] = []
    methods: list[MethodSummary] = []
