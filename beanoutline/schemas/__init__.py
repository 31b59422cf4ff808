"""Pydantic Schemas: serializable summaries of outlines.

Invariants:
    - Domain types from core/ used for enum fields
"""
