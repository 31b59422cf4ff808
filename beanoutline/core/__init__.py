"""Core Layer: pure outline logic (reflection, property model, proxies, coercion).

Invariants:
    - No module in core/ imports from services/ or infrastructure/
    - No process-wide mutable state lives in core/ (the build cache is in services/)

Design Decisions:
    - Functional core separated from the caching shell
"""
