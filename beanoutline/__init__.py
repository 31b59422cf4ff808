"""Bean Outline Package: structural introspection of bean-style Python classes.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, e.g.
      `from beanoutline.services.outline_builder import OutlineBuilder`
"""
