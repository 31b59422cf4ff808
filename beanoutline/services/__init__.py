"""Services Layer: stateful orchestration around the pure core.

Invariants:
    - The process-wide Outline cache lives here and nowhere else
"""
