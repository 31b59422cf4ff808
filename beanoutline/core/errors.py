"""Error Hierarchy: typed, categorized exceptions for all outline failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - All errors are deterministic and caller-visible: none is retried internally
    - to_dict() produces a uniform envelope for callers that log or forward errors

Design Decisions:
    - Single hierarchy with OutlineError base: callers catch one type for all failures
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    type_name: str | None = None
    member_name: str | None = None
    debug_info: dict[str, Any] | None = None


class OutlineError(Exception):
    """Base exception for all outline errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "type_name": self.context.type_name,
                    "member_name": self.context.member_name,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Build-time Errors ──────────────────────────────────────────

class ModelConflictError(OutlineError):
    """Getter/setter candidates for one property cannot be reconciled."""
    def __init__(self, message: str, property_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.member_name = ctx.member_name or property_name
        super().__init__(
            message, "MODEL_CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.property_name = property_name


# ─── Lookup Errors ──────────────────────────────────────────────

class UnknownMemberError(OutlineError):
    """A proxy call, handle or name does not resolve to a known member."""
    def __init__(self, member: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.member_name = ctx.member_name or member
        type_part = f" on {ctx.type_name}" if ctx.type_name else ""
        super().__init__(
            f"Unknown member '{member}'{type_part}",
            "UNKNOWN_MEMBER", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx,
        )
        self.member = member


# ─── Access Errors ──────────────────────────────────────────────

class NoGetterError(OutlineError):
    """Property is write-only."""
    def __init__(self, property_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.member_name = ctx.member_name or property_name
        super().__init__(
            f"Property '{property_name}' has no getter",
            "NO_GETTER", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx,
        )
        self.property_name = property_name


class NoSetterError(OutlineError):
    """Property is read-only."""
    def __init__(self, property_name: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.member_name = ctx.member_name or property_name
        super().__init__(
            f"Property '{property_name}' has no setter",
            "NO_SETTER", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx,
        )
        self.property_name = property_name


class TypeCoercionError(OutlineError):
    """Value cannot be converted to the property's native type."""
    def __init__(
        self,
        target_type: str,
        value: Any,
        reason: str | None = None,
        context: ErrorContext | None = None,
    ):
        suffix = f": {reason}" if reason else ""
        super().__init__(
            f"Cannot coerce {value!r} to {target_type}{suffix}",
            "TYPE_COERCION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context,
        )
        self.target_type = target_type
        self.value = value
