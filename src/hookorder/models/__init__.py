from .report import (
    ComponentResult,
    OrderReport,
    OrderViolation,
    RuleMeta,
    SourceLocation,
)

__all__ = [
    "ComponentResult",
    "OrderReport",
    "OrderViolation",
    "RuleMeta",
    "SourceLocation",
]
