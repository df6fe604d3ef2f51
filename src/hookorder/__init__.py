"""
Public API for the hookorder package.
"""

from .checker import RULE_META, check, check_file
from .models import (
    ComponentResult,
    OrderReport,
    OrderViolation,
    SourceLocation,
)
from .ordering import CANONICAL_ORDER, CATEGORY_LABELS, Category

__all__ = [
    "check",
    "check_file",
    "RULE_META",
    "Category",
    "CANONICAL_ORDER",
    "CATEGORY_LABELS",
    "ComponentResult",
    "OrderReport",
    "OrderViolation",
    "SourceLocation",
]
