"""
Statement-order checking for UI component bodies.

Classifies each top-level statement of a component into a category and
verifies that categories follow one fixed canonical order.
"""

from .models import (
    CANONICAL_ORDER,
    CATEGORY_LABELS,
    Category,
    ClassifiedStatement,
    ComponentBody,
    Declarator,
    ExpressionKind,
    ExpressionShape,
    Location,
    StatementKind,
    StatementShape,
    Violation,
    expected_order_labels,
    rank_of,
)

__all__ = [
    "Category",
    "CANONICAL_ORDER",
    "CATEGORY_LABELS",
    "ClassifiedStatement",
    "ComponentBody",
    "Declarator",
    "ExpressionKind",
    "ExpressionShape",
    "Location",
    "StatementKind",
    "StatementShape",
    "Violation",
    "expected_order_labels",
    "rank_of",
]
