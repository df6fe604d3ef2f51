"""
Public models for the component statement-order checker.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..ordering.models import Category


class SourceLocation(BaseModel):
    """
    Position of a node in the checked source (1-based line, 0-based column).
    """

    line: int = Field(description="1-based start line.")
    column: int = Field(description="0-based start column.")
    end_line: Optional[int] = Field(default=None, description="1-based end line, when known.")
    end_column: Optional[int] = Field(default=None, description="0-based end column, when known.")


class OrderViolation(BaseModel):
    """
    A single out-of-order statement inside a component.
    """

    component: str = Field(description="Name of the component function.")
    location: Optional[SourceLocation] = Field(
        default=None,
        description="Location of the offending statement.",
    )
    category: Category = Field(description="Category of the offending statement.")
    blocking_category: Category = Field(
        description="Category of the nearest earlier statement that should come after the offender.",
    )
    blocker_location: Optional[SourceLocation] = Field(
        default=None,
        description="Location of the blocking statement.",
    )
    message_id: str = Field(default="order", description="Stable diagnostic identifier.")
    message: str = Field(default="", description="Rendered human-readable diagnostic.")
    expected_order: list[str] = Field(
        default_factory=list,
        description="Labels of the full canonical order, first to last.",
    )


class ComponentResult(BaseModel):
    """
    Per-component check trace.
    """

    name: str = Field(description="Component function name.")
    location: Optional[SourceLocation] = Field(default=None, description="Location of the component.")
    num_statements: int = Field(default=0, description="Top-level statements in the body.")
    num_classified: int = Field(
        default=0,
        description="Statements that matched a category (the rest are ignored).",
    )
    categories: list[Category] = Field(
        default_factory=list,
        description="Categories of the classified statements in source order.",
    )
    violation: Optional[OrderViolation] = Field(
        default=None,
        description="First ordering violation, if any.",
    )


class OrderReport(BaseModel):
    """
    Aggregated result for one syntax tree (usually one source file).
    """

    source: Optional[str] = Field(default=None, description="Name of the checked source, if known.")
    components: list[ComponentResult] = Field(
        default_factory=list,
        description="Every discovered component in source order.",
    )
    violations: list[OrderViolation] = Field(
        default_factory=list,
        description="At most one violation per component.",
    )
    num_components: int = Field(default=0, description="Number of discovered components.")
    num_violations: int = Field(default=0, description="Number of reported violations.")
    ok: bool = Field(default=True, description="True when no component is out of order.")


class RuleMeta(BaseModel):
    """
    Descriptive metadata of the ordering rule.
    """

    name: str
    type: str
    description: str
    category: str
    recommended: bool = False
    messages: dict[str, str] = Field(default_factory=dict)
