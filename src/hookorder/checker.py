"""
Component Order Checker — deterministic statement-order linting.

Checks that every UI component function keeps its top-level statements
in one canonical order:

    useState → custom hook → variable/computed value → handler/method
             → useEffect → conditional rendering → JSX return

CRITICAL DESIGN PRINCIPLES
--------------------------

1. The checker consumes a syntax tree, it never parses source text.
   Input is an ESTree JSON object produced by an external JavaScript
   parser. Only the root is validated.

2. Classification is FORM-based.
   Categories depend on identifier names, node kinds and declarator
   counts. No scope analysis, no data flow, no hook legality checks.

3. One violation per component, at most.
   Once a body is out of order, the first drop in rank is reported
   against the nearest earlier higher-ranked statement and the rest of
   the body is not inspected.

4. Components are independent.
   No state crosses component bodies; results are deterministic.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

from pydantic import TypeAdapter

from .logging import logger
from .models.report import (
    ComponentResult,
    OrderReport,
    OrderViolation,
    RuleMeta,
    SourceLocation,
)
from .models.syntax import _SyntaxNode
from .ordering.classifier import StatementClassifier
from .ordering.discovery import ComponentDiscovery
from .ordering.models import (
    CATEGORY_LABELS,
    ComponentBody,
    Location,
    Violation,
    expected_order_labels,
)
from .ordering.shapes import ShapeBuilder
from .ordering.verifier import SequenceVerifier

MESSAGE_ID = "order"
EXPECTED_ORDER_SEPARATOR = " → "
MESSAGE_TEMPLATE = (
    "The '{current}' block is after a '{blocker}' block. "
    "'{current}' should come before all '{blocker}' blocks.\n"
    "Expected order: {expected_order}."
)

RULE_META = RuleMeta(
    name="order",
    type="suggestion",
    description=(
        "Enforce the order of useState, custom hooks, variables/computed values, methods, "
        "useEffect, conditional rendering, and JSX return in React function components."
    ),
    category="Best Practices",
    recommended=False,
    messages={MESSAGE_ID: MESSAGE_TEMPLATE},
)

_ROOT_ADAPTER = TypeAdapter(_SyntaxNode)


def expected_order_text() -> str:
    """Canonical order rendered for humans (``useState → ... → JSX return``)."""
    return EXPECTED_ORDER_SEPARATOR.join(expected_order_labels())


def render_message(violation: Violation) -> str:
    """Render the diagnostic message for a violation."""
    return MESSAGE_TEMPLATE.format(
        current=CATEGORY_LABELS[violation.category],
        blocker=CATEGORY_LABELS[violation.blocking_category],
        expected_order=expected_order_text(),
    )


class ComponentOrderChecker:
    """
    Checker for the canonical statement order of component functions.

    Check flow:
    1. Validate the tree root
    2. Discover component functions (naming convention)
    3. For each component body:
       a. Project statements into shapes
       b. Classify statements (unclassified ones are dropped)
       c. Verify canonical order, first violation only
    4. Aggregate into an OrderReport
    """

    def __init__(self):
        """Initialize all components."""
        self.discovery = ComponentDiscovery()
        self.shape_builder = ShapeBuilder()
        self.classifier = StatementClassifier()
        self.verifier = SequenceVerifier()

    @classmethod
    def check(cls, tree: Any, source: Optional[str] = None) -> OrderReport:
        """
        Check every component in a syntax tree.

        Args:
            tree: ESTree root as a JSON-compatible dict
            source: Optional source name echoed in the report

        Returns:
            OrderReport with per-component traces and violations

        Raises:
            pydantic.ValidationError: if ``tree`` is not a syntax node
        """
        _ROOT_ADAPTER.validate_python(tree)
        instance = cls()

        components = instance.discovery.discover(tree)
        results = [instance._check_component(component) for component in components]
        violations = [result.violation for result in results if result.violation is not None]

        logger.info(
            f"ComponentOrderChecker: {source or '<tree>'}: "
            f"{len(results)} component(s), {len(violations)} violation(s)"
        )
        return OrderReport(
            source=source,
            components=results,
            violations=violations,
            num_components=len(results),
            num_violations=len(violations),
            ok=not violations,
        )

    def check_body(self, statements: list[Any]) -> Optional[Violation]:
        """
        Check one component body given as a list of ESTree statement nodes.

        Returns:
            The first Violation, or None if the body is conformant
        """
        shapes = [self.shape_builder.statement(node) for node in statements]
        return self.verifier.verify(self.classifier.classify_all(shapes))

    def _check_component(self, component: ComponentBody) -> ComponentResult:
        shapes = [self.shape_builder.statement(node) for node in component.statements]
        classified = self.classifier.classify_all(shapes)
        violation = self.verifier.verify(classified)

        result = ComponentResult(
            name=component.name,
            location=self._to_source_location(component.location),
            num_statements=len(shapes),
            num_classified=len(classified),
            categories=[entry.category for entry in classified],
        )
        if violation is None:
            logger.info(f"  Component {component.name}: in order ({len(classified)} classified)")
            return result

        result.violation = self._to_order_violation(component.name, violation)
        logger.info(
            f"  Component {component.name}: "
            f"{violation.category.value} after {violation.blocking_category.value}"
        )
        return result

    @staticmethod
    def _to_source_location(location: Optional[Location]) -> Optional[SourceLocation]:
        if location is None:
            return None
        return SourceLocation(
            line=location.line,
            column=location.column,
            end_line=location.end_line,
            end_column=location.end_column,
        )

    def _to_order_violation(self, component: str, violation: Violation) -> OrderViolation:
        return OrderViolation(
            component=component,
            location=self._to_source_location(violation.offender.location),
            category=violation.category,
            blocking_category=violation.blocking_category,
            blocker_location=self._to_source_location(violation.blocker.location),
            message_id=MESSAGE_ID,
            message=render_message(violation),
            expected_order=expected_order_labels(),
        )


def check(tree: Any, source: Optional[str] = None) -> OrderReport:
    """Check every component in an ESTree dict."""
    return ComponentOrderChecker.check(tree, source=source)


def load_tree(path: str | Path) -> Any:
    """
    Load an ESTree JSON file.

    Raises:
        ValueError: if the file is not valid JSON
    """
    path = Path(path)
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid syntax tree JSON in {path}: {exc}") from exc


def check_file(path: str | Path) -> OrderReport:
    """Load an ESTree JSON file and check it."""
    return check(load_tree(path), source=str(path))
