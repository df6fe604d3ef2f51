"""
Projection of ESTree statement nodes into StatementShape.

The checker never parses source text. It consumes the JSON tree produced by
an external JavaScript parser (``@babel/parser``, ``espree``, ``acorn-jsx``,
``esprima``) and reads only the handful of properties the ordering rules
need:

- statement kind
- declarator count, declared name, initializer kind
- callee identifier name of calls
- taken branch of ``if`` statements and the argument of ``return``

Node types the rules never mention map to OTHER. That is not an error:
an OTHER statement is simply left unclassified.
"""

from __future__ import annotations

from typing import Any, Optional

from loguru import logger

from .models import (
    Declarator,
    ExpressionKind,
    ExpressionShape,
    Location,
    StatementKind,
    StatementShape,
)

_STATEMENT_KINDS = {
    "VariableDeclaration": StatementKind.VARIABLE_DECLARATION,
    "FunctionDeclaration": StatementKind.FUNCTION_DECLARATION,
    "ExpressionStatement": StatementKind.EXPRESSION,
    "IfStatement": StatementKind.IF,
    "ReturnStatement": StatementKind.RETURN,
    "BlockStatement": StatementKind.BLOCK,
}

_EXPRESSION_KINDS = {
    "CallExpression": ExpressionKind.CALL,
    "ArrowFunctionExpression": ExpressionKind.ARROW_FUNCTION,
    "FunctionExpression": ExpressionKind.FUNCTION,
    "JSXElement": ExpressionKind.MARKUP_ELEMENT,
    "JSXFragment": ExpressionKind.MARKUP_FRAGMENT,
}

# Babel emits this wrapper only with ``createParenthesizedExpressions``.
_TRANSPARENT_WRAPPERS = {"ParenthesizedExpression"}


def node_type(node: Any) -> Optional[str]:
    """ESTree ``type`` of a node, or None when ``node`` is not a node."""
    if isinstance(node, dict):
        value = node.get("type")
        if isinstance(value, str):
            return value
    return None


def identifier_name(node: Any) -> Optional[str]:
    """Name of an ``Identifier`` node, None for anything else."""
    if node_type(node) != "Identifier":
        return None
    name = node.get("name")
    return name if isinstance(name, str) else None


def location_of(node: Any) -> Optional[Location]:
    """Read ESTree ``loc`` into a Location (None when absent)."""
    if not isinstance(node, dict):
        return None
    loc = node.get("loc")
    if not isinstance(loc, dict):
        return None
    start = loc.get("start") or {}
    end = loc.get("end") or {}
    line = start.get("line")
    column = start.get("column")
    if not isinstance(line, int) or not isinstance(column, int):
        return None
    end_line = end.get("line")
    end_column = end.get("column")
    return Location(
        line=line,
        column=column,
        end_line=end_line if isinstance(end_line, int) else None,
        end_column=end_column if isinstance(end_column, int) else None,
    )


class ShapeBuilder:
    """
    Build StatementShape / ExpressionShape values from raw ESTree dicts.

    Stateless; one instance can serve any number of component bodies.
    """

    def statement(self, node: Any) -> StatementShape:
        """Project one statement node."""
        raw_type = node_type(node)
        if raw_type is None:
            logger.warning(f"Non-node statement ignored: {type(node).__name__}")
            return StatementShape(kind=StatementKind.OTHER)

        kind = _STATEMENT_KINDS.get(raw_type, StatementKind.OTHER)
        location = location_of(node)

        if kind == StatementKind.VARIABLE_DECLARATION:
            declarations = node.get("declarations")
            if not isinstance(declarations, list):
                logger.warning("VariableDeclaration without declarations list treated as OTHER")
                return StatementShape(kind=StatementKind.OTHER, node_type=raw_type, location=location)
            return StatementShape(
                kind=kind,
                node_type=raw_type,
                declarators=tuple(self.declarator(d) for d in declarations),
                location=location,
            )

        if kind == StatementKind.FUNCTION_DECLARATION:
            return StatementShape(
                kind=kind,
                node_type=raw_type,
                name=identifier_name(node.get("id")),
                location=location,
            )

        if kind == StatementKind.EXPRESSION:
            return StatementShape(
                kind=kind,
                node_type=raw_type,
                expression=self.expression(node.get("expression")),
                location=location,
            )

        if kind == StatementKind.RETURN:
            argument = node.get("argument")
            return StatementShape(
                kind=kind,
                node_type=raw_type,
                expression=self.expression(argument) if argument is not None else None,
                location=location,
            )

        if kind == StatementKind.IF:
            consequent = node.get("consequent")
            return StatementShape(
                kind=kind,
                node_type=raw_type,
                consequent=self.statement(consequent) if consequent is not None else None,
                location=location,
            )

        if kind == StatementKind.BLOCK:
            body = node.get("body")
            if not isinstance(body, list):
                body = []
            return StatementShape(
                kind=kind,
                node_type=raw_type,
                body=tuple(self.statement(child) for child in body),
                location=location,
            )

        return StatementShape(kind=StatementKind.OTHER, node_type=raw_type, location=location)

    def declarator(self, node: Any) -> Declarator:
        """Project one ``VariableDeclarator``."""
        if not isinstance(node, dict):
            return Declarator(name=None)
        init = node.get("init")
        return Declarator(
            name=identifier_name(node.get("id")),
            init=self.expression(init) if init is not None else None,
        )

    def expression(self, node: Any) -> ExpressionShape:
        """Project an expression, looking through parenthesis wrappers."""
        while node_type(node) in _TRANSPARENT_WRAPPERS:
            node = node.get("expression")

        raw_type = node_type(node)
        kind = _EXPRESSION_KINDS.get(raw_type or "", ExpressionKind.OTHER)
        if kind == ExpressionKind.CALL:
            return ExpressionShape(kind=kind, callee_name=identifier_name(node.get("callee")))
        return ExpressionShape(kind=kind)
