"""
Component discovery over an ESTree.

A component is recognized by naming convention only:

- ``function Name() { ... }`` whose name starts with an uppercase letter
- ``const Name = () => { ... }`` / ``const Name = function () { ... }``
  whose binding name starts with an uppercase letter

Discovery visits the WHOLE tree (exports, nested scopes, class bodies),
like a linter visitor would. Components with an expression body
(``const Name = () => <div />``) have no statement list and are skipped.
"""

from __future__ import annotations

import re
from typing import Any, Iterator

from ..logging import logger
from .models import ComponentBody
from .shapes import identifier_name, location_of, node_type

COMPONENT_NAME_PATTERN = re.compile(r"^[A-Z]")

_FUNCTION_VALUE_TYPES = frozenset({"ArrowFunctionExpression", "FunctionExpression"})

# Positional/comment metadata never contains statements.
_SKIPPED_KEYS = frozenset({
    "loc",
    "range",
    "start",
    "end",
    "extra",
    "comments",
    "tokens",
    "leadingComments",
    "trailingComments",
    "innerComments",
})


def is_component_name(name: Any) -> bool:
    return isinstance(name, str) and COMPONENT_NAME_PATTERN.match(name) is not None


def iter_nodes(tree: Any) -> Iterator[dict]:
    """Yield every node of the tree in source (pre-)order."""
    stack = [tree]
    while stack:
        current = stack.pop()
        if isinstance(current, list):
            stack.extend(reversed(current))
            continue
        if not isinstance(current, dict):
            continue
        if node_type(current) is not None:
            yield current
        children = [
            value
            for key, value in current.items()
            if key not in _SKIPPED_KEYS and isinstance(value, (dict, list))
        ]
        stack.extend(reversed(children))


def _block_statements(function_node: Any) -> list | None:
    body = function_node.get("body") if isinstance(function_node, dict) else None
    if node_type(body) != "BlockStatement":
        return None
    statements = body.get("body")
    return statements if isinstance(statements, list) else None


class ComponentDiscovery:
    """Find component functions and hand out their statement lists."""

    def discover(self, tree: Any) -> list[ComponentBody]:
        """
        Collect every component body in the tree.

        Args:
            tree: ESTree root (``Program`` or Babel ``File``) or any subtree

        Returns:
            Component bodies in source order
        """
        components = []
        for node in iter_nodes(tree):
            kind = node_type(node)
            if kind == "FunctionDeclaration":
                components.extend(self._from_function_declaration(node))
            elif kind == "VariableDeclaration":
                components.extend(self._from_variable_declaration(node))
        logger.debug(f"Discovered {len(components)} component(s)")
        return components

    def _from_function_declaration(self, node: dict) -> list[ComponentBody]:
        # ``export default function () {}`` has no id
        name = identifier_name(node.get("id"))
        if not is_component_name(name):
            return []
        statements = _block_statements(node)
        if statements is None:
            return []
        return [ComponentBody(name=name, statements=statements, location=location_of(node))]

    def _from_variable_declaration(self, node: dict) -> list[ComponentBody]:
        declarations = node.get("declarations")
        if not isinstance(declarations, list):
            return []
        found = []
        for declarator in declarations:
            if not isinstance(declarator, dict):
                continue
            name = identifier_name(declarator.get("id"))
            init = declarator.get("init")
            if not is_component_name(name) or node_type(init) not in _FUNCTION_VALUE_TYPES:
                continue
            statements = _block_statements(init)
            if statements is None:
                continue
            found.append(ComponentBody(name=name, statements=statements, location=location_of(declarator)))
        return found
