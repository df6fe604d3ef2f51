from hookorder.ordering.models import ExpressionKind, Location, StatementKind
from hookorder.ordering.shapes import ShapeBuilder, location_of

from estree_nodes import (
    array_pattern,
    call,
    conditional_return,
    const,
    declaration,
    declarator,
    jsx,
    member,
    ret,
    state_binding,
)


def test_variable_declaration_projects_declarators():
    shape = ShapeBuilder().statement(state_binding(line=4))
    assert shape.kind == StatementKind.VARIABLE_DECLARATION
    assert shape.single_declarator.name is None  # array pattern
    assert shape.single_declarator.init.kind == ExpressionKind.CALL
    assert shape.single_declarator.init.callee_name == "useState"
    assert shape.location == Location(line=4, column=2, end_line=4, end_column=30)


def test_single_declarator_is_none_for_multiple_declarators():
    shape = ShapeBuilder().statement(declaration(declarator("a", None), declarator("b", None)))
    assert len(shape.declarators) == 2
    assert shape.single_declarator is None


def test_identifier_binding_keeps_name():
    shape = ShapeBuilder().statement(const("value", call("compute")))
    assert shape.single_declarator.name == "value"


def test_member_callee_has_no_name():
    shape = ShapeBuilder().statement(const(array_pattern("a"), call(member("React", "useState"))))
    assert shape.single_declarator.init.callee_name is None


def test_if_statement_projects_taken_branch():
    shape = ShapeBuilder().statement(conditional_return())
    assert shape.kind == StatementKind.IF
    assert shape.consequent.kind == StatementKind.RETURN
    assert shape.consequent.returns_markup


def test_parenthesized_markup_is_transparent():
    wrapped = {"type": "ParenthesizedExpression", "expression": {"type": "ParenthesizedExpression", "expression": jsx()}}
    shape = ShapeBuilder().statement(ret(wrapped))
    assert shape.expression.kind == ExpressionKind.MARKUP_ELEMENT


def test_malformed_nodes_degrade_to_other():
    builder = ShapeBuilder()
    assert builder.statement(None).kind == StatementKind.OTHER
    assert builder.statement({"kind": "const"}).kind == StatementKind.OTHER
    assert builder.statement({"type": "VariableDeclaration"}).kind == StatementKind.OTHER


def test_location_of_requires_start_position():
    assert location_of({"type": "X"}) is None
    assert location_of({"type": "X", "loc": {"start": {"line": 3}}}) is None
    assert location_of({"type": "X", "loc": {"start": {"line": 3, "column": 1}}}) == Location(line=3, column=1)
