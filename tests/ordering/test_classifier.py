from hookorder.ordering.classifier import StatementClassifier
from hookorder.ordering.models import Category
from hookorder.ordering.shapes import ShapeBuilder

from estree_nodes import (
    arrow,
    arrow_expression_body,
    array_pattern,
    binary,
    block,
    call,
    conditional_return,
    const,
    declaration,
    declarator,
    derived_hook_binding,
    effect_registration,
    expression_statement,
    fragment,
    function_declaration,
    function_expression,
    handler_binding,
    ident,
    if_statement,
    jsx,
    literal,
    markup_return,
    member,
    plain_binding,
    ret,
    state_binding,
    unclassified,
)


def _classify(node):
    return StatementClassifier().classify(ShapeBuilder().statement(node))


def test_canonical_examples_map_to_their_category():
    assert _classify(state_binding()) == Category.STATE
    assert _classify(derived_hook_binding()) == Category.DERIVED_HOOK
    assert _classify(plain_binding()) == Category.PLAIN_VALUE
    assert _classify(handler_binding()) == Category.HANDLER
    assert _classify(effect_registration()) == Category.EFFECT
    assert _classify(conditional_return()) == Category.CONDITIONAL
    assert _classify(markup_return()) == Category.MARKUP_RETURN


def test_use_state_with_plain_identifier_is_state():
    assert _classify(const("count", call("useState", literal(0)))) == Category.STATE


def test_member_callee_use_state_is_not_state():
    # React.useState(...) has no identifier callee, falls through to plain value
    assert _classify(const("a", call(member("React", "useState")))) == Category.PLAIN_VALUE


def test_two_declarators_never_match_hook_rules():
    node = declaration(
        declarator("a", call("useState", literal(0))),
        declarator("b", call("useCustom")),
    )
    assert _classify(node) == Category.PLAIN_VALUE


def test_custom_hook_requires_uppercase_after_use():
    assert _classify(const("x", call("useCustom"))) == Category.DERIVED_HOOK
    assert _classify(const("x", call("user"))) == Category.PLAIN_VALUE
    assert _classify(const("x", call("use"))) == Category.PLAIN_VALUE


def test_bound_use_effect_result_is_plain_value():
    assert _classify(const("cleanup", call("useEffect", arrow()))) == Category.PLAIN_VALUE


def test_effect_requires_bare_call_statement():
    assert _classify(expression_statement(call("useEffect", arrow()))) == Category.EFFECT
    assert _classify(expression_statement(call("useLayoutEffect", arrow()))) is None
    assert _classify(expression_statement(call(member("React", "useEffect")))) is None


def test_handlers_cover_declarations_and_function_values():
    assert _classify(function_declaration("handleClick")) == Category.HANDLER
    assert _classify(const("onClick", arrow())) == Category.HANDLER
    assert _classify(const("onClick", function_expression())) == Category.HANDLER
    assert _classify(const("render", arrow_expression_body(jsx()))) == Category.HANDLER


def test_destructured_handler_binding_is_still_a_handler():
    assert _classify(const(array_pattern("fn"), arrow())) == Category.HANDLER


def test_conditional_return_with_block_branch():
    node = if_statement(block(expression_statement(call("track")), ret(fragment())))
    assert _classify(node) == Category.CONDITIONAL


def test_conditional_return_of_non_markup_is_unclassified():
    assert _classify(if_statement(ret(literal(None)))) is None
    assert _classify(if_statement(block(ret(literal(None))))) is None


def test_conditional_ignores_else_branch_and_nested_blocks():
    assert _classify(if_statement(block(), alternate=ret(jsx()))) is None
    assert _classify(if_statement(block(block(ret(jsx()))))) is None


def test_markup_return_accepts_elements_and_fragments():
    assert _classify(ret(jsx())) == Category.MARKUP_RETURN
    assert _classify(ret(fragment())) == Category.MARKUP_RETURN
    assert _classify(ret({"type": "ParenthesizedExpression", "expression": jsx()})) == Category.MARKUP_RETURN


def test_non_markup_return_is_unclassified():
    assert _classify(ret(literal(None))) is None
    assert _classify(ret(None)) is None
    assert _classify(ret(ident("children"))) is None


def test_any_other_declaration_is_plain_value():
    assert _classify(plain_binding()) == Category.PLAIN_VALUE
    assert _classify(declaration(declarator("x", None), kind="let")) == Category.PLAIN_VALUE
    assert _classify(const(array_pattern("x", "y"), ident("pair"))) == Category.PLAIN_VALUE


def test_unmatched_statements_are_unclassified():
    assert _classify(unclassified()) is None
    assert _classify({"type": "ForOfStatement"}) is None
    assert _classify({"type": "TryStatement"}) is None
    assert _classify("not a node") is None


def test_classification_is_deterministic_and_position_independent():
    classifier = StatementClassifier()
    shape = ShapeBuilder().statement(derived_hook_binding())
    first = classifier.classify(shape)
    classifier.classify(ShapeBuilder().statement(state_binding()))
    assert classifier.classify(shape) == first == Category.DERIVED_HOOK


def test_classify_all_drops_unclassified_and_keeps_order():
    builder = ShapeBuilder()
    shapes = [builder.statement(node) for node in (unclassified(), plain_binding(), unclassified(), markup_return())]
    classified = StatementClassifier().classify_all(shapes)
    assert [entry.category for entry in classified] == [Category.PLAIN_VALUE, Category.MARKUP_RETURN]
    assert classified[0].statement is shapes[1]


def test_rule_table_order_is_fixed():
    names = [name for name, _, _ in StatementClassifier.RULES]
    assert names == [
        "state",
        "derived_hook",
        "effect",
        "handler",
        "conditional",
        "markup_return",
        "plain_value",
    ]


def test_computed_initializer_is_plain_value():
    assert _classify(const("total", binary("price", 2))) == Category.PLAIN_VALUE
