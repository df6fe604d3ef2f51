"""
Statement classification for component bodies.

Category is NOT a property stored on a statement.
It is DERIVED from the statement's syntactic shape:

    Category : StatementShape → {state, derivedHook, plainValue, handler,
                                 effect, conditional, markupReturn} ∪ {None}

None means "unclassified": the statement is excluded from ordering and
neither helps nor hinders the check.

DETERMINATION METHOD
--------------------
Rules are evaluated in a FIXED priority order, first match wins.
The shapes overlap (a useState binding is also a binding, a handler
binding is also a binding), so the order is part of the semantics:

    1. state          const [a, setA] = useState(0)
    2. derivedHook    const b = useCustom()
    3. effect         useEffect(() => {}, [a])
    4. handler        function onClick() {} / const onClick = () => {}
    5. conditional    if (cond) return <Spinner />
    6. markupReturn   return <div />
    7. plainValue     any other binding declaration

Classification is FORM-based:
- identifier names, node kinds and declarator counts only
- no scope analysis (a local variable named ``useState`` still counts)
- no runtime values
"""

from __future__ import annotations

import re
from typing import Callable, Optional

from ..logging import logger
from .models import (
    Category,
    ClassifiedStatement,
    ExpressionKind,
    StatementKind,
    StatementShape,
)

STATE_HOOK = "useState"
EFFECT_HOOK = "useEffect"
BUILTIN_HOOKS = frozenset({STATE_HOOK, EFFECT_HOOK})

CUSTOM_HOOK_PATTERN = re.compile(r"^use[A-Z]")


def _single_call_init_name(statement: StatementShape) -> Optional[str]:
    declarator = statement.single_declarator
    if declarator is None or declarator.init is None:
        return None
    if declarator.init.kind != ExpressionKind.CALL:
        return None
    return declarator.init.callee_name


def is_state_binding(statement: StatementShape) -> bool:
    return _single_call_init_name(statement) == STATE_HOOK


def is_derived_hook_binding(statement: StatementShape) -> bool:
    callee = _single_call_init_name(statement)
    if callee is None or callee in BUILTIN_HOOKS:
        return False
    return CUSTOM_HOOK_PATTERN.match(callee) is not None


def is_effect_registration(statement: StatementShape) -> bool:
    expression = statement.expression
    return (
        statement.kind == StatementKind.EXPRESSION
        and expression is not None
        and expression.kind == ExpressionKind.CALL
        and expression.callee_name == EFFECT_HOOK
    )


def is_handler(statement: StatementShape) -> bool:
    if statement.kind == StatementKind.FUNCTION_DECLARATION:
        return True
    declarator = statement.single_declarator
    return declarator is not None and declarator.init is not None and declarator.init.is_function


def is_conditional_return(statement: StatementShape) -> bool:
    """
    ``if`` whose taken branch returns markup.

    The branch may be the return itself or a block holding a markup return
    among its direct statements. The ``else`` branch is never inspected.
    """
    if statement.kind != StatementKind.IF or statement.consequent is None:
        return False
    branch = statement.consequent
    if branch.kind == StatementKind.BLOCK:
        return any(child.returns_markup for child in branch.body)
    return branch.returns_markup


def is_markup_return(statement: StatementShape) -> bool:
    return statement.returns_markup


def is_plain_binding(statement: StatementShape) -> bool:
    return statement.kind == StatementKind.VARIABLE_DECLARATION


Rule = tuple[str, Callable[[StatementShape], bool], Category]


class StatementClassifier:
    """
    Assign a Category to a component-body statement.

    RULES is an ordered table of (name, predicate, category).
    Order is CRITICAL and MUST NOT be changed:

    - state and derivedHook before handler/plainValue:
      hook bindings are bindings too
    - conditional before markupReturn: a markup return nested in an ``if``
      belongs to the branch, not to the final return
    - plainValue last: it is the catch-all for declarations
    """

    RULES: tuple[Rule, ...] = (
        ("state", is_state_binding, Category.STATE),
        ("derived_hook", is_derived_hook_binding, Category.DERIVED_HOOK),
        ("effect", is_effect_registration, Category.EFFECT),
        ("handler", is_handler, Category.HANDLER),
        ("conditional", is_conditional_return, Category.CONDITIONAL),
        ("markup_return", is_markup_return, Category.MARKUP_RETURN),
        ("plain_value", is_plain_binding, Category.PLAIN_VALUE),
    )

    def classify(self, statement: StatementShape) -> Optional[Category]:
        """
        Classify one statement.

        Args:
            statement: Projected statement shape

        Returns:
            Category of the first matching rule, or None if no rule matches
        """
        for name, predicate, category in self.RULES:
            if predicate(statement):
                logger.debug(f"{statement.node_type or statement.kind.value} matched rule {name} -> {category.value}")
                return category
        return None

    def classify_all(self, statements: list[StatementShape]) -> list[ClassifiedStatement]:
        """Classify a body, dropping unclassified statements (order preserved)."""
        classified = []
        for statement in statements:
            category = self.classify(statement)
            if category is None:
                continue
            classified.append(ClassifiedStatement(category=category, statement=statement))
        return classified
