"""
Data models for the component statement-order checker.

The canonical order is defined ONCE here and shared by the classifier,
the verifier and the reporting layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Optional


class Category(str, Enum):
    """
    Semantic category of a top-level statement in a component body.

    Declaration order of the members IS the canonical rank (0..6).
    """
    STATE = "state"                  # const [a, setA] = useState(0)
    DERIVED_HOOK = "derivedHook"     # const b = useCustom()
    PLAIN_VALUE = "plainValue"       # const c = a + 1
    HANDLER = "handler"              # const onClick = () => {}
    EFFECT = "effect"                # useEffect(() => {}, [a])
    CONDITIONAL = "conditional"      # if (!b) return <Spinner />
    MARKUP_RETURN = "markupReturn"   # return <div />


CANONICAL_ORDER: tuple[Category, ...] = tuple(Category)

CATEGORY_LABELS = MappingProxyType({
    Category.STATE: "useState",
    Category.DERIVED_HOOK: "custom hook",
    Category.PLAIN_VALUE: "variable/computed value",
    Category.HANDLER: "handler/method",
    Category.EFFECT: "useEffect",
    Category.CONDITIONAL: "conditional rendering",
    Category.MARKUP_RETURN: "JSX return",
})

_RANKS = MappingProxyType({category: rank for rank, category in enumerate(CANONICAL_ORDER)})


def rank_of(category: Category) -> int:
    """Canonical rank of a category (0 = must come first)."""
    return _RANKS[category]


def expected_order_labels() -> list[str]:
    """Human labels of the canonical order, first to last."""
    return [CATEGORY_LABELS[category] for category in CANONICAL_ORDER]


class StatementKind(Enum):
    """
    Syntactic kind of a statement, as far as ordering cares.

    Everything the rules never look at collapses into OTHER.
    """
    VARIABLE_DECLARATION = "variable_declaration"
    FUNCTION_DECLARATION = "function_declaration"
    EXPRESSION = "expression"
    IF = "if"
    RETURN = "return"
    BLOCK = "block"
    OTHER = "other"


class ExpressionKind(Enum):
    """Syntactic kind of an expression (initializer, call, return argument)."""
    CALL = "call"
    ARROW_FUNCTION = "arrow_function"
    FUNCTION = "function"
    MARKUP_ELEMENT = "markup_element"
    MARKUP_FRAGMENT = "markup_fragment"
    OTHER = "other"


FUNCTION_KINDS = frozenset({ExpressionKind.ARROW_FUNCTION, ExpressionKind.FUNCTION})
MARKUP_KINDS = frozenset({ExpressionKind.MARKUP_ELEMENT, ExpressionKind.MARKUP_FRAGMENT})


@dataclass(frozen=True)
class Location:
    """Source position of a node (1-based line, 0-based column)."""
    line: int
    column: int
    end_line: Optional[int] = None
    end_column: Optional[int] = None


@dataclass(frozen=True)
class ExpressionShape:
    """
    Structural projection of an expression.

    callee_name is set only for calls to a plain identifier;
    member callees such as ``React.useState`` leave it None.
    """
    kind: ExpressionKind
    callee_name: Optional[str] = None

    @property
    def is_markup(self) -> bool:
        return self.kind in MARKUP_KINDS

    @property
    def is_function(self) -> bool:
        return self.kind in FUNCTION_KINDS


@dataclass(frozen=True)
class Declarator:
    """
    One declarator of a binding declaration.

    name is None for destructuring patterns; init is None for ``let x;``.
    """
    name: Optional[str]
    init: Optional[ExpressionShape] = None


@dataclass(frozen=True)
class StatementShape:
    """
    Everything the classifier is allowed to read about a statement.

    - declarators: for VARIABLE_DECLARATION
    - expression: the expression of an EXPRESSION statement, or the argument
      of a RETURN (None for a bare ``return;``)
    - consequent: the taken branch of an IF
    - body: direct child statements of a BLOCK
    """
    kind: StatementKind
    node_type: str = ""
    declarators: tuple[Declarator, ...] = ()
    expression: Optional[ExpressionShape] = None
    consequent: Optional["StatementShape"] = None
    body: tuple["StatementShape", ...] = ()
    name: Optional[str] = None
    location: Optional[Location] = None

    @property
    def single_declarator(self) -> Optional[Declarator]:
        """The only declarator of a one-declarator binding, else None."""
        if self.kind != StatementKind.VARIABLE_DECLARATION or len(self.declarators) != 1:
            return None
        return self.declarators[0]

    @property
    def returns_markup(self) -> bool:
        return (
            self.kind == StatementKind.RETURN
            and self.expression is not None
            and self.expression.is_markup
        )


@dataclass(frozen=True)
class ClassifiedStatement:
    """A statement paired with the category the classifier assigned it."""
    category: Category
    statement: StatementShape

    @property
    def rank(self) -> int:
        return rank_of(self.category)


@dataclass(frozen=True)
class Violation:
    """
    First ordering violation found in a component body.

    offender: the statement whose rank dropped below an earlier one
    blocker: nearest earlier statement with a strictly higher rank
    """
    offender: StatementShape
    category: Category
    blocker: StatementShape
    blocking_category: Category


@dataclass
class ComponentBody:
    """
    A discovered component function and its top-level statement list.

    statements holds the raw tree nodes; they are only read, never mutated.
    """
    name: str
    statements: list[dict] = field(default_factory=list)
    location: Optional[Location] = None
