from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from parsimonious.nodes import Node


class NodeKind(str, Enum):
    """Grammar rules that can tag a parse tree node"""

    CALCULATION = "calculation"
    EXPRESSION = "expression"
    SUM_TAIL = "sum_tail"
    SUM_STEP = "sum_step"
    TERM = "term"
    PRODUCT_TAIL = "product_tail"
    PRODUCT_STEP = "product_step"
    FACTOR = "factor"
    UNARY = "unary"
    FUNCTION_CALL = "function_call"
    PAREN_EXPR = "paren_expr"
    ADDITIVE_OP = "additive_op"
    MULTIPLICATIVE_OP = "multiplicative_op"
    SIGN = "sign"
    PLUS = "plus"
    MINUS = "minus"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    LPAREN = "lparen"
    RPAREN = "rparen"
    FUNCTION_NAME = "function_name"
    NUMBER = "number"
    WHITESPACE = "_"

    @classmethod
    def of(cls, node: Node) -> Optional["NodeKind"]:
        """Kind of a parse tree node, or None for anonymous nodes"""
        try:
            return cls(node.expr_name)
        except ValueError:
            return None


OPERATOR_KINDS = frozenset({NodeKind.PLUS, NodeKind.MINUS, NodeKind.MULTIPLY, NodeKind.DIVIDE})


@dataclass(frozen=True)
class ParseOutcome:
    """Result of running the grammar over a document

    ``expected`` lists the tokens the grammar tried, and did not find, at the
    furthest offset it reached.
    """

    succeeded: bool
    consumed_length: int
    total_length: int
    root: Optional[Node] = None
    expected: Tuple[str, ...] = ()
    too_deep: bool = False

    @property
    def is_fully_valid(self) -> bool:
        return self.succeeded and self.consumed_length == self.total_length
