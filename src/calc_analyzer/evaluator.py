import math
import operator
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from .ast_nodes import (
    AstNode,
    BinaryOperator,
    BinaryOpNode,
    FunctionCallNode,
    NumberNode,
    Span,
    UnaryOperator,
    UnaryOpNode,
)
from .models import AstError
from .position import to_range


def _periodic(func: Callable[[float], float]) -> Callable[[float], float]:
    # math raises on infinite arguments where IEEE 754 gives NaN
    return lambda x: func(x) if math.isfinite(x) else math.nan


@dataclass(frozen=True)
class FunctionRule:
    """How a built-in function is evaluated.

    ``rejects`` is the domain guard: when it returns True for the argument,
    ``message`` is reported instead of calling ``apply``.
    """

    apply: Callable[[float], float]
    rejects: Optional[Callable[[float], bool]] = None
    message: str = ""


FUNCTIONS: Dict[str, FunctionRule] = {
    "sin": FunctionRule(_periodic(math.sin)),
    "cos": FunctionRule(_periodic(math.cos)),
    "tan": FunctionRule(_periodic(math.tan)),
    "sqrt": FunctionRule(math.sqrt, lambda x: x < 0.0, "cannot take square root of a negative number"),
    "log": FunctionRule(math.log, lambda x: x <= 0.0, "cannot take logarithm of a non-positive number"),
}

BINARY_FUNCTIONS: Dict[BinaryOperator, Callable[[float, float], float]] = {
    BinaryOperator.ADD: operator.add,
    BinaryOperator.SUBTRACT: operator.sub,
    BinaryOperator.MULTIPLY: operator.mul,
    BinaryOperator.DIVIDE: operator.truediv,
}


class Evaluator:
    """Evaluates a semantic AST, collecting every error on the visited nodes.

    A failed subtree evaluates to None; ancestors pass the None along without
    adding errors of their own, so each defect is reported once.
    """

    def __init__(self, source: str, functions: Optional[Dict[str, FunctionRule]] = None):
        self.source = source
        self.functions = FUNCTIONS if functions is None else functions
        self.errors: List[AstError] = []

    def evaluate(self, node: Optional[AstNode]) -> Optional[float]:
        if isinstance(node, NumberNode):
            return self._evaluate_number(node)
        if isinstance(node, UnaryOpNode):
            return self._evaluate_unary(node)
        if isinstance(node, BinaryOpNode):
            return self._evaluate_binary(node)
        if isinstance(node, FunctionCallNode):
            return self._evaluate_function(node)
        return None

    def _evaluate_number(self, node: NumberNode) -> Optional[float]:
        try:
            return float(node.span.text_of(self.source))
        except ValueError:
            self._add_error(node.span, "cannot parse number", "invalid-number")
            return None

    def _evaluate_unary(self, node: UnaryOpNode) -> Optional[float]:
        operand = self.evaluate(node.operand)
        if operand is None:
            return None
        if node.operator is UnaryOperator.NEGATE:
            return -operand
        return operand

    def _evaluate_binary(self, node: BinaryOpNode) -> Optional[float]:
        # Chains fold to the left; walk the left spine instead of recursing into it
        spine = [node]
        while isinstance(spine[-1].left, BinaryOpNode):
            spine.append(spine[-1].left)

        value = self.evaluate(spine[-1].left)
        for current in reversed(spine):
            right = self.evaluate(current.right)
            if value is None or right is None:
                value = None
                continue
            value = self._apply_binary(current, value, right)
        return value

    def _apply_binary(self, node: BinaryOpNode, left: float, right: float) -> Optional[float]:
        func = BINARY_FUNCTIONS.get(node.operator)
        if func is None:
            self._add_error(node.span, "unknown binary operator", "unknown-operator")
            return None
        if node.operator is BinaryOperator.DIVIDE and right == 0.0:
            self._add_error(node.span, "division by zero", "division-by-zero")
            return None
        return func(left, right)

    def _evaluate_function(self, node: FunctionCallNode) -> Optional[float]:
        argument = self.evaluate(node.argument)
        if argument is None:
            return None

        rule = self.functions.get(node.name)
        if rule is None:
            self._add_error(node.span, f"unknown function: {node.name}", "unknown-function")
            return None
        if rule.rejects is not None and rule.rejects(argument):
            self._add_error(node.span, rule.message, "math-domain")
            return None
        return rule.apply(argument)

    def _add_error(self, span: Span, message: str, rule_id: str):
        self.errors.append(AstError(range=to_range(self.source, span.start, span.end), message=message, rule_id=rule_id))
