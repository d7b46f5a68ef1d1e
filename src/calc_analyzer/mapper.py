"""Builds the semantic AST from a calculator parse tree.

The grammar encodes precedence as ``operand (operator operand)*``. The mapper
folds each repetition into a left-associative chain of binary nodes and drops
the grouping and wrapper nodes that only shape the parse tree.
"""

from typing import Callable, Dict, Optional

from calc_grammar import OPERATOR_KINDS, NodeKind, ParseTreeWalker
from parsimonious.nodes import Node

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

BINARY_OPERATORS = {
    NodeKind.PLUS: BinaryOperator.ADD,
    NodeKind.MINUS: BinaryOperator.SUBTRACT,
    NodeKind.MULTIPLY: BinaryOperator.MULTIPLY,
    NodeKind.DIVIDE: BinaryOperator.DIVIDE,
}

UNARY_OPERATORS = {
    NodeKind.PLUS: UnaryOperator.PLUS,
    NodeKind.MINUS: UnaryOperator.NEGATE,
}

# Alternatives of the factor rule, in the order they are tried
FACTOR_ALTERNATIVES = (
    NodeKind.FUNCTION_CALL,
    NodeKind.UNARY,
    NodeKind.NUMBER,
    NodeKind.PAREN_EXPR,
)


def _span(node: Node) -> Span:
    return Span(node.start, node.end)


def _find_operator(node: Node) -> Optional[Node]:
    return ParseTreeWalker.find_first(node, lambda n: NodeKind.of(n) in OPERATOR_KINDS)


class AstMapper:
    """Maps parse tree nodes onto semantic AST nodes"""

    def __init__(self):
        self._handlers: Dict[NodeKind, Callable[[Node], Optional[AstNode]]] = {
            NodeKind.CALCULATION: self._map_calculation,
            NodeKind.EXPRESSION: lambda node: self._map_chain(node, NodeKind.TERM, NodeKind.SUM_TAIL),
            NodeKind.TERM: lambda node: self._map_chain(node, NodeKind.FACTOR, NodeKind.PRODUCT_TAIL),
            NodeKind.UNARY: self._map_unary,
            NodeKind.FUNCTION_CALL: self._map_function_call,
            NodeKind.PAREN_EXPR: self._map_paren_expr,
            NodeKind.FACTOR: self._map_factor,
            NodeKind.NUMBER: self._map_number,
        }

    def to_ast(self, node: Node) -> Optional[AstNode]:
        """Map a parse tree node; None if the node has no semantic counterpart"""
        handler = self._handlers.get(NodeKind.of(node))
        if handler is None:
            return None
        return handler(node)

    def _map_calculation(self, node: Node) -> Optional[AstNode]:
        expression = ParseTreeWalker.get_child_of_kind(node, NodeKind.EXPRESSION)
        if expression is None:
            return None
        return self.to_ast(expression)

    def _map_chain(self, node: Node, operand_kind: NodeKind, tail_kind: NodeKind) -> Optional[AstNode]:
        first = ParseTreeWalker.get_child_of_kind(node, operand_kind)
        if first is None:
            return None

        current = self.to_ast(first)
        tail = ParseTreeWalker.get_child_of_kind(node, tail_kind)
        if tail is None:
            return current

        for step in tail.children:
            operator = _find_operator(step)
            operand = ParseTreeWalker.find_first_of_kind(step, operand_kind)
            if operator is None or operand is None:
                continue
            current = BinaryOpNode(
                operator=BINARY_OPERATORS[NodeKind.of(operator)],
                left=current,
                right=self.to_ast(operand),
                span=_span(operator),
            )
        return current

    def _map_unary(self, node: Node) -> Optional[AstNode]:
        operator = _find_operator(node)
        operand = ParseTreeWalker.find_first_of_kind(node, NodeKind.FACTOR)
        if operator is None or operand is None:
            return None
        return UnaryOpNode(
            operator=UNARY_OPERATORS[NodeKind.of(operator)],
            operand=self.to_ast(operand),
            span=_span(operator),
        )

    def _map_function_call(self, node: Node) -> Optional[AstNode]:
        name = ParseTreeWalker.find_first_of_kind(node, NodeKind.FUNCTION_NAME)
        argument = ParseTreeWalker.find_first_of_kind(node, NodeKind.EXPRESSION)
        if name is None or argument is None:
            return None
        return FunctionCallNode(name=name.text, argument=self.to_ast(argument), span=_span(name))

    def _map_paren_expr(self, node: Node) -> Optional[AstNode]:
        expression = ParseTreeWalker.find_first_of_kind(node, NodeKind.EXPRESSION)
        if expression is None:
            return None
        return self.to_ast(expression)

    def _map_factor(self, node: Node) -> Optional[AstNode]:
        for kind in FACTOR_ALTERNATIVES:
            child = ParseTreeWalker.get_child_of_kind(node, kind)
            if child is not None:
                return self.to_ast(child)
        return None

    def _map_number(self, node: Node) -> AstNode:
        return NumberNode(span=_span(node))
