"""Semantic AST for calculator expressions.

Four node kinds, each owning its children. Every node keeps the source span of
the token that produced it: the literal for numbers, the operator for unary and
binary nodes, the function name for calls.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class UnaryOperator(str, Enum):
    NEGATE = "-"
    PLUS = "+"


class BinaryOperator(str, Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


@dataclass(frozen=True)
class Span:
    """Half-open [start, end) character offsets into the source"""

    start: int
    end: int

    def text_of(self, source: str) -> str:
        return source[self.start : self.end]


@dataclass(frozen=True)
class NumberNode:
    span: Span


@dataclass(frozen=True)
class UnaryOpNode:
    operator: UnaryOperator
    operand: Optional["AstNode"]
    span: Span


@dataclass(frozen=True)
class BinaryOpNode:
    operator: BinaryOperator
    left: Optional["AstNode"]
    right: Optional["AstNode"]
    span: Span


@dataclass(frozen=True)
class FunctionCallNode:
    name: str
    argument: Optional["AstNode"]
    span: Span


AstNode = Union[NumberNode, UnaryOpNode, BinaryOpNode, FunctionCallNode]
