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
from .engine import AnalysisEngine
from .models import AnalysisResult, AstError, Position, Range, Severity
from .position import offset_to_position, position_to_offset
from .session import DocumentSession, DocumentState

__all__ = [
    "AnalysisEngine",
    "AnalysisResult",
    "AstError",
    "AstNode",
    "BinaryOpNode",
    "BinaryOperator",
    "DocumentSession",
    "DocumentState",
    "FunctionCallNode",
    "NumberNode",
    "Position",
    "Range",
    "Severity",
    "Span",
    "UnaryOpNode",
    "UnaryOperator",
    "offset_to_position",
    "position_to_offset",
]
