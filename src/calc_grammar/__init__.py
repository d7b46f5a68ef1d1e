from .ast_walker import ParseTreeWalker
from .grammar import CALC_GRAMMAR
from .node_types import OPERATOR_KINDS, NodeKind, ParseOutcome
from .parser import CalcParser

__all__ = [
    "CALC_GRAMMAR",
    "OPERATOR_KINDS",
    "CalcParser",
    "NodeKind",
    "ParseOutcome",
    "ParseTreeWalker",
]
