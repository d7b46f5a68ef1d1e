from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .ast_nodes import AstNode


class Severity(str, Enum):
    ERROR = "error"


@dataclass(frozen=True)
class Position:
    """Zero-based line/character pair"""

    line: int
    character: int


@dataclass(frozen=True)
class Range:
    """Half-open range between two positions"""

    start: Position
    end: Position


@dataclass(frozen=True)
class AstError:
    """A positioned diagnostic found while analysing an expression"""

    range: Range
    message: str
    rule_id: str = "analysis"
    severity: Severity = Severity.ERROR


@dataclass(frozen=True)
class AnalysisResult:
    errors: Tuple[AstError, ...]
    ast_root: Optional[AstNode] = None
    value: Optional[float] = None

    def __post_init__(self):
        if self.errors and self.value is not None:
            raise ValueError("an analysis with errors cannot carry a value")

    @property
    def has_value(self) -> bool:
        return self.value is not None
