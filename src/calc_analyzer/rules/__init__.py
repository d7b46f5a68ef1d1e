from .base import BaseRule
from .syntax_rules import MissingOperandRule, ParenthesisBalanceRule

__all__ = ["BaseRule", "MissingOperandRule", "ParenthesisBalanceRule"]
