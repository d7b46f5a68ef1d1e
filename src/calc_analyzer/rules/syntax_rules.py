from typing import List, Optional

from ..models import AstError
from .base import BaseRule

BINARY_OPERATORS = "+-*/"


class ParenthesisBalanceRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "unbalanced-parenthesis"

    @property
    def description(self) -> str:
        return "Every '(' must be closed and every ')' must close an open '('."

    def check(self, text: str) -> List[AstError]:
        errors = []
        stack: List[int] = []

        for index, char in enumerate(text):
            if char == "(":
                stack.append(index)
            elif char == ")":
                if not stack:
                    errors.append(
                        self._create_error(
                            text, index, index + 1,
                            "closing parenthesis without matching opening parenthesis",
                        )
                    )
                else:
                    stack.pop()

        # Innermost unclosed parenthesis first
        while stack:
            index = stack.pop()
            errors.append(self._create_error(text, index, index + 1, "opening parenthesis never closed"))

        return errors


class MissingOperandRule(BaseRule):
    @property
    def rule_id(self) -> str:
        return "missing-operand"

    @property
    def description(self) -> str:
        return "A binary operator must be followed by an operand."

    def check(self, text: str) -> List[AstError]:
        errors = []

        for index, char in enumerate(text):
            if char not in BINARY_OPERATORS:
                continue

            previous = _previous_non_space(text, index - 1)
            # Leading operators are signs, not binary operators
            if previous is None or not _is_operand_end(text[previous]):
                continue

            following = _next_non_space(text, index + 1)
            if following is None or text[following] in ")*/":
                errors.append(
                    self._create_error(
                        text, index, index + 1,
                        f"binary operator with no right-hand operand: {char}",
                    )
                )

        return errors


def _previous_non_space(text: str, index: int) -> Optional[int]:
    while index >= 0:
        if not text[index].isspace():
            return index
        index -= 1
    return None


def _next_non_space(text: str, index: int) -> Optional[int]:
    while index < len(text):
        if not text[index].isspace():
            return index
        index += 1
    return None


def _is_operand_end(char: str) -> bool:
    return char.isdigit() or char.isalpha() or char in ".)"
