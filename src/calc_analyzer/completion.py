from dataclasses import dataclass
from typing import List

from .models import Position
from .position import position_to_offset


@dataclass(frozen=True)
class FunctionCompletion:
    name: str
    description: str
    insert_text: str


@dataclass(frozen=True)
class Suggestion:
    label: str
    detail: str
    kind: str
    insert_text: str
    is_snippet: bool = False

    @classmethod
    def function_snippet(cls, completion: FunctionCompletion) -> "Suggestion":
        return cls(
            label=completion.name,
            detail=completion.description,
            kind="function",
            insert_text=completion.insert_text,
            is_snippet=True,
        )


FUNCTION_COMPLETIONS = (
    FunctionCompletion("sin", "Sine of an angle in radians", "sin($1)"),
    FunctionCompletion("sqrt", "Square root", "sqrt($1)"),
    FunctionCompletion("cos", "Cosine of an angle in radians", "cos($1)"),
    FunctionCompletion("tan", "Tangent of an angle in radians", "tan($1)"),
    FunctionCompletion("log", "Natural logarithm", "log($1)"),
)


class FunctionSuggester:
    """Suggests built-in function names for the word before the cursor"""

    def __init__(self, completions=FUNCTION_COMPLETIONS):
        self.completions = tuple(completions)

    def trigger_characters(self) -> List[str]:
        triggers = []
        for completion in self.completions:
            if completion.name and completion.name[0] not in triggers:
                triggers.append(completion.name[0])
        return triggers

    def suggest(self, text: str, position: Position) -> List[Suggestion]:
        offset = position_to_offset(text, position)
        if offset < 0:
            return []
        return self.suggest_prefix(_word_before(text, offset))

    def suggest_prefix(self, prefix: str) -> List[Suggestion]:
        prefix = prefix.lower()
        return [
            Suggestion.function_snippet(completion)
            for completion in self.completions
            if completion.name.startswith(prefix)
        ]


def _word_before(text: str, offset: int) -> str:
    start = offset
    while start > 0 and text[start - 1].isalpha():
        start -= 1
    return text[start:offset]
