"""Open-document store that keeps one analysis per document URI.

Edits replace the whole text of a document. Every open or change re-parses and
re-analyses the new text and hands the resulting diagnostics to an optional
publisher callback.
"""

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from calc_grammar import CalcParser, ParseOutcome

from .completion import FunctionSuggester, Suggestion
from .engine import AnalysisEngine
from .highlight import semantic_tokens
from .models import AnalysisResult, AstError, Position
from .position import to_range

logger = logging.getLogger(__name__)

Publisher = Callable[[str, List[AstError]], None]


@dataclass(frozen=True)
class DocumentState:
    uri: str
    content: str
    outcome: ParseOutcome
    analysis: AnalysisResult


def syntax_errors(content: str, outcome: ParseOutcome) -> List[AstError]:
    """Error covering the part of the input the grammar did not accept"""
    # Input too deep to parse is reported by the engine instead
    if outcome.too_deep or outcome.consumed_length >= outcome.total_length:
        return []
    if outcome.succeeded:
        message = "Invalid expression: unexpected characters"
    else:
        message = "Invalid expression"
    if outcome.expected:
        message += " Expected: " + ", ".join(outcome.expected)
    return [
        AstError(
            range=to_range(content, outcome.consumed_length, outcome.total_length),
            message=message,
            rule_id="syntax",
        )
    ]


class DocumentSession:
    """Thread-safe map of document URI to its latest analysis"""

    def __init__(self, engine: Optional[AnalysisEngine] = None, publisher: Optional[Publisher] = None):
        self.engine = engine or AnalysisEngine()
        self.parser = CalcParser()
        self.suggester = FunctionSuggester()
        self.publisher = publisher
        self._documents: Dict[str, DocumentState] = {}
        self._lock = threading.RLock()

    def open(self, uri: str, content: str) -> DocumentState:
        return self._update(uri, content)

    def change(self, uri: str, content: str) -> DocumentState:
        return self._update(uri, content)

    def close(self, uri: str) -> None:
        with self._lock:
            self._documents.pop(uri, None)

    def get(self, uri: str) -> Optional[DocumentState]:
        with self._lock:
            return self._documents.get(uri)

    def uris(self) -> List[str]:
        with self._lock:
            return sorted(self._documents)

    def diagnostics(self, uri: str) -> List[AstError]:
        state = self.get(uri)
        if state is None:
            return []
        return publish_diagnostics(state)

    def semantic_tokens(self, uri: str) -> List[int]:
        state = self.get(uri)
        if state is None:
            return []
        return semantic_tokens(state.outcome)

    def completion(self, uri: str, position: Position) -> List[Suggestion]:
        state = self.get(uri)
        if state is None:
            return []
        return self.suggester.suggest(state.content, position)

    def _update(self, uri: str, content: str) -> DocumentState:
        # Updates are applied and published in the order they arrive
        with self._lock:
            outcome = self.parser.parse_string(content)
            state = DocumentState(
                uri=uri,
                content=content,
                outcome=outcome,
                analysis=self.engine.analyze(content, outcome),
            )
            self._documents[uri] = state
            logger.debug("analysed %s: %d errors", uri, len(state.analysis.errors))

            if self.publisher is not None:
                self.publisher(uri, publish_diagnostics(state))
        return state


def publish_diagnostics(state: DocumentState) -> List[AstError]:
    return syntax_errors(state.content, state.outcome) + list(state.analysis.errors)
