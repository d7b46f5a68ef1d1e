import logging
from collections import defaultdict
from typing import Dict, Tuple

from parsimonious.exceptions import ParseError
from parsimonious.expressions import Expression, Literal, Regex
from parsimonious.grammar import Grammar

from .grammar import CALC_GRAMMAR
from .node_types import ParseOutcome

logger = logging.getLogger(__name__)


def _describe(expr: Expression) -> str:
    if isinstance(expr, Regex):
        return expr.name
    return f'"{expr.literal}"'


class CalcParser:
    """Runs the calculator grammar and reports how much of the input it accepted"""

    def __init__(self, grammar: Grammar = CALC_GRAMMAR):
        self.grammar = grammar
        self.terminals = [expr for expr in grammar.values() if isinstance(expr, (Literal, Regex))]

    def parse_string(self, source: str) -> ParseOutcome:
        """Match the longest prefix of source the grammar accepts.

        A failed match yields an outcome with nothing consumed and no tree.
        Whenever input is left over, the outcome lists the tokens that would
        have let the grammar go further.
        """
        cache: Dict[int, Dict[int, object]] = defaultdict(dict)
        error = ParseError(source)
        try:
            root = self.grammar.default_rule.match_core(source, 0, cache, error)
        except RecursionError:
            logger.debug("input of length %d nests too deeply to parse", len(source))
            return ParseOutcome(succeeded=False, consumed_length=0, total_length=len(source), too_deep=True)

        if root is None:
            logger.debug("grammar rejected input at offset %d", error.pos)
            return ParseOutcome(
                succeeded=False,
                consumed_length=0,
                total_length=len(source),
                expected=self._expected_at(cache, error.pos),
            )

        expected: Tuple[str, ...] = ()
        if root.end < len(source):
            logger.debug("grammar stopped at offset %d of %d", root.end, len(source))
            expected = self._expected_at(cache, error.pos)
        return ParseOutcome(
            succeeded=True,
            consumed_length=root.end,
            total_length=len(source),
            root=root,
            expected=expected,
        )

    def _expected_at(self, cache: Dict[int, Dict[int, object]], pos: int) -> Tuple[str, ...]:
        # The match cache holds None for every expression that failed at a position
        expected = []
        for expr in self.terminals:
            attempts = cache.get(id(expr), {})
            if pos in attempts and attempts[pos] is None:
                expected.append(_describe(expr))
        return tuple(expected)
