"""Split a document into the prefix the grammar accepted and the rejected rest."""

from dataclasses import dataclass
from typing import List

from calc_grammar import ParseOutcome

from .ast_nodes import Span

TOKEN_LEGEND = ("valid", "invalid", "function", "number", "operator")
VALID = 0
INVALID = 1


@dataclass(frozen=True)
class HighlightRegion:
    span: Span
    token_type: int

    @property
    def kind(self) -> str:
        return TOKEN_LEGEND[self.token_type]


def classify(outcome: ParseOutcome) -> List[HighlightRegion]:
    regions = []
    if outcome.consumed_length > 0:
        regions.append(HighlightRegion(Span(0, outcome.consumed_length), VALID))
    if outcome.consumed_length < outcome.total_length:
        regions.append(HighlightRegion(Span(outcome.consumed_length, outcome.total_length), INVALID))
    return regions


def semantic_tokens(outcome: ParseOutcome) -> List[int]:
    """Encode the regions as [delta_line, delta_start, length, token_type, modifiers] groups.

    Regions are kept on line 0 with offsets measured in characters from the
    start of the document.
    """
    data: List[int] = []
    previous_start = 0
    for region in classify(outcome):
        data.extend([0, region.span.start - previous_start, region.span.end - region.span.start, region.token_type, 0])
        previous_start = region.span.start
    return data
