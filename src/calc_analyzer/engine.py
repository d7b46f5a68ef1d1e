import logging
from typing import List, Optional

from calc_grammar import CalcParser, ParseOutcome

from .evaluator import Evaluator
from .mapper import AstMapper
from .models import AnalysisResult, AstError
from .position import to_range
from .registry import RuleRegistry, TextRule

logger = logging.getLogger(__name__)

TOO_DEEP_MESSAGE = "expression nested too deeply"


class AnalysisEngine:
    """Core engine for calculator expression analysis"""

    def __init__(self, registry: Optional[RuleRegistry] = None, rules: Optional[List[TextRule]] = None):
        self.registry = registry or RuleRegistry()
        self.rules = self.registry.get_all_rules() if rules is None else rules
        self.parser = CalcParser()
        self.mapper = AstMapper()

    def analyze(self, text: str, outcome: ParseOutcome, rules: Optional[List[TextRule]] = None) -> AnalysisResult:
        """Run the structural rules, then map and evaluate a cleanly parsed document.

        The value is only kept when no error was found in either phase.
        """
        errors: List[AstError] = []
        for rule in self.rules if rules is None else rules:
            errors.extend(rule.check(text))

        ast_root = None
        value = None
        if outcome.too_deep:
            errors.append(self._too_deep_error(text))
        elif outcome.root is not None and outcome.is_fully_valid and not errors:
            try:
                ast_root = self.mapper.to_ast(outcome.root)
                evaluator = Evaluator(text)
                value = evaluator.evaluate(ast_root)
            except RecursionError:
                logger.debug("expression too deep to map or evaluate")
                ast_root = None
                errors.append(self._too_deep_error(text))
            else:
                errors.extend(evaluator.errors)
        else:
            logger.debug(
                "skipping evaluation: fully_valid=%s, %d structural errors",
                outcome.is_fully_valid,
                len(errors),
            )

        if errors:
            value = None

        return AnalysisResult(errors=tuple(errors), ast_root=ast_root, value=value)

    def analyze_string(self, text: str, rules: Optional[List[TextRule]] = None) -> AnalysisResult:
        """Parse text with the calculator grammar and analyze it"""
        return self.analyze(text, self.parser.parse_string(text), rules=rules)

    def _too_deep_error(self, text: str) -> AstError:
        return AstError(range=to_range(text, 0, len(text)), message=TOO_DEEP_MESSAGE, rule_id="nesting-depth")
