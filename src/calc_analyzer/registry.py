from typing import Protocol

from .models import AstError


class TextRule(Protocol):
    """Protocol for a check over raw document text"""

    rule_id: str

    def check(self, text: str) -> list[AstError]: ...


class RuleRegistry:
    """Registry for managing and loading structural rules"""

    def __init__(self):
        self._rules: list[TextRule] = []
        self._load_builtin_rules()

    def register(self, rule: TextRule):
        self._rules.append(rule)

    def get_all_rules(self) -> list[TextRule]:
        return list(self._rules)

    def get_enabled_rules(self, select: list[str] | None = None, ignore: list[str] | None = None) -> list[TextRule]:
        """Rules whose id starts with one of select (all when empty) and is not ignored"""
        ignored = set(ignore or [])
        enabled = []
        for rule in self._rules:
            if rule.rule_id in ignored:
                continue
            if select and not any(rule.rule_id.startswith(prefix) for prefix in select):
                continue
            enabled.append(rule)
        return enabled

    def _load_builtin_rules(self):
        from .rules.syntax_rules import MissingOperandRule, ParenthesisBalanceRule

        self.register(ParenthesisBalanceRule())
        self.register(MissingOperandRule())


registry = RuleRegistry()
