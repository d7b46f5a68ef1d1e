from abc import ABC, abstractmethod

from ..models import AstError, Severity
from ..position import to_range


class BaseRule(ABC):
    """Abstract base class for checks run over the raw document text."""

    @property
    @abstractmethod
    def rule_id(self) -> str:
        """Unique rule identifier (e.g., 'missing-operand')."""
        pass

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def description(self) -> str:
        """Detailed description of what this rule checks."""
        return ""

    @abstractmethod
    def check(self, text: str) -> list[AstError]:
        """Run the check and return found errors."""
        pass

    # Helper method for consistent error creation
    def _create_error(self, text: str, start: int, end: int, message: str) -> AstError:
        return AstError(
            range=to_range(text, start, end),
            message=message,
            rule_id=self.rule_id,
            severity=self.severity,
        )
