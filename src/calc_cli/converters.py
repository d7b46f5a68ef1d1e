from calc_analyzer.models import AstError

from .models import LintIssue


def ast_error_to_lint_issue(error: AstError, file_path: str) -> LintIssue:
    """Convert an internal dataclass error to an external Pydantic issue.

    Lines and columns are reported 1-based.
    """
    return LintIssue(
        severity=error.severity.value.upper(),  # dataclass uses 'error', Pydantic uses 'ERROR'
        file_path=file_path,
        line_number=error.range.start.line + 1,
        column=error.range.start.character + 1,
        end_line_number=error.range.end.line + 1,
        end_column=error.range.end.character + 1,
        rule_id=error.rule_id,
        message=error.message,
    )
