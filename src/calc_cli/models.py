from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Severity(str, Enum):
    ERROR = "ERROR"


class LintIssue(BaseModel):
    severity: Severity
    file_path: str
    line_number: int
    column: int
    end_line_number: int
    end_column: int
    rule_id: str
    message: str


class FileReport(BaseModel):
    file_path: str
    value: Optional[float] = None
    issues: List[LintIssue] = Field(default_factory=list)


class LintReport(BaseModel):
    files: List[FileReport] = Field(default_factory=list)

    @property
    def error_count(self) -> int:
        return sum(1 for f in self.files for i in f.issues if i.severity == Severity.ERROR)
