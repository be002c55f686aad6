from dataclasses import dataclass
from typing import List


@dataclass
class ValidationIssue:
    level: str       # "authority" | "declaration"
    message: str
    object_id: str


class ValidationError(Exception):
    """
    The authority tuple is inconsistent.

    Carries every violation found, never only the first. The message is the
    newline-joined list of issue messages.
    """

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = list(issues)
        super().__init__("\n".join(issue.message for issue in self.issues))

    @property
    def messages(self) -> List[str]:
        return [issue.message for issue in self.issues]


class ContractViolation(RuntimeError):
    """Internal invariant broken during enumeration. Not recoverable."""
