from dataclasses import dataclass, field
from typing import Dict, List

from .errors import ValidationError, ValidationIssue


@dataclass
class ValidationResult:
    is_valid: bool
    errors: List[ValidationIssue]
    stats: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def success(cls, stats: Dict[str, int] | None = None):
        return cls(is_valid=True, errors=[], stats=stats or {})

    @classmethod
    def failure(cls, errors: List[ValidationIssue], stats: Dict[str, int] | None = None):
        return cls(is_valid=False, errors=errors, stats=stats or {})

    def raise_for_errors(self) -> None:
        if self.errors:
            raise ValidationError(self.errors)

    def to_dict(self) -> dict:
        return {
            "is_valid": self.is_valid,
            "errors": [issue.message for issue in self.errors],
            "stats": self.stats,
        }
