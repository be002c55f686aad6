"""
Authority Validator - Checks that an authority tuple is internally consistent.

Two independent passes, both always run:
- every action a controller is authorized for has declared properties
- every declared action is authorized by at least one controller

All violations are collected and reported together.
"""

import logging
from typing import List, Set

from ucca.ir.authority import AuthorityTuple
from ucca.ir.errors import ValidationIssue
from ucca.ir.identifiers import Action
from ucca.ir.validation import ValidationResult

logger = logging.getLogger(__name__)


class AuthorityValidator:
    """
    Usage:
        result = AuthorityValidator().validate(authority)
        result.raise_for_errors()
    """

    def validate(self, authority: AuthorityTuple) -> ValidationResult:
        issues: List[ValidationIssue] = []
        issues.extend(self._check_undeclared_actions(authority))
        issues.extend(self._check_orphan_actions(authority))

        stats = {
            "controllers": len(authority.controllers),
            "actions": len(authority.actions),
            "authority_edges": authority.edge_count,
        }

        if issues:
            logger.warning(
                "Authority tuple rejected with %d issue(s)", len(issues)
            )
            return ValidationResult.failure(issues, stats)
        return ValidationResult.success(stats)

    def _check_undeclared_actions(self, authority: AuthorityTuple) -> List[ValidationIssue]:
        issues = []
        for controller, actions in authority.controllers.items():
            for action in actions:
                if action not in authority.actions:
                    issues.append(ValidationIssue(
                        level="authority",
                        message=(
                            f"No action properties provided for {action}, "
                            f"but was given in controller {controller}."
                        ),
                        object_id=str(action),
                    ))
        return issues

    def _check_orphan_actions(self, authority: AuthorityTuple) -> List[ValidationIssue]:
        authorized: Set[Action] = {
            action
            for actions in authority.controllers.values()
            for action in actions
        }
        return [
            ValidationIssue(
                level="declaration",
                message=f"No controller defines action {action}",
                object_id=str(action),
            )
            for action in authority.actions
            if action not in authorized
        ]


def validate_authority(authority: AuthorityTuple) -> ValidationResult:
    return AuthorityValidator().validate(authority)
