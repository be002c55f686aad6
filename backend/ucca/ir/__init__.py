from .identifiers import Action, Controller
from .authority import ActionProps, AuthorityTuple
from .disjoint_set import DisjointSet, InterchangeableControllers
from .errors import ContractViolation, ValidationError, ValidationIssue
from .validation import ValidationResult
from .ucca import (
    UCCA,
    ActionState,
    ProvidedActionState,
    ProvidedActionsUCCA,
    ProvidedSharedActionsUCCA,
    TemporalActionState,
    TemporalActionsUCCA,
    TemporalSharedActionsUCCA,
)

__all__ = [
    "Action",
    "Controller",
    "ActionProps",
    "AuthorityTuple",
    "DisjointSet",
    "InterchangeableControllers",
    "ContractViolation",
    "ValidationError",
    "ValidationIssue",
    "ValidationResult",
    "UCCA",
    "ActionState",
    "ProvidedActionState",
    "ProvidedActionsUCCA",
    "ProvidedSharedActionsUCCA",
    "TemporalActionState",
    "TemporalActionsUCCA",
    "TemporalSharedActionsUCCA",
]
