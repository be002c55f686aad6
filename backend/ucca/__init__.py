"""
UCCA identification engine.

Enumerates potential Unsafe Combinations of Control Actions for a
controller team from its authority tuple.
"""

from ucca.engine import UCCAIdentificationAlgorithm, split_into_teams
from ucca.ir import (
    Action,
    ActionProps,
    AuthorityTuple,
    Controller,
    ContractViolation,
    DisjointSet,
    InterchangeableControllers,
    ValidationError,
)

__all__ = [
    "UCCAIdentificationAlgorithm",
    "split_into_teams",
    "Action",
    "ActionProps",
    "AuthorityTuple",
    "Controller",
    "ContractViolation",
    "DisjointSet",
    "InterchangeableControllers",
    "ValidationError",
]
