"""
Builds engine inputs from application-layer records.

Only record-level problems (repeated ids) are reported here; consistency of
the assembled authority tuple is checked by UCCAIdentificationAlgorithm on
construction.
"""

from collections import Counter
from typing import Iterable, List

from ucca.ir.authority import ActionProps, AuthorityTuple
from ucca.ir.disjoint_set import DisjointSet
from ucca.ir.errors import ValidationError, ValidationIssue
from ucca.ir.identifiers import Action, Controller
from ucca.schemas import ControlActionRecord, ControllerRecord


def _duplicate_ids(ids: Iterable[str], kind: str) -> List[ValidationIssue]:
    counts = Counter(ids)
    return [
        ValidationIssue(
            level="record",
            message=f"Duplicate {kind} id {record_id} ({count} records)",
            object_id=record_id,
        )
        for record_id, count in counts.items()
        if count > 1
    ]


def build_authority(
    controllers: Iterable[ControllerRecord],
    control_actions: Iterable[ControlActionRecord],
) -> AuthorityTuple:
    """
    Raises ValidationError listing every repeated controller or control
    action id, since later records would otherwise replace earlier ones.
    """
    controllers = list(controllers)
    control_actions = list(control_actions)

    issues = _duplicate_ids((record.id for record in controllers), "controller")
    issues.extend(_duplicate_ids((record.id for record in control_actions), "control action"))
    if issues:
        raise ValidationError(issues)

    return AuthorityTuple(
        controllers={
            Controller(record.id): tuple(Action(action_id) for action_id in record.actions)
            for record in controllers
        },
        actions={
            Action(record.id): ActionProps(id=Action(record.id), discrete=record.discrete)
            for record in control_actions
        },
    )


def build_interchangeable(groups: Iterable[Iterable[str]]) -> DisjointSet[Controller]:
    interchangeable: DisjointSet[Controller] = DisjointSet()
    for group in groups:
        members: List[Controller] = [Controller(controller_id) for controller_id in group]
        for member in members:
            interchangeable.add(member)
        for member in members[1:]:
            interchangeable.union(members[0], member)
    return interchangeable


def label_for(record: ControlActionRecord) -> str:
    """'verb object' when available, else the action id."""
    label = " ".join(part for part in (record.verb, record.object) if part)
    return label or record.id
