"""
Output records of the UCCA Identification Algorithm.

Four variants, one per row of the case table (Kopeikin 2024, Table 4-14):

    type      abstraction  states
    2a.1-2    team         provided / not provided
    2b.1-2    controller   provided / not provided
    2a.3-4    team         starts / ends
    2b.3-4    controller   starts / ends

Each variant carries fixed class-level tags so consumers can match on
either the class or the `type` string. Consumers must handle all four
variants and finish with assert_never.

The not-provided state serializes as "not provided" (with a space).
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Literal, Tuple, Union

from .identifiers import Action, Controller


class ProvidedActionState(str, Enum):
    PROVIDED = "provided"
    NOT_PROVIDED = "not provided"


class TemporalActionState(str, Enum):
    STARTS = "starts"
    ENDS = "ends"


ActionState = Union[ProvidedActionState, TemporalActionState]

AbstractionType = Literal["2a", "2b"]
UCCATypes = Literal["1-2", "3-4"]


@dataclass(frozen=True)
class ProvidedActionsUCCA:
    """Abstraction 2a, types 1-2: the team provides/omits `action` vs. other actions."""
    type: ClassVar[str] = "2a.1-2"
    abstraction_type: ClassVar[AbstractionType] = "2a"
    ucca_types: ClassVar[UCCATypes] = "1-2"

    action: Action
    other_actions: Tuple[Action, ...]
    action_state: ProvidedActionState
    # state at least one of other_actions is in
    other_actions_state: ProvidedActionState


@dataclass(frozen=True)
class ProvidedSharedActionsUCCA:
    """Abstraction 2b, types 1-2: `controller` vs. the other controllers of `action`."""
    type: ClassVar[str] = "2b.1-2"
    abstraction_type: ClassVar[AbstractionType] = "2b"
    ucca_types: ClassVar[UCCATypes] = "1-2"

    action: Action
    controller: Controller
    other_controllers: Tuple[Controller, ...]
    action_state: ProvidedActionState
    # state of `action` for at least one of other_controllers
    other_actions_state: ProvidedActionState


@dataclass(frozen=True)
class TemporalActionsUCCA:
    type: ClassVar[str] = "2a.3-4"
    abstraction_type: ClassVar[AbstractionType] = "2a"
    ucca_types: ClassVar[UCCATypes] = "3-4"

    action: Action
    other_actions: Tuple[Action, ...]
    action_state: TemporalActionState
    other_actions_state: TemporalActionState


@dataclass(frozen=True)
class TemporalSharedActionsUCCA:
    type: ClassVar[str] = "2b.3-4"
    abstraction_type: ClassVar[AbstractionType] = "2b"
    ucca_types: ClassVar[UCCATypes] = "3-4"

    action: Action
    controller: Controller
    other_controllers: Tuple[Controller, ...]
    action_state: TemporalActionState
    other_actions_state: TemporalActionState


UCCA = Union[
    ProvidedActionsUCCA,
    ProvidedSharedActionsUCCA,
    TemporalActionsUCCA,
    TemporalSharedActionsUCCA,
]
