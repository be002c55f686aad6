from dataclasses import dataclass, field
from typing import Dict, Iterable, Tuple

from .identifiers import Action, Controller


@dataclass(frozen=True)
class ActionProps:
    id: Action
    discrete: bool = True  # discrete actions have no starts/ends states


def _ordered_unique(actions: Iterable[Action]) -> Tuple[Action, ...]:
    return tuple(dict.fromkeys(actions))


@dataclass
class AuthorityTuple:
    """
    Who may issue which control actions, and the properties of each action.

    Authorized-action sets are kept as insertion-ordered tuples without
    duplicates so every traversal over the tuple is reproducible.
    Consistency between the two maps is NOT checked here, see
    ucca.validation.authority_validator.
    """
    controllers: Dict[Controller, Tuple[Action, ...]] = field(default_factory=dict)
    actions: Dict[Action, ActionProps] = field(default_factory=dict)

    def __post_init__(self):
        self.controllers = {
            controller: _ordered_unique(actions)
            for controller, actions in self.controllers.items()
        }
        self.actions = dict(self.actions)

    @property
    def edge_count(self) -> int:
        return sum(len(actions) for actions in self.controllers.values())
