"""
UCCA Identification Algorithm (Kopeikin 2024, p.100; case table 4-14, p.102).

Runs over a single controller team: a set of controllers sharing control of
at least one action. For every action the four rows of the case table are
walked in a fixed order and each potential UCCA is pushed to a sink.

Row 1  2a 1-2  4 per action, always
Row 3  2a 3-4  0-4 per action, pruned when the peer set would be empty
Row 2  2b 1-2  3 per (action, controller)
Row 4  2b 3-4  4 per (action, controller)
"""

import logging
from collections import Counter
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from ucca.engine.reverse_index import build_action_to_controllers
from ucca.ir.authority import AuthorityTuple
from ucca.ir.disjoint_set import DisjointSet
from ucca.ir.errors import ContractViolation
from ucca.ir.identifiers import Action, Controller
from ucca.ir.ucca import (
    UCCA,
    ProvidedActionState,
    ProvidedActionsUCCA,
    ProvidedSharedActionsUCCA,
    TemporalActionState,
    TemporalActionsUCCA,
    TemporalSharedActionsUCCA,
)
from ucca.validation.authority_validator import AuthorityValidator

logger = logging.getLogger(__name__)

PROVIDED_STATES = (ProvidedActionState.PROVIDED, ProvidedActionState.NOT_PROVIDED)
TEMPORAL_STATES = (TemporalActionState.STARTS, TemporalActionState.ENDS)

# Row 2 leaves out (not provided, provided): that case is produced from the
# perspective of the other controller which did provide the action.
SHARED_PROVIDED_CASES = (
    (ProvidedActionState.NOT_PROVIDED, ProvidedActionState.NOT_PROVIDED),
    (ProvidedActionState.PROVIDED, ProvidedActionState.PROVIDED),
    (ProvidedActionState.PROVIDED, ProvidedActionState.NOT_PROVIDED),
)


class UCCAIdentificationAlgorithm:
    """
    Enumerates potential UCCAs for one controller team.

    Construction validates the authority tuple (raising ValidationError with
    every violation) and builds the action -> controllers index. After that
    the instance is read-only; enumeration can be repeated and always yields
    the same sequence.

    Usage:
        algorithm = UCCAIdentificationAlgorithm(authority, DisjointSet())
        algorithm.enumerate_combinations(results.append)
    """

    def __init__(
        self,
        authority: AuthorityTuple,
        interchangeable: Optional[DisjointSet[Controller]] = None,
    ):
        self._authority = authority
        self._interchangeable = interchangeable if interchangeable is not None else DisjointSet()

        AuthorityValidator().validate(authority).raise_for_errors()
        self._action_to_controllers = build_action_to_controllers(authority)

        logger.debug(
            "Initialized UCCA identification for %d controller(s), %d action(s)",
            len(authority.controllers),
            len(authority.actions),
        )

    @property
    def authority(self) -> AuthorityTuple:
        return self._authority

    @property
    def interchangeable(self) -> DisjointSet[Controller]:
        return self._interchangeable

    def controllers_of(self, action: Action) -> Tuple[Controller, ...]:
        try:
            return self._action_to_controllers[action]
        except KeyError:
            raise ContractViolation(
                f"Action {action} is missing from the controller index"
            ) from None

    # ------------------------------------------------------------------
    # Enumeration
    # ------------------------------------------------------------------

    def enumerate_combinations(self, accept: Callable[[UCCA], None]) -> None:
        """Push every potential UCCA to `accept`, in canonical order."""
        for ucca in self.iter_combinations():
            accept(ucca)

    def iter_combinations(self) -> Iterator[UCCA]:
        """Lazily yield every potential UCCA. Stop iterating to stop early."""
        for action in self._authority.actions:
            other_actions = tuple(a for a in self._authority.actions if a != action)

            yield from self._row1_provided_actions(action, other_actions)
            yield from self._row3_temporal_actions(action, other_actions)

            controllers = self.controllers_of(action)
            for controller in controllers:
                other_controllers = tuple(c for c in controllers if c != controller)
                yield from self._row2_provided_shared(action, controller, other_controllers)
                yield from self._row4_temporal_shared(action, controller, other_controllers)

    def enumerate_all(self) -> List[UCCA]:
        return list(self.iter_combinations())

    def count_by_type(self) -> Dict[str, int]:
        counts = Counter(ucca.type for ucca in self.iter_combinations())
        return dict(counts)

    # ------------------------------------------------------------------
    # Rows
    # ------------------------------------------------------------------

    def _row1_provided_actions(
        self, action: Action, other_actions: Tuple[Action, ...]
    ) -> Iterator[ProvidedActionsUCCA]:
        # No guard on empty other_actions
        for action_state in PROVIDED_STATES:
            for other_state in PROVIDED_STATES:
                yield ProvidedActionsUCCA(
                    action=action,
                    other_actions=other_actions,
                    action_state=action_state,
                    other_actions_state=other_state,
                )

    def _row3_temporal_actions(
        self,
        action: Action,
        other_actions: Tuple[Action, ...],
    ) -> Iterator[TemporalActionsUCCA]:
        # the discreteness of `action` itself is not consulted
        other_continuous = tuple(
            a for a in other_actions if not self._authority.actions[a].discrete
        )
        for action_state in TEMPORAL_STATES:
            for other_state in TEMPORAL_STATES:
                candidates = (
                    other_continuous
                    if other_state is TemporalActionState.ENDS
                    else other_actions
                )
                if not candidates:
                    continue
                yield TemporalActionsUCCA(
                    action=action,
                    other_actions=candidates,
                    action_state=action_state,
                    other_actions_state=other_state,
                )

    def _row2_provided_shared(
        self,
        action: Action,
        controller: Controller,
        other_controllers: Tuple[Controller, ...],
    ) -> Iterator[ProvidedSharedActionsUCCA]:
        for action_state, other_state in SHARED_PROVIDED_CASES:
            yield ProvidedSharedActionsUCCA(
                action=action,
                controller=controller,
                other_controllers=other_controllers,
                action_state=action_state,
                other_actions_state=other_state,
            )

    def _row4_temporal_shared(
        self,
        action: Action,
        controller: Controller,
        other_controllers: Tuple[Controller, ...],
    ) -> Iterator[TemporalSharedActionsUCCA]:
        for action_state in TEMPORAL_STATES:
            for other_state in TEMPORAL_STATES:
                yield TemporalSharedActionsUCCA(
                    action=action,
                    controller=controller,
                    other_controllers=other_controllers,
                    action_state=action_state,
                    other_actions_state=other_state,
                )
