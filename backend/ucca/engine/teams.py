"""
Controller teams.

The identification algorithm is run for one controller team at a time,
where a team is a set of controllers linked by shared control actions.
"""

import logging
from typing import Dict, List

from ucca.ir.authority import AuthorityTuple
from ucca.ir.disjoint_set import DisjointSet
from ucca.ir.identifiers import Action, Controller

logger = logging.getLogger(__name__)


def split_into_teams(authority: AuthorityTuple) -> List[AuthorityTuple]:
    """
    Partition an authority tuple into one tuple per controller team.

    Teams are ordered by their first controller; controllers and actions
    keep their original order. Controllers without any authorized action
    form no team, and declared actions nobody authorizes are dropped, so
    validate the whole tuple first if those should be reported.
    Undeclared actions stay in the controller's authority set.
    """
    teams: DisjointSet[Controller] = DisjointSet()
    first_controller: Dict[Action, Controller] = {}

    for controller, actions in authority.controllers.items():
        if not actions:
            continue
        teams.add(controller)
        for action in actions:
            if action in first_controller:
                teams.union(first_controller[action], controller)
            else:
                first_controller[action] = controller

    result = []
    for members in teams.groups():
        member_set = set(members)
        controllers = {
            controller: actions
            for controller, actions in authority.controllers.items()
            if controller in member_set
        }
        used = {action for actions in controllers.values() for action in actions}
        actions = {
            action: props
            for action, props in authority.actions.items()
            if action in used
        }
        result.append(AuthorityTuple(controllers=controllers, actions=actions))

    logger.debug("Split %d controller(s) into %d team(s)", len(authority.controllers), len(result))
    return result
