from typing import Dict, List, Tuple

from ucca.ir.authority import AuthorityTuple
from ucca.ir.identifiers import Action, Controller


def build_action_to_controllers(
    authority: AuthorityTuple,
) -> Dict[Action, Tuple[Controller, ...]]:
    """
    Invert controller -> actions into action -> controllers.

    One pass over every authority edge. Controllers keep the order in which
    they appear in authority.controllers.
    """
    index: Dict[Action, List[Controller]] = {}
    for controller, actions in authority.controllers.items():
        for action in actions:
            index.setdefault(action, []).append(controller)
    return {action: tuple(controllers) for action, controllers in index.items()}
