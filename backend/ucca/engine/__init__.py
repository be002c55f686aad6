from ucca.engine.algorithm import UCCAIdentificationAlgorithm
from ucca.engine.reverse_index import build_action_to_controllers
from ucca.engine.teams import split_into_teams

__all__ = [
    "UCCAIdentificationAlgorithm",
    "build_action_to_controllers",
    "split_into_teams",
]
