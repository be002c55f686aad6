from typing import Any, assert_never

from ucca.ir.ucca import (
    UCCA,
    ProvidedActionsUCCA,
    ProvidedSharedActionsUCCA,
    TemporalActionsUCCA,
    TemporalSharedActionsUCCA,
)


def serialize_ucca(ucca: UCCA) -> dict[str, Any]:
    """
    JSON-compatible view of a UCCA record.
    Deterministic: peer lists keep enumeration order.
    """
    payload: dict[str, Any] = {
        "type": ucca.type,
        "abstractionType": ucca.abstraction_type,
        "uccaTypes": ucca.ucca_types,
        "action": str(ucca.action),
    }

    if isinstance(ucca, (ProvidedActionsUCCA, TemporalActionsUCCA)):
        payload["otherActions"] = [str(a) for a in ucca.other_actions]
    elif isinstance(ucca, (ProvidedSharedActionsUCCA, TemporalSharedActionsUCCA)):
        payload["controller"] = str(ucca.controller)
        payload["otherControllers"] = [str(c) for c in ucca.other_controllers]
    else:
        assert_never(ucca)

    payload["actionState"] = ucca.action_state.value
    payload["otherActionsState"] = ucca.other_actions_state.value
    return payload
