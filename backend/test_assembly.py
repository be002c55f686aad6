"""
Tests for building engine inputs from application-layer records and
serializing the resulting UCCAs.
"""

import pytest

from ucca.api.serializers import serialize_ucca
from ucca.assembly import build_authority, build_interchangeable, label_for
from ucca.engine import UCCAIdentificationAlgorithm
from ucca.ir import Action, Controller, ValidationError
from ucca.schemas import ControlActionRecord, ControllerRecord


def sample_records():
    controllers = [
        ControllerRecord(id="pilot", kind="human", actions=["flaps", "flaps"]),
        ControllerRecord(id="autopilot", kind="software", actions=["flaps", "thrust"]),
    ]
    actions = [
        ControlActionRecord(id="flaps", verb="extend", object="flaps"),
        ControlActionRecord(id="thrust", verb="increase", object="thrust", discrete=False),
    ]
    return controllers, actions


class TestBuildAuthority:

    def test_maps_records_to_identifiers(self):
        authority = build_authority(*sample_records())
        assert authority.controllers == {
            Controller("pilot"): (Action("flaps"),),
            Controller("autopilot"): (Action("flaps"), Action("thrust")),
        }
        assert authority.actions[Action("thrust")].discrete is False
        assert authority.actions[Action("flaps")].discrete is True
        assert authority.actions[Action("flaps")].id == Action("flaps")

    def test_does_not_validate(self):
        authority = build_authority(
            [ControllerRecord(id="pilot", actions=["missing"])],
            [],
        )
        assert authority.controllers[Controller("pilot")] == (Action("missing"),)

    def test_duplicate_controller_ids_rejected(self):
        controllers = [
            ControllerRecord(id="C1", actions=["X"]),
            ControllerRecord(id="C1", actions=["Y"]),
        ]
        actions = [ControlActionRecord(id="X"), ControlActionRecord(id="Y")]
        with pytest.raises(ValidationError) as exc:
            build_authority(controllers, actions)
        assert exc.value.messages == ["Duplicate controller id C1 (2 records)"]

    def test_duplicate_action_ids_rejected(self):
        controllers = [ControllerRecord(id="C1", actions=["X"])]
        actions = [
            ControlActionRecord(id="X", discrete=False),
            ControlActionRecord(id="X", discrete=True),
        ]
        with pytest.raises(ValidationError, match="Duplicate control action id X"):
            build_authority(controllers, actions)

    def test_every_duplicate_reported(self):
        controllers = [ControllerRecord(id=cid) for cid in ["C1", "C2", "C1", "C2", "C2"]]
        actions = [ControlActionRecord(id="X"), ControlActionRecord(id="X")]
        with pytest.raises(ValidationError) as exc:
            build_authority(controllers, actions)
        assert str(exc.value) == "\n".join([
            "Duplicate controller id C1 (2 records)",
            "Duplicate controller id C2 (3 records)",
            "Duplicate control action id X (2 records)",
        ])
        assert [issue.level for issue in exc.value.issues] == ["record"] * 3


class TestBuildInterchangeable:

    def test_groups_become_sets(self):
        ds = build_interchangeable([["pilot", "copilot", "relief"], ["atc"]])
        assert ds.connected(Controller("pilot"), Controller("relief"))
        assert ds.has(Controller("atc"))
        assert not ds.connected(Controller("atc"), Controller("pilot"))
        assert len(ds.groups()) == 2

    def test_empty(self):
        assert len(build_interchangeable([])) == 0


def test_label_for():
    assert label_for(ControlActionRecord(id="a1", verb="open", object="valve")) == "open valve"
    assert label_for(ControlActionRecord(id="a1", verb="brake")) == "brake"
    assert label_for(ControlActionRecord(id="a1")) == "a1"


class TestSerializeUcca:

    def test_team_level_record(self):
        authority = build_authority(*sample_records())
        first = UCCAIdentificationAlgorithm(authority).enumerate_all()[0]
        assert serialize_ucca(first) == {
            "type": "2a.1-2",
            "abstractionType": "2a",
            "uccaTypes": "1-2",
            "action": "flaps",
            "otherActions": ["thrust"],
            "actionState": "provided",
            "otherActionsState": "provided",
        }

    def test_controller_level_record(self):
        authority = build_authority(*sample_records())
        uccas = UCCAIdentificationAlgorithm(authority).enumerate_all()
        shared = next(u for u in uccas if u.type == "2b.3-4")
        assert serialize_ucca(shared) == {
            "type": "2b.3-4",
            "abstractionType": "2b",
            "uccaTypes": "3-4",
            "action": "flaps",
            "controller": "pilot",
            "otherControllers": ["autopilot"],
            "actionState": "starts",
            "otherActionsState": "starts",
        }

    def test_not_provided_state_value(self):
        authority = build_authority(*sample_records())
        uccas = UCCAIdentificationAlgorithm(authority).enumerate_all()
        assert serialize_ucca(uccas[3])["actionState"] == "not provided"
        assert serialize_ucca(uccas[3])["otherActionsState"] == "not provided"
