"""Tests for agent and contract parsing."""

import pytest
from pydantic import ValidationError

from stagent.models.api import AgentInfo, Contract, contracts_from_api

AGENT = {
    "accountId": "clxyz",
    "symbol": "AGENT-123",
    "headquarters": "X1-QD10-A1",
    "credits": 175000,
    "startingFaction": "COSMIC",
    "shipCount": 2,
}

CONTRACT = {
    "id": "clp1contract",
    "factionSymbol": "COSMIC",
    "type": "PROCUREMENT",
    "terms": {
        "deadline": "2023-11-21T22:13:20.000Z",
        "payment": {"onAccepted": 2000, "onFulfilled": 15000},
        "deliver": [
            {
                "tradeSymbol": "IRON_ORE",
                "destinationSymbol": "X1-QD10-H50",
                "unitsRequired": 60,
                "unitsFulfilled": 20,
            }
        ],
    },
    "accepted": True,
    "fulfilled": False,
    "deadlineToAccept": "2023-11-15T22:13:20.000Z",
}


class TestAgentInfo:
    def test_from_api(self):
        agent = AgentInfo.from_api({"data": AGENT})
        assert agent.symbol == "AGENT-123"
        assert agent.faction == "COSMIC"
        assert agent.credits == 175000
        assert agent.headquarters == "X1-QD10-A1"

    def test_system_symbol_from_headquarters(self):
        agent = AgentInfo.from_api({"data": AGENT})
        assert agent.system_symbol == "X1-QD10"

    def test_system_symbol_from_location(self):
        data = {**AGENT, "location": {"systemSymbol": "X1-TT88"}}
        assert AgentInfo.from_api({"data": data}).system_symbol == "X1-TT88"

    def test_construct_by_field_name(self):
        agent = AgentInfo(
            symbol="AGENT-123",
            faction="TEST_FACTION",
            credits=1000,
            headquarters="X1-ABCD-1234",
        )
        assert agent.faction == "TEST_FACTION"
        assert agent.system_symbol is None

    def test_missing_envelope(self):
        with pytest.raises(ValueError):
            AgentInfo.from_api(AGENT)

    def test_missing_field(self):
        data = {k: v for k, v in AGENT.items() if k != "credits"}
        with pytest.raises(ValidationError):
            AgentInfo.from_api({"data": data})


class TestContracts:
    def test_contracts_from_api(self):
        contracts = contracts_from_api({"data": [CONTRACT], "meta": {"total": 1}})
        assert len(contracts) == 1
        contract = contracts[0]
        assert contract.id == "clp1contract"
        assert contract.faction_symbol == "COSMIC"
        assert contract.terms.payment.on_fulfilled == 15000
        assert contract.terms.deliver[0].trade_symbol == "IRON_ORE"
        assert contract.terms.deliver[0].units_remaining == 40

    def test_no_contracts(self):
        assert contracts_from_api({"data": []}) == []

    def test_get_contract_response(self):
        contract = Contract.from_api({"data": CONTRACT})
        assert contract.is_open
        assert not contract.is_complete

    def test_accept_response_wraps_contract(self):
        payload = {"data": {"agent": AGENT, "contract": {**CONTRACT, "accepted": True}}}
        assert Contract.from_api(payload).accepted is True

    def test_fulfilled_contract(self):
        deliver = {**CONTRACT["terms"]["deliver"][0], "unitsFulfilled": 60}
        data = {
            **CONTRACT,
            "fulfilled": True,
            "terms": {**CONTRACT["terms"], "deliver": [deliver]},
        }
        contract = Contract.from_api({"data": {"agent": AGENT, "contract": data}})
        assert contract.is_complete
        assert not contract.is_open


def test_agent_position_from_location():
    data = {**AGENT, "location": {"systemSymbol": "X1-QD10", "x": -12, "y": 7}}
    agent = AgentInfo.from_api({"data": data})
    assert (agent.x, agent.y) == (-12, 7)
    assert agent.position.distance_to(agent.position) == 0


def test_agent_position_defaults_to_origin():
    agent = AgentInfo.from_api({"data": AGENT})
    assert (agent.x, agent.y) == (0, 0)
