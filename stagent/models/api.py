"""Agent and contract records parsed from SpaceTraders API responses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from stagent.domain.distance import Point, system_symbol_for


def unwrap_data(payload: dict):
    """Return the ``data`` member of an API response envelope."""
    if "data" not in payload:
        raise ValueError("API response has no 'data' envelope")
    return payload["data"]


class AgentInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    symbol: str
    faction: str = Field(alias="startingFaction")
    credits: int
    headquarters: str
    system_symbol: str | None = None
    x: int = 0
    y: int = 0

    @classmethod
    def from_api(cls, payload: dict) -> AgentInfo:
        """Parse a ``GET /my/agent`` response.

        ``system_symbol`` is taken from ``location.systemSymbol`` when the
        API sends it, otherwise derived from the headquarters waypoint.
        ``x``/``y`` come from ``location`` and stay at the origin without it.
        """
        data = unwrap_data(payload)
        agent = cls.model_validate(data)
        location = data.get("location") or {}
        agent.x = location.get("x", 0)
        agent.y = location.get("y", 0)
        if location.get("systemSymbol"):
            agent.system_symbol = location["systemSymbol"]
        elif agent.headquarters:
            agent.system_symbol = system_symbol_for(agent.headquarters)
        return agent

    @property
    def position(self) -> Point:
        return Point(x=self.x, y=self.y)


class DeliveryTerm(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    trade_symbol: str = Field(alias="tradeSymbol")
    destination_symbol: str = Field(alias="destinationSymbol")
    units_required: int = Field(alias="unitsRequired")
    units_fulfilled: int = Field(default=0, alias="unitsFulfilled")

    @property
    def units_remaining(self) -> int:
        return max(self.units_required - self.units_fulfilled, 0)


class ContractPayment(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    on_accepted: int = Field(default=0, alias="onAccepted")
    on_fulfilled: int = Field(default=0, alias="onFulfilled")


class ContractTerms(BaseModel):
    deadline: str | None = None
    payment: ContractPayment = ContractPayment()
    deliver: list[DeliveryTerm] = []


class Contract(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    faction_symbol: str = Field(alias="factionSymbol")
    type: str
    terms: ContractTerms
    accepted: bool = False
    fulfilled: bool = False

    @classmethod
    def from_api(cls, payload: dict) -> Contract:
        """Parse a single-contract response (get, accept or fulfill).

        Accept and fulfill wrap the contract as ``data.contract`` next to the
        updated agent; get returns it as ``data`` directly.
        """
        data = unwrap_data(payload)
        if "contract" in data:
            data = data["contract"]
        return cls.model_validate(data)

    @property
    def is_open(self) -> bool:
        return self.accepted and not self.fulfilled

    @property
    def is_complete(self) -> bool:
        """All delivery terms have their required units."""
        return all(term.units_remaining == 0 for term in self.terms.deliver)


def contracts_from_api(payload: dict) -> list[Contract]:
    """Parse a ``GET /my/contracts`` response."""
    return [Contract.model_validate(item) for item in unwrap_data(payload)]
