"""Coordinates and distances between systems, waypoints and asteroids."""

from __future__ import annotations

import math
from typing import Self, Sequence, TypeVar

from pydantic import BaseModel


class Point(BaseModel):
    x: int
    y: int

    def distance_to(self, other: Point) -> float:
        """Euclidean distance."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def manhattan_distance_to(self, other: Point) -> int:
        return abs(self.x - other.x) + abs(self.y - other.y)


class Location(BaseModel):
    """Anything with a symbol and a position on the system map."""

    symbol: str
    point: Point

    @classmethod
    def at(cls, symbol: str, x: int, y: int, **kwargs) -> Self:
        return cls(symbol=symbol, point=Point(x=x, y=y), **kwargs)

    def distance_to(self, other: Location) -> float:
        return self.point.distance_to(other.point)


class System(Location):
    pass


class Waypoint(Location):
    type: str | None = None


class Asteroid(Location):
    materials: list[str] = []


L = TypeVar("L", bound=Location)


def system_symbol_for(waypoint_symbol: str) -> str:
    """Derive the system symbol from a waypoint symbol (``X1-QD10-A1`` -> ``X1-QD10``)."""
    parts = waypoint_symbol.split("-")
    if len(parts) < 2 or not all(parts[:2]):
        raise ValueError(f"Not a waypoint symbol: '{waypoint_symbol}'")
    return f"{parts[0]}-{parts[1]}"


def has_materials(asteroid: Asteroid, required: Sequence[str]) -> list[str]:
    """Return the required materials this asteroid carries.

    A material matches when either name contains the other, so ``IRON``
    matches an ``IRON_ORE`` deposit and ``COMMON_METAL_DEPOSITS`` matches
    ``COMMON_METAL``.
    """
    found = []
    for material in required:
        if any(material in m or m in material for m in asteroid.materials):
            found.append(material)
    return found


def find_closest(candidates: Sequence[L], origin: Point) -> L | None:
    """Nearest candidate to ``origin``; the first one wins on ties."""
    if not candidates:
        return None
    return min(candidates, key=lambda c: c.point.distance_to(origin))


def closest_asteroid_with(
    required: Sequence[str], asteroids: Sequence[Asteroid], origin: Point
) -> Asteroid | None:
    """Nearest asteroid to ``origin`` carrying at least one required material."""
    matching = [a for a in asteroids if has_materials(a, required)]
    return find_closest(matching, origin)
