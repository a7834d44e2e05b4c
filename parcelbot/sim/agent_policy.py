"""Delivery robots: policies mapping (state, memory) to the next move."""

from __future__ import annotations

import random
from typing import Any, Iterable, Protocol, Sequence

from parcelbot.sim.contracts import Decision
from parcelbot.sim.errors import ConfigError
from parcelbot.sim.graph import Graph
from parcelbot.sim.pathfinding import Route, find_route, find_routes
from parcelbot.sim.world_loader import MAIL_ROUTE
from parcelbot.sim.world_state import Parcel, WorldState


class Robot(Protocol):
    name: str

    def decide(self, state: WorldState, memory: Any) -> Decision:
        """Return the next direction and the memory for the following turn."""


class RandomRobot:
    name = "random"

    def __init__(self, graph: Graph, *, rng: random.Random | None = None) -> None:
        self._graph = graph
        self._rng = rng or random.Random()

    def decide(self, state: WorldState, memory: Any = ()) -> Decision:
        _ = memory
        return Decision(direction=self._rng.choice(self._graph[state.place]))


class RouteRobot:
    """Follows a fixed tour through every place, starting over when it ends."""

    name = "route"

    def __init__(self, route: Sequence[str] = MAIL_ROUTE) -> None:
        if not route:
            raise ConfigError("Route robot needs a non-empty route.")
        self._route = tuple(route)

    def decide(self, state: WorldState, memory: Route = ()) -> Decision:
        _ = state
        if not memory:
            memory = self._route
        return Decision(direction=memory[0], memory=tuple(memory[1:]))


class GoalOrientedRobot:
    """Heads for the first parcel, then for its address, along a shortest route."""

    name = "goal"

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    def decide(self, state: WorldState, memory: Route = ()) -> Decision:
        route = tuple(memory)
        if not route:
            route = find_route(self._graph, state.place, _target(state))
        return Decision(direction=route[0], memory=route[1:])


class ImprovedGoalOrientedRobot:
    """Like the goal robot, but among equally short routes picks the one that
    passes the most parcel pickups and drop-offs."""

    name = "improved"

    def __init__(self, graph: Graph) -> None:
        self._graph = graph

    def decide(self, state: WorldState, memory: Route = ()) -> Decision:
        route = tuple(memory)
        if not route:
            routes = find_routes(self._graph, state.place, _target(state))
            route = _busiest_route(routes, state.parcels)
        return Decision(direction=route[0], memory=route[1:])


def count_parcels(parcels: Iterable[Parcel], route: Iterable[str]) -> int:
    parcels = list(parcels)
    count = 0
    for place in route:
        for parcel in parcels:
            if place == parcel.place or place == parcel.address:
                count += 1
    return count


ROBOT_NAMES = (
    RandomRobot.name,
    RouteRobot.name,
    GoalOrientedRobot.name,
    ImprovedGoalOrientedRobot.name,
)


def build_robot(
    name: str,
    graph: Graph,
    *,
    rng: random.Random | None = None,
    route: Sequence[str] = MAIL_ROUTE,
) -> Robot:
    key = name.strip().lower()
    if key == RandomRobot.name:
        return RandomRobot(graph, rng=rng)
    if key == RouteRobot.name:
        return RouteRobot(route)
    if key == GoalOrientedRobot.name:
        return GoalOrientedRobot(graph)
    if key == ImprovedGoalOrientedRobot.name:
        return ImprovedGoalOrientedRobot(graph)
    raise ConfigError(
        f"Unknown robot {name!r}; expected one of {', '.join(ROBOT_NAMES)}."
    )


def _target(state: WorldState) -> str:
    if not state.parcels:
        raise ValueError("No parcels left to target.")
    parcel = state.parcels[0]
    if parcel.place != state.place:
        return parcel.place
    return parcel.address


def _busiest_route(routes: list[Route], parcels: Sequence[Parcel]) -> Route:
    best = routes[0]
    best_count = count_parcels(parcels, best)
    for route in routes[1:]:
        count = count_parcels(parcels, route)
        if count > best_count:
            best, best_count = route, count
    return best
