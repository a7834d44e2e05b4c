"""Simulation core: road graph, routes, village state, robots."""

from parcelbot.sim.agent_policy import (
    GoalOrientedRobot,
    ImprovedGoalOrientedRobot,
    RandomRobot,
    Robot,
    RouteRobot,
    build_robot,
    count_parcels,
)
from parcelbot.sim.benchmark import compare_robots
from parcelbot.sim.contracts import (
    BenchmarkResult,
    Decision,
    ParcelSnapshot,
    TurnRecord,
)
from parcelbot.sim.errors import ConfigError, NoRouteError, TurnLimitExceeded
from parcelbot.sim.graph import Graph, build_graph
from parcelbot.sim.pathfinding import find_route, find_routes, find_routes_by_length
from parcelbot.sim.turn_loop import run_robot, run_turns
from parcelbot.sim.world_state import Parcel, WorldState, random_state

__all__ = [
    "BenchmarkResult",
    "ConfigError",
    "Decision",
    "GoalOrientedRobot",
    "Graph",
    "ImprovedGoalOrientedRobot",
    "NoRouteError",
    "Parcel",
    "ParcelSnapshot",
    "RandomRobot",
    "Robot",
    "RouteRobot",
    "TurnLimitExceeded",
    "TurnRecord",
    "WorldState",
    "build_graph",
    "build_robot",
    "compare_robots",
    "count_parcels",
    "find_route",
    "find_routes",
    "find_routes_by_length",
    "random_state",
    "run_robot",
    "run_turns",
]
