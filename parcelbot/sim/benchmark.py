"""Compare robots over many random villages."""

from __future__ import annotations

import random
from typing import Sequence

from parcelbot.sim.agent_policy import Robot
from parcelbot.sim.contracts import BenchmarkResult
from parcelbot.sim.graph import Graph
from parcelbot.sim.turn_loop import run_robot
from parcelbot.sim.world_loader import VILLAGE_HUB
from parcelbot.sim.world_state import DEFAULT_PARCEL_COUNT, random_state


def compare_robots(
    number_of_times: int,
    robots: Sequence[Robot],
    *,
    graph: Graph,
    rng: random.Random | None = None,
    parcel_count: int = DEFAULT_PARCEL_COUNT,
    hub: str = VILLAGE_HUB,
    max_turns: int | None = None,
) -> BenchmarkResult:
    """Run every robot on the same random start state for each trial and
    average the turn counts per robot name."""
    if number_of_times < 1:
        raise ValueError("number_of_times must be at least 1")
    names = [robot.name for robot in robots]
    if len(set(names)) != len(names):
        raise ValueError(f"Robot names must be unique, got {names}")

    rng = rng or random.Random()
    totals = {name: 0 for name in names}
    for _ in range(number_of_times):
        state = random_state(graph, parcel_count, rng=rng, hub=hub)
        for robot in robots:
            totals[robot.name] += run_robot(state, robot, graph, max_turns=max_turns)

    return BenchmarkResult(
        trials=number_of_times,
        parcel_count=parcel_count,
        totals=totals,
        averages={name: total / number_of_times for name, total in totals.items()},
    )
