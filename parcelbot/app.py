"""Application entry for running simulations and benchmarks."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from rich.console import Console

from parcelbot.render.viewer import render_benchmark, render_summary, render_turn
from parcelbot.sim.agent_policy import build_robot
from parcelbot.sim.benchmark import compare_robots
from parcelbot.sim.contracts import BenchmarkResult, TurnRecord
from parcelbot.sim.errors import ConfigError
from parcelbot.sim.turn_loop import run_robot
from parcelbot.sim.world_loader import (
    VillageConfig,
    default_village,
    load_village_config,
    validate_village,
)
from parcelbot.sim.world_state import DEFAULT_PARCEL_COUNT, random_state

DEFAULT_ROBOT = "goal"
DEFAULT_COMPARE_ROBOTS = ("goal", "improved")


@dataclass(frozen=True)
class RunSettings:
    robot: str = DEFAULT_ROBOT
    parcels: int = DEFAULT_PARCEL_COUNT
    seed: int | None = None
    world_path: Path | None = None
    max_turns: int | None = None


def resolve_settings(
    *,
    robot: str | None = None,
    parcels: int | None = None,
    seed: int | None = None,
    world_path: Path | None = None,
    max_turns: int | None = None,
) -> RunSettings:
    env_world = os.getenv("PARCELBOT_WORLD")
    return RunSettings(
        robot=(robot or os.getenv("PARCELBOT_ROBOT") or DEFAULT_ROBOT).lower(),
        parcels=parcels
        if parcels is not None
        else _env_int("PARCELBOT_PARCELS", DEFAULT_PARCEL_COUNT),
        seed=seed if seed is not None else _env_int("PARCELBOT_SEED", None),
        world_path=world_path or (Path(env_world) if env_world else None),
        max_turns=max_turns,
    )


def load_village(settings: RunSettings) -> VillageConfig:
    if settings.world_path is None:
        return default_village()
    return load_village_config(settings.world_path)


def run_simulation(
    settings: RunSettings,
    *,
    console: Console | None = None,
    quiet: bool = False,
) -> int:
    console = console or Console()
    village = load_village(settings)
    graph = validate_village(village)
    rng = random.Random(settings.seed)
    robot = build_robot(settings.robot, graph, rng=rng, route=village.mail_route)
    state = random_state(graph, settings.parcels, rng=rng, hub=village.hub)

    def _print_turn(record: TurnRecord) -> None:
        console.print(render_turn(record))

    turns = run_robot(
        state,
        robot,
        graph,
        max_turns=settings.max_turns,
        on_turn=None if quiet else _print_turn,
    )
    console.print(render_summary(robot.name, turns))
    return turns


def run_benchmark(
    settings: RunSettings,
    trials: int,
    *,
    robot_names: Sequence[str] = DEFAULT_COMPARE_ROBOTS,
    console: Console | None = None,
) -> BenchmarkResult:
    console = console or Console()
    if not robot_names:
        raise ConfigError("Benchmark needs at least one robot.")
    village = load_village(settings)
    graph = validate_village(village)
    rng = random.Random(settings.seed)
    robots = [
        build_robot(name, graph, rng=rng, route=village.mail_route)
        for name in dict.fromkeys(name.lower() for name in robot_names)
    ]
    result = compare_robots(
        trials,
        robots,
        graph=graph,
        rng=rng,
        parcel_count=settings.parcels,
        hub=village.hub,
        max_turns=settings.max_turns,
    )
    console.print(render_benchmark(result))
    return result


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be an integer, got {raw!r}.") from exc
