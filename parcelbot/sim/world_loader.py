"""Village data: the built-in roads and JSON overrides."""

from __future__ import annotations

import json
from collections import deque
from dataclasses import dataclass
from pathlib import Path

from parcelbot.sim.errors import ConfigError
from parcelbot.sim.graph import Graph, build_graph, is_adjacent

VILLAGE_ROADS: tuple[str, ...] = (
    "Alice's House-Bob's House",
    "Alice's House-Cabin",
    "Alice's House-Post Office",
    "Bob's House-Town Hall",
    "Daria's House-Ernie's House",
    "Daria's House-Town Hall",
    "Ernie's House-Grete's House",
    "Grete's House-Farm",
    "Grete's House-Shop",
    "Marketplace-Farm",
    "Marketplace-Post Office",
    "Marketplace-Shop",
    "Marketplace-Town Hall",
    "Shop-Town Hall",
)

# Starts next to the Post Office and visits every place.
MAIL_ROUTE: tuple[str, ...] = (
    "Alice's House",
    "Cabin",
    "Alice's House",
    "Bob's House",
    "Town Hall",
    "Daria's House",
    "Ernie's House",
    "Grete's House",
    "Shop",
    "Grete's House",
    "Farm",
    "Marketplace",
    "Post Office",
)

VILLAGE_HUB = "Post Office"


@dataclass(frozen=True)
class VillageConfig:
    roads: tuple[str, ...]
    hub: str
    mail_route: tuple[str, ...]

    def build_graph(self) -> Graph:
        return build_graph(self.roads)


def default_village() -> VillageConfig:
    return VillageConfig(roads=VILLAGE_ROADS, hub=VILLAGE_HUB, mail_route=MAIL_ROUTE)


def load_village_config(path: Path) -> VillageConfig:
    data = _load_json(path)
    if not isinstance(data, dict):
        raise ConfigError(f"Village file {path} must contain a JSON object.")

    roads = data.get("roads")
    if not isinstance(roads, list) or not all(isinstance(r, str) for r in roads):
        raise ConfigError(f"Village file {path} needs a list of road strings.")
    hub = data.get("hub", VILLAGE_HUB)
    if not isinstance(hub, str):
        raise ConfigError(f"Village file {path} has a non-string hub.")
    mail_route = data.get("mail_route", [])
    if not isinstance(mail_route, list) or not all(
        isinstance(stop, str) for stop in mail_route
    ):
        raise ConfigError(f"Village file {path} needs a list of mail route stops.")

    config = VillageConfig(roads=tuple(roads), hub=hub, mail_route=tuple(mail_route))
    validate_village(config)
    return config


def validate_village(config: VillageConfig) -> Graph:
    """Check the village can be cleared: every place reachable from the hub
    and a mail route that loops from the hub through every place."""
    graph = config.build_graph()
    if config.hub not in graph:
        raise ConfigError(f"Hub {config.hub} is not on any road.")
    unreached = set(graph) - _reachable(graph, config.hub)
    if unreached:
        raise ConfigError(
            f"Places not reachable from {config.hub}: {', '.join(sorted(unreached))}."
        )
    if config.mail_route:
        _validate_mail_route(graph, config.hub, config.mail_route)
    return graph


def _validate_mail_route(graph: Graph, hub: str, mail_route: tuple[str, ...]) -> None:
    for stop in mail_route:
        if stop not in graph:
            raise ConfigError(f"Mail route stop {stop} is not on any road.")
    if not is_adjacent(graph, hub, mail_route[0]):
        raise ConfigError(f"Mail route must start next to {hub}.")
    # The route robot starts over from the first stop once it runs out.
    legs = zip(mail_route, mail_route[1:] + mail_route[:1])
    for start, end in legs:
        if not is_adjacent(graph, start, end):
            raise ConfigError(f"Mail route jumps from {start} to {end}.")
    missed = set(graph) - set(mail_route)
    if missed:
        raise ConfigError(f"Mail route skips {', '.join(sorted(missed))}.")


def _reachable(graph: Graph, start: str) -> set[str]:
    queue: deque[str] = deque([start])
    seen: set[str] = {start}
    while queue:
        current = queue.popleft()
        for neighbor in graph[current]:
            if neighbor in seen:
                continue
            seen.add(neighbor)
            queue.append(neighbor)
    return seen


def _load_json(path: Path) -> object:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing village data file: {path}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Village file {path} is not valid JSON: {exc}") from exc
