"""Undirected road graph built from "From-To" edge strings."""

from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from parcelbot.sim.errors import ConfigError

Graph = Mapping[str, tuple[str, ...]]

EDGE_SEPARATOR = "-"


def build_graph(edges: Iterable[str], *, separator: str = EDGE_SEPARATOR) -> Graph:
    adjacency: dict[str, list[str]] = {}

    def add_edge(start: str, end: str) -> None:
        adjacency.setdefault(start, []).append(end)

    for edge in edges:
        start, end = split_edge(edge, separator=separator)
        add_edge(start, end)
        add_edge(end, start)

    return MappingProxyType(
        {place: tuple(neighbors) for place, neighbors in adjacency.items()}
    )


def split_edge(edge: str, *, separator: str = EDGE_SEPARATOR) -> tuple[str, str]:
    parts = edge.split(separator)
    if len(parts) != 2:
        raise ConfigError(
            f"Road {edge!r} must contain exactly one {separator!r} separator."
        )
    start, end = (part.strip() for part in parts)
    if not start or not end:
        raise ConfigError(f"Road {edge!r} has an empty endpoint.")
    return start, end


def is_adjacent(graph: Graph, start: str, end: str) -> bool:
    return end in graph.get(start, ())
