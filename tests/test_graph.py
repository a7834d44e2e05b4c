import pytest

from parcelbot.sim.errors import ConfigError
from parcelbot.sim.graph import build_graph, is_adjacent
from parcelbot.sim.world_loader import VILLAGE_ROADS


def test_build_graph_is_symmetric() -> None:
    graph = build_graph(VILLAGE_ROADS)

    for place, neighbors in graph.items():
        for neighbor in neighbors:
            assert place in graph[neighbor]


def test_build_graph_keeps_insertion_order_and_duplicates() -> None:
    graph = build_graph(["A-B", "A-C", "A-B"])

    assert graph["A"] == ("B", "C", "B")
    assert graph["B"] == ("A", "A")
    assert graph["C"] == ("A",)


def test_build_graph_village_neighbors() -> None:
    graph = build_graph(VILLAGE_ROADS)

    assert graph["Alice's House"] == ("Bob's House", "Cabin", "Post Office")
    assert len(graph) == 11
    assert is_adjacent(graph, "Post Office", "Marketplace")
    assert not is_adjacent(graph, "Post Office", "Farm")


def test_build_graph_does_not_mutate_input_and_is_read_only() -> None:
    edges = ["A-B", "B-C"]
    graph = build_graph(edges)

    assert edges == ["A-B", "B-C"]
    with pytest.raises(TypeError):
        graph["D"] = ("A",)  # type: ignore[index]


@pytest.mark.parametrize("edge", ["AB", "A-B-C", "-B", "A- "])
def test_build_graph_rejects_malformed_edges(edge: str) -> None:
    with pytest.raises(ConfigError):
        build_graph(["A-B", edge])


def test_build_graph_custom_separator() -> None:
    graph = build_graph(["North Gate/South-Gate"], separator="/")

    assert graph["North Gate"] == ("South-Gate",)
