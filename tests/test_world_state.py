import random

import pytest

from parcelbot.sim.errors import ConfigError
from parcelbot.sim.graph import build_graph
from parcelbot.sim.world_loader import VILLAGE_ROADS
from parcelbot.sim.world_state import Parcel, WorldState, random_state


def test_move_carries_and_delivers_parcels() -> None:
    graph = build_graph(["A-B", "B-C"])
    state = WorldState("A", [Parcel(place="A", address="C")])

    first = state.move("B", graph)
    assert first == WorldState("B", [Parcel(place="B", address="C")])

    second = first.move("C", graph)
    assert second == WorldState("C", [])
    assert second.is_done


def test_move_leaves_waiting_parcels_alone() -> None:
    graph = build_graph(["A-B", "B-C"])
    waiting = Parcel(place="C", address="A")
    state = WorldState("A", [Parcel(place="A", address="B"), waiting])

    moved = state.move("B", graph)

    assert moved.parcels == (waiting,)
    assert state.parcels == (Parcel(place="A", address="B"), waiting)


def test_move_rejects_non_neighbors() -> None:
    graph = build_graph(["A-B", "B-C"])
    state = WorldState("A", [Parcel(place="A", address="C")])

    assert state.move("C", graph) == state
    assert state.move("Nowhere", graph) is state


def test_move_parcel_invariants_over_random_walks() -> None:
    graph = build_graph(VILLAGE_ROADS)
    rng = random.Random(7)

    for _ in range(20):
        state = random_state(graph, 8, rng=rng)
        for _ in range(30):
            addresses = sorted(parcel.address for parcel in state.parcels)
            next_state = state.move(rng.choice(graph[state.place]), graph)
            assert all(parcel.place != parcel.address for parcel in next_state.parcels)
            remaining = sorted(parcel.address for parcel in next_state.parcels)
            for address in remaining:
                assert address in addresses
            state = next_state


def test_random_state_starts_at_hub_with_undelivered_parcels() -> None:
    graph = build_graph(VILLAGE_ROADS)

    state = random_state(graph, 10, rng=random.Random(3))

    assert state.place == "Post Office"
    assert len(state.parcels) == 10
    for parcel in state.parcels:
        assert parcel.place != parcel.address
        assert parcel.place in graph
        assert parcel.address in graph


def test_random_state_is_reproducible_with_seed() -> None:
    graph = build_graph(VILLAGE_ROADS)

    first = random_state(graph, 5, rng=random.Random(42))
    second = random_state(graph, 5, rng=random.Random(42))

    assert first == second


def test_random_state_rejects_unknown_hub() -> None:
    graph = build_graph(["A-B"])

    with pytest.raises(ConfigError):
        random_state(graph, 1, rng=random.Random(0))

    assert random_state(graph, 2, rng=random.Random(0), hub="A").place == "A"
