"""Turn loop driving one robot until every parcel is delivered."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from parcelbot.sim.agent_policy import Robot
from parcelbot.sim.contracts import ParcelSnapshot, TurnRecord
from parcelbot.sim.errors import TurnLimitExceeded
from parcelbot.sim.graph import Graph
from parcelbot.sim.world_state import WorldState


def run_turns(
    state: WorldState,
    robot: Robot,
    graph: Graph,
    *,
    memory: Any = (),
    max_turns: int | None = None,
) -> Iterator[TurnRecord]:
    """Yield one record per move until no parcels remain.

    There is no turn bound unless ``max_turns`` is given; on a disconnected
    graph an unreachable parcel keeps the loop going forever.
    """
    turn = 0
    while not state.is_done:
        if max_turns is not None and turn >= max_turns:
            raise TurnLimitExceeded(max_turns, len(state.parcels))
        decision = robot.decide(state, memory)
        next_state = state.move(decision.direction, graph)
        memory = decision.memory
        turn += 1
        yield TurnRecord(
            turn=turn,
            robot=robot.name,
            direction=decision.direction,
            place=next_state.place,
            moved=next_state is not state,
            parcels=[ParcelSnapshot.from_parcel(p) for p in next_state.parcels],
        )
        state = next_state


def run_robot(
    state: WorldState,
    robot: Robot,
    graph: Graph,
    *,
    memory: Any = (),
    max_turns: int | None = None,
    on_turn: Callable[[TurnRecord], None] | None = None,
) -> int:
    turns = 0
    for record in run_turns(
        state, robot, graph, memory=memory, max_turns=max_turns
    ):
        turns = record.turn
        if on_turn is not None:
            on_turn(record)
    return turns
