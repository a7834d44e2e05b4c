import pytest
from pydantic import ValidationError

from parcelbot.sim.contracts import (
    BenchmarkResult,
    Decision,
    ParcelSnapshot,
    TurnRecord,
)
from parcelbot.sim.world_state import Parcel


def test_turn_record_shape() -> None:
    record = TurnRecord(
        turn=1,
        robot="goal",
        direction="B",
        place="B",
        parcels=[ParcelSnapshot.from_parcel(Parcel(place="B", address="C"))],
    )

    assert record.remaining == 1
    assert record.model_dump()["parcels"] == [{"place": "B", "address": "C"}]

    with pytest.raises(ValidationError):
        TurnRecord(turn=0, robot="goal", direction="B", place="B")


def test_decision_defaults_to_empty_memory() -> None:
    decision = Decision(direction="B")

    assert decision.memory == ()


def test_benchmark_result_best_and_validation() -> None:
    result = BenchmarkResult(
        trials=2,
        parcel_count=5,
        totals={"goal": 30, "improved": 26},
        averages={"goal": 15.0, "improved": 13.0},
    )

    assert result.best() == "improved"

    with pytest.raises(ValidationError):
        BenchmarkResult(trials=1, parcel_count=5, totals={"goal": 3}, averages={})
