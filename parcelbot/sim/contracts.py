"""Structured records emitted by the turn loop and benchmark."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from parcelbot.sim.world_state import Parcel


class ParcelSnapshot(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    place: str
    address: str

    @classmethod
    def from_parcel(cls, parcel: Parcel) -> "ParcelSnapshot":
        return cls(place=parcel.place, address=parcel.address)


class Decision(BaseModel):
    """One robot choice: where to go next and what to remember."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    direction: str
    memory: Any = ()


class TurnRecord(BaseModel):
    model_config = ConfigDict(extra="forbid")

    turn: int = Field(ge=1)
    robot: str
    direction: str
    place: str
    moved: bool = True
    parcels: list[ParcelSnapshot] = Field(default_factory=list)

    @property
    def remaining(self) -> int:
        return len(self.parcels)


class BenchmarkResult(BaseModel):
    model_config = ConfigDict(extra="forbid")

    trials: int = Field(ge=1)
    parcel_count: int = Field(ge=0)
    totals: dict[str, int] = Field(default_factory=dict)
    averages: dict[str, float] = Field(default_factory=dict)

    @model_validator(mode="after")
    def validate_robots(self) -> "BenchmarkResult":
        if set(self.totals) != set(self.averages):
            raise ValueError("totals and averages must cover the same robots")
        return self

    def best(self) -> str | None:
        if not self.averages:
            return None
        return min(self.averages, key=lambda name: self.averages[name])
