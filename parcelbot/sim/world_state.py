"""Immutable village state: robot location plus undelivered parcels."""

from __future__ import annotations

from dataclasses import dataclass, field
import random

from parcelbot.sim.errors import ConfigError
from parcelbot.sim.graph import Graph, is_adjacent
from parcelbot.sim.world_loader import VILLAGE_HUB

DEFAULT_PARCEL_COUNT = 5


@dataclass(frozen=True)
class Parcel:
    place: str
    address: str

    @property
    def delivered(self) -> bool:
        return self.place == self.address


@dataclass(frozen=True)
class WorldState:
    place: str
    parcels: tuple[Parcel, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.parcels, tuple):
            object.__setattr__(self, "parcels", tuple(self.parcels))

    @property
    def is_done(self) -> bool:
        return not self.parcels

    def move(self, destination: str, graph: Graph) -> WorldState:
        """Walk to a neighbouring place, carrying parcels picked up here.

        A destination that is not a direct neighbour leaves the state as it is.
        """
        if not is_adjacent(graph, self.place, destination):
            return self

        parcels = tuple(
            parcel
            if parcel.place != self.place
            else Parcel(place=destination, address=parcel.address)
            for parcel in self.parcels
        )
        return WorldState(
            place=destination,
            parcels=tuple(parcel for parcel in parcels if not parcel.delivered),
        )


def random_state(
    graph: Graph,
    parcel_count: int = DEFAULT_PARCEL_COUNT,
    *,
    rng: random.Random | None = None,
    hub: str = VILLAGE_HUB,
) -> WorldState:
    if hub not in graph:
        raise ConfigError(f"Hub {hub!r} is not a place in the village.")
    places = list(graph.keys())
    if len(places) < 2 and parcel_count > 0:
        raise ConfigError("Random parcels need at least two places.")
    rng = rng or random.Random()

    parcels: list[Parcel] = []
    for _ in range(parcel_count):
        address = rng.choice(places)
        place = rng.choice(places)
        while place == address:
            place = rng.choice(places)
        parcels.append(Parcel(place=place, address=address))
    return WorldState(place=hub, parcels=tuple(parcels))
