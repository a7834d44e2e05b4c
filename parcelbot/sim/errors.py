"""Error types raised by the simulation core."""

from __future__ import annotations


class ConfigError(ValueError):
    """Village data (roads, hub, routes, robot names) is malformed."""


class NoRouteError(LookupError):
    def __init__(self, start: str, goal: str) -> None:
        super().__init__(f"No route from {start!r} to {goal!r}.")
        self.start = start
        self.goal = goal


class TurnLimitExceeded(RuntimeError):
    def __init__(self, max_turns: int, remaining: int) -> None:
        super().__init__(
            f"Parcels still undelivered after {max_turns} turns ({remaining} left)."
        )
        self.max_turns = max_turns
        self.remaining = remaining
