"""Rich rendering for turn records and benchmark results."""

from __future__ import annotations

from rich.console import RenderableType
from rich.table import Table
from rich.text import Text

from parcelbot.sim.contracts import BenchmarkResult, ParcelSnapshot, TurnRecord


def render_turn(record: TurnRecord, *, max_parcels: int = 5) -> RenderableType:
    line = Text()
    line.append(f"Turn {record.turn}", style="bold")
    line.append(" ")
    if record.moved:
        line.append(f"-> {record.direction}", style="cyan")
    else:
        line.append(f"x {record.direction} (not a road)", style="red")
    line.append(f"  {record.remaining} left", style="dim")
    if record.parcels:
        line.append("  ")
        line.append(_format_parcels(record.parcels, max_parcels=max_parcels))
    return line


def render_summary(robot_name: str, turns: int) -> RenderableType:
    return Text(f"{robot_name}: done in {turns} turns", style="bold green")


def render_benchmark(result: BenchmarkResult) -> RenderableType:
    table = Table(
        title=f"Average turns over {result.trials} trials "
        f"({result.parcel_count} parcels)",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Robot")
    table.add_column("Average", justify="right")
    table.add_column("Total", justify="right")

    best = result.best()
    for name, average in result.averages.items():
        style = "green" if name == best else None
        table.add_row(name, f"{average:.2f}", str(result.totals[name]), style=style)
    if not result.averages:
        table.add_row("-", "None", "-")
    return table


def _format_parcels(parcels: list[ParcelSnapshot], *, max_parcels: int) -> str:
    shown = [f"{parcel.place} > {parcel.address}" for parcel in parcels[:max_parcels]]
    hidden = len(parcels) - len(shown)
    if hidden > 0:
        shown.append(f"+{hidden} more")
    return "; ".join(shown)
