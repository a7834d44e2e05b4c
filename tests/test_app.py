import json
from pathlib import Path

import pytest
from rich.console import Console

from parcelbot.app import resolve_settings, run_benchmark, run_simulation
from parcelbot.sim.errors import ConfigError


def test_resolve_settings_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PARCELBOT_ROBOT", "Improved")
    monkeypatch.setenv("PARCELBOT_SEED", "12")
    monkeypatch.setenv("PARCELBOT_PARCELS", "3")
    monkeypatch.delenv("PARCELBOT_WORLD", raising=False)

    settings = resolve_settings()

    assert settings.robot == "improved"
    assert settings.seed == 12
    assert settings.parcels == 3
    assert settings.world_path is None

    assert resolve_settings(robot="route", parcels=7).robot == "route"
    assert resolve_settings(robot="route", parcels=7).parcels == 7


def test_resolve_settings_rejects_bad_integers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PARCELBOT_SEED", "abc")

    with pytest.raises(ConfigError):
        resolve_settings()


def test_run_simulation_is_reproducible(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("PARCELBOT_WORLD", raising=False)
    settings = resolve_settings(robot="goal", seed=5, parcels=5)
    console = Console(width=120, record=True)

    first = run_simulation(settings, console=console)
    second = run_simulation(settings, console=Console(width=120), quiet=True)

    assert first == second
    output = console.export_text()
    assert "Turn 1" in output
    assert f"goal: done in {first} turns" in output


def test_run_simulation_with_world_file(tmp_path: Path) -> None:
    path = tmp_path / "village.json"
    path.write_text(
        json.dumps(
            {
                "roads": ["A-B", "B-C"],
                "hub": "A",
                "mail_route": ["B", "C", "B", "A"],
            }
        ),
        encoding="utf-8",
    )
    settings = resolve_settings(robot="route", seed=1, parcels=2, world_path=path)

    turns = run_simulation(settings, console=Console(width=120), quiet=True)

    assert turns > 0


def test_run_benchmark_prints_table() -> None:
    settings = resolve_settings(seed=3, parcels=5)
    console = Console(width=120, record=True)

    result = run_benchmark(
        settings, 5, robot_names=["goal", "improved", "goal"], console=console
    )

    assert list(result.averages) == ["goal", "improved"]
    assert "Average turns over 5 trials" in console.export_text()
