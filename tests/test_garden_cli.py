import io
import json

import pytest

from smart_garden.control_loops.garden_controller import GardenController
from smart_garden.domain.plants.plant_entity import VegetablePlant
from smart_garden.workers.garden_cli import main, run_simulation


@pytest.fixture()
def controller(scripted_sensor, make_reading, scripted_random):
    sensors = [scripted_sensor("S1", make_reading(humidity=50))]
    return GardenController(sensors, [VegetablePlant("Tomato", "12.5")], rng=scripted_random(*([0.99] * 5)))


def test_run_simulation_prints_each_day_and_sleeps_between(controller):
    out = io.StringIO()
    sleeps = []

    reports = run_simulation(controller, 3, 0.5, out=out, sleep=sleeps.append)

    text = out.getvalue()
    assert len(reports) == 3
    assert sleeps == [0.5, 0.5]
    assert text.startswith("Welcome to the Smart Garden system!")
    for day in (1, 2, 3):
        assert f"=== Day {day} ===" in text
    assert "Greenhouse snapshot: Tomato" in text
    assert text.rstrip().endswith("Greenhouse shutting down. Goodbye!")


def test_run_simulation_json_mode(controller):
    out = io.StringIO()

    run_simulation(controller, 2, 0, as_json=True, out=out, sleep=lambda _: None)

    payloads = [json.loads(line) for line in out.getvalue().splitlines() if line.startswith("{")]
    assert [p["cycle"] for p in payloads] == [1, 2]
    assert payloads[0]["snapshot"][0].startswith("Tomato")


def test_main_runs_default_garden(monkeypatch, tmp_path, capsys, clean_logging):
    monkeypatch.setenv("SMART_GARDEN_LOG_FILE", str(tmp_path / "garden.log"))

    exit_code = main(["--cycles", "2", "--delay", "0", "--seed", "3"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "=== Day 2 ===" in out
    assert "=== Day 3 ===" not in out
    assert (tmp_path / "garden.log").exists()


def test_main_reports_bad_configuration(monkeypatch, capsys):
    monkeypatch.setenv("SMART_GARDEN_CYCLES", "lots")

    assert main([]) == 2
    assert "SMART_GARDEN_CYCLES" in capsys.readouterr().err


def test_main_cycles_flag_overrides_invalid_environment(monkeypatch, tmp_path, capsys, clean_logging):
    monkeypatch.setenv("SMART_GARDEN_LOG_FILE", str(tmp_path / "garden.log"))
    monkeypatch.setenv("SMART_GARDEN_CYCLES", "0")

    exit_code = main(["--cycles", "1", "--delay", "0", "--seed", "1"])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "=== Day 1 ===" in out
    assert "=== Day 2 ===" not in out


def test_main_help_ignores_invalid_environment(monkeypatch, capsys):
    monkeypatch.setenv("SMART_GARDEN_CYCLES", "0")

    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])

    assert excinfo.value.code == 0
    assert "--cycles" in capsys.readouterr().out


def test_main_rejects_non_positive_cycles(monkeypatch, tmp_path):
    monkeypatch.setenv("SMART_GARDEN_LOG_FILE", str(tmp_path / "garden.log"))
    with pytest.raises(SystemExit):
        main(["--cycles", "0"])
