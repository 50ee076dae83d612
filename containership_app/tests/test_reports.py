"""Tests for the ship manifest text and the loading scenario."""

from __future__ import annotations

import io
import logging

from containership_app.config.settings import Settings, init_logging
from containership_app.main import run_scenario
from containership_app.models import Ship
from containership_app.reports import build_ship_info_text
from containership_app.reports.simple_text_report import format_quantity


def test_format_quantity() -> None:
    assert format_quantity(25) == "25"
    assert format_quantity(40000.0) == "40000"
    assert format_quantity(75.5) == "75.5"
    assert format_quantity(1234567) == "1234567"
    assert format_quantity(0.004) == "0.004"


def test_small_load_not_rounded_away(sample_ship, gas_container) -> None:
    gas_container.load(0.004)
    sample_ship.load_container(gas_container)
    assert build_ship_info_text(sample_ship).splitlines()[-1] == (
        "- Container KON-G-1 (0.004 kg loaded)"
    )


def test_ship_info_text(sample_ship, milk_tank, gas_container) -> None:
    milk_tank.load(500)
    sample_ship.load_container(milk_tank)
    sample_ship.load_container(gas_container)
    assert build_ship_info_text(sample_ship) == (
        "Ship Test Vessel (Speed: 25 knots, Max Containers: 3, Max Weight: 5000 kg)\n"
        "- Container KON-L-1 (500 kg loaded)\n"
        "- Container KON-G-1 (0 kg loaded)"
    )


def test_print_info(capsys) -> None:
    Ship(name="Empty", max_speed_kn=12.5, max_containers=1, max_weight_kg=10).print_info()
    assert capsys.readouterr().out == (
        "Ship Empty (Speed: 12.5 knots, Max Containers: 1, Max Weight: 10 kg)\n"
    )


def test_scenario_output(capsys) -> None:
    ship = run_scenario()
    out = capsys.readouterr().out
    assert out == (
        "Temperature too low for bananas!\n"
        "\n"
        "After unloading container 1:\n"
        "Ship Ship 1 (Speed: 25 knots, Max Containers: 100, Max Weight: 40000 kg)\n"
        "- Container KON-G-1 (1500 kg loaded)\n"
    )
    assert [c.serial_number for c in ship.containers] == ["KON-G-1"]


def test_scenario_to_stream() -> None:
    buf = io.StringIO()
    run_scenario(buf)
    assert "Temperature too low for bananas!" in buf.getvalue()


def test_scenario_before_rejection_registers_two(capsys) -> None:
    ship = run_scenario()
    capsys.readouterr()
    # container 1 was taken off again; the reefer never made it on board
    assert ship.total_load_weight == 1500


def test_init_logging_file(tmp_path) -> None:
    log_file = tmp_path / "logs" / "containership.log"
    settings = Settings(project_root=tmp_path, log_level=logging.DEBUG, log_file=log_file)
    root = logging.getLogger()
    saved = root.handlers[:]
    saved_level = root.level
    root.handlers.clear()
    try:
        init_logging(settings)
        assert log_file.exists()
        assert any(isinstance(h, logging.FileHandler) for h in root.handlers)
    finally:
        for h in root.handlers:
            h.close()
        root.handlers[:] = saved
        root.setLevel(saved_level)


def test_default_settings() -> None:
    settings = Settings.default()
    assert settings.log_file is None
    assert settings.log_level == logging.INFO
    assert (settings.project_root / "containership_app").is_dir()
