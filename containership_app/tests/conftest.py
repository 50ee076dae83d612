"""Pytest configuration and fixtures."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure project root is on path when running tests
_project_root = Path(__file__).resolve().parents[2]
if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

from containership_app.models import Ship
from containership_app.services.container_factory import ContainerFactory


@pytest.fixture
def factory():
    """Fresh factory so serial numbers start at 1 in every test."""
    return ContainerFactory()


@pytest.fixture
def sample_ship():
    return Ship(name="Test Vessel", max_speed_kn=25, max_containers=3, max_weight_kg=5000)


@pytest.fixture
def milk_tank(factory):
    return factory.liquid(max_load_kg=1000, product_type="milk")


@pytest.fixture
def fuel_tank(factory):
    return factory.liquid(max_load_kg=1000, product_type="fuel")


@pytest.fixture
def gas_container(factory):
    return factory.gas(max_load_kg=2000)


@pytest.fixture
def banana_reefer(factory):
    return factory.refrigerated(max_load_kg=1500, product_type="bananas", temperature_c=12.0)
