"""
Application entry point for the containership app.

Runs a fixed loading scenario: three containers are filled and put on a
ship, one of them is rejected, and the ship manifest is printed before and
after a container is taken off again.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from containership_app.config.settings import Settings, init_logging
from containership_app.models import Container, LoadingError, Ship
from containership_app.services.container_factory import ContainerFactory
from containership_app.services.ship_service import create_ship

_LOG = logging.getLogger(__name__)


def run_scenario(stream: TextIO | None = None, factory: ContainerFactory | None = None) -> Ship:
    out = stream or sys.stdout
    factory = factory or ContainerFactory()

    ship = create_ship("Ship 1", max_speed_kn=25, max_containers=100, max_weight_kg=40000)

    container1: Container = factory.liquid(max_load_kg=1000, product_type="milk")
    container2: Container = factory.gas(max_load_kg=2000)
    container3: Container = factory.refrigerated(
        max_load_kg=1500, product_type="bananas", temperature_c=5
    )

    try:
        container1.load(500)
        ship.load_container(container1)
        container2.load(1500)
        ship.load_container(container2)
        container3.load(1000)
        ship.load_container(container3)
        ship.print_info(out)
    except LoadingError as exc:
        _LOG.warning("Loading stopped: %s", exc.message)
        print(exc.message, file=out)

    ship.unload_container(container1)
    print("\nAfter unloading container 1:", file=out)
    ship.print_info(out)
    return ship


def main() -> None:
    """Bootstraps logging and runs the loading scenario."""
    settings = Settings.default()
    init_logging(settings)
    run_scenario()


if __name__ == "__main__":
    main()
