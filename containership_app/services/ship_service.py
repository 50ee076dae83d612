"""
Ship construction rules and fleet-wide hazard reporting.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TextIO

from containership_app.models import Ship

_LOG = logging.getLogger(__name__)


@dataclass(slots=True)
class ShipValidationError(Exception):
    message: str

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


def create_ship(name: str, max_speed_kn: float, max_containers: int, max_weight_kg: float) -> Ship:
    ship = Ship(
        name=name,
        max_speed_kn=max_speed_kn,
        max_containers=max_containers,
        max_weight_kg=max_weight_kg,
    )
    validate_ship(ship)
    return ship


def validate_ship(ship: Ship) -> None:
    if not ship.name.strip():
        raise ShipValidationError("Ship name is required.")
    if not ship.max_speed_kn > 0:
        raise ShipValidationError("Max speed must be greater than zero.")
    if not ship.max_containers > 0:
        raise ShipValidationError("Max containers must be greater than zero.")
    if not ship.max_weight_kg > 0:
        raise ShipValidationError("Max weight must be greater than zero.")


def send_hazard_notifications(ship: Ship, stream: TextIO | None = None) -> int:
    """Notify for every hazardous container on board. Returns the number sent."""
    sent = 0
    for container in ship.hazardous_containers():
        container.send_hazard_notification(stream)
        sent += 1
    _LOG.info("%d hazard notification(s) sent for %s", sent, ship.name)
    return sent
