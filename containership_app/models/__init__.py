"""
Domain models for the containership app.

These are pure Python/domain classes: containers, the ship and the loading errors.
"""

from containership_app.models.errors import (
    LoadingError,
    OverfillError,
    UnsafeLoadError,
    TemperatureError,
    ShipCapacityError,
    InvalidWeightError,
)
from containership_app.models.container import (
    Container,
    ContainerKind,
    HazardNotifier,
    LiquidContainer,
    GasContainer,
    RefrigeratedContainer,
    required_temperature,
)
from containership_app.models.ship import Ship

__all__ = [
    "LoadingError",
    "OverfillError",
    "UnsafeLoadError",
    "TemperatureError",
    "ShipCapacityError",
    "InvalidWeightError",
    "Container",
    "ContainerKind",
    "HazardNotifier",
    "LiquidContainer",
    "GasContainer",
    "RefrigeratedContainer",
    "required_temperature",
    "Ship",
]
