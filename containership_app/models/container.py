"""
Cargo containers and their load-acceptance rules.

Every variant overrides the base behaviour through ordinary method
overriding, so a container behaves the same whether it is handled as a
``Container`` or as its concrete type. Variant-specific pre-checks run in
``_check_load`` before the base overfill check, which always applies.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Protocol, TextIO, runtime_checkable

from containership_app.config.limits import (
    DEFAULT_REQUIRED_TEMPERATURE_C,
    FUEL_FILL_FRACTION,
    FUEL_PRODUCT,
    GAS_RESIDUE_FRACTION,
    LIQUID_FILL_FRACTION,
    REQUIRED_TEMPERATURE_C,
)
from containership_app.models.errors import (
    InvalidWeightError,
    OverfillError,
    TemperatureError,
    UnsafeLoadError,
)

_LOG = logging.getLogger(__name__)


class ContainerKind(Enum):
    """Container type; the value is the code used in serial numbers."""

    LIQUID = "L"
    GAS = "G"
    REFRIGERATED = "C"


@runtime_checkable
class HazardNotifier(Protocol):
    """Capability of containers whose cargo is considered dangerous."""

    def send_hazard_notification(self, stream: TextIO | None = None) -> None:
        ...


def required_temperature(product_type: str) -> float:
    """Minimum storage temperature (C) for a refrigerated product."""
    return REQUIRED_TEMPERATURE_C.get(product_type, DEFAULT_REQUIRED_TEMPERATURE_C)


@dataclass(slots=True, eq=False)
class Container:
    """
    Base container: plain overfill rule, unloading empties it completely.

    Equality is identity, so a ship removes exactly the object it was given.
    """

    serial_number: str
    height_cm: float = 0.0
    depth_cm: float = 0.0
    own_weight_kg: float = 0.0
    max_load_kg: float = 0.0

    # Current cargo mass; only load()/unload() change it
    load_weight: float = field(default=0.0, init=False)

    @property
    def hazardous(self) -> bool:
        return isinstance(self, HazardNotifier)

    def load(self, weight: float) -> None:
        # Checks are written positively so NaN is rejected too
        if not weight >= 0:
            raise InvalidWeightError(f"Cargo weight must be zero or more (got {weight}).")
        self._check_load(weight)
        if not weight + self.load_weight <= self.max_load_kg:
            raise OverfillError("Overload! The load exceeds the container capacity.")
        self.load_weight += weight
        _LOG.debug("%s loaded %s kg (now %s kg)", self.serial_number, weight, self.load_weight)

    def unload(self) -> None:
        self.load_weight = 0.0

    def _check_load(self, weight: float) -> None:
        """Variant rule evaluated before the overfill check. Base has none."""


@dataclass(slots=True, eq=False)
class LiquidContainer(Container):
    """Liquid cargo; fuel may fill half the container, anything else 90 %."""

    KIND: ClassVar[ContainerKind] = ContainerKind.LIQUID

    product_type: str = ""
    pressure_bar: float = 0.0

    @property
    def allowed_fraction(self) -> float:
        return FUEL_FILL_FRACTION if self.product_type == FUEL_PRODUCT else LIQUID_FILL_FRACTION

    def _check_load(self, weight: float) -> None:
        if not weight + self.load_weight <= self.max_load_kg * self.allowed_fraction:
            raise UnsafeLoadError("Unsafe loading attempt.")

    def send_hazard_notification(self, stream: TextIO | None = None) -> None:
        _LOG.warning("Hazard reported for %s", self.serial_number)
        print(
            f"Hazard: Liquid container {self.serial_number} has a dangerous situation.",
            file=stream or sys.stdout,
        )


@dataclass(slots=True, eq=False)
class GasContainer(Container):
    """Pressurized gas; unloading leaves a residue behind."""

    KIND: ClassVar[ContainerKind] = ContainerKind.GAS

    pressure_bar: float = 0.0

    def unload(self) -> None:
        self.load_weight *= GAS_RESIDUE_FRACTION

    def send_hazard_notification(self, stream: TextIO | None = None) -> None:
        _LOG.warning("Hazard reported for %s", self.serial_number)
        print(
            f"Hazard: Gas container {self.serial_number} has a dangerous situation.",
            file=stream or sys.stdout,
        )


@dataclass(slots=True, eq=False)
class RefrigeratedContainer(Container):
    KIND: ClassVar[ContainerKind] = ContainerKind.REFRIGERATED

    product_type: str = ""
    temperature_c: float = 0.0

    def _check_load(self, weight: float) -> None:
        if not self.temperature_c >= required_temperature(self.product_type):
            raise TemperatureError(f"Temperature too low for {self.product_type}!")
