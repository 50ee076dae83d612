"""
Container construction: serial number assignment and configuration checks.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Dict, Type

from containership_app.config.limits import SERIAL_PREFIX
from containership_app.models import (
    Container,
    ContainerKind,
    GasContainer,
    LiquidContainer,
    RefrigeratedContainer,
)

_LOG = logging.getLogger(__name__)

_CONTAINER_CLASSES: Dict[ContainerKind, Type[Container]] = {
    ContainerKind.LIQUID: LiquidContainer,
    ContainerKind.GAS: GasContainer,
    ContainerKind.REFRIGERATED: RefrigeratedContainer,
}

_NON_NEGATIVE_FIELDS = ("height_cm", "depth_cm", "own_weight_kg", "max_load_kg")


class ContainerValidationError(Exception):
    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class SerialNumberSequence:
    """Per-type serial counters starting at 1: KON-L-1, KON-L-2, KON-G-1, ..."""

    def __init__(self, prefix: str = SERIAL_PREFIX) -> None:
        self._prefix = prefix
        self._counters: Dict[ContainerKind, int] = {}
        self._lock = threading.Lock()

    def next(self, kind: ContainerKind) -> str:
        with self._lock:
            n = self._counters.get(kind, 0) + 1
            self._counters[kind] = n
        return f"{self._prefix}-{kind.value}-{n}"

    def reset(self) -> None:
        with self._lock:
            self._counters.clear()


class ContainerFactory:
    """Builds configured containers, drawing serials from its sequence."""

    def __init__(self, sequence: SerialNumberSequence | None = None) -> None:
        self._sequence = sequence or SerialNumberSequence()

    @property
    def sequence(self) -> SerialNumberSequence:
        return self._sequence

    def create(self, kind: ContainerKind, **fields: Any) -> Container:
        self._validate(fields)
        cls = _CONTAINER_CLASSES[kind]
        container = cls(serial_number=self._sequence.next(kind), **fields)
        _LOG.debug("Created %s (max load %s kg)", container.serial_number, container.max_load_kg)
        return container

    def liquid(
        self,
        max_load_kg: float,
        product_type: str = "",
        pressure_bar: float = 0.0,
        **fields: Any,
    ) -> LiquidContainer:
        return self.create(  # type: ignore[return-value]
            ContainerKind.LIQUID,
            max_load_kg=max_load_kg,
            product_type=product_type,
            pressure_bar=pressure_bar,
            **fields,
        )

    def gas(self, max_load_kg: float, pressure_bar: float = 0.0, **fields: Any) -> GasContainer:
        return self.create(  # type: ignore[return-value]
            ContainerKind.GAS,
            max_load_kg=max_load_kg,
            pressure_bar=pressure_bar,
            **fields,
        )

    def refrigerated(
        self,
        max_load_kg: float,
        product_type: str = "",
        temperature_c: float = 0.0,
        **fields: Any,
    ) -> RefrigeratedContainer:
        return self.create(  # type: ignore[return-value]
            ContainerKind.REFRIGERATED,
            max_load_kg=max_load_kg,
            product_type=product_type,
            temperature_c=temperature_c,
            **fields,
        )

    def _validate(self, fields: Dict[str, Any]) -> None:
        for name in _NON_NEGATIVE_FIELDS:
            value = fields.get(name, 0.0)
            if not value >= 0:
                raise ContainerValidationError(f"{name} must be zero or more (got {value}).")
