from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from typing import List, TextIO

from containership_app.models.container import Container, HazardNotifier
from containership_app.models.errors import ShipCapacityError
from containership_app.reports.simple_text_report import build_ship_info_text

_LOG = logging.getLogger(__name__)


@dataclass(slots=True)
class Ship:
    """
    Ship carrying containers, limited by container count and total cargo weight.

    Containers are only referenced: unloading one from the ship leaves the
    container object (and its cargo) untouched.
    """

    name: str = ""
    max_speed_kn: float = 0.0
    max_containers: int = 0
    max_weight_kg: float = 0.0

    # Load order
    containers: List[Container] = field(default_factory=list)

    @property
    def total_load_weight(self) -> float:
        return sum(c.load_weight for c in self.containers)

    def load_container(self, container: Container) -> None:
        if (
            len(self.containers) >= self.max_containers
            or not self.total_load_weight + container.load_weight <= self.max_weight_kg
        ):
            raise ShipCapacityError("Cannot load container. Ship capacity exceeded.")
        self.containers.append(container)
        _LOG.info("Container %s loaded on %s", container.serial_number, self.name)

    def unload_container(self, container: Container) -> None:
        for i, c in enumerate(self.containers):
            if c is container:
                del self.containers[i]
                _LOG.info("Container %s unloaded from %s", container.serial_number, self.name)
                return

    def hazardous_containers(self) -> List[Container]:
        return [c for c in self.containers if isinstance(c, HazardNotifier)]

    def print_info(self, stream: TextIO | None = None) -> None:
        print(build_ship_info_text(self), file=stream or sys.stdout)
