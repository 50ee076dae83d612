"""
Simple text-based report builder for a ship and its containers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from containership_app.models import Ship


def format_quantity(value: float) -> str:
    """Full value without a trailing '.0': 25 -> '25', 0.004 -> '0.004'."""
    text = repr(float(value))
    return text[:-2] if text.endswith(".0") else text


def build_ship_info_text(ship: "Ship") -> str:
    lines: list[str] = []
    lines.append(
        f"Ship {ship.name} (Speed: {format_quantity(ship.max_speed_kn)} knots, "
        f"Max Containers: {ship.max_containers}, "
        f"Max Weight: {format_quantity(ship.max_weight_kg)} kg)"
    )
    for container in ship.containers:
        lines.append(
            f"- Container {container.serial_number} "
            f"({format_quantity(container.load_weight)} kg loaded)"
        )
    return "\n".join(lines)
