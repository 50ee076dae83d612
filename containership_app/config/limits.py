"""
Hard-coded loading rules for containers.

Weights are in kg, temperatures in degrees Celsius.
"""

from __future__ import annotations

# Serial numbers look like KON-L-1, KON-G-1, KON-C-1
SERIAL_PREFIX = "KON"

# Liquid containers: max fill as fraction of max load
FUEL_FILL_FRACTION = 0.5
LIQUID_FILL_FRACTION = 0.9
FUEL_PRODUCT = "fuel"

# Gas containers keep this fraction of their load after unloading (pressurized residue)
GAS_RESIDUE_FRACTION = 0.05

# Refrigerated containers: minimum storage temperature per product
REQUIRED_TEMPERATURE_C = {
    "bananas": 10.0,
    "milk": 4.0,
}
DEFAULT_REQUIRED_TEMPERATURE_C = 0.0
