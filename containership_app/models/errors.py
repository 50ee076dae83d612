"""
Errors raised when a loading rule is violated.
"""

from __future__ import annotations


class LoadingError(Exception):
    """Base class for every rejected load or registration."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class OverfillError(LoadingError):
    """Load would exceed the container's maximum load."""


class UnsafeLoadError(LoadingError):
    """Liquid container fill fraction exceeded."""


class TemperatureError(LoadingError):
    """Refrigerated container is colder than its product requires."""


class ShipCapacityError(LoadingError):
    """Ship container count or total weight cap exceeded."""


class InvalidWeightError(LoadingError, ValueError):
    """Negative cargo weight."""
