"""Fewest vehicles needed when each carries at most two loads."""

from __future__ import annotations

from typing import Iterable


def min_vehicles(weights: Iterable[int], limit: int) -> int:
    """Count vehicles, pairing each heaviest load with the lightest one that still fits."""
    ordered = sorted(weights)
    light, heavy = 0, len(ordered) - 1
    vehicles = 0
    while light <= heavy:
        vehicles += 1
        if light < heavy and ordered[light] <= limit - ordered[heavy]:
            light += 1
        heavy -= 1
    return vehicles