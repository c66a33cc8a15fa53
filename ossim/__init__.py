"""Simulators for CPU scheduling, page replacement, deadlock avoidance and load pairing."""

__version__ = "0.1.0"

__all__ = [
    "bankers",
    "models",
    "nonpreemptive",
    "paging",
    "priority",
    "srtf",
    "vehicles",
]