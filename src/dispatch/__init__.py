"""Direction and stopping rules for a single SCAN car."""

from __future__ import annotations

from .eligibility import is_direction_compatible, must_stop_at
from .interface import Direction, DispatchPolicy
from .scan import ScanPolicy, next_direction, requests_above_below

__all__ = [
    "Direction",
    "DispatchPolicy",
    "ScanPolicy",
    "is_direction_compatible",
    "must_stop_at",
    "next_direction",
    "requests_above_below",
]
