from __future__ import annotations

from dataclasses import dataclass


@dataclass
class CarConstraints:
    """Building and car limits plus the simulated timing of one cycle."""

    num_floors: int = 10
    capacity: int = 9
    travel_interval: float = 2.0  # seconds between adjacent floors
    poll_interval: float = 1.0  # idle re-check period
    allow_late_registration: bool = False

    def __post_init__(self) -> None:
        if self.num_floors < 2:
            raise ValueError(f"num_floors must be at least 2, got {self.num_floors}")
        if self.capacity < 1:
            raise ValueError(f"capacity must be positive, got {self.capacity}")
        if self.travel_interval < 0 or self.poll_interval < 0:
            raise ValueError("travel_interval and poll_interval must not be negative")

    def validate_floor(self, floor: int) -> None:
        if not 0 <= floor < self.num_floors:
            raise ValueError(f"Floor {floor} is out of range (0-{self.num_floors - 1})")
