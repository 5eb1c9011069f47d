from __future__ import annotations

from dataclasses import dataclass

from dispatch.interface import Direction


@dataclass
class Car:
    """Position and heading of the single elevator car."""

    num_floors: int
    current_floor: int = 0
    direction: Direction = Direction.IDLE

    def __post_init__(self) -> None:
        if not 0 <= self.current_floor < self.num_floors:
            raise ValueError(
                f"Starting floor {self.current_floor} is out of range (0-{self.num_floors - 1})"
            )

    @property
    def is_idle(self) -> bool:
        return self.direction == Direction.IDLE

    def advance(self) -> int:
        """Move one floor toward the current direction, staying inside the shaft."""
        target = self.current_floor + int(self.direction)
        self.current_floor = min(max(target, 0), self.num_floors - 1)
        return self.current_floor
