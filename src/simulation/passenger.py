from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Passenger:
    """Represents a rider travelling between two floors."""

    passenger_id: int
    origin: int
    destination: int
    registered_at: int = 0
    board_time: Optional[int] = None
    alight_time: Optional[int] = None

    def record_boarding(self, tick: int) -> None:
        self.board_time = tick

    def record_alighting(self, tick: int) -> None:
        self.alight_time = tick

    @property
    def wait_time(self) -> Optional[int]:
        if self.board_time is None:
            return None
        return self.board_time - self.registered_at

    @property
    def ride_time(self) -> Optional[int]:
        if self.board_time is None or self.alight_time is None:
            return None
        return self.alight_time - self.board_time
