from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Optional

from .passenger import Passenger


@dataclass
class Floor:
    """A floor with a single FIFO queue of waiting riders."""

    number: int
    queue: Deque[Passenger] = field(default_factory=deque)

    def add_passenger(self, passenger: Passenger) -> None:
        self.queue.append(passenger)

    def has_waiting(self) -> bool:
        return bool(self.queue)

    def front(self) -> Optional[Passenger]:
        return self.queue[0] if self.queue else None

    def pop_front(self) -> Passenger:
        if not self.queue:
            raise IndexError(f"No passengers waiting at floor {self.number}")
        return self.queue.popleft()

    def __len__(self) -> int:
        return len(self.queue)
