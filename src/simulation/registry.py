from __future__ import annotations

import itertools
from typing import List, Optional, Tuple

from .config import CarConstraints
from .floor import Floor
from .passenger import Passenger


class PassengerRegistry:
    """Per-floor waiting queues, the onboard set and the progress counters.

    A passenger lives in exactly one place at a time: the queue of its origin
    floor, the onboard list, or nowhere once it has been marked processed.
    The registry does no locking of its own; callers serialize access.
    """

    def __init__(self, constraints: Optional[CarConstraints] = None) -> None:
        self.constraints = constraints or CarConstraints()
        self.floors: List[Floor] = [Floor(i) for i in range(self.constraints.num_floors)]
        self._onboard: List[Passenger] = []
        self._ids = itertools.count(1)
        self.total_registered: int = 0
        self.total_processed: int = 0

    @property
    def num_floors(self) -> int:
        return self.constraints.num_floors

    @property
    def capacity(self) -> int:
        return self.constraints.capacity

    @property
    def onboard(self) -> Tuple[Passenger, ...]:
        return tuple(self._onboard)

    def register(self, origin: int, destination: int, registered_at: int = 0) -> Passenger:
        self.constraints.validate_floor(origin)
        self.constraints.validate_floor(destination)
        if origin == destination:
            raise ValueError(f"Destination must differ from origin (both {origin})")

        passenger = Passenger(
            passenger_id=next(self._ids),
            origin=origin,
            destination=destination,
            registered_at=registered_at,
        )
        self.floors[origin].add_passenger(passenger)
        self.total_registered += 1
        return passenger

    def has_waiting_at(self, floor: int) -> bool:
        return self.floors[floor].has_waiting()

    def peek_front_at(self, floor: int) -> Optional[Passenger]:
        return self.floors[floor].front()

    def dequeue_front_at(self, floor: int) -> Passenger:
        return self.floors[floor].pop_front()

    def has_room(self) -> bool:
        return len(self._onboard) < self.capacity

    def board(self, passenger: Passenger) -> None:
        if not self.has_room():
            raise ValueError(f"Car is full ({self.capacity}); cannot board passenger {passenger.passenger_id}")
        self._onboard.append(passenger)

    def mark_processed(self, passenger: Passenger) -> None:
        try:
            self._onboard.remove(passenger)
        except ValueError:
            raise ValueError(f"Passenger {passenger.passenger_id} is not onboard") from None
        self.total_processed += 1

    def waiting_counts(self) -> Tuple[int, ...]:
        return tuple(len(floor) for floor in self.floors)

    def is_complete(self) -> bool:
        return self.total_processed == self.total_registered and not self._onboard
