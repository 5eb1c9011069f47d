from __future__ import annotations

from typing import TYPE_CHECKING

from .interface import Direction

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from simulation.passenger import Passenger
    from simulation.registry import PassengerRegistry


def is_direction_compatible(direction: Direction, floor: int, passenger: "Passenger") -> bool:
    """Whether a rider waiting at ``floor`` may board a car heading ``direction``.

    An idle car has not committed to a direction yet and accepts anyone.
    """

    if direction == Direction.UP:
        return passenger.destination > floor
    if direction == Direction.DOWN:
        return passenger.destination < floor
    return True


def must_stop_at(floor: int, direction: Direction, registry: "PassengerRegistry") -> bool:
    if any(p.destination == floor for p in registry.onboard):
        return True

    # Only the head of the queue counts; riders behind it never skip ahead.
    front = registry.peek_front_at(floor)
    if front is None or not registry.has_room():
        return False
    return is_direction_compatible(direction, floor, front)
