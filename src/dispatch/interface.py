from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from simulation.registry import PassengerRegistry


class Direction(IntEnum):
    """Travel direction of the car; the value is the floor step."""

    DOWN = -1
    IDLE = 0
    UP = 1


class DispatchPolicy(Protocol):
    """Strategy interface for steering a single car."""

    def next_direction(
        self,
        direction: Direction,
        current_floor: int,
        registry: "PassengerRegistry",
    ) -> Direction:
        """Return the direction the car should travel after this dwell."""
        ...

    def must_stop_at(
        self,
        floor: int,
        direction: Direction,
        registry: "PassengerRegistry",
    ) -> bool:
        """
        Return True when the car has to halt at ``floor``.

        Implementations must be side-effect free; the controller calls them
        while holding its state lock.
        """
        ...
