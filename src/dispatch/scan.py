from __future__ import annotations

from typing import TYPE_CHECKING, Tuple

from .eligibility import must_stop_at
from .interface import Direction

if TYPE_CHECKING:  # pragma: no cover - import cycle safe typing
    from simulation.registry import PassengerRegistry


def requests_above_below(current_floor: int, registry: "PassengerRegistry") -> Tuple[bool, bool]:
    """Scan onboard destinations and waiting floors relative to the car."""

    above = any(p.destination > current_floor for p in registry.onboard)
    below = any(p.destination < current_floor for p in registry.onboard)
    for floor in range(registry.num_floors):
        if above and below:
            break
        if not registry.has_waiting_at(floor):
            continue
        if floor > current_floor:
            above = True
        elif floor < current_floor:
            below = True
    return above, below


def next_direction(
    direction: Direction, current_floor: int, registry: "PassengerRegistry"
) -> Direction:
    above, below = requests_above_below(current_floor, registry)

    if direction == Direction.UP:
        if above:
            return Direction.UP
        return Direction.DOWN if below else Direction.IDLE
    if direction == Direction.DOWN:
        if below:
            return Direction.DOWN
        return Direction.UP if above else Direction.IDLE

    # An idle car looks downward first.
    if below:
        return Direction.DOWN
    if above:
        return Direction.UP
    return Direction.IDLE


class ScanPolicy:
    """Implements SCAN continuation: keep going until a side runs dry."""

    def next_direction(
        self,
        direction: Direction,
        current_floor: int,
        registry: "PassengerRegistry",
    ) -> Direction:
        return next_direction(direction, current_floor, registry)

    def must_stop_at(
        self,
        floor: int,
        direction: Direction,
        registry: "PassengerRegistry",
    ) -> bool:
        return must_stop_at(floor, direction, registry)
