"""
Shared pytest fixtures for scanlift tests.
"""

from __future__ import annotations

from typing import Callable, List

import pytest

from simulation import CarConstraints, ElevatorController, ManualClock, StatusSnapshot


@pytest.fixture
def manual_clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def make_controller(manual_clock) -> Callable[..., ElevatorController]:
    """Factory for controllers on virtual time, optionally pre-loaded with riders."""

    def factory(start_floor: int = 0, passengers=(), **constraint_overrides) -> ElevatorController:
        controller = ElevatorController(
            start_floor=start_floor,
            constraints=CarConstraints(**constraint_overrides),
            clock=manual_clock,
        )
        for origin, destination in passengers:
            controller.register(origin, destination)
        return controller

    return factory


@pytest.fixture
def status_log() -> Callable[[ElevatorController], List[StatusSnapshot]]:
    """Attach a recorder to a controller's status events and return its list."""

    def attach(controller: ElevatorController) -> List[StatusSnapshot]:
        statuses: List[StatusSnapshot] = []
        controller.on_event("status", statuses.append)
        return statuses

    return attach
