"""Unit tests for the SCAN direction policy and stop eligibility."""

from __future__ import annotations

import pytest

from dispatch import (
    Direction,
    ScanPolicy,
    is_direction_compatible,
    must_stop_at,
    next_direction,
    requests_above_below,
)
from simulation import CarConstraints, PassengerRegistry

UP, DOWN, IDLE = Direction.UP, Direction.DOWN, Direction.IDLE


def onboard(registry: PassengerRegistry, origin: int, destination: int):
    registry.register(origin, destination)
    passenger = registry.dequeue_front_at(origin)
    registry.board(passenger)
    return passenger


@pytest.fixture
def registry() -> PassengerRegistry:
    return PassengerRegistry()


# =============================================================================
# requests_above_below
# =============================================================================


class TestRequestsAboveBelow:
    def test_nothing_pending(self, registry):
        assert requests_above_below(4, registry) == (False, False)

    def test_onboard_destinations(self, registry):
        onboard(registry, 4, 7)
        onboard(registry, 4, 1)
        assert requests_above_below(4, registry) == (True, True)

    def test_waiting_floors(self, registry):
        registry.register(8, 9)
        assert requests_above_below(4, registry) == (True, False)
        registry.register(2, 9)
        assert requests_above_below(4, registry) == (True, True)

    def test_waiting_at_current_floor_is_neither(self, registry):
        # Only the floor of the queue matters, not where its riders are going.
        registry.register(4, 9)
        registry.register(4, 0)
        assert requests_above_below(4, registry) == (False, False)

    def test_waiting_floor_counts_regardless_of_destination(self, registry):
        registry.register(6, 0)
        assert requests_above_below(4, registry) == (True, False)


# =============================================================================
# next_direction
# =============================================================================


class TestNextDirection:
    @pytest.mark.parametrize(
        "current,above,below,expected",
        [
            (UP, True, False, UP),
            (UP, True, True, UP),
            (UP, False, True, DOWN),
            (UP, False, False, IDLE),
            (DOWN, False, True, DOWN),
            (DOWN, True, True, DOWN),
            (DOWN, True, False, UP),
            (DOWN, False, False, IDLE),
            (IDLE, True, True, DOWN),
            (IDLE, False, True, DOWN),
            (IDLE, True, False, UP),
            (IDLE, False, False, IDLE),
        ],
    )
    def test_decision_table(self, registry, current, above, below, expected):
        if above:
            registry.register(8, 9)
        if below:
            registry.register(1, 0)
        assert next_direction(current, 5, registry) == expected

    def test_idle_prefers_down_even_when_above_is_closer(self, registry):
        registry.register(6, 9)
        registry.register(0, 3)
        assert next_direction(IDLE, 5, registry) == DOWN

    def test_moving_up_keeps_going_while_rider_needs_higher_floor(self, registry):
        onboard(registry, 2, 7)
        registry.register(0, 9)
        assert next_direction(UP, 3, registry) == UP

    def test_policy_object_delegates(self, registry):
        registry.register(1, 0)
        assert ScanPolicy().next_direction(IDLE, 5, registry) == DOWN


# =============================================================================
# stop eligibility
# =============================================================================


class TestDirectionCompatibility:
    @pytest.mark.parametrize(
        "direction,destination,expected",
        [
            (UP, 8, True),
            (UP, 2, False),
            (DOWN, 2, True),
            (DOWN, 8, False),
            (IDLE, 8, True),
            (IDLE, 2, True),
        ],
    )
    def test_compatibility(self, registry, direction, destination, expected):
        passenger = registry.register(5, destination)
        assert is_direction_compatible(direction, 5, passenger) is expected


class TestMustStopAt:
    def test_empty_floor_no_riders(self, registry):
        assert not must_stop_at(3, UP, registry)

    def test_dropoff_always_stops(self, registry):
        onboard(registry, 0, 3)
        assert must_stop_at(3, UP, registry)
        assert must_stop_at(3, DOWN, registry)

    def test_compatible_front_stops(self, registry):
        registry.register(3, 6)
        assert must_stop_at(3, UP, registry)
        assert must_stop_at(3, IDLE, registry)

    def test_incompatible_front_does_not_stop(self, registry):
        registry.register(3, 6)
        assert not must_stop_at(3, DOWN, registry)

    def test_only_front_of_queue_is_considered(self, registry):
        registry.register(3, 0)
        registry.register(3, 6)
        assert not must_stop_at(3, UP, registry)

    def test_full_car_skips_pickup(self):
        registry = PassengerRegistry(CarConstraints(capacity=1))
        onboard(registry, 0, 9)
        registry.register(3, 6)
        assert not must_stop_at(3, UP, registry)

    def test_full_car_still_stops_for_dropoff(self):
        registry = PassengerRegistry(CarConstraints(capacity=1))
        onboard(registry, 0, 3)
        registry.register(3, 6)
        assert must_stop_at(3, UP, registry)

    def test_policy_object_delegates(self, registry):
        registry.register(3, 6)
        assert ScanPolicy().must_stop_at(3, UP, registry)
