from __future__ import annotations

import logging
import threading
from dataclasses import asdict, dataclass
from typing import Callable, Dict, List, Optional, Tuple

from dispatch import Direction, DispatchPolicy, ScanPolicy, is_direction_compatible

from .car import Car
from .clock import Clock, SystemClock
from .config import CarConstraints
from .metrics import MetricsTracker
from .passenger import Passenger
from .registry import PassengerRegistry

logger = logging.getLogger(__name__)

Event = Tuple[str, object]


class RegistrationClosedError(RuntimeError):
    """Raised when a passenger is registered after the control loop started."""


@dataclass(frozen=True)
class StatusSnapshot:
    """What the renderer sees once per cycle."""

    tick: int
    current_floor: int
    direction: Direction
    onboard_count: int
    capacity: int
    waiting_counts: Tuple[int, ...]
    total_registered: int
    total_processed: int

    @property
    def is_complete(self) -> bool:
        return self.total_processed == self.total_registered and self.onboard_count == 0

    def to_dict(self) -> dict:
        data = asdict(self)
        data["direction"] = self.direction.name
        data["waiting_counts"] = list(self.waiting_counts)
        return data


class ElevatorController:
    """Drives one car through dwell-and-move cycles until every rider is delivered.

    All shared state (registry, car, counters) sits behind one condition
    variable. A cycle's dwell (disembark, board, redirect) happens inside a
    single critical section; the lock is given up while the car travels or
    idles so registrations and ``stop()`` can get in between cycles.
    """

    def __init__(
        self,
        start_floor: int = 0,
        constraints: Optional[CarConstraints] = None,
        policy: Optional[DispatchPolicy] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self.constraints = constraints or CarConstraints()
        self.registry = PassengerRegistry(self.constraints)
        self.car = Car(num_floors=self.constraints.num_floors, current_floor=start_floor)
        self.policy: DispatchPolicy = policy or ScanPolicy()
        self.clock: Clock = clock or SystemClock()
        self.metrics = MetricsTracker()
        self.current_tick: int = 0
        self.event_hooks: Dict[str, List[Callable[[object], None]]] = {}
        self._condition = threading.Condition()
        self._thread: Optional[threading.Thread] = None
        self._started = False
        self._running = False
        self._halt = False
        self._registrations = 0
        self._registrations_seen = 0

    # -- registration / lifecycle -------------------------------------------------

    def register(self, origin: int, destination: int) -> Passenger:
        with self._condition:
            if self._started and not self.constraints.allow_late_registration:
                raise RegistrationClosedError("Passengers must be registered before the control loop starts")
            passenger = self.registry.register(origin, destination, registered_at=self.current_tick)
            self._registrations += 1
            self._condition.notify_all()
        logger.info(
            "Registered passenger %d waiting at floor %d going to floor %d",
            passenger.passenger_id,
            origin,
            destination,
        )
        self._emit("register", {"passenger": passenger, "tick": passenger.registered_at})
        return passenger

    def start(self) -> threading.Thread:
        self._mark_started()
        self._thread = threading.Thread(target=self._run_loop, name="elevator-control", daemon=True)
        self._thread.start()
        return self._thread

    def run(self) -> None:
        """Run the control loop on the calling thread until it terminates."""
        self._mark_started()
        self._run_loop()

    def stop(self) -> None:
        with self._condition:
            self._halt = True
            self._condition.notify_all()
        logger.info("Stop requested at tick %d", self.current_tick)

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for the worker thread; returns True once it has exited."""
        if self._thread is None:
            return not self.is_running
        self._thread.join(timeout)
        return not self._thread.is_alive()

    @property
    def is_running(self) -> bool:
        with self._condition:
            return self._running

    @property
    def started(self) -> bool:
        with self._condition:
            return self._started

    def is_complete(self) -> bool:
        with self._condition:
            return self.registry.is_complete()

    def snapshot(self) -> StatusSnapshot:
        with self._condition:
            return self._snapshot_locked()

    def on_event(self, event: str, callback: Callable[[object], None]) -> None:
        self.event_hooks.setdefault(event, []).append(callback)

    # -- cycle ----------------------------------------------------------------------

    def step(self) -> StatusSnapshot:
        """One full cycle: dwell, report, then travel or idle."""
        snapshot = self.tick()
        self._advance()
        return snapshot

    def tick(self) -> StatusSnapshot:
        """Disembark, board and redirect as one atomic transition."""
        events: List[Event] = []
        with self._condition:
            floor = self.car.current_floor
            dwelled = self.policy.must_stop_at(floor, self.car.direction, self.registry)
            if dwelled:
                events.append(("dwell", {"floor": floor, "tick": self.current_tick}))
                self._disembark(floor, events)
                self._board(floor, events)

            new_direction = self.policy.next_direction(self.car.direction, floor, self.registry)
            if new_direction != self.car.direction:
                self._change_direction(new_direction, events)
                # Riders skipped under the old heading get a chance under the new one.
                if self.policy.must_stop_at(floor, new_direction, self.registry):
                    if not dwelled:
                        events.append(("dwell", {"floor": floor, "tick": self.current_tick}))
                    self._board(floor, events)
                    self._change_direction(
                        self.policy.next_direction(new_direction, floor, self.registry), events
                    )

            snapshot = self._snapshot_locked()
            self._registrations_seen = self._registrations
            self.current_tick += 1

        for name, payload in events:
            self._emit(name, payload)
        self._emit("status", snapshot)
        return snapshot

    def _run_loop(self) -> None:
        with self._condition:
            waiting = self.registry.total_registered
        logger.info(
            "Control loop started at floor %d with %d passenger(s)", self.car.current_floor, waiting
        )
        try:
            while True:
                with self._condition:
                    halted = self._halt
                    complete = self.registry.is_complete()
                    tick = self.current_tick
                if halted:
                    logger.info("Control loop stopped at tick %d", tick)
                    self._emit("stopped", {"tick": tick, "snapshot": self.snapshot()})
                    break
                if complete:
                    logger.info("All passengers delivered after %d tick(s)", tick)
                    self._emit("complete", {"tick": tick, "snapshot": self.snapshot()})
                    break
                self.step()
        finally:
            with self._condition:
                self._running = False

    def _mark_started(self) -> None:
        with self._condition:
            if self._started:
                raise RuntimeError("Control loop already started")
            self._started = True
            self._running = True

    def _disembark(self, floor: int, events: List[Event]) -> None:
        leaving = [p for p in self.registry.onboard if p.destination == floor]
        for passenger in leaving:
            self.registry.mark_processed(passenger)
            passenger.record_alighting(self.current_tick)
            self.metrics.record_ride_time(passenger)
            logger.info("Passenger %d getting off at floor %d", passenger.passenger_id, floor)
            events.append(("disembark", {"passenger": passenger, "floor": floor, "tick": self.current_tick}))

    def _board(self, floor: int, events: List[Event]) -> None:
        direction = self.car.direction
        while self.registry.has_room():
            front = self.registry.peek_front_at(floor)
            if front is None or not is_direction_compatible(direction, floor, front):
                break
            passenger = self.registry.dequeue_front_at(floor)
            self.registry.board(passenger)
            passenger.record_boarding(self.current_tick)
            self.metrics.record_wait_time(passenger)
            logger.info(
                "Passenger %d boarding at floor %d going to floor %d",
                passenger.passenger_id,
                floor,
                passenger.destination,
            )
            events.append(("board", {"passenger": passenger, "floor": floor, "tick": self.current_tick}))

    def _change_direction(self, direction: Direction, events: List[Event]) -> None:
        if direction == self.car.direction:
            return
        logger.debug(
            "Direction %s -> %s at floor %d", self.car.direction.name, direction.name, self.car.current_floor
        )
        events.append(
            ("direction", {"from": self.car.direction, "to": direction, "floor": self.car.current_floor})
        )
        self.car.direction = direction

    def _advance(self) -> None:
        with self._condition:
            if self.car.is_idle:
                seen = self._registrations_seen
                self.clock.wait(
                    self._condition,
                    self.constraints.poll_interval,
                    lambda: self._halt or self._registrations != seen or self.registry.is_complete(),
                )
                return

            self.clock.wait(self._condition, self.constraints.travel_interval, lambda: self._halt)
            if self._halt:
                return
            previous = self.car.current_floor
            self.car.advance()
            logger.debug("Car moved %s from floor %d to %d", self.car.direction.name, previous, self.car.current_floor)

    def _snapshot_locked(self) -> StatusSnapshot:
        return StatusSnapshot(
            tick=self.current_tick,
            current_floor=self.car.current_floor,
            direction=self.car.direction,
            onboard_count=len(self.registry.onboard),
            capacity=self.registry.capacity,
            waiting_counts=self.registry.waiting_counts(),
            total_registered=self.registry.total_registered,
            total_processed=self.registry.total_processed,
        )

    def _emit(self, event: str, payload: object) -> None:
        for callback in self.event_hooks.get(event, []):
            callback(payload)
