"""Build and run controllers from JSON-style scenario dictionaries.

A scenario looks like::

    {
        "name": "single-rider",
        "description": "One rider from the lobby to floor 5",
        "start_floor": 0,
        "constraints": {"capacity": 9, "travel_interval": 2.0},
        "passengers": [[0, 5]],
        "realtime": false,
        "max_ticks": 500
    }

Scenarios run on a :class:`ManualClock` unless ``realtime`` is set, so an
offline run finishes as fast as the loop can spin.
"""

from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Dict, List

from .clock import ManualClock, SystemClock
from .config import CarConstraints
from .controller import ElevatorController, StatusSnapshot

logger = logging.getLogger(__name__)

DEFAULT_MAX_TICKS = 1000


def build_controller(config: Dict) -> ElevatorController:
    constraints = CarConstraints(**config.get("constraints", {}))
    clock = SystemClock() if config.get("realtime", False) else ManualClock()
    controller = ElevatorController(
        start_floor=config.get("start_floor", 0),
        constraints=constraints,
        clock=clock,
    )
    for entry in config.get("passengers", []):
        origin, destination = entry
        controller.register(origin, destination)
    return controller


def run_scenario(controller: ElevatorController, config: Dict) -> Dict:
    """Run ``controller`` to completion on this thread and collect results."""

    max_ticks = config.get("max_ticks", DEFAULT_MAX_TICKS)
    statuses: List[Dict] = []

    def record(snapshot: StatusSnapshot) -> None:
        statuses.append(snapshot.to_dict())
        if snapshot.tick + 1 >= max_ticks:
            logger.warning("Scenario hit max_ticks=%d before completing; stopping", max_ticks)
            controller.stop()

    controller.on_event("status", record)
    controller.run()

    final = controller.snapshot()
    return {
        "scenario": config.get("name", "unnamed"),
        "description": config.get("description"),
        "completed": controller.is_complete(),
        "ticks": final.tick,
        "final_status": final.to_dict(),
        "final_metrics": asdict(controller.metrics.snapshot(final.tick)),
        "status_over_time": statuses,
    }
