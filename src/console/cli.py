"""Interactive elevator simulation: enter riders, then watch the car serve them."""
from __future__ import annotations

import argparse
import logging
import sys
from functools import partial
from typing import List, Optional, Sequence, Tuple

from simulation import CarConstraints, ElevatorController, StatusSnapshot
from simulation import logging_config

from .prompts import read_floor, read_passenger, read_passenger_count
from .render import CLEAR_SCREEN, format_event, render_status

logger = logging.getLogger(__name__)


def parse_pair(value: str) -> Tuple[int, int]:
    """argparse type for ``ORIGIN:DESTINATION``."""
    try:
        origin, destination = (int(part) for part in value.split(":"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ORIGIN:DESTINATION, got '{value}'") from None
    return origin, destination


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--start-floor", type=int, help="Skip the prompt and start the car here")
    parser.add_argument(
        "--passenger",
        type=parse_pair,
        action="append",
        default=[],
        metavar="ORIGIN:DESTINATION",
        help="Register a rider without prompting; repeatable",
    )
    parser.add_argument("--travel-interval", type=float, default=CarConstraints.travel_interval)
    parser.add_argument("--poll-interval", type=float, default=CarConstraints.poll_interval)
    parser.add_argument("--no-clear", action="store_true", help="Do not clear the screen between ticks")
    parser.add_argument("--log-level", help="Enable console logging at this level")
    return parser


def collect_passengers(num_floors: int) -> List[Tuple[int, int]]:
    count = read_passenger_count()
    print("\nEnter passenger details:")
    passengers: List[Tuple[int, int]] = []
    for index in range(count):
        print(f"\nPassenger {index + 1}:")
        passengers.append(read_passenger(num_floors))
    return passengers


def show_status(clear: bool, snapshot: StatusSnapshot) -> None:
    if clear:
        print(CLEAR_SCREEN, end="")
    print(render_status(snapshot))


def print_event(event: str, payload: dict) -> None:
    print(format_event(event, payload))


def attach_console(controller: ElevatorController, clear: bool = True) -> None:
    for event in ("register", "board", "disembark"):
        controller.on_event(event, partial(print_event, event))
    controller.on_event("status", partial(show_status, clear))


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.log_level:
        logging_config.enable_console_logging(level=args.log_level.upper())
    else:
        logging_config.configure_from_env()

    constraints = CarConstraints(
        travel_interval=args.travel_interval,
        poll_interval=args.poll_interval,
    )
    top = constraints.num_floors - 1

    print("Welcome to the Elevator Simulation!\n")
    try:
        if args.start_floor is None:
            start_floor = read_floor(
                f"Enter the starting floor for the elevator (0-{top}, 0 = Ground Floor): ",
                constraints.num_floors,
            )
        else:
            start_floor = args.start_floor
        passengers = args.passenger or collect_passengers(constraints.num_floors)
    except (EOFError, KeyboardInterrupt):
        print("\nInput closed; nothing to simulate.")
        return 1

    try:
        controller = ElevatorController(start_floor=start_floor, constraints=constraints)
        attach_console(controller, clear=not args.no_clear)
        for origin, destination in passengers:
            controller.register(origin, destination)
        logger.info("Console session starting at floor %d with %d passenger(s)", start_floor, len(passengers))
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    print("\nStarting elevator simulation...")
    controller.start()
    try:
        while not controller.join(timeout=0.5):
            pass
    except KeyboardInterrupt:
        controller.stop()
        controller.join()

    if controller.is_complete():
        print("\nSimulation complete! All passengers have reached their destinations.")
        return 0
    snapshot = controller.snapshot()
    print(
        f"\nSimulation stopped with {snapshot.total_processed}/{snapshot.total_registered} "
        "passengers delivered."
    )
    return 1


if __name__ == "__main__":
    sys.exit(main())
