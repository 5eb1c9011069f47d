"""Reprompting readers that only ever hand validated integers to the core."""

from __future__ import annotations

from typing import Callable, Optional, Tuple

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

MIN_PASSENGERS = 1
MAX_PASSENGERS = 20


def _read_int(
    prompt: str,
    low: int,
    high: int,
    error: str,
    input_fn: Optional[InputFn],
    output: Optional[OutputFn],
    empty_error: Optional[str] = None,
    range_error: Optional[str] = None,
) -> int:
    input_fn = input_fn or input
    output = output or print
    while True:
        raw = input_fn(prompt).strip()
        if not raw:
            output(empty_error or error)
            continue
        if not (raw.isascii() and raw.isdigit()):
            output(error)
            continue
        value = int(raw)
        if low <= value <= high:
            return value
        output(range_error or error)


def read_floor(
    prompt: str,
    num_floors: int = 10,
    input_fn: Optional[InputFn] = None,
    output: Optional[OutputFn] = None,
) -> int:
    top = num_floors - 1
    return _read_int(
        prompt,
        0,
        top,
        f"Invalid floor! Please enter a number between 0 (Ground Floor) and {top}.",
        input_fn,
        output,
    )


def read_passenger_count(input_fn: Optional[InputFn] = None, output: Optional[OutputFn] = None) -> int:
    return _read_int(
        f"Enter the number of passengers ({MIN_PASSENGERS}-{MAX_PASSENGERS}): ",
        MIN_PASSENGERS,
        MAX_PASSENGERS,
        f"Invalid input! Please enter a numerical value between {MIN_PASSENGERS} and {MAX_PASSENGERS}.",
        input_fn,
        output,
        empty_error=f"Please enter a number between {MIN_PASSENGERS} and {MAX_PASSENGERS}.",
        range_error=f"Number must be between {MIN_PASSENGERS} and {MAX_PASSENGERS}!",
    )


def read_passenger(
    num_floors: int = 10,
    input_fn: Optional[InputFn] = None,
    output: Optional[OutputFn] = None,
) -> Tuple[int, int]:
    """Ask for one origin/destination pair, insisting the two differ."""
    output = output or print
    top = num_floors - 1
    origin = read_floor(f"Starting floor (0-{top}, 0 = Ground Floor): ", num_floors, input_fn, output)
    while True:
        destination = read_floor(
            f"Destination floor (0-{top}, 0 = Ground Floor): ", num_floors, input_fn, output
        )
        if destination != origin:
            return origin, destination
        output("Destination floor must be different from starting floor!")
