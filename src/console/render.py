from __future__ import annotations

from typing import List

from simulation import StatusSnapshot

CLEAR_SCREEN = "\033[2J\033[1;1H"


def floor_label(floor: int, short: bool = False) -> str:
    if floor == 0:
        return "G" if short else "Ground"
    return str(floor)


def render_status(snapshot: StatusSnapshot) -> str:
    lines: List[str] = [
        "=== Elevator Status ===",
        f"Current Floor: {floor_label(snapshot.current_floor)}",
        f"Direction: {snapshot.direction.name}",
        f"Passengers in elevator: {snapshot.onboard_count}/{snapshot.capacity}",
        f"Total passengers processed: {snapshot.total_processed}/{snapshot.total_registered}",
        "",
        "Waiting Passengers:",
    ]
    for floor in reversed(range(len(snapshot.waiting_counts))):
        count = snapshot.waiting_counts[floor]
        waiting = f"{count} waiting" if count else "None"
        lines.append(f"Floor {floor_label(floor, short=True)}: {waiting}")
    lines.append("=" * 19)
    return "\n".join(lines)


def format_event(event: str, payload: dict) -> str:
    passenger = payload["passenger"]
    if event == "register":
        return (
            f"Added passenger {passenger.passenger_id} waiting at floor "
            f"{floor_label(passenger.origin, short=True)} going to floor "
            f"{floor_label(passenger.destination, short=True)}"
        )
    if event == "board":
        return (
            f"Passenger {passenger.passenger_id} boarding at floor "
            f"{floor_label(payload['floor'], short=True)} going to floor "
            f"{floor_label(passenger.destination, short=True)}"
        )
    if event == "disembark":
        return (
            f"Passenger {passenger.passenger_id} getting off at floor "
            f"{floor_label(payload['floor'], short=True)}"
        )
    raise ValueError(f"No console format for event '{event}'")
