"""Interactive console front-end: prompts in, status screens out."""

import logging

from .prompts import read_floor, read_passenger, read_passenger_count
from .render import floor_label, format_event, render_status

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "floor_label",
    "format_event",
    "read_floor",
    "read_passenger",
    "read_passenger_count",
    "render_status",
]
