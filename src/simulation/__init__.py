"""Simulation primitives for scanlift."""

import logging

from .car import Car
from .clock import Clock, ManualClock, SystemClock
from .config import CarConstraints
from .controller import ElevatorController, RegistrationClosedError, StatusSnapshot
from .floor import Floor
from .metrics import MetricsSnapshot, MetricsTracker
from .passenger import Passenger
from .registry import PassengerRegistry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Car",
    "CarConstraints",
    "Clock",
    "ElevatorController",
    "Floor",
    "ManualClock",
    "MetricsSnapshot",
    "MetricsTracker",
    "Passenger",
    "PassengerRegistry",
    "RegistrationClosedError",
    "StatusSnapshot",
    "SystemClock",
]
