"""HTTP and WebSocket surface for the elevator controller."""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
