"""Pepper module: scripted sessions and the instruction channel to the robot.

Loads the motion library and session scripts once at startup, exposes them
over HTTP and forwards say/move instructions to the robot's WebSocket.
"""

from . import xPepperService as xPepperService  # re-export module for convenience

__all__ = [
    "config_loader",
    "xPepperService",
]
