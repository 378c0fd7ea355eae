from .actions import Command, MoveAction, SayAction, SayAndMoveAction, is_nil
from .errors import (
    ContentResolutionError,
    EncodingError,
    IdentityAlreadySetError,
    MissingAssetError,
    PepperError,
    TransportNotReadyError,
    TransportWriteError,
)
from .library import MotionLibrary, discover_moves
from .link import RobotLink
from .sessions import Session, SessionItem, SessionTree, build_sessions
from .templates import load_session_templates
from .wire import PepperMessage, send_instruction

__all__ = [
    "Command",
    "MoveAction",
    "SayAction",
    "SayAndMoveAction",
    "is_nil",
    "ContentResolutionError",
    "EncodingError",
    "IdentityAlreadySetError",
    "MissingAssetError",
    "PepperError",
    "TransportNotReadyError",
    "TransportWriteError",
    "MotionLibrary",
    "discover_moves",
    "RobotLink",
    "Session",
    "SessionItem",
    "SessionTree",
    "build_sessions",
    "load_session_templates",
    "PepperMessage",
    "send_instruction",
]
