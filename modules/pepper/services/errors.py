from __future__ import annotations


class PepperError(Exception):
    """Base class for pepper module failures."""


class TransportNotReadyError(PepperError):
    """Raised when the robot has not opened its connection yet."""


class ContentResolutionError(PepperError):
    """Raised when an instruction's payload cannot be produced."""


class EncodingError(PepperError):
    """Raised when a wire message cannot be serialized."""


class IdentityAlreadySetError(PepperError):
    """Raised on a second identity assignment."""


class MissingAssetError(PepperError, FileNotFoundError):
    """Raised by the session builder when a referenced audio file is absent."""


class TransportWriteError(PepperError):
    """Raised when a frame could not be handed to the robot in time."""
