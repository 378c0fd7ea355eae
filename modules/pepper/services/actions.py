from __future__ import annotations
"""Pepper instruction types.

Three concrete instructions share one contract (see ``Instruction``):

- ``SayAction``: a phrase with its audio file. Audio is played next to the
  robot, so only the file name travels over the wire.
- ``MoveAction``: a ready-made motion file (.qianim) from the library.
- ``SayAndMoveAction``: a wrapper uniting the two. It is never sent as is;
  ``wire.send_instruction`` unpacks it.

An absent instruction is plain ``None``; use ``is_nil()`` to test for it.
"""

import os
import uuid
from dataclasses import dataclass, field
from datetime import timedelta
from enum import Enum
from typing import Any, Optional, Protocol

from .errors import IdentityAlreadySetError


class Command(str, Enum):
    SAY = "say"
    MOVE = "move"
    SAY_AND_MOVE = "sayAndMove"

    def __str__(self) -> str:
        return self.value


class Instruction(Protocol):
    id: Optional[uuid.UUID]

    def command(self) -> Command: ...

    def content(self) -> bytes: ...

    def delay_millis(self) -> int: ...

    def set_id(self, value: uuid.UUID) -> None: ...

    def is_valid(self) -> bool: ...

    def is_nil(self) -> bool: ...


def new_id() -> uuid.UUID:
    return uuid.uuid4()


def is_nil(instruction: Any) -> bool:
    return instruction is None or instruction.is_nil()


def _valid_id(value: Optional[uuid.UUID]) -> bool:
    if not isinstance(value, uuid.UUID) or value.int == 0:
        return False
    try:
        uuid.UUID(str(value))
    except ValueError:
        return False
    return True


class Identified:
    """Identity that can be assigned exactly once."""

    id: Optional[uuid.UUID]

    def set_id(self, value: uuid.UUID) -> None:
        if self.id is not None:
            raise IdentityAlreadySetError(f"{type(self).__name__} already has id {self.id}")
        self.id = value

    def is_nil(self) -> bool:
        return False


@dataclass
class SayAction(Identified):
    phrase: str = ""
    file_path: str = ""
    id: Optional[uuid.UUID] = None

    def command(self) -> Command:
        return Command.SAY

    def content(self) -> bytes:
        return os.path.basename(self.file_path).encode("utf-8")

    def delay_millis(self) -> int:
        return 0

    def is_valid(self) -> bool:
        return _valid_id(self.id) and bool(self.file_path)

    def __str__(self) -> str:
        return f"say {self.phrase} from {self.file_path}"


@dataclass
class MoveAction(Identified):
    name: str = ""
    file_path: str = ""
    delay: timedelta = field(default_factory=timedelta)
    group: str = ""
    id: Optional[uuid.UUID] = None

    def command(self) -> Command:
        return Command.MOVE

    def content(self) -> bytes:
        with open(self.file_path, "rb") as f:
            return f.read()

    def delay_millis(self) -> int:
        return self.delay // timedelta(milliseconds=1)

    def is_valid(self) -> bool:
        return _valid_id(self.id) and bool(self.file_path)

    def __str__(self) -> str:
        return f"move {self.name} from {self.file_path}"


@dataclass
class SayAndMoveAction(Identified):
    say: Optional[SayAction] = None
    move: Optional[MoveAction] = None
    id: Optional[uuid.UUID] = None

    def command(self) -> Command:
        return Command.SAY_AND_MOVE

    def content(self) -> bytes:
        return b""

    def delay_millis(self) -> int:
        return 0

    def is_valid(self) -> bool:
        if not _valid_id(self.id) or self.say is None:
            return False
        return bool(self.say.phrase) and bool(self.say.file_path)

    def __str__(self) -> str:
        phrase = self.say.phrase if self.say is not None else ""
        name = self.move.name if self.move is not None else ""
        return f"say {phrase!r} and move {name!r}"


__all__ = [
    "Command",
    "Identified",
    "Instruction",
    "SayAction",
    "MoveAction",
    "SayAndMoveAction",
    "is_nil",
    "new_id",
]
