from __future__ import annotations
"""Wire format and delivery of instructions to the robot."""

import json
import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from .actions import Command, Instruction, SayAndMoveAction
from .errors import ContentResolutionError, EncodingError, TransportNotReadyError

logger = logging.getLogger("pepper.wire")


class Sink(Protocol):
    """One logical message channel to the robot."""

    @property
    def connected(self) -> bool: ...

    def write(self, message: str) -> None: ...


@dataclass
class PepperMessage:
    command: Command
    content: bytes
    delay: int

    def to_dict(self) -> dict:
        return {
            "command": str(self.command),
            "content": self.content.decode("utf-8", errors="replace"),
            "delay": int(self.delay),
        }

    def encode(self) -> str:
        try:
            return json.dumps(self.to_dict(), ensure_ascii=False)
        except (TypeError, ValueError) as exc:
            raise EncodingError(f"can't encode PepperMessage: {exc}") from exc


def build_message(instruction: Optional[Instruction]) -> PepperMessage:
    """Resolve an instruction into the message that goes over the wire.

    A SayAndMoveAction is unpacked into its motion only: the phrase is played
    from a speaker next to the robot, not by the robot itself.
    """
    if instruction is None:
        raise ContentResolutionError("nil instruction")

    if instruction.command() == Command.SAY_AND_MOVE:
        if not isinstance(instruction, SayAndMoveAction):
            raise ContentResolutionError(f"{instruction}: not a SayAndMoveAction")
        move = instruction.move
        if move is None:
            raise ContentResolutionError(f"{instruction.id}: nothing to send, no move attached")
        instruction = move

    try:
        content = instruction.content()
    except OSError as exc:
        raise ContentResolutionError(f"can't get content out of {instruction}: {exc}") from exc

    return PepperMessage(command=instruction.command(), content=content, delay=instruction.delay_millis())


def send_instruction(instruction: Optional[Instruction], sink: Optional[Sink]) -> PepperMessage:
    """Send one instruction over ``sink``; a single write, never retried."""
    if sink is None or not sink.connected:
        raise TransportNotReadyError("robot connection is not established, Pepper must open it first")

    message = build_message(instruction)
    payload = message.encode()
    sink.write(payload)
    logger.info("sent %s (%d bytes, delay %d ms)", message.command, len(payload), message.delay)
    return message


__all__ = ["Sink", "PepperMessage", "build_message", "send_instruction"]
