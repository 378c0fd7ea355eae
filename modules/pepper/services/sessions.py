from __future__ import annotations
"""Sessions: scripted conversations with a child.

A session is a list of items; each item is a question and optional positive
and negative reactions, every one of them a SayAndMoveAction shown in the UI
as a button.
"""

import logging
import os
import uuid
from dataclasses import dataclass, field, replace
from typing import Iterator, List, Optional, Sequence

from .actions import MoveAction, SayAndMoveAction, Identified, is_nil, new_id
from .errors import MissingAssetError
from .library import MotionLibrary

logger = logging.getLogger("pepper.sessions")


@dataclass
class SessionItem(Identified):
    question: Optional[SayAndMoveAction] = None
    positive_answer: Optional[SayAndMoveAction] = None
    negative_answer: Optional[SayAndMoveAction] = None
    id: Optional[uuid.UUID] = None

    def instructions(self) -> List[SayAndMoveAction]:
        """Non-nil instructions of the item: negative, positive, question."""
        out = []
        for action in (self.negative_answer, self.positive_answer, self.question):
            if not is_nil(action):
                out.append(action)
        return out


@dataclass
class Session(Identified):
    name: str = ""
    description: str = ""
    items: List[SessionItem] = field(default_factory=list)
    id: Optional[uuid.UUID] = None


class SessionTree(Sequence[Session]):
    """All sessions available to the operator, built once at startup."""

    def __init__(self, sessions: Optional[List[Session]] = None) -> None:
        self._sessions: List[Session] = list(sessions or [])

    def __getitem__(self, index):  # type: ignore[override]
        return self._sessions[index]

    def __len__(self) -> int:
        return len(self._sessions)

    def __iter__(self) -> Iterator[Session]:
        return iter(self._sessions)

    def get_session(self, id_: uuid.UUID) -> Optional[Session]:
        for s in self._sessions:
            if s.id == id_:
                return s
        return None

    def get_instruction_by_id(self, id_: uuid.UUID) -> Optional[SayAndMoveAction]:
        """Find a top level SayAndMoveAction anywhere in the tree, or None."""
        for session in self._sessions:
            for item in session.items:
                for action in item.instructions():
                    if action.id == id_:
                        return action
        return None


def build_sessions(templates: List[Session], library: MotionLibrary, say_dir: str) -> SessionTree:
    """Assign ids, resolve audio paths and bind library moves.

    Audio files are looked up as ``say_dir/<session name>/<file>``; a missing
    one aborts the whole build with MissingAssetError. Moves are matched by
    name against ``library`` and replaced with a copy of the library entry
    that keeps the authored delay.
    """
    for session in templates:
        session.set_id(new_id())
        for item in session.items:
            item.set_id(new_id())
            for action in (item.question, item.positive_answer, item.negative_answer):
                if is_nil(action):
                    continue
                _resolve_instruction(action, session, library, say_dir)

    tree = SessionTree(templates)
    logger.info("built %d sessions", len(tree))
    return tree


def _resolve_instruction(action: SayAndMoveAction, session: Session, library: MotionLibrary, say_dir: str) -> None:
    if action.move is not None and action.move.name:
        action.move = _bind_move(action.move, library, session)

    action.set_id(new_id())
    if action.say is not None:
        action.say.set_id(new_id())
    if action.move is not None:
        action.move.set_id(new_id())

    say = action.say
    if say is None or not say.file_path:
        logger.debug("%s: %s has no audio file, left unresolved", session.name, action)
        return
    # authored paths are always relative to say_dir/<session name>
    path = os.path.join(say_dir, session.name, say.file_path.lstrip("/\\"))
    if not os.path.exists(path):
        raise MissingAssetError(f"audio file not found: {path}")
    say.file_path = os.path.abspath(path)


def _bind_move(authored: MoveAction, library: MotionLibrary, session: Session) -> MoveAction:
    entry = library.get_by_name(authored.name)
    if entry is None:
        logger.warning("%s: move %r not found in the library, keeping it unresolved", session.name, authored.name)
        return authored
    # the library picks the file and group, the author picks the timing
    return replace(entry, id=None, delay=authored.delay)


__all__ = ["Session", "SessionItem", "SessionTree", "build_sessions"]
