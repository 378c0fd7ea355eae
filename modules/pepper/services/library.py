from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Iterator, List, Optional, Sequence

from .actions import MoveAction, new_id

logger = logging.getLogger("pepper.library")

MOTION_EXTENSION = ".qianim"


class MotionLibrary(Sequence[MoveAction]):
    """Ready-made moves found on disk, in discovery order.

    Entries belong to the library; callers that need to adjust one (e.g. its
    delay) must work on a copy.
    """

    def __init__(self, moves: Optional[List[MoveAction]] = None) -> None:
        self._moves: List[MoveAction] = list(moves or [])

    def __getitem__(self, index):  # type: ignore[override]
        return self._moves[index]

    def __len__(self) -> int:
        return len(self._moves)

    def __iter__(self) -> Iterator[MoveAction]:
        return iter(self._moves)

    def get_by_id(self, id_: uuid.UUID) -> Optional[MoveAction]:
        for m in self._moves:
            if m.id == id_:
                return m
        return None

    def get_by_name(self, name: str) -> Optional[MoveAction]:
        for m in self._moves:
            if m.name == name:
                return m
        return None

    def groups(self) -> List[str]:
        return sorted({m.group for m in self._moves})

    def by_group(self, group: str) -> List[MoveAction]:
        return [m for m in self._moves if m.group == group]


def discover_moves(root: str | Path, extension: str = MOTION_EXTENSION) -> MotionLibrary:
    """Scan ``root`` recursively for motion files.

    The parent folder of each file is its group, the file stem its name.
    Matches are sorted by path so name lookups resolve the same way on every
    filesystem.
    """
    base = Path(root)
    if not base.exists():
        raise FileNotFoundError(f"moves directory not found: {base}")
    if not base.is_dir():
        raise NotADirectoryError(f"moves path is not a directory: {base}")

    items: List[MoveAction] = []
    for path in sorted(base.rglob(f"*{extension}")):
        if not path.is_file():
            continue
        items.append(
            MoveAction(
                id=new_id(),
                name=path.stem,
                file_path=str(path),
                group=path.parent.name,
            )
        )

    library = MotionLibrary(items)
    logger.info("discovered %d moves in %d groups under %s", len(library), len(library.groups()), base)
    return library


__all__ = ["MotionLibrary", "discover_moves", "MOTION_EXTENSION"]
