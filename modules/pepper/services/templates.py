from __future__ import annotations
"""Hand-authored session templates (config/sessions.yml).

Şema (örnek):
sessions:
  - name: Session 1
    description: Tanışma
    items:
      - question:
          phrase: "Kui vana sa oled?"
          file: 2out_vanus.wav
          move: Show_Hand_Right_02
          delay_ms: 0
        positive: {phrase: Nice, move: NiceReaction_01}
        negative: {phrase: Sad, move: SadReaction_01}

Templates are raw: no ids, relative audio files, moves by name only.
``build_sessions`` turns them into a usable tree.
"""

from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .actions import MoveAction, SayAction, SayAndMoveAction
from .sessions import Session, SessionItem

_DEFAULT_TEMPLATES_PATH = Path(__file__).resolve().parent.parent / "config" / "sessions.yml"


def _parse_action(data: Any, where: str) -> Optional[SayAndMoveAction]:
    if data is None:
        return None
    if not isinstance(data, dict):
        raise ValueError(f"{where}: expected a mapping, got {type(data).__name__}")
    say = SayAction(phrase=_text(data.get("phrase")), file_path=_text(data.get("file")))
    move = None
    if data.get("move"):
        raw_delay = data.get("delay_ms")
        try:
            delay_ms = int(raw_delay) if raw_delay is not None else 0
        except (TypeError, ValueError):
            raise ValueError(f"{where}: delay_ms must be an integer, got {raw_delay!r}")
        move = MoveAction(name=str(data["move"]), delay=timedelta(milliseconds=delay_ms))
    return SayAndMoveAction(say=say, move=move)


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def parse_session_templates(data: Dict[str, Any]) -> List[Session]:
    raw_sessions = (data or {}).get("sessions", [])
    if not isinstance(raw_sessions, list):
        raise ValueError("'sessions' must be a list")

    out: List[Session] = []
    for i, raw in enumerate(raw_sessions):
        if not isinstance(raw, dict) or not raw.get("name"):
            raise ValueError(f"session #{i}: a mapping with a name is required")
        items: List[SessionItem] = []
        for j, raw_item in enumerate(raw.get("items") or []):
            where = f"{raw['name']} item #{j}"
            if not isinstance(raw_item, dict):
                raise ValueError(f"{where}: expected a mapping")
            items.append(
                SessionItem(
                    question=_parse_action(raw_item.get("question"), where + " question"),
                    positive_answer=_parse_action(raw_item.get("positive"), where + " positive"),
                    negative_answer=_parse_action(raw_item.get("negative"), where + " negative"),
                )
            )
        out.append(Session(name=str(raw["name"]), description=str(raw.get("description", "")), items=items))
    return out


def load_session_templates(path: str | Path | None = None) -> List[Session]:
    p = Path(path) if path else _DEFAULT_TEMPLATES_PATH
    if not p.exists():
        raise FileNotFoundError(f"Session templates not found: {p}")
    with open(p, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"invalid session templates file: {p}")
    return parse_session_templates(data)


__all__ = ["load_session_templates", "parse_session_templates"]
