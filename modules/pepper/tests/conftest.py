from __future__ import annotations

from pathlib import Path
import sys
from typing import Dict, List

import pytest

ROOT = Path(__file__).resolve().parents[3]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

SESSIONS_YML = """
sessions:
  - name: Session 1
    description: Greeting
    items:
      - question:
          phrase: Hello
          file: 1out_intro.wav
          move: Hello_01
          delay_ms: 0
        positive:
          phrase: Nice
          move: NiceReaction_01
          delay_ms: 250
        negative:
          phrase: Sad
          move: SadReaction_01
      - question:
          phrase: How old are you?
          file: 2out_age.wav
          move: NiceReaction_01
          delay_ms: 5000
      - question:
          phrase: Unknown move
          file: 2out_age.wav
          move: Does_Not_Exist
  - name: Session 2
    items:
      - question:
          phrase: Q1
"""


class FakeSink:
    def __init__(self, connected: bool = True) -> None:
        self.connected = connected
        self.sent: List[str] = []

    def write(self, message: str) -> None:
        self.sent.append(message)


@pytest.fixture
def pepper_files(tmp_path: Path) -> Dict[str, Path]:
    moves = tmp_path / "moves"
    for group, name, body in (
        ("Greetings", "Hello_01", "<anim>hello</anim>"),
        ("Reactions", "NiceReaction_01", "<anim>nice</anim>"),
        ("Reactions", "SadReaction_01", "<anim>sad</anim>"),
    ):
        (moves / group).mkdir(parents=True, exist_ok=True)
        (moves / group / f"{name}.qianim").write_text(body, encoding="utf-8")

    say = tmp_path / "say" / "Session 1"
    say.mkdir(parents=True)
    (say / "1out_intro.wav").write_bytes(b"RIFF....")
    (say / "2out_age.wav").write_bytes(b"RIFF....")

    sessions_file = tmp_path / "sessions.yml"
    sessions_file.write_text(SESSIONS_YML, encoding="utf-8")

    return {
        "moves_dir": moves,
        "say_dir": tmp_path / "say",
        "sessions_file": sessions_file,
    }


@pytest.fixture
def make_sink():
    return FakeSink
