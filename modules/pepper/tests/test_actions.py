from __future__ import annotations

import uuid
from datetime import timedelta

import pytest

from modules.pepper.services.actions import (
    Command,
    MoveAction,
    SayAction,
    SayAndMoveAction,
    is_nil,
    new_id,
)
from modules.pepper.services.errors import IdentityAlreadySetError


def test_command_wire_tags():
    assert str(Command.SAY) == "say"
    assert str(Command.MOVE) == "move"
    assert str(Command.SAY_AND_MOVE) == "sayAndMove"


def test_say_content_is_file_name_only():
    say = SayAction(phrase="Hello", file_path="/data/say/Session 1/1out_intro.wav")
    assert say.command() is Command.SAY
    assert say.content() == b"1out_intro.wav"
    assert say.delay_millis() == 0


def test_move_content_reads_file(tmp_path):
    path = tmp_path / "Hello_01.qianim"
    path.write_bytes(b"<anim/>")
    move = MoveAction(name="Hello_01", file_path=str(path), delay=timedelta(seconds=5))
    assert move.content() == b"<anim/>"
    assert move.delay_millis() == 5000


def test_move_content_missing_file(tmp_path):
    move = MoveAction(name="Gone", file_path=str(tmp_path / "gone.qianim"))
    with pytest.raises(FileNotFoundError):
        move.content()


def test_composite_has_no_content_of_its_own():
    action = SayAndMoveAction(say=SayAction(phrase="Hi", file_path="a.wav"), move=MoveAction(name="m", file_path="m.qianim", delay=timedelta(seconds=2)))
    assert action.command() is Command.SAY_AND_MOVE
    assert action.content() == b""
    assert action.delay_millis() == 0
    assert str(action) == "say 'Hi' and move 'm'"


def test_validity_rules():
    say = SayAction(phrase="Hi", file_path="a.wav")
    assert not say.is_valid()  # no id yet
    say.set_id(new_id())
    assert say.is_valid()

    assert not SayAction(phrase="Hi", id=new_id()).is_valid()
    assert not MoveAction(name="m", id=new_id()).is_valid()
    assert MoveAction(name="m", file_path="m.qianim", id=new_id()).is_valid()
    assert not MoveAction(name="m", file_path="m.qianim", id=uuid.UUID(int=0)).is_valid()

    composite = SayAndMoveAction(say=SayAction(phrase="Hi", file_path="a.wav"), id=new_id())
    assert composite.is_valid()
    composite_no_audio = SayAndMoveAction(say=SayAction(phrase="Nice"), id=new_id())
    assert not composite_no_audio.is_valid()
    assert not SayAndMoveAction(id=new_id()).is_valid()


def test_identity_is_set_once():
    move = MoveAction(name="m")
    first = new_id()
    move.set_id(first)
    with pytest.raises(IdentityAlreadySetError):
        move.set_id(new_id())
    assert move.id == first


def test_nil_check():
    assert is_nil(None)
    assert not is_nil(SayAndMoveAction())
    assert not SayAction().is_nil()
