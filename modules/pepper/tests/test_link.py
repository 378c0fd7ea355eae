from __future__ import annotations

import asyncio
import json
import threading
import time
from typing import List

import pytest

from modules.pepper.services.actions import SayAction, new_id
from modules.pepper.services.errors import PepperError, TransportNotReadyError, TransportWriteError
from modules.pepper.services.link import RobotLink
from modules.pepper.services.wire import send_instruction


class FakeWebSocket:
    def __init__(self) -> None:
        self.sent: List[str] = []

    async def send_text(self, text: str) -> None:
        self.sent.append(text)


@pytest.fixture
def loop():
    lp = asyncio.new_event_loop()
    t = threading.Thread(target=lp.run_forever, name="test-loop", daemon=True)
    t.start()
    yield lp
    lp.call_soon_threadsafe(lp.stop)
    t.join(timeout=1.0)
    lp.close()


def test_write_requires_connection():
    link = RobotLink()
    assert link.connected is False
    with pytest.raises(TransportNotReadyError):
        link.write("{}")


def test_write_goes_through_the_socket_loop(loop):
    link = RobotLink(write_timeout=1.0)
    ws = FakeWebSocket()
    link.attach(ws, loop)

    send_instruction(SayAction(phrase="Hi", file_path="say/hi.wav", id=new_id()), link)

    assert [json.loads(m) for m in ws.sent] == [{"command": "say", "content": "hi.wav", "delay": 0}]


def test_reconnect_replaces_and_stale_detach_is_ignored(loop):
    link = RobotLink(write_timeout=1.0)
    old, new = FakeWebSocket(), FakeWebSocket()
    link.attach(old, loop)
    link.attach(new, loop)
    link.detach(old)
    assert link.connected

    link.write("ping")
    assert new.sent == ["ping"]
    assert old.sent == []

    link.detach(new)
    assert not link.connected
    with pytest.raises(TransportNotReadyError):
        send_instruction(SayAction(phrase="Hi", file_path="hi.wav"), link)


class SlowWebSocket(FakeWebSocket):
    async def send_text(self, text: str) -> None:
        await asyncio.sleep(0.5)
        self.sent.append(text)


def test_timed_out_write_is_cancelled(loop):
    link = RobotLink(write_timeout=0.1)
    ws = SlowWebSocket()
    link.attach(ws, loop)

    with pytest.raises(TransportWriteError):
        link.write("late")

    time.sleep(0.6)
    assert ws.sent == []
    assert isinstance(TransportWriteError("x"), PepperError)
