from __future__ import annotations

import asyncio
import concurrent.futures
import logging
import threading
from typing import Any, Optional

from .errors import TransportNotReadyError, TransportWriteError

logger = logging.getLogger("pepper.link")


class RobotLink:
    """WebSocket channel opened by the robot, usable from worker threads.

    Pepper connects to ``/pepper/ws`` and keeps the socket open; the link
    remembers that socket and the event loop serving it. ``write`` blocks the
    calling thread until the frame is sent. Only one connection is kept: a
    new one replaces the old.
    """

    def __init__(self, write_timeout: float = 5.0) -> None:
        self.write_timeout = write_timeout
        self._lock = threading.Lock()
        self._write_lock = threading.Lock()
        self._ws: Any = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None

    @property
    def connected(self) -> bool:
        return self._ws is not None

    def attach(self, ws: Any, loop: asyncio.AbstractEventLoop) -> None:
        with self._lock:
            if self._ws is not None and self._ws is not ws:
                logger.warning("robot reconnected, dropping previous connection")
            self._ws = ws
            self._loop = loop
        logger.info("robot connected")

    def detach(self, ws: Any) -> None:
        with self._lock:
            if self._ws is not ws:
                return
            self._ws = None
            self._loop = None
        logger.info("robot disconnected")

    def write(self, message: str) -> None:
        # never hold _lock while waiting on the loop
        with self._write_lock:
            with self._lock:
                ws, loop = self._ws, self._loop
            if ws is None or loop is None:
                raise TransportNotReadyError("robot connection is not established")
            fut = asyncio.run_coroutine_threadsafe(ws.send_text(message), loop)
            try:
                fut.result(timeout=self.write_timeout)
            except concurrent.futures.TimeoutError:
                # cancel() is False only when the send already finished
                if fut.cancel():
                    raise TransportWriteError(f"robot write timed out after {self.write_timeout}s")
                fut.result()


__all__ = ["RobotLink"]
