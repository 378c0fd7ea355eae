from __future__ import annotations

import json
import logging
from collections import deque
from typing import Deque, Iterable, List


class InMemoryLogHandler(logging.Handler):
    """Halka buffer log handler; /logs endpoint'i buradan okur.

    - thread-safe: logging.Handler zaten lock içerir
    - formatlanmış stringleri saklar (emit sonrası)
    """

    def __init__(self, maxlen: int = 1000, level: int = logging.NOTSET) -> None:
        super().__init__(level=level)
        self.buffer: Deque[str] = deque(maxlen=maxlen)

    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        try:
            msg = self.format(record)
        except Exception:  # pragma: no cover
            msg = record.getMessage()
        self.buffer.append(msg)

    def tail(self, n: int = 100) -> List[str]:
        if n <= 0:
            return []
        items = list(self.buffer)
        return items[-n:]

    def clear(self) -> None:
        self.acquire()
        try:
            self.buffer.clear()
        finally:
            self.release()

    def iter(self) -> Iterable[str]:
        return iter(self.buffer)


class JsonFormatter(logging.Formatter):
    """One JSON object per line, message escaped properly."""

    def format(self, record: logging.LogRecord) -> str:
        out = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "msg": record.getMessage(),
            "module": record.module,
            "line": record.lineno,
        }
        if record.exc_info:
            out["exc"] = self.formatException(record.exc_info)
        return json.dumps(out, ensure_ascii=False)


def build_formatter(json_format: bool) -> logging.Formatter:
    if json_format:
        return JsonFormatter(datefmt="%Y-%m-%dT%H:%M:%S")
    # Human friendly
    fmt = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
    datefmt = "%H:%M:%S"
    return logging.Formatter(fmt=fmt, datefmt=datefmt)
