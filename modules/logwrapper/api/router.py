from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..xLogService import get_memory_handler

router = APIRouter(prefix="/logs", tags=["logs"])


class LevelChange(BaseModel):
    logger: str
    level: str


@router.get("/")
def list_logs(n: int = 200) -> Dict[str, Any]:
    handler = get_memory_handler()
    items = handler.tail(n) if handler else []
    return {"count": len(items), "items": items}


@router.post("/clear")
def clear_logs() -> Dict[str, str]:
    handler = get_memory_handler()
    if handler is not None:
        handler.clear()
    return {"status": "ok"}


@router.post("/level")
def set_level(payload: LevelChange) -> Dict[str, str]:
    level = payload.level.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise HTTPException(status_code=400, detail=f"unknown level: {payload.level}")
    logging.getLogger(payload.logger).setLevel(level)
    return {"status": "ok"}
