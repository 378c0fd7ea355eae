from __future__ import annotations
import asyncio
import logging
import uuid
from typing import TYPE_CHECKING, Optional

from fastapi import APIRouter, HTTPException, WebSocket, WebSocketDisconnect

from ..services.errors import ContentResolutionError, EncodingError, TransportNotReadyError, TransportWriteError
from ..services.link import RobotLink

if TYPE_CHECKING:
    from modules.pepper.xPepperService import PepperService

logger = logging.getLogger("pepper.api")


def _parse_id(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"unknown id: {raw}")


def get_router(service: PepperService) -> APIRouter:
    r = APIRouter(prefix="/pepper", tags=["pepper"])

    async def _send(fn, id_: uuid.UUID):
        try:
            # blocking file read and socket write, keep them off the event loop
            msg = await asyncio.to_thread(fn, id_)
        except KeyError:
            raise HTTPException(status_code=404, detail=f"unknown id: {id_}")
        except TransportNotReadyError as e:
            raise HTTPException(status_code=503, detail=str(e))
        except TransportWriteError as e:
            raise HTTPException(status_code=504, detail=str(e))
        except ContentResolutionError as e:
            raise HTTPException(status_code=422, detail=str(e))
        except EncodingError as e:
            logger.exception("encoding failed for %s", id_)
            raise HTTPException(status_code=500, detail=str(e))
        return {"ok": True, "command": str(msg.command), "delay": msg.delay}

    @r.get("/healthz")
    def healthz():
        return {
            "ok": True,
            "robot_connected": bool(service.link.connected),
            "sessions": len(service.sessions),
            "moves": len(service.library),
        }

    @r.get("/sessions")
    def list_sessions():
        return {"ok": True, "sessions": service.list_sessions()}

    @r.get("/sessions/{session_id}/items")
    def list_items(session_id: str):
        try:
            items = service.list_items(_parse_id(session_id))
        except KeyError:
            raise HTTPException(status_code=404, detail=f"unknown session: {session_id}")
        return {"ok": True, "items": items}

    @r.get("/moves")
    def list_moves(group: Optional[str] = None):
        return {"ok": True, "moves": service.list_moves(group)}

    @r.get("/moves/groups")
    def list_groups():
        return {"ok": True, "groups": service.list_groups()}

    @r.post("/instructions/{instruction_id}/send")
    async def send_instruction(instruction_id: str):
        return await _send(service.send_instruction, _parse_id(instruction_id))

    @r.post("/moves/{move_id}/send")
    async def send_move(move_id: str):
        return await _send(service.send_move, _parse_id(move_id))

    @r.websocket("/ws")
    async def robot_socket(ws: WebSocket):
        link = service.link
        if not isinstance(link, RobotLink):
            await ws.close(code=1011)
            return
        await ws.accept()
        link.attach(ws, asyncio.get_running_loop())
        try:
            while True:
                msg = await ws.receive_text()
                logger.debug("robot: %s", msg)
        except WebSocketDisconnect:
            pass
        finally:
            link.detach(ws)

    return r
