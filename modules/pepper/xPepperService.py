from __future__ import annotations
import argparse
import logging
import uuid
from typing import Any, Dict, List, Optional

from fastapi import FastAPI

from modules.pepper.config_loader import load_config
from modules.pepper.services.actions import MoveAction, SayAndMoveAction
from modules.pepper.services.library import MotionLibrary, discover_moves
from modules.pepper.services.link import RobotLink
from modules.pepper.services.sessions import Session, SessionTree, build_sessions
from modules.pepper.services.templates import load_session_templates
from modules.pepper.services.wire import PepperMessage, Sink, send_instruction

try:
    from modules.logwrapper import init_logging as _init_global_logging  # type: ignore
    _init_global_logging()
except Exception:
    pass

logger = logging.getLogger("pepper")


class PepperService:
    """Pepper robotu için oturum ağacı ve komut kanalı.

    Motion library and sessions are built once here and stay read-only; a
    missing session audio file makes the constructor fail.
    """

    def __init__(
        self,
        config_path: Optional[str] = None,
        config_overrides: Optional[Dict[str, Any]] = None,
        link: Optional[Sink] = None,
    ):
        self.cfg = load_config(config_path, overrides=config_overrides)
        self.library: MotionLibrary = discover_moves(self.cfg["moves_dir"], extension=self.cfg.get("motion_extension", ".qianim"))
        templates = load_session_templates(self.cfg["sessions_file"])
        self.sessions: SessionTree = build_sessions(templates, self.library, self.cfg["say_dir"])
        self.link = link if link is not None else RobotLink(float(self.cfg.get("link", {}).get("write_timeout", 5.0)))

    # API
    def list_sessions(self) -> List[Dict[str, Any]]:
        return [session_summary(s) for s in self.sessions]

    def list_items(self, session_id: uuid.UUID) -> List[Dict[str, Any]]:
        session = self.sessions.get_session(session_id)
        if session is None:
            raise KeyError(str(session_id))
        return [
            {
                "id": str(item.id),
                "question": instruction_to_dict(item.question),
                "positive": instruction_to_dict(item.positive_answer),
                "negative": instruction_to_dict(item.negative_answer),
            }
            for item in session.items
        ]

    def list_groups(self) -> List[str]:
        return self.library.groups()

    def list_moves(self, group: Optional[str] = None) -> List[Dict[str, Any]]:
        moves = self.library.by_group(group) if group else list(self.library)
        return [move_to_dict(m) for m in moves]

    def get_instruction(self, instruction_id: uuid.UUID) -> SayAndMoveAction:
        found = self.sessions.get_instruction_by_id(instruction_id)
        if found is None:
            raise KeyError(str(instruction_id))
        return found

    def send_instruction(self, instruction_id: uuid.UUID) -> PepperMessage:
        instruction = self.get_instruction(instruction_id)
        logger.info("sending %s", instruction)
        return send_instruction(instruction, self.link)

    def send_move(self, move_id: uuid.UUID) -> PepperMessage:
        move = self.library.get_by_id(move_id)
        if move is None:
            raise KeyError(str(move_id))
        logger.info("sending library %s", move)
        return send_instruction(move, self.link)


def session_summary(session: Session) -> Dict[str, Any]:
    return {
        "id": str(session.id),
        "name": session.name,
        "description": session.description,
        "items": len(session.items),
    }


def move_to_dict(move: Optional[MoveAction]) -> Optional[Dict[str, Any]]:
    if move is None:
        return None
    return {
        "id": str(move.id),
        "name": move.name,
        "group": move.group,
        "delay_ms": move.delay_millis(),
    }


def instruction_to_dict(action: Optional[SayAndMoveAction]) -> Optional[Dict[str, Any]]:
    if action is None:
        return None
    return {
        "id": str(action.id),
        "label": str(action),
        "phrase": action.say.phrase if action.say is not None else "",
        "move": move_to_dict(action.move),
        "valid": action.is_valid(),
    }


def create_app(config_path: str | None = None) -> FastAPI:
    service = PepperService(config_path)
    app = FastAPI(title="Pepper")
    app.state.pepper = service  # type: ignore[attr-defined]
    from modules.pepper.api.router import get_router  # local import to avoid circular
    app.include_router(get_router(service))
    return app


def main():
    parser = argparse.ArgumentParser(description="Pepper session service")
    parser.add_argument("--config", type=str, default=None, help="Path to config.yml")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    import uvicorn  # type: ignore
    cfg = load_config(args.config)
    host = str(cfg.get("server", {}).get("host", "0.0.0.0"))
    port = int(cfg.get("server", {}).get("port", 8090))
    uvicorn.run(create_app(args.config), host=host, port=port)


if __name__ == "__main__":
    main()
