from __future__ import annotations
from typing import Dict, Any

import logging

from fastapi import FastAPI

logger = logging.getLogger("gateway.bootstrap")


def _include_pepper(app: FastAPI, started: Dict[str, object], overrides: Dict[str, Any] | None = None) -> None:
    from modules.pepper.xPepperService import PepperService  # type: ignore
    from modules.pepper.api.router import get_router as get_pepper_router  # type: ignore
    svc = PepperService(config_overrides=overrides)
    started["pepper"] = svc
    app.include_router(get_pepper_router(svc))
    logger.info("module pepper mounted: %d sessions, %d moves", len(svc.sessions), len(svc.library))


def _include_logs(app: FastAPI, started: Dict[str, object]) -> None:
    from modules.logwrapper import get_router as get_logs_router  # type: ignore
    logs_router = get_logs_router()
    if logs_router is not None:
        app.include_router(logs_router)
        started["logs"] = True
        logger.info("module logs mounted")


def bootstrap(app: FastAPI, cfg: Dict[str, Any]) -> Dict[str, object]:
    """Wire modules according to cfg.include and return started dict.

    pepper failures propagate, so a missing session asset stops startup;
    other modules degrade with a warning.
    """
    started: Dict[str, object] = {}

    include = cfg.get("include", {})

    def _try(fn, name: str = ""):
        try:
            fn()
        except Exception as exc:
            logger.warning("module %s failed to mount: %s", name or fn.__name__, exc)

    if include.get("pepper"):
        _include_pepper(app, started, cfg.get("pepper"))
    if include.get("logs"):
        _try(lambda: _include_logs(app, started), "logs")

    return started
