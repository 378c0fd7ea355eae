from __future__ import annotations
from typing import Dict, Any
from fastapi import APIRouter


def get_router(cfg: Dict[str, Any], started: Dict[str, object]) -> APIRouter:
    r = APIRouter()

    @r.get("/healthz")
    def healthz():
        out: Dict[str, Any] = {"ok": True, "modules": {}}
        for name, mod in started.items():
            entry: Dict[str, Any] = {"ok": True}
            link = getattr(mod, "link", None)
            if link is not None:
                entry["robot_connected"] = bool(link.connected)
            out["modules"][name] = entry
        return out

    @r.get("/status")
    def status():
        include_cfg = dict(cfg.get("include", {}))
        started_names = list(started.keys())
        configured_on = [k for k, v in include_cfg.items() if bool(v)]
        not_started = [k for k in configured_on if k not in started_names]
        return {
            "ok": True,
            "configured": include_cfg,
            "started": started_names,
            "not_started": not_started,
        }

    return r
