from __future__ import annotations

import os
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "server": {"host": "0.0.0.0", "port": 8090},
    "moves_dir": "data/moves",  # .qianim library, one folder per group
    "say_dir": "data/say",  # <say_dir>/<session name>/<file>.wav
    "sessions_file": None,  # if None, use modules/pepper/config/sessions.yml
    "motion_extension": ".qianim",
    "link": {"write_timeout": 5.0},
}


def load_config(config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Pepper modülü için YAML konfigürasyonunu yükler.

    Öncelik: overrides > env (PEPPER_MOVES_DIR, PEPPER_SAY_DIR)
    > config_path veya PEPPER_CONFIG > varsayılan config.yml > DEFAULT_CONFIG
    """
    cfg: Dict[str, Any] = _deep_update({}, DEFAULT_CONFIG)

    candidates = []
    if config_path:
        if not os.path.exists(config_path):
            raise FileNotFoundError(f"Config file not found: {config_path}")
        candidates.append(config_path)
    env_path = os.getenv("PEPPER_CONFIG")
    if env_path and os.path.exists(env_path):
        candidates.append(env_path)
    here = os.path.dirname(__file__)
    candidates.append(os.path.join(here, "config", "config.yml"))

    for path in candidates:
        if os.path.exists(path):
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            if isinstance(data, dict):
                cfg = _deep_update(cfg, data)
            break

    env_moves = os.getenv("PEPPER_MOVES_DIR")
    if env_moves:
        cfg["moves_dir"] = env_moves
    env_say = os.getenv("PEPPER_SAY_DIR")
    if env_say:
        cfg["say_dir"] = env_say

    if overrides:
        cfg = _deep_update(cfg, {k: v for k, v in overrides.items() if v is not None})

    if not cfg.get("sessions_file"):
        cfg["sessions_file"] = os.path.join(here, "config", "sessions.yml")

    return cfg


def _deep_update(base: Dict[str, Any], up: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in up.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_update(out[k], v)  # type: ignore
        elif isinstance(v, dict):
            out[k] = _deep_update({}, v)
        else:
            out[k] = v
    return out
