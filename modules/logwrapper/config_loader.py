from __future__ import annotations

import os
from typing import Any, Dict, Optional

import yaml

DEFAULT_CONFIG: Dict[str, Any] = {
    "enable_console": True,
    "console_level": "INFO",
    "enable_file": True,
    "file_path": "logs/pepper.log",
    "rotate_bytes": 2 * 1024 * 1024,  # 2MB
    "backup_count": 5,
    "json_format": False,
    "buffer_size": 1000,
    "capture_warnings": True,
    "module_levels": {"uvicorn.access": "WARNING"},
}

_TRUE = {"1", "true", "yes", "on"}


def load_config(base_dir: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Log ayarlarını birleştirir: varsayılanlar < config.yml < overrides < env.

    Dosya LOGWRAPPER_CONFIG ile, yoksa base_dir/config/config.yml ile,
    o da yoksa modülün kendi config/config.yml'i ile seçilir.
    module_levels sözlükleri üst üste eklenir, birbirini silmez.

    Env: LOG_LEVEL, LOG_FILE, LOG_JSON (1/true).
    """
    cfg: Dict[str, Any] = dict(DEFAULT_CONFIG)
    cfg["module_levels"] = dict(DEFAULT_CONFIG["module_levels"])

    path = os.getenv("LOGWRAPPER_CONFIG")
    if not path and base_dir and os.path.exists(os.path.join(base_dir, "config", "config.yml")):
        path = os.path.join(base_dir, "config", "config.yml")
    if not path:
        path = os.path.join(os.path.dirname(__file__), "config", "config.yml")

    if os.path.exists(path):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if isinstance(data, dict):
            _merge(cfg, data)

    if overrides:
        _merge(cfg, {k: v for k, v in overrides.items() if v is not None})

    if os.getenv("LOG_LEVEL"):
        cfg["console_level"] = os.environ["LOG_LEVEL"]
    if os.getenv("LOG_FILE"):
        cfg["file_path"] = os.environ["LOG_FILE"]
    if os.getenv("LOG_JSON"):
        cfg["json_format"] = os.environ["LOG_JSON"].strip().lower() in _TRUE

    return cfg


def _merge(cfg: Dict[str, Any], data: Dict[str, Any]) -> None:
    for key, value in data.items():
        if key == "module_levels" and isinstance(value, dict):
            cfg["module_levels"].update({str(k): str(v).upper() for k, v in value.items()})
        else:
            cfg[key] = value
