from __future__ import annotations

import logging
import logging.config
import os
import warnings
from typing import Any, Dict, Optional

from .config_loader import load_config
from .services.handlers import InMemoryLogHandler, build_formatter

_MEMORY_HANDLER: Optional[InMemoryLogHandler] = None
_ROUTER = None  # lazy import for FastAPI


def _ensure_log_dir(path: str) -> None:
    directory = os.path.dirname(path)
    if directory and not os.path.exists(directory):
        os.makedirs(directory, exist_ok=True)


def _build_handlers(cfg: Dict[str, Any]) -> Dict[str, Dict[str, Any]]:
    handlers: Dict[str, Dict[str, Any]] = {
        "in_memory": {
            "()": InMemoryLogHandler,
            "maxlen": int(cfg.get("buffer_size", 1000)),
            "level": "DEBUG",
        }
    }

    if cfg.get("enable_console", True):
        handlers["console"] = {
            "class": "logging.StreamHandler",
            "level": cfg.get("console_level", "INFO"),
            "stream": "ext://sys.stdout",
        }

    if cfg.get("enable_file", True):
        path = str(cfg.get("file_path", "logs/pepper.log"))
        _ensure_log_dir(path)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "level": "DEBUG",
            "filename": path,
            "maxBytes": int(cfg.get("rotate_bytes", 2 * 1024 * 1024)),
            "backupCount": int(cfg.get("backup_count", 5)),
            "encoding": "utf-8",
        }
    return handlers


def init_logging(overrides: Optional[Dict[str, Any]] = None) -> None:
    """Kök logger'ı merkezi olarak yapılandırır.

    - pepper.*, gateway.* ve uvicorn logları tek yerde toplanır
    - Console ve dönen dosya handler isteğe bağlı
    - Bellek içi halka buffer (/logs)
    - Warnings capture
    """
    global _MEMORY_HANDLER

    # Zaten kuruluysa tekrar yapılandırma
    if _MEMORY_HANDLER is not None and logging.getLogger().handlers:
        return

    cfg = load_config(overrides=overrides)
    handlers = _build_handlers(cfg)
    formatter = build_formatter(bool(cfg.get("json_format", False)))

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "()": lambda: formatter,
                }
            },
            "handlers": {
                name: {
                    **opts,
                    "formatter": "default",
                }
                for name, opts in handlers.items()
            },
            "root": {
                "level": "DEBUG",
                "handlers": list(handlers.keys()),
            },
        }
    )

    if cfg.get("capture_warnings", True):
        logging.captureWarnings(True)
        warnings.simplefilter("default")
        # uvicorn's websocket stack is noisy about its own deprecations
        warnings.filterwarnings("ignore", message=r".*websockets\.legacy is deprecated.*", category=DeprecationWarning)
        warnings.filterwarnings("ignore", message=r".*WebSocketServerProtocol is deprecated.*", category=DeprecationWarning)

    for h in logging.getLogger().handlers:
        if isinstance(h, InMemoryLogHandler):
            _MEMORY_HANDLER = h
            break

    # Module bazlı level override
    for name, level in (cfg.get("module_levels") or {}).items():
        logging.getLogger(name).setLevel(str(level).upper())


def get_memory_handler() -> Optional[InMemoryLogHandler]:
    return _MEMORY_HANDLER


def get_router():  # lazy import to avoid FastAPI dep when unused
    global _ROUTER
    if _ROUTER is not None:
        return _ROUTER
    from .api.router import router
    _ROUTER = router
    return _ROUTER


if __name__ == "__main__":
    init_logging()
    log = logging.getLogger("logwrapper.demo")
    log.info("Logwrapper service started")
    log.warning("This is a warning")
