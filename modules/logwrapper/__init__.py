"""
PepperBOT loglama: pepper.* ve gateway.* loggerları ile uvicorn çıktısı
tek bir dictConfig altında toplanır.

- init_logging(overrides) run_robot.py başında bir kez çağrılır
- get_memory_handler() son kayıtları tutan halka tamponu döndürür
- get_router() gateway'e /logs uçlarını (tail, clear) ekler
"""
from .xLogService import init_logging, get_memory_handler, get_router

__all__ = ["init_logging", "get_memory_handler", "get_router"]
