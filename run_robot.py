from __future__ import annotations
"""
PepperBOT ana başlatıcı
- Merkezi loglama
- Gateway app oluşturma (pepper oturumları + loglar)
- Uvicorn ile servis başlatma
"""
import argparse
import logging
import os
import sys

import uvicorn  # type: ignore

# Proje kökünü PYTHONPATH'e ekle (script doğrudan çalıştığında)
ROOT = os.path.dirname(os.path.abspath(__file__))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)


def main() -> None:
    parser = argparse.ArgumentParser(description="PepperBOT gateway")
    parser.add_argument("--gateway-config", type=str, default=None, help="Path to gateway config.yml (or GATEWAY_CONFIG)")
    parser.add_argument("--moves-dir", type=str, default=None, help="Motion library root (.qianim files)")
    parser.add_argument("--say-dir", type=str, default=None, help="Session audio root")
    args = parser.parse_args()

    from modules.logwrapper import init_logging  # type: ignore
    init_logging()

    if args.gateway_config:
        os.environ["GATEWAY_CONFIG"] = args.gateway_config

    from modules.gateway.xGatewayService import create_app  # type: ignore
    from modules.gateway.config_loader import load_config  # type: ignore

    pepper_overrides = {k: v for k, v in {"moves_dir": args.moves_dir, "say_dir": args.say_dir}.items() if v}
    cfg = load_config()
    try:
        app = create_app(overrides={"pepper": pepper_overrides} if pepper_overrides else None)
    except (OSError, ValueError) as exc:
        logging.getLogger("pepperbot").error("startup aborted: %s", exc)
        raise SystemExit(1)

    host = str(cfg["server"]["host"])
    port = int(cfg["server"]["port"])
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
