from __future__ import annotations

from pathlib import Path

import pytest


def _pepper_dirs(tmp_path: Path) -> dict:
    (tmp_path / "moves" / "Greetings").mkdir(parents=True)
    (tmp_path / "moves" / "Greetings" / "Hello_01.qianim").write_text("<anim/>", encoding="utf-8")
    (tmp_path / "say" / "Demo").mkdir(parents=True)
    (tmp_path / "say" / "Demo" / "hi.wav").write_bytes(b"")
    sessions = tmp_path / "sessions.yml"
    sessions.write_text(
        "sessions:\n  - name: Demo\n    items:\n      - question: {phrase: Hi, file: hi.wav, move: Hello_01}\n",
        encoding="utf-8",
    )
    return {
        "moves_dir": str(tmp_path / "moves"),
        "say_dir": str(tmp_path / "say"),
        "sessions_file": str(sessions),
    }


def test_gateway_bootstrap_mounts(tmp_path):
    from fastapi import FastAPI
    from fastapi.testclient import TestClient
    from modules.gateway.services.bootstrap import bootstrap
    cfg = {"include": {"pepper": True, "logs": True}, "pepper": _pepper_dirs(tmp_path)}
    app = FastAPI()
    started = bootstrap(app, cfg)
    assert "pepper" in started
    assert "logs" in started
    client = TestClient(app)
    resp = client.get("/pepper/sessions")
    assert resp.status_code == 200
    assert [s["name"] for s in resp.json()["sessions"]] == ["Demo"]
    assert client.get("/logs/").status_code == 200


def test_gateway_status(tmp_path):
    from fastapi.testclient import TestClient
    from modules.gateway.xGatewayService import create_app
    app = create_app(overrides={"pepper": _pepper_dirs(tmp_path)})
    client = TestClient(app)
    status = client.get("/status").json()
    assert status["started"] == ["pepper", "logs"]
    assert status["not_started"] == []
    health = client.get("/healthz").json()
    assert health["modules"]["pepper"] == {"ok": True, "robot_connected": False}


def test_missing_pepper_asset_stops_bootstrap(tmp_path):
    from fastapi import FastAPI
    from modules.gateway.services.bootstrap import bootstrap
    dirs = _pepper_dirs(tmp_path)
    (tmp_path / "say" / "Demo" / "hi.wav").unlink()
    with pytest.raises(FileNotFoundError):
        bootstrap(FastAPI(), {"include": {"pepper": True}, "pepper": dirs})
