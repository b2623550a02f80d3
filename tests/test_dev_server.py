"""Tests for wren.server.dev — pounce wiring from AppConfig."""

import sys
import types
from typing import Any

import pytest

from wren.app import App
from wren.config import AppConfig
from wren.server.dev import run_dev_server


@pytest.fixture
def fake_pounce(monkeypatch: pytest.MonkeyPatch) -> dict[str, Any]:
    """Install stand-in pounce modules that record what they were given."""
    seen: dict[str, Any] = {}

    class ServerConfig:
        def __init__(self, **kwargs: Any) -> None:
            seen["config"] = kwargs

    class Server:
        def __init__(self, config: ServerConfig, app: Any, app_path: str | None = None) -> None:
            seen["app"] = app
            seen["app_path"] = app_path

        def run(self) -> None:
            seen["ran"] = True

    config_mod = types.ModuleType("pounce.config")
    config_mod.ServerConfig = ServerConfig  # type: ignore[attr-defined]
    server_mod = types.ModuleType("pounce.server")
    server_mod.Server = Server  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "pounce", types.ModuleType("pounce"))
    monkeypatch.setitem(sys.modules, "pounce.config", config_mod)
    monkeypatch.setitem(sys.modules, "pounce.server", server_mod)
    return seen


class TestRunDevServer:
    def test_config_drives_server(self, fake_pounce: dict[str, Any]) -> None:
        app = App(
            config=AppConfig(
                host="0.0.0.0",
                port=9000,
                debug=True,
                reload_include=(".json",),
                reload_dirs=("src",),
            )
        )
        run_dev_server(app, app_path="svc:app")

        assert fake_pounce["config"] == {
            "host": "0.0.0.0",
            "port": 9000,
            "workers": 1,
            "reload": True,
            "reload_include": (".json",),
            "reload_dirs": ("src",),
        }
        assert fake_pounce["app"] is app
        assert fake_pounce["app_path"] == "svc:app"
        assert fake_pounce["ran"] is True

    def test_overrides(self, fake_pounce: dict[str, Any]) -> None:
        run_dev_server(App(), host="10.0.0.1", port=3000)
        assert fake_pounce["config"]["host"] == "10.0.0.1"
        assert fake_pounce["config"]["port"] == 3000
        assert fake_pounce["config"]["reload"] is False
        assert fake_pounce["app_path"] is None

    def test_app_run_freezes_and_serves(self, fake_pounce: dict[str, Any]) -> None:
        app = App()
        app.get("/ping", lambda req, res, params: res.end())
        app.run(port=8123)
        assert fake_pounce["config"]["port"] == 8123
        with pytest.raises(RuntimeError):
            app.get("/late", lambda req, res, params: res.end())
