"""Tests for shellroute.cli — ``run`` and ``serve`` subcommands."""

import sys
import types
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from shellroute.app import App
from shellroute.cli import main
from shellroute.cli._resolve import resolve_app
from shellroute.config import AppConfig


@pytest.fixture
def fake_app(monkeypatch: pytest.MonkeyPatch) -> App:
    """Register a fake module holding an App and an App factory."""
    app = App(config=AppConfig(host="127.0.0.1", port=8000))
    mod = types.ModuleType("_cli_test_app")
    mod.app = app  # type: ignore[attr-defined]
    mod.create_app = lambda: App()  # type: ignore[attr-defined]
    mod.not_an_app = 42  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_cli_test_app", mod)
    return app


class TestResolveApp:
    def test_attribute(self, fake_app: App) -> None:
        assert resolve_app("_cli_test_app:app") is fake_app

    def test_default_attribute(self, fake_app: App) -> None:
        assert resolve_app("_cli_test_app") is fake_app

    def test_factory(self, fake_app: App) -> None:
        assert isinstance(resolve_app("_cli_test_app:create_app"), App)

    def test_not_an_app(self, fake_app: App) -> None:
        with pytest.raises(TypeError, match="not a shellroute.App"):
            resolve_app("_cli_test_app:not_an_app")


class TestRun:
    @patch("shellroute.server.dev.run_server")
    def test_default_host_and_port(self, mock_server: MagicMock, fake_app: App) -> None:
        main(["run", "_cli_test_app:app"])
        mock_server.assert_called_once()
        args, kwargs = mock_server.call_args
        assert args == (fake_app, "127.0.0.1", 8000)
        assert kwargs == {"reload": False, "app_path": "_cli_test_app:app"}
        assert fake_app.routes.frozen

    @patch("shellroute.server.dev.run_server")
    def test_overrides(self, mock_server: MagicMock, fake_app: App) -> None:
        main(["run", "_cli_test_app:app", "--host", "0.0.0.0", "--port", "3000", "--reload"])
        args, kwargs = mock_server.call_args
        assert args[1:] == ("0.0.0.0", 3000)
        assert kwargs["reload"] is True

    def test_missing_module(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", "_definitely_missing_module:app"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestServe:
    @patch("shellroute.server.dev.run_server")
    def test_serves_directory(self, mock_server: MagicMock, site_dir: Path) -> None:
        main(["serve", str(site_dir), "--prefix", "/site", "--port", "9001"])
        app, host, port = mock_server.call_args[0]
        assert (host, port) == ("localhost", 9001)
        assert app.routes.resolve("/site/img/logo.png", "GET") is not None
        assert app.routes.resolve("/site", "GET") is not None

    def test_missing_directory(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["serve", str(tmp_path / "missing")])
        assert exc_info.value.code == 1
        assert "no such directory" in capsys.readouterr().err


class TestHelp:
    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "shellroute" in capsys.readouterr().out
