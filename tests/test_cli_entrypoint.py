from __future__ import annotations

import importlib

import pytest

from gtp_adapter.engines import ENGINES, DummyEngine
from gtp_adapter.errors import InvalidMove


class ContractBreakingEngine(DummyEngine):
    def genmove(self, player):
        raise InvalidMove()


def test_console_entrypoint_exposes_app() -> None:
    pytest.importorskip("typer")

    module = importlib.import_module("gtp_adapter.main")

    assert hasattr(module, "app")
    assert module.app is not None


def test_serve_command_speaks_gtp_on_stdio() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from gtp_adapter.main import app

    result = typer_testing.CliRunner().invoke(app, ["serve", "--engine", "board"], input="1 name\n2 quit\n")

    assert result.exit_code == 0
    assert "=1 BoardBot\n\n=2 bye\n\n" in result.stdout


def test_probe_command_prints_capabilities() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from gtp_adapter.main import app

    result = typer_testing.CliRunner().invoke(app, ["probe", "--engine", "dummy"])

    assert result.exit_code == 0
    assert "showboard" in result.stdout


def test_unknown_engine_is_a_usage_error() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from gtp_adapter.main import app

    result = typer_testing.CliRunner().invoke(app, ["probe", "--engine", "gnugo"])

    assert result.exit_code == 2


def test_contract_violation_exits_with_error(monkeypatch) -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from gtp_adapter.main import app

    monkeypatch.setitem(ENGINES, "broken", ContractBreakingEngine)
    result = typer_testing.CliRunner().invoke(app, ["serve", "--engine", "broken"], input="1 genmove b\n")

    assert result.exit_code == 2
    assert "=1" not in result.stdout


def test_settings_command_prints_configuration() -> None:
    typer_testing = pytest.importorskip("typer.testing")
    from gtp_adapter.main import app

    result = typer_testing.CliRunner().invoke(app, ["settings"])

    assert result.exit_code == 0
    assert "gtp-adapter" in result.stdout
    assert "log_level" in result.stdout
