"""CLI startup entrypoint for the GTP adapter."""

from __future__ import annotations

import sys

import typer
from rich import print
from rich.console import Console

from gtp_adapter.config import settings
from gtp_adapter.dispatcher import GtpDispatcher
from gtp_adapter.engines import ENGINES, build_engine
from gtp_adapter.errors import EngineContractError
from gtp_adapter.serve import serve as serve_stream
from gtp_adapter.telemetry import configure_logging

app = typer.Typer(help="Go Text Protocol adapter for built-in engines")

_stderr = Console(stderr=True)


def _build_dispatcher(engine_name: str) -> GtpDispatcher:
    try:
        engine = build_engine(engine_name)
    except KeyError as exc:
        raise typer.BadParameter(str(exc.args[0]), param_hint="--engine") from exc
    return GtpDispatcher(engine)


@app.command("settings")
def show_settings() -> None:
    """Show the effective runtime configuration."""
    print(settings.model_dump())


@app.command()
def serve(
    engine: str = typer.Option(settings.engine, help=f"Engine to serve: {', '.join(sorted(ENGINES))}"),
    log_level: str = typer.Option(settings.log_level, help="Log level for stderr diagnostics"),
) -> None:
    """Speak GTP on stdin/stdout until quit or end of input."""
    configure_logging(log_level, settings.log_file)
    try:
        serve_stream(_build_dispatcher(engine), sys.stdin, sys.stdout)
    except EngineContractError as exc:
        _stderr.print(f"[bold red]fatal:[/] {exc}")
        raise typer.Exit(code=2)


@app.command()
def probe(
    engine: str = typer.Option(settings.engine, help=f"Engine to probe: {', '.join(sorted(ENGINES))}"),
) -> None:
    """Print which optional commands an engine supports."""
    dispatcher = _build_dispatcher(engine)
    print({"engine": engine, "capabilities": dispatcher.capabilities.as_dict()})


if __name__ == "__main__":
    app()
