"""Command-line host for the bridge."""

from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console

from .config.app_config import get_app_config
from .config.bridge_config import BridgeConfig, get_bridge_config
from .models.enums import EnvelopeField
from .models.outcome import Failure
from .services.bridge_service import RequestBridge
from .utils.logger import setup_logging

app = typer.Typer(no_args_is_help=True, help="Forward text to a remote HTTP endpoint.")

_console = Console()
_err_console = Console(stderr=True)


def _resolve_config(endpoint: Optional[str], field: Optional[EnvelopeField]) -> BridgeConfig:
    config = get_bridge_config()
    updates: dict[str, object] = {}
    if endpoint is not None:
        updates["endpoint_url"] = endpoint
    if field is not None:
        updates["envelope_field"] = field
    if not updates:
        return config
    return BridgeConfig(**{**config.model_dump(), **updates})


@app.command()
def send(
    text: str = typer.Argument(..., help="Text to forward."),
    endpoint: Optional[str] = typer.Option(None, "--endpoint", "-e", help="Override BRIDGE_ENDPOINT_URL."),
    field: Optional[EnvelopeField] = typer.Option(None, "--field", "-f", help="JSON field carrying the text."),
) -> None:
    """POST TEXT to the endpoint and print the response body."""

    setup_logging()
    try:
        config = _resolve_config(endpoint, field)
    except ValidationError as exc:
        _err_console.print(f"[red]Invalid configuration:[/red] {exc.errors()[0]['msg']}")
        raise typer.Exit(code=2) from exc

    outcome = RequestBridge(config).send_sync(text)
    if isinstance(outcome, Failure):
        _err_console.print(f"[red]{outcome.error_type.value} failure:[/red] {outcome.reason}")
        raise typer.Exit(code=1)
    _console.print(outcome.text, markup=False, highlight=False)


@app.command("config")
def show_config() -> None:
    """Show the endpoint settings in effect."""

    settings = get_bridge_config()
    _console.print(f"endpoint: {settings.endpoint_url}", markup=False)
    _console.print(f"field:    {settings.envelope_field.value}", markup=False)
    timeout = "httpx default" if settings.timeout is None else f"{settings.timeout}s"
    _console.print(f"timeout:  {timeout}", markup=False)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Override APP_HOST."),
    port: Optional[int] = typer.Option(None, help="Override APP_PORT."),
) -> None:
    """Serve the HTTP host (POST /submit) with uvicorn."""

    import uvicorn

    app_config = get_app_config()
    uvicorn.run(
        "text_bridge.main:app",
        host=host or app_config.app_host,
        port=port or app_config.app_port,
        log_config=None,
    )


def run() -> None:
    app()


if __name__ == "__main__":
    run()
