"""Typer CLI entrypoint for the PDF service."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, NoReturn, Optional

import typer
import uvicorn

from .config import ConfigManager
from .container import create_container
from .errors import PipelineError
from .logging import configure_logging
from .schemas import ProfileRecord, UserIdentity
from .service import create_app

app = typer.Typer(help="Bilingual résumé PDF export CLI.")


def _load_settings(config: Optional[Path]) -> dict[str, Any]:
    if not config:
        return {}
    try:
        return ConfigManager.load_path(config)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="config") from exc


def _read_json(path: Path, name: str) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"Invalid JSON: {exc}", param_hint=name) from exc


def _configure_logging(level: str, log_format: str) -> None:
    try:
        configure_logging(level, log_format=log_format)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="log_format") from exc


def _fail(exc: PipelineError) -> NoReturn:
    typer.echo(f"{exc.kind}: {exc.message}", err=True)
    raise typer.Exit(code=1)


@app.command()
def render(
    profile: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Profile document JSON path."),
    user: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="User identity JSON path."),
    output: Path = typer.Option(
        ...,
        exists=False,
        file_okay=True,
        dir_okay=False,
        resolve_path=True,
        help="Output PDF path.",
    ),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    export_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Export record log output (JSONL)."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log output format: json or console."),
) -> None:
    """Render a profile document to PDF."""
    settings = _load_settings(config)
    if export_log:
        settings["export_log"] = str(export_log)

    _configure_logging(log_level, log_format)

    container = create_container(settings=settings)
    profile_data = _read_json(profile, "profile")
    user_data = _read_json(user, "user")

    try:
        if export_log:
            document = container.pipeline().resolve(profile_data, user_data)
            record = ProfileRecord(
                id=profile.stem,
                user_id=document.username,
                data=profile_data,
                user=UserIdentity.model_validate(user_data),
            )
            rendered, export = asyncio.run(
                container.export_service().export_pdf(record, requester_id=record.user_id)
            )
            typer.echo(f"Export {export.id} recorded in {export_log}.")
        else:
            rendered = asyncio.run(container.pipeline().generate(profile_data, user_data))
    except PipelineError as exc:
        _fail(exc)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(rendered.pdf)
    typer.echo(f"Rendered {rendered.filename} ({len(rendered.pdf)} bytes). Saved to {output}.")


@app.command()
def html(
    profile: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="Profile document JSON path."),
    user: Path = typer.Option(..., exists=True, readable=True, dir_okay=False, help="User identity JSON path."),
    output: Path = typer.Option(..., dir_okay=False, resolve_path=True, help="Output HTML path."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log output format: json or console."),
) -> None:
    """Compose the résumé HTML without launching a browser."""
    _configure_logging(log_level, log_format)
    container = create_container(settings=_load_settings(config))

    try:
        markup = container.pipeline().compose(
            _read_json(profile, "profile"), _read_json(user, "user")
        )
    except PipelineError as exc:
        _fail(exc)

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(markup, encoding="utf-8")
    typer.echo(f"HTML saved to {output}.")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address."),
    port: Optional[int] = typer.Option(None, envvar="PORT", help="Listen port."),
    api_key: Optional[str] = typer.Option(None, envvar="API_KEY", help="Bearer token required by /generate."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("INFO", help="Log level for structured logging."),
    log_format: str = typer.Option("json", help="Log output format: json or console."),
) -> None:
    """Run the HTTP service."""
    _configure_logging(log_level, log_format)
    container = create_container(settings=_load_settings(config))
    service = container.config.service()
    key = api_key or service["api_key"]
    if not key:
        raise typer.BadParameter("An API key is required (--api-key or API_KEY).", param_hint="api_key")

    application = create_app(pipeline=container.pipeline(), api_key=key)
    uvicorn.run(
        application,
        host=host or service["host"],
        port=port or service["port"],
        log_level=log_level.lower(),
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
