"""HTTP service exposing the PDF pipeline."""

from __future__ import annotations

import asyncio
import contextlib
import json
import secrets
from typing import Any, Awaitable, TypeVar

import structlog
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, Response

from . import __version__
from .errors import MissingData, PipelineError
from .pipeline import ResumePdfPipeline

SERVICE_NAME = "Porichoy PDF Service"
# nginx convention for "client closed request".
CLIENT_CLOSED_REQUEST = 499

T = TypeVar("T")


class ClientDisconnected(Exception):
    """The requester went away before the response was ready."""


def bearer_token(header: str | None) -> str | None:
    if not header:
        return None
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def create_app(*, pipeline: ResumePdfPipeline, api_key: str | None) -> FastAPI:
    """Build the FastAPI application around a configured pipeline."""

    app = FastAPI(title=SERVICE_NAME, version=__version__)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    logger = structlog.get_logger(__name__)

    def authorized(request: Request) -> bool:
        token = bearer_token(request.headers.get("authorization"))
        return bool(api_key and token and secrets.compare_digest(token, api_key))

    @app.exception_handler(PipelineError)
    async def _pipeline_error(_: Request, exc: PipelineError) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.summary, **exc.to_dict()},
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok", "service": SERVICE_NAME}

    @app.post("/generate")
    async def generate(request: Request) -> Response:
        if not authorized(request):
            return JSONResponse(status_code=401, content={"error": "Unauthorized"})

        profile_data, user = await _read_payload(request)
        try:
            rendered = await _unless_disconnected(request, pipeline.generate(profile_data, user))
        except ClientDisconnected:
            logger.warning("pdf.generate.cancelled", reason="client_disconnected")
            return Response(status_code=CLIENT_CLOSED_REQUEST)

        return Response(
            content=rendered.pdf,
            media_type=rendered.content_type,
            headers={"Content-Disposition": f'attachment; filename="{rendered.filename}"'},
        )

    @app.post("/preview")
    async def preview(request: Request) -> Response:
        if not authorized(request):
            return JSONResponse(status_code=401, content={"error": "Unauthorized"})

        profile_data, user = await _read_payload(request)
        return HTMLResponse(pipeline.compose(profile_data, user))

    return app


async def _read_payload(request: Request) -> tuple[Any, Any]:
    try:
        body = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise MissingData("Request body must be a JSON object") from exc
    if not isinstance(body, dict):
        raise MissingData("Request body must be a JSON object")
    profile_data = body.get("profileData")
    user = body.get("user")
    if not profile_data or not user:
        raise MissingData()
    return profile_data, user


async def _unless_disconnected(
    request: Request,
    work: Awaitable[T],
    *,
    poll_interval: float = 0.5,
) -> T:
    """Await ``work``, cancelling it if the client disconnects first."""
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                task.cancel()
                with contextlib.suppress(asyncio.CancelledError):
                    await task
                raise ClientDisconnected()
    finally:
        if not task.done():
            task.cancel()


__all__ = ["SERVICE_NAME", "bearer_token", "create_app"]
