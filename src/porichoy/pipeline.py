"""Résumé PDF pipeline assembly and execution."""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from typing import Any

import structlog

from .core import HtmlCompositor, ResolvedDocument, assemble
from .errors import MissingData, PipelineError, RenderFailure, RenderTimeout
from .render import RenderEngine
from .schemas import Locale

PDF_CONTENT_TYPE = "application/pdf"


def resume_filename(username: str) -> str:
    return f"resume-{username}.pdf"


@dataclass(frozen=True, slots=True)
class RenderedResume:
    """Output of a successful generation."""

    pdf: bytes
    html: str
    filename: str
    locale: Locale
    content_type: str = PDF_CONTENT_TYPE


class ResumePdfPipeline:
    """Input assembly -> HTML composition -> PDF rendering, in one pass."""

    def __init__(
        self,
        *,
        compositor: HtmlCompositor,
        engine: RenderEngine,
        render_timeout: float = 30.0,
    ) -> None:
        self._compositor = compositor
        self._engine = engine
        self._render_timeout = render_timeout
        self._logger = structlog.get_logger(__name__)

    def resolve(self, profile_data: Any, user: Any) -> ResolvedDocument:
        try:
            return assemble(profile_data, user)
        except MissingData as exc:
            self._logger.warning("pdf.input.rejected", message=exc.message, detail=exc.detail)
            raise

    def compose(self, profile_data: Any, user: Any) -> str:
        """Return the résumé HTML without rendering it."""
        return self._compositor.compose(self.resolve(profile_data, user))

    async def generate(self, profile_data: Any, user: Any) -> RenderedResume:
        document = self.resolve(profile_data, user)
        html = self._compositor.compose(document)
        log = self._logger.bind(username=document.username, locale=document.locale.value)
        log.info("pdf.generate.start", html_bytes=len(html.encode("utf-8")))

        started = time.perf_counter()
        try:
            pdf = await asyncio.wait_for(
                self._engine.render(html),
                timeout=self._render_timeout,
            )
        except asyncio.TimeoutError as exc:
            error: PipelineError = RenderTimeout(
                detail=f"render did not complete within {self._render_timeout:g}s"
            )
            log.error("pdf.generate.failed", kind=error.kind, detail=error.detail)
            raise error from exc
        except PipelineError as exc:
            log.error("pdf.generate.failed", kind=exc.kind, detail=exc.detail or exc.message)
            raise
        except Exception as exc:  # noqa: BLE001
            error = RenderFailure(detail=f"{type(exc).__name__}: {exc}")
            log.exception("pdf.generate.failed", kind=error.kind, detail=error.detail)
            raise error from exc

        if not pdf:
            error = RenderFailure(detail="render engine returned no output")
            log.error("pdf.generate.failed", kind=error.kind, detail=error.detail)
            raise error

        log.info(
            "pdf.generate.success",
            pdf_bytes=len(pdf),
            duration_ms=round((time.perf_counter() - started) * 1000, 1),
        )
        return RenderedResume(
            pdf=pdf,
            html=html,
            filename=resume_filename(document.username),
            locale=document.locale,
        )


__all__ = ["PDF_CONTENT_TYPE", "RenderedResume", "ResumePdfPipeline", "resume_filename"]
