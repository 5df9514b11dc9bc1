"""Headless Chromium render engine backed by Playwright."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Sequence

import structlog
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from ..errors import RenderFailure, RenderTimeout

DEFAULT_CHROMIUM_ARGS: tuple[str, ...] = (
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
    "--disable-gpu",
)


def _default_margins() -> dict[str, str]:
    return {"top": "20mm", "right": "15mm", "bottom": "20mm", "left": "15mm"}


@dataclass(frozen=True, slots=True)
class PageSetup:
    """Print options applied to every generated document."""

    format: str = "A4"
    margins: dict[str, str] = field(default_factory=_default_margins)
    print_background: bool = True
    chromium_args: Sequence[str] = DEFAULT_CHROMIUM_ARGS


class PlaywrightRenderEngine:
    """Print HTML to PDF in a browser launched for that single call.

    ``launcher`` defaults to ``async_playwright`` and only needs to return an
    async context manager exposing ``chromium.launch``.
    """

    def __init__(
        self,
        *,
        page_setup: PageSetup | None = None,
        settle_timeout: float = 30.0,
        launcher: Callable[[], Any] | None = None,
    ) -> None:
        self._page_setup = page_setup or PageSetup()
        self._settle_timeout = settle_timeout
        self._launcher = launcher or async_playwright
        self._logger = structlog.get_logger(__name__)

    @property
    def page_setup(self) -> PageSetup:
        return self._page_setup

    async def render(self, html: str) -> bytes:
        try:
            pdf = await self._print(html)
        except PlaywrightTimeoutError as exc:
            self._logger.warning("pdf.render.timeout", error=str(exc))
            raise RenderTimeout(detail=str(exc)) from exc
        except PlaywrightError as exc:
            self._logger.error("pdf.render.browser_error", error=str(exc))
            raise RenderFailure(detail=str(exc)) from exc
        if not pdf:
            raise RenderFailure(detail="Browser returned an empty document")
        return pdf

    async def _print(self, html: str) -> bytes:
        setup = self._page_setup
        timeout_ms = self._settle_timeout * 1000
        async with self._launcher() as playwright:
            browser = await playwright.chromium.launch(
                headless=True,
                args=list(setup.chromium_args),
            )
            try:
                page = await browser.new_page()
                # networkidle covers the web font fetch.
                await page.set_content(html, wait_until="networkidle", timeout=timeout_ms)
                return await page.pdf(
                    format=setup.format,
                    print_background=setup.print_background,
                    margin=dict(setup.margins),
                )
            finally:
                await browser.close()
                self._logger.debug("pdf.render.browser_closed")


__all__ = ["DEFAULT_CHROMIUM_ARGS", "PageSetup", "PlaywrightRenderEngine"]
