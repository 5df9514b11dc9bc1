"""Render engines turning composed HTML into PDF bytes."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .chromium import DEFAULT_CHROMIUM_ARGS, PageSetup, PlaywrightRenderEngine


@runtime_checkable
class RenderEngine(Protocol):
    """Render engine contract.

    Implementations turn a self-contained HTML document into PDF bytes, raising
    ``RenderTimeout`` or ``RenderFailure`` and never returning a partial
    document. Each call must own and release its own rendering resources.
    """

    async def render(self, html: str) -> bytes:
        """Return the printed PDF for ``html``."""


__all__ = ["DEFAULT_CHROMIUM_ARGS", "PageSetup", "PlaywrightRenderEngine", "RenderEngine"]
