"""Dependency injection container for the PDF service."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .config import load_settings
from .core import HtmlCompositor
from .exports import ExportLog, ExportService
from .pipeline import ResumePdfPipeline
from .render import PageSetup, PlaywrightRenderEngine


class PorichoyContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    page_setup = providers.Singleton(
        PageSetup,
        format=config.render.page_format,
        margins=config.render.margins,
        print_background=config.render.print_background,
        chromium_args=config.render.chromium_args,
    )

    render_engine = providers.Singleton(
        PlaywrightRenderEngine,
        page_setup=page_setup,
        settle_timeout=config.render.settle_timeout,
    )

    compositor = providers.Singleton(
        HtmlCompositor,
        font_url=config.template.font_url,
    )

    pipeline = providers.Factory(
        ResumePdfPipeline,
        compositor=compositor,
        engine=render_engine,
        render_timeout=config.render.settle_timeout,
    )

    export_log = providers.Singleton(ExportLog, path=config.export_log)

    export_service = providers.Factory(
        ExportService,
        pipeline=pipeline,
        log=export_log,
    )


def create_container(*, settings: dict[str, Any] | None = None) -> PorichoyContainer:
    """Instantiate container from packaged defaults plus optional overrides."""

    container = PorichoyContainer()
    container.config.from_dict(load_settings(settings))
    return container


__all__ = ["PorichoyContainer", "create_container"]
