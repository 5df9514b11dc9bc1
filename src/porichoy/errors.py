"""Typed failures surfaced by the rendering pipeline and export layer."""

from __future__ import annotations

from typing import ClassVar


class PipelineError(Exception):
    """Base class for failures reported to pipeline callers.

    ``message`` is safe to hand back to the requester. ``detail`` carries the
    diagnostic text that is only written to server-side logs.
    """

    kind: ClassVar[str] = "PipelineError"
    status_code: ClassVar[int] = 500
    summary: ClassVar[str] = "Failed to generate PDF"
    default_message: ClassVar[str] = "Failed to generate PDF"

    def __init__(self, message: str | None = None, *, detail: str | None = None) -> None:
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(self.message)

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "message": self.message}

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"{self.kind}: {self.message}"


class MissingData(PipelineError):
    """Profile or user input is absent or malformed."""

    kind = "MissingData"
    status_code = 400
    summary = "Missing required data"
    default_message = "Missing required data"


class RenderTimeout(PipelineError):
    """Content did not settle within the configured bound."""

    kind = "RenderTimeout"
    status_code = 504
    default_message = "PDF rendering timed out"


class RenderFailure(PipelineError):
    """The browser process crashed or produced no document."""

    kind = "RenderFailure"
    status_code = 500


class ExportDenied(PipelineError):
    """Requester is neither the owner nor looking at a public profile."""

    kind = "ExportDenied"
    status_code = 403
    summary = "You do not have access to this profile"
    default_message = "You do not have access to this profile"


__all__ = [
    "ExportDenied",
    "MissingData",
    "PipelineError",
    "RenderFailure",
    "RenderTimeout",
]
