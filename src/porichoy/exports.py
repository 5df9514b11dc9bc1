"""Export authorization and bookkeeping around the PDF pipeline."""

from __future__ import annotations

import asyncio
import base64
import json
from pathlib import Path

import structlog

from .errors import ExportDenied, PipelineError
from .pipeline import RenderedResume, ResumePdfPipeline
from .schemas import ExportRecord, ExportStatus, ExportType, ProfileRecord


class ExportLog:
    """Append-only export log writing JSON lines.

    Every status transition is appended as a new line; the latest line for an
    export id is its current state.
    """

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def path(self) -> Path:
        return self._path

    def append(self, record: ExportRecord) -> ExportRecord:
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(record.model_dump(mode="json"), ensure_ascii=False))
            handle.write("\n")
        return record

    def records(self) -> list[ExportRecord]:
        if not self._path.exists():
            return []
        records: list[ExportRecord] = []
        with self._path.open("r", encoding="utf-8") as handle:
            for line in handle:
                raw = line.strip()
                if raw:
                    records.append(ExportRecord.model_validate_json(raw))
        return records

    def latest(self, export_id: str) -> ExportRecord | None:
        found = None
        for record in self.records():
            if record.id == export_id:
                found = record
        return found


class ExportService:
    """Authorize, generate and record PDF exports of stored profiles."""

    def __init__(self, *, pipeline: ResumePdfPipeline, log: ExportLog) -> None:
        self._pipeline = pipeline
        self._log = log
        self._logger = structlog.get_logger(__name__)

    @staticmethod
    def can_access(profile: ProfileRecord, requester_id: str | None) -> bool:
        return profile.is_public or (requester_id is not None and requester_id == profile.user_id)

    async def export_pdf(
        self,
        profile: ProfileRecord,
        requester_id: str | None = None,
    ) -> tuple[RenderedResume, ExportRecord]:
        if not self.can_access(profile, requester_id):
            self._logger.warning(
                "export.denied", profile_id=profile.id, requester_id=requester_id
            )
            raise ExportDenied()

        record = self._log.append(ExportRecord(profile_id=profile.id, type=ExportType.PDF))
        record = self._transition(record, ExportStatus.PROCESSING)
        try:
            rendered = await self._pipeline.generate(profile.data, profile.user)
        except PipelineError as exc:
            self._transition(
                record,
                ExportStatus.FAILED,
                error_message=f"{exc.kind}: {exc.message}",
            )
            self._logger.error(
                "export.failed", export_id=record.id, profile_id=profile.id, kind=exc.kind
            )
            raise
        except asyncio.CancelledError:
            self._transition(record, ExportStatus.FAILED, error_message="cancelled")
            self._logger.warning("export.cancelled", export_id=record.id, profile_id=profile.id)
            raise

        encoded = base64.b64encode(rendered.pdf).decode("ascii")
        record = self._transition(
            record,
            ExportStatus.SUCCESS,
            file_url=f"data:{rendered.content_type};base64,{encoded}",
        )
        self._logger.info("export.success", export_id=record.id, profile_id=profile.id)
        return rendered, record

    def _transition(self, record: ExportRecord, status: ExportStatus, **changes) -> ExportRecord:
        return self._log.append(record.model_copy(update={"status": status, **changes}))


__all__ = ["ExportLog", "ExportService"]
