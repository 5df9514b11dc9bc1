"""Export bookkeeping records."""

from __future__ import annotations

import uuid
from enum import Enum
from typing import Any

import pendulum
from pydantic import BaseModel, ConfigDict, Field

from .user import UserIdentity


class ExportStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    SUCCESS = "success"
    FAILED = "failed"


class ExportType(str, Enum):
    PDF = "pdf"
    HTML = "html"


class ExportRecord(BaseModel):
    """One state of an export request."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    profile_id: str
    type: ExportType = ExportType.PDF
    status: ExportStatus = ExportStatus.PENDING
    file_url: str = ""
    error_message: str | None = None
    created_at: str = Field(default_factory=lambda: pendulum.now("UTC").to_iso8601_string())

    model_config = ConfigDict(extra="forbid")


class ProfileRecord(BaseModel):
    """Profile row joined with its owner, as handed over by the data layer."""

    id: str
    user_id: str
    is_public: bool = False
    data: dict[str, Any] = Field(default_factory=dict)
    user: UserIdentity

    model_config = ConfigDict(extra="ignore")
