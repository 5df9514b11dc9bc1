"""User identity consumed by the rendering pipeline."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from .profile import drop_nulls


class Locale(str, Enum):
    """Supported display languages."""

    BN = "bn"
    EN = "en"


class UserIdentity(BaseModel):
    """Snapshot of the profile owner as stored in the users table.

    Nullable columns (``name``, ``locale``) come through as ``null`` and fall
    back to their defaults.
    """

    name: str = ""
    locale: Locale = Locale.EN
    username: str

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        return drop_nulls(data)

    @property
    def prefers_bangla(self) -> bool:
        return self.locale is Locale.BN
