"""Pydantic schema definitions for profile documents, users and exports."""

from __future__ import annotations

from .export import ExportRecord, ExportStatus, ExportType, ProfileRecord
from .profile import (
    CertificationEntry,
    ContactInfo,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    LanguageProficiency,
    PersonalInfo,
    ProfileDocument,
    ProjectEntry,
    SkillEntry,
    SkillLevel,
)
from .user import Locale, UserIdentity

__all__ = [
    "CertificationEntry",
    "ContactInfo",
    "EducationEntry",
    "ExperienceEntry",
    "ExportRecord",
    "ExportStatus",
    "ExportType",
    "LanguageEntry",
    "LanguageProficiency",
    "Locale",
    "PersonalInfo",
    "ProfileDocument",
    "ProfileRecord",
    "ProjectEntry",
    "SkillEntry",
    "SkillLevel",
    "UserIdentity",
]
