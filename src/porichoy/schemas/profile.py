"""Résumé profile document schema.

Field names follow the JSON documents produced by the editor (camelCase); the
Python attributes are snake_case and the camelCase spelling is accepted as an
alias. ``null`` values are dropped before validation so that every field falls
back to its default.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class _OrdinalEnum(str, Enum):
    """String enum whose declaration order is meaningful."""

    @property
    def rank(self) -> int:
        return list(type(self)).index(self) + 1


class SkillLevel(_OrdinalEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    EXPERT = "expert"


class LanguageProficiency(_OrdinalEnum):
    BASIC = "basic"
    CONVERSATIONAL = "conversational"
    FLUENT = "fluent"
    NATIVE = "native"


def drop_nulls(data: Any) -> Any:
    """Remove ``None`` values from a raw mapping so field defaults apply."""
    if isinstance(data, dict):
        return {key: value for key, value in data.items() if value is not None}
    return data


class ProfileModel(BaseModel):
    """Shared configuration for profile sub-documents."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        return drop_nulls(data)


class PersonalInfo(ProfileModel):
    """Name, profession and location of the profile owner."""

    full_name: str = ""
    full_name_bn: str = ""
    profession: str = ""
    profession_bn: str = ""
    location: str = ""
    location_bn: str = ""
    date_of_birth: str | None = None
    nationality: str = ""
    nationality_bn: str = ""


class ExperienceEntry(ProfileModel):
    """Employment history entry."""

    id: str | None = None
    company: str = ""
    company_bn: str = ""
    position: str = ""
    position_bn: str = ""
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False
    description: str = ""
    description_bn: str = ""
    location: str = ""
    achievements: list[str] = Field(default_factory=list)


class EducationEntry(ProfileModel):
    """Structured education history entry."""

    id: str | None = None
    institution: str = ""
    institution_bn: str = ""
    degree: str = ""
    degree_bn: str = ""
    field: str = ""
    field_bn: str = ""
    start_date: str | None = None
    end_date: str | None = None
    current: bool = False
    gpa: str = ""
    description: str = ""
    description_bn: str = ""


class SkillEntry(ProfileModel):
    id: str | None = None
    name: str = ""
    name_bn: str = ""
    level: SkillLevel | None = None
    category: str | None = None


class ProjectEntry(ProfileModel):
    id: str | None = None
    name: str = ""
    name_bn: str = ""
    description: str = ""
    description_bn: str = ""
    role: str = ""
    technologies: list[str] = Field(default_factory=list)
    start_date: str | None = None
    end_date: str | None = None
    url: str = ""
    github_url: str = ""


class CertificationEntry(ProfileModel):
    id: str | None = None
    name: str = ""
    name_bn: str = ""
    issuer: str = ""
    issuer_bn: str = ""
    issue_date: str | None = None
    expiry_date: str | None = None
    credential_id: str = ""
    credential_url: str = ""


class LanguageEntry(ProfileModel):
    id: str | None = None
    name: str = ""
    name_bn: str = ""
    proficiency: LanguageProficiency | None = None


class ContactInfo(ProfileModel):
    """Contact channels and social links."""

    phone: str = ""
    email: str = ""
    website: str = ""
    linkedin: str = ""
    github: str = ""
    twitter: str = ""
    facebook: str = ""
    address: str = ""
    address_bn: str = ""


class ProfileDocument(ProfileModel):
    """Structured résumé content for one profile."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    experience: list[ExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[SkillEntry] = Field(default_factory=list)
    projects: list[ProjectEntry] = Field(default_factory=list)
    certifications: list[CertificationEntry] = Field(default_factory=list)
    languages: list[LanguageEntry] = Field(default_factory=list)
    contact: ContactInfo = Field(default_factory=ContactInfo)
