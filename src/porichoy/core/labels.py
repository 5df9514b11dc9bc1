"""Fixed display labels for both supported locales."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from ..schemas import LanguageProficiency, Locale, SkillLevel


@dataclass(frozen=True, slots=True)
class Labels:
    """Static strings rendered around user content."""

    resume: str
    present: str
    experience: str
    education: str
    skills: str
    projects: str
    languages: str
    certifications: str
    technologies: str
    gpa: str
    view_project: str
    github: str
    linkedin: str
    twitter: str
    website: str
    credential_id: str
    skill_levels: Mapping[SkillLevel, str]
    proficiencies: Mapping[LanguageProficiency, str]


_ENGLISH = Labels(
    resume="Resume",
    present="Present",
    experience="Work Experience",
    education="Education",
    skills="Skills",
    projects="Projects",
    languages="Languages",
    certifications="Certifications",
    technologies="Technologies",
    gpa="GPA",
    view_project="View Project",
    github="GitHub",
    linkedin="LinkedIn",
    twitter="Twitter",
    website="Website",
    credential_id="Credential ID",
    skill_levels=MappingProxyType(
        {
            SkillLevel.BEGINNER: "Beginner",
            SkillLevel.INTERMEDIATE: "Intermediate",
            SkillLevel.ADVANCED: "Advanced",
            SkillLevel.EXPERT: "Expert",
        }
    ),
    proficiencies=MappingProxyType(
        {
            LanguageProficiency.BASIC: "Basic",
            LanguageProficiency.CONVERSATIONAL: "Conversational",
            LanguageProficiency.FLUENT: "Fluent",
            LanguageProficiency.NATIVE: "Native",
        }
    ),
)

_BANGLA = Labels(
    resume="জীবনবৃত্তান্ত",
    present="বর্তমান",
    experience="কাজের অভিজ্ঞতা",
    education="শিক্ষাগত যোগ্যতা",
    skills="দক্ষতা",
    projects="প্রজেক্ট",
    languages="ভাষা",
    certifications="সার্টিফিকেশন",
    technologies="প্রযুক্তি",
    gpa="জিপিএ",
    view_project="প্রজেক্ট দেখুন",
    github="GitHub",
    linkedin="LinkedIn",
    twitter="Twitter",
    website="ওয়েবসাইট",
    credential_id="ক্রেডেনশিয়াল আইডি",
    skill_levels=MappingProxyType(
        {
            SkillLevel.BEGINNER: "শিক্ষানবিশ",
            SkillLevel.INTERMEDIATE: "মধ্যম",
            SkillLevel.ADVANCED: "উন্নত",
            SkillLevel.EXPERT: "বিশেষজ্ঞ",
        }
    ),
    proficiencies=MappingProxyType(
        {
            LanguageProficiency.BASIC: "প্রাথমিক",
            LanguageProficiency.CONVERSATIONAL: "কথোপকথন",
            LanguageProficiency.FLUENT: "সাবলীল",
            LanguageProficiency.NATIVE: "মাতৃভাষা",
        }
    ),
)

_LABELS: dict[Locale, Labels] = {Locale.EN: _ENGLISH, Locale.BN: _BANGLA}


def labels_for(locale: Locale) -> Labels:
    return _LABELS[locale]


__all__ = ["Labels", "labels_for"]
