"""Validate pipeline input and resolve bilingual fields for the active locale."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping
from urllib.parse import urlsplit

from pydantic import BaseModel, ValidationError

from ..errors import MissingData
from ..schemas import (
    CertificationEntry,
    EducationEntry,
    ExperienceEntry,
    LanguageEntry,
    Locale,
    ProfileDocument,
    ProjectEntry,
    SkillEntry,
    UserIdentity,
)
from .dates import format_date_range
from .labels import Labels, labels_for

_LINK_SCHEMES = frozenset({"http", "https", "mailto"})


@dataclass(frozen=True, slots=True)
class ResolvedLink:
    label: str
    url: str


@dataclass(frozen=True, slots=True)
class ResolvedHeader:
    name: str
    profession: str
    location: str
    email: str
    phone: str
    links: tuple[ResolvedLink, ...]


@dataclass(frozen=True, slots=True)
class ResolvedExperience:
    position: str
    company: str
    date_range: str
    location: str
    description: str
    achievements: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class ResolvedEducation:
    degree: str
    field: str
    institution: str
    date_range: str
    gpa: str
    description: str


@dataclass(frozen=True, slots=True)
class ResolvedSkill:
    name: str
    level: str
    stars: int


@dataclass(frozen=True, slots=True)
class ResolvedProject:
    name: str
    role: str
    description: str
    date_range: str
    technologies: tuple[str, ...]
    links: tuple[ResolvedLink, ...]


@dataclass(frozen=True, slots=True)
class ResolvedLanguage:
    name: str
    proficiency: str


@dataclass(frozen=True, slots=True)
class ResolvedCertification:
    name: str
    issuer: str
    date_range: str
    credential_id: str
    credential_url: str


@dataclass(frozen=True, slots=True)
class ResolvedDocument:
    """Profile document with every bilingual field settled for one locale."""

    locale: Locale
    username: str
    labels: Labels
    header: ResolvedHeader
    experience: tuple[ResolvedExperience, ...] = ()
    education: tuple[ResolvedEducation, ...] = ()
    skills: tuple[ResolvedSkill, ...] = ()
    projects: tuple[ResolvedProject, ...] = ()
    languages: tuple[ResolvedLanguage, ...] = ()
    certifications: tuple[ResolvedCertification, ...] = ()


def pick(primary: str | None, secondary: str | None, *, prefer_secondary: bool) -> str:
    """Return the display value for a bilingual field pair.

    The secondary (Bangla) variant wins only when it is preferred and
    non-blank; otherwise the primary variant is used. Blank on both sides
    yields an empty string.
    """
    if prefer_secondary and _present(secondary):
        return secondary.strip()  # type: ignore[union-attr]
    if _present(primary):
        return primary.strip()  # type: ignore[union-attr]
    return ""


def assemble(profile_data: Any, user: Any) -> ResolvedDocument:
    """Validate both inputs and build the resolved view for the user's locale."""
    profile = _validate(ProfileDocument, profile_data, "profileData")
    identity = _validate(UserIdentity, user, "user")
    return _Resolver(identity).resolve(profile)


def _validate(model: type[BaseModel], value: Any, name: str) -> Any:
    if value is None:
        raise MissingData(f"Missing required data: {name}")
    if isinstance(value, model):
        return value
    if not isinstance(value, Mapping):
        raise MissingData(f"Malformed {name}: expected an object")
    try:
        return model.model_validate(dict(value))
    except ValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"]) or name for error in exc.errors()
        )
        raise MissingData(f"Malformed {name}: {fields}", detail=str(exc)) from exc


class _Resolver:
    def __init__(self, user: UserIdentity) -> None:
        self._user = user
        self._locale = user.locale
        self._bangla = user.prefers_bangla
        self._labels = labels_for(user.locale)

    def _pick(self, primary: str | None, secondary: str | None) -> str:
        return pick(primary, secondary, prefer_secondary=self._bangla)

    def _dates(self, start: str | None, end: str | None, current: bool = False) -> str:
        return format_date_range(start, end, current, self._locale)

    def resolve(self, profile: ProfileDocument) -> ResolvedDocument:
        return ResolvedDocument(
            locale=self._locale,
            username=self._user.username,
            labels=self._labels,
            header=self._header(profile),
            experience=tuple(self._experience(item) for item in profile.experience),
            education=tuple(self._education(item) for item in profile.education),
            skills=tuple(self._skill(item) for item in profile.skills),
            projects=tuple(self._project(item) for item in profile.projects),
            languages=tuple(self._language(item) for item in profile.languages),
            certifications=tuple(
                self._certification(item) for item in profile.certifications
            ),
        )

    def _header(self, profile: ProfileDocument) -> ResolvedHeader:
        info = profile.personal_info
        contact = profile.contact
        name = self._pick(info.full_name, info.full_name_bn) or self._user.name.strip()
        links = _links(
            (
                (self._labels.website, contact.website),
                (self._labels.linkedin, contact.linkedin),
                (self._labels.github, contact.github),
                (self._labels.twitter, contact.twitter),
            )
        )
        return ResolvedHeader(
            name=name,
            profession=self._pick(info.profession, info.profession_bn),
            location=self._pick(info.location, info.location_bn),
            email=contact.email.strip(),
            phone=contact.phone.strip(),
            links=links,
        )

    def _experience(self, item: ExperienceEntry) -> ResolvedExperience:
        return ResolvedExperience(
            position=self._pick(item.position, item.position_bn),
            company=self._pick(item.company, item.company_bn),
            date_range=self._dates(item.start_date, item.end_date, item.current),
            location=item.location.strip(),
            description=self._pick(item.description, item.description_bn),
            achievements=_texts(item.achievements),
        )

    def _education(self, item: EducationEntry) -> ResolvedEducation:
        return ResolvedEducation(
            degree=self._pick(item.degree, item.degree_bn),
            field=self._pick(item.field, item.field_bn),
            institution=self._pick(item.institution, item.institution_bn),
            date_range=self._dates(item.start_date, item.end_date, item.current),
            gpa=item.gpa.strip(),
            description=self._pick(item.description, item.description_bn),
        )

    def _skill(self, item: SkillEntry) -> ResolvedSkill:
        level = item.level
        return ResolvedSkill(
            name=self._pick(item.name, item.name_bn),
            level=self._labels.skill_levels[level] if level else "",
            stars=level.rank if level else 0,
        )

    def _project(self, item: ProjectEntry) -> ResolvedProject:
        return ResolvedProject(
            name=self._pick(item.name, item.name_bn),
            role=item.role.strip(),
            description=self._pick(item.description, item.description_bn),
            date_range=self._dates(item.start_date, item.end_date),
            technologies=_texts(item.technologies),
            links=_links(
                (
                    (self._labels.view_project, item.url),
                    (self._labels.github, item.github_url),
                )
            ),
        )

    def _language(self, item: LanguageEntry) -> ResolvedLanguage:
        proficiency = item.proficiency
        return ResolvedLanguage(
            name=self._pick(item.name, item.name_bn),
            proficiency=self._labels.proficiencies[proficiency] if proficiency else "",
        )

    def _certification(self, item: CertificationEntry) -> ResolvedCertification:
        return ResolvedCertification(
            name=self._pick(item.name, item.name_bn),
            issuer=self._pick(item.issuer, item.issuer_bn),
            date_range=self._dates(item.issue_date, item.expiry_date),
            credential_id=item.credential_id.strip(),
            credential_url=_safe_url(item.credential_url),
        )


def _present(value: str | None) -> bool:
    return bool(value and value.strip())


def _texts(values: Iterable[str]) -> tuple[str, ...]:
    return tuple(value.strip() for value in values if _present(value))


def _safe_url(value: str) -> str:
    """Keep web and mail links; bare hosts get https, other schemes are dropped."""
    url = value.strip()
    if not url:
        return ""
    try:
        scheme = urlsplit(url).scheme.lower()
    except ValueError:
        return ""
    if scheme in _LINK_SCHEMES:
        return url
    if not scheme:
        return f"https://{url.lstrip('/')}"
    return ""


def _links(pairs: Iterable[tuple[str, str]]) -> tuple[ResolvedLink, ...]:
    links: list[ResolvedLink] = []
    for label, value in pairs:
        url = _safe_url(value)
        if url:
            links.append(ResolvedLink(label=label, url=url))
    return tuple(links)


__all__ = [
    "ResolvedCertification",
    "ResolvedDocument",
    "ResolvedEducation",
    "ResolvedExperience",
    "ResolvedHeader",
    "ResolvedLanguage",
    "ResolvedLink",
    "ResolvedProject",
    "ResolvedSkill",
    "assemble",
    "pick",
]
