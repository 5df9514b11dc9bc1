from __future__ import annotations

import asyncio
from typing import Any, Callable

import pytest

from porichoy.core import HtmlCompositor
from porichoy.pipeline import ResumePdfPipeline

FAKE_PDF = b"%PDF-1.7\n% porichoy test document\n%%EOF"


class StaticRenderEngine:
    """Returns canned bytes and remembers the HTML it was given."""

    def __init__(self, payload: bytes = FAKE_PDF) -> None:
        self.payload = payload
        self.rendered: list[str] = []

    async def render(self, html: str) -> bytes:
        self.rendered.append(html)
        return self.payload


class NeverSettlingEngine:
    """Waits forever, like a page whose network never goes idle."""

    def __init__(self) -> None:
        self.started = False
        self.released = False

    async def render(self, html: str) -> bytes:
        self.started = True
        try:
            await asyncio.Event().wait()
        finally:
            self.released = True
        return b""  # pragma: no cover - unreachable


class CrashingEngine:
    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or RuntimeError("chromium exited with signal 11")

    async def render(self, html: str) -> bytes:
        raise self.exc


@pytest.fixture
def static_engine() -> StaticRenderEngine:
    return StaticRenderEngine()


@pytest.fixture
def never_settling_engine() -> NeverSettlingEngine:
    return NeverSettlingEngine()


@pytest.fixture
def crashing_engine() -> CrashingEngine:
    return CrashingEngine()


@pytest.fixture
def make_pipeline() -> Callable[..., ResumePdfPipeline]:
    def factory(engine: Any, *, render_timeout: float = 5.0) -> ResumePdfPipeline:
        return ResumePdfPipeline(
            compositor=HtmlCompositor(),
            engine=engine,
            render_timeout=render_timeout,
        )

    return factory


@pytest.fixture
def english_user() -> dict[str, Any]:
    return {"name": "Rahim Uddin", "locale": "en", "username": "rahim"}


@pytest.fixture
def bangla_user() -> dict[str, Any]:
    return {"name": "Rahim Uddin", "locale": "bn", "username": "rahim"}


@pytest.fixture
def profile_data() -> dict[str, Any]:
    return {
        "personalInfo": {
            "fullName": "Rahim Uddin",
            "fullNameBn": "রহিম উদ্দিন",
            "profession": "Backend Engineer",
            "professionBn": "ব্যাকএন্ড প্রকৌশলী",
            "location": "Dhaka",
            "locationBn": "ঢাকা",
        },
        "experience": [
            {
                "id": "exp-1",
                "company": "Pathao",
                "companyBn": "পাঠাও",
                "position": "Software Engineer",
                "positionBn": "সফটওয়্যার প্রকৌশলী",
                "startDate": "2020-01-01",
                "endDate": None,
                "current": True,
                "description": "Built payment services.",
                "descriptionBn": "পেমেন্ট সার্ভিস তৈরি করেছি।",
            }
        ],
        "education": [],
        "skills": [
            {"id": "s-1", "name": "Python", "level": "expert"},
            {"id": "s-2", "name": "PostgreSQL", "nameBn": "পোস্টগ্রেস", "level": "advanced"},
        ],
        "projects": [],
        "certifications": [],
        "languages": [],
        "contact": {"email": "rahim@example.com", "phone": "+8801700000000"},
    }
