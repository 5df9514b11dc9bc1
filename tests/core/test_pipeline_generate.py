from __future__ import annotations

import asyncio
import time

import pytest

from porichoy.errors import MissingData, RenderFailure, RenderTimeout
from porichoy.pipeline import RenderedResume, resume_filename
from porichoy.schemas import Locale


def test_generate_returns_pdf_and_metadata(make_pipeline, static_engine, profile_data, english_user):
    pipeline = make_pipeline(static_engine)

    rendered = asyncio.run(pipeline.generate(profile_data, english_user))

    assert isinstance(rendered, RenderedResume)
    assert rendered.pdf == static_engine.payload
    assert rendered.content_type == "application/pdf"
    assert rendered.filename == "resume-rahim.pdf"
    assert rendered.locale is Locale.EN
    assert static_engine.rendered == [rendered.html]


def test_generate_html_matches_compose(make_pipeline, static_engine, profile_data, bangla_user):
    pipeline = make_pipeline(static_engine)

    rendered = asyncio.run(pipeline.generate(profile_data, bangla_user))

    assert rendered.html == pipeline.compose(profile_data, bangla_user)


def test_never_settling_render_times_out(make_pipeline, never_settling_engine, profile_data, english_user):
    pipeline = make_pipeline(never_settling_engine, render_timeout=0.05)

    started = time.perf_counter()
    with pytest.raises(RenderTimeout) as exc:
        asyncio.run(pipeline.generate(profile_data, english_user))

    assert time.perf_counter() - started < 5
    assert exc.value.to_dict() == {"kind": "RenderTimeout", "message": "PDF rendering timed out"}
    assert never_settling_engine.started is True
    assert never_settling_engine.released is True


def test_engine_crash_becomes_render_failure(make_pipeline, crashing_engine, profile_data, english_user):
    pipeline = make_pipeline(crashing_engine)

    with pytest.raises(RenderFailure) as exc:
        asyncio.run(pipeline.generate(profile_data, english_user))

    assert exc.value.message == "Failed to generate PDF"
    assert "signal 11" in exc.value.detail


def test_typed_engine_errors_pass_through(make_pipeline, profile_data, english_user):
    class TimingOutEngine:
        async def render(self, html: str) -> bytes:
            raise RenderTimeout(detail="Timeout 30000ms exceeded")

    with pytest.raises(RenderTimeout):
        asyncio.run(make_pipeline(TimingOutEngine()).generate(profile_data, english_user))


def test_empty_output_is_a_failure(make_pipeline, profile_data, english_user):
    class EmptyEngine:
        async def render(self, html: str) -> bytes:
            return b""

    with pytest.raises(RenderFailure):
        asyncio.run(make_pipeline(EmptyEngine()).generate(profile_data, english_user))


def test_missing_input_never_reaches_engine(make_pipeline, static_engine, profile_data):
    pipeline = make_pipeline(static_engine)

    with pytest.raises(MissingData):
        asyncio.run(pipeline.generate(profile_data, None))

    assert static_engine.rendered == []


def test_cancellation_reaches_engine(make_pipeline, never_settling_engine, profile_data, english_user):
    pipeline = make_pipeline(never_settling_engine, render_timeout=30)

    async def scenario() -> None:
        task = asyncio.create_task(pipeline.generate(profile_data, english_user))
        await asyncio.sleep(0.01)
        task.cancel()
        with pytest.raises(asyncio.CancelledError):
            await task

    asyncio.run(scenario())

    assert never_settling_engine.released is True


def test_resume_filename():
    assert resume_filename("karim_99") == "resume-karim_99.pdf"
