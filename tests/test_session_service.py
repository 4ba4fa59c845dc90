"""
Session service tests covering the empty-input precondition, the busy guard around full analysis, and feed-driven automatic re-analysis.
"""

from __future__ import annotations

import asyncio

import pytest

from api.requests import SessionConfigRequest
from engine.enums import FeedState
from services.exceptions import AnalysisBusyError, EmptyInputError
from services.session_service import AnalysisSession


@pytest.mark.asyncio
async def test_empty_input_rejected_without_touching_stats(fixed_rng):
    session = AnalysisSession(rng=fixed_rng(0.0), text="   \n ")
    before = session.stats
    with pytest.raises(EmptyInputError):
        await session.analyze()
    assert session.stats == before
    assert session.results is None
    assert session.busy is False


@pytest.mark.asyncio
async def test_full_analysis_updates_results_and_stats(fixed_rng):
    session = AnalysisSession(rng=fixed_rng(0.0))
    report = await session.analyze()
    assert report.stats is not None
    assert session.stats == report.stats
    assert session.results == report.results
    assert session.stats.total == 9


@pytest.mark.asyncio
async def test_busy_guard_rejects_second_full_analysis(monkeypatch, fixed_rng):
    monkeypatch.setattr("config.settings.analysis_latency_seconds", 0.05)
    session = AnalysisSession(rng=fixed_rng(0.0))
    first = asyncio.create_task(session.analyze())
    await asyncio.sleep(0)
    assert session.busy is True
    with pytest.raises(AnalysisBusyError):
        await session.analyze()
    report = await first
    assert report.stats.total == 9
    assert session.busy is False


@pytest.mark.asyncio
async def test_auto_analysis_allowed_while_busy(monkeypatch, fixed_rng):
    monkeypatch.setattr("config.settings.analysis_latency_seconds", 0.05)
    session = AnalysisSession(rng=fixed_rng(0.0))
    first = asyncio.create_task(session.analyze())
    await asyncio.sleep(0)
    assert session.analyze_now(update_stats=False) is not None
    await first


def test_configure_merges_partial_updates(fixed_rng):
    session = AnalysisSession(rng=fixed_rng(0.0))
    config = session.configure(SessionConfigRequest(threshold=0.7))
    assert config.threshold == 0.7
    assert config.level_filter == "all"
    config = session.configure(SessionConfigRequest(level_filter="error", rca_enabled=False))
    assert config.threshold == 0.7
    assert config.level_filter == "error"
    assert config.rca_enabled is False


def test_feed_line_always_appends(fixed_rng):
    # 0.9 is above the auto-analysis probability, so no run happens
    session = AnalysisSession(rng=fixed_rng(0.9), text="")
    session._on_feed_line("2024-01-15 10:30:22 ERROR boom")
    assert session.buffer.text == "2024-01-15 10:30:22 ERROR boom"
    assert session.results is None


def test_feed_line_triggers_auto_analysis_without_stats(fixed_rng):
    session = AnalysisSession(rng=fixed_rng(0.0), text="")
    session._on_feed_line("2024-01-15 10:30:22 ERROR Database connection failed")
    assert session.results is not None
    assert len(session.results) == 1
    # headline stats are left alone by automatic runs
    assert session.stats.total == 0


def test_load_sample_and_set_text(fixed_rng):
    session = AnalysisSession(rng=fixed_rng(0.0), text="")
    session.load_sample()
    assert session.buffer.line_count == 9
    session.set_text("one line")
    assert session.state().line_count == 1


@pytest.mark.asyncio
async def test_feed_start_stop_and_shutdown(fixed_rng):
    session = AnalysisSession(rng=fixed_rng(0.9), text="")
    assert session.start_feed(period_seconds=0.01) == FeedState.running
    feed = session._feed
    assert session.start_feed(period_seconds=0.01) == FeedState.running
    assert session._feed is feed
    await asyncio.sleep(0.05)
    assert session.buffer.line_count >= 1
    assert session.stop_feed() == FeedState.stopped
    assert session.start_feed(period_seconds=0.01) == FeedState.running
    await session.shutdown()
    assert session.feed_state == FeedState.stopped


def test_state_snapshot(fixed_rng):
    session = AnalysisSession(rng=fixed_rng(0.0))
    state = session.state()
    assert state.threshold == 0.5
    assert state.feed == FeedState.stopped
    assert state.busy is False
    assert state.results is None
    assert state.stats.total == 0
