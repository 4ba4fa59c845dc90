"""
Route-level tests for the stateless analysis endpoints and the session workflow, including error translation for empty input and concurrent full analyses.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio

import pytest
from fastapi import HTTPException

from api.requests import AnalyzeRequest, DetectRequest, FilterRequest, LogTextRequest, SessionConfigRequest
from api.routes import analyze as analyze_route
from api.routes import health as health_route
from api.routes import logs as logs_route
from api.routes import session as session_route
from engine.enums import FeedState, LogLevel

MIXED = "\n".join([
    "2024-01-15 10:30:22 INFO Application started successfully",
    "2024-01-15 10:31:00 WARN Retrying connection attempt 1/3",
    "2024-01-15 10:30:45 ERROR Database connection failed - timeout after 30s",
])


class DummyRequest:
    def __init__(self, body: bytes):
        self._body = body

    async def body(self) -> bytes:
        return self._body


@pytest.mark.asyncio
async def test_health_reports_feed_state():
    out = await health_route.health()
    assert out == {"status": "ok", "feed": "stopped"}


@pytest.mark.asyncio
async def test_parse_and_filter_routes():
    parsed = await logs_route.parse_logs(LogTextRequest(raw_text=MIXED + "\n\n"))
    assert [p.level for p in parsed] == [LogLevel.INFO, LogLevel.WARN, LogLevel.ERROR]
    filtered = await logs_route.filter_logs(FilterRequest(raw_text=MIXED, level_filter="warn"))
    assert [p.level for p in filtered] == [LogLevel.WARN, LogLevel.ERROR]


@pytest.mark.asyncio
async def test_detect_route_returns_ranked_results():
    results = await logs_route.detect_log_anomalies(DetectRequest(raw_text=MIXED, threshold=0.5))
    assert results
    assert results[0].score == 1.0
    assert all(r.score > 0.5 for r in results)


@pytest.mark.asyncio
async def test_analyze_route_serializes_report():
    req = AnalyzeRequest(raw_text=MIXED, threshold=0.5, level_filter="error")
    out = await analyze_route.analyze(req)
    payload = out.model_dump(mode="json")
    assert payload["stats"]["total"] == 1
    assert payload["stats"]["anomalies"] == 1
    assert payload["results"][0]["level"] == "ERROR"
    assert payload["results"][0]["root_cause"].startswith("Database connectivity issue")


@pytest.mark.asyncio
async def test_analyze_route_without_stats():
    out = await analyze_route.analyze(AnalyzeRequest(raw_text=MIXED, update_stats=False))
    assert out.stats is None


def test_threshold_validation():
    with pytest.raises(ValueError):
        AnalyzeRequest(raw_text="x", threshold=0.95)
    with pytest.raises(ValueError):
        SessionConfigRequest(threshold=0.05)


@pytest.mark.asyncio
async def test_analyze_route_wraps_unexpected_errors(monkeypatch):
    def broken(req):
        raise RuntimeError("pipeline exploded")

    monkeypatch.setattr(analyze_route, "run_analysis", broken)
    with pytest.raises(HTTPException) as exc:
        await analyze_route.analyze(AnalyzeRequest(raw_text="x"))
    assert exc.value.status_code == 500
    assert exc.value.detail == "pipeline exploded"


@pytest.mark.asyncio
async def test_session_full_analysis_flow():
    await session_route.load_sample_logs()
    config = await session_route.update_config(SessionConfigRequest(threshold=0.6))
    assert config.threshold == 0.6
    report = await session_route.analyze_session()
    assert report.stats.total == 9
    state = await session_route.session_state()
    assert state.stats == report.stats
    assert state.results == report.results


@pytest.mark.asyncio
async def test_session_empty_input_is_400():
    await session_route.replace_logs(LogTextRequest(raw_text="  \n\t"))
    with pytest.raises(HTTPException) as exc:
        await session_route.analyze_session()
    assert exc.value.status_code == 400
    assert exc.value.detail == "Please enter some log data first!"


@pytest.mark.asyncio
async def test_session_busy_is_409(monkeypatch):
    monkeypatch.setattr("config.settings.analysis_latency_seconds", 0.05)
    first = asyncio.create_task(session_route.analyze_session())
    await asyncio.sleep(0)
    with pytest.raises(HTTPException) as exc:
        await session_route.analyze_session()
    assert exc.value.status_code == 409
    await first


@pytest.mark.asyncio
async def test_session_upload_replaces_text():
    state = await session_route.upload_logs(DummyRequest(MIXED.encode("utf-8")))
    assert state.line_count == 3


@pytest.mark.asyncio
async def test_feed_start_stop_routes(fresh_session):
    started = await session_route.start_feed()
    assert started.state == FeedState.running
    again = await session_route.start_feed()
    assert again.state == FeedState.running
    stopped = await session_route.stop_feed()
    assert stopped.state == FeedState.stopped
    await fresh_session.shutdown()
