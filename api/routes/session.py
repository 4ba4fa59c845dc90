"""
Session routes for the interactive analysis workflow: editing or uploading the log buffer, adjusting detection settings, running a full analysis and toggling the real-time synthetic feed.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter, Request

from api.requests import DetectionConfig, LogTextRequest, SessionConfigRequest
from api.responses import AnalysisReport, FeedStatus, SessionState
from api.routes.exception import handle_exceptions
from services.session_service import get_session

router = APIRouter(tags=["Session"])


@router.get("/session", response_model=SessionState)
@handle_exceptions
async def session_state() -> SessionState:
    return get_session().state()


@router.put("/session/logs", response_model=SessionState, summary="Replace the session log text")
@handle_exceptions
async def replace_logs(req: LogTextRequest) -> SessionState:
    session = get_session()
    session.set_text(req.raw_text)
    return session.state()


@router.post("/session/logs/upload", response_model=SessionState, summary="Replace the session log text with an uploaded UTF-8 file body")
@handle_exceptions
async def upload_logs(request: Request) -> SessionState:
    body = await request.body()
    session = get_session()
    session.set_text(body.decode("utf-8", errors="replace"))
    return session.state()


@router.post("/session/logs/sample", response_model=SessionState, summary="Load the bundled sample log")
@handle_exceptions
async def load_sample_logs() -> SessionState:
    session = get_session()
    session.load_sample()
    return session.state()


@router.put("/session/config", response_model=DetectionConfig)
@handle_exceptions
async def update_config(req: SessionConfigRequest) -> DetectionConfig:
    return get_session().configure(req)


@router.post("/session/analyze", response_model=AnalysisReport, summary="Run a full analysis over the session log text")
@handle_exceptions
async def analyze_session() -> AnalysisReport:
    return await get_session().analyze()


@router.post("/session/feed/start", response_model=FeedStatus)
@handle_exceptions
async def start_feed() -> FeedStatus:
    get_session().start_feed()
    return get_session().feed_status()


@router.post("/session/feed/stop", response_model=FeedStatus)
@handle_exceptions
async def stop_feed() -> FeedStatus:
    get_session().stop_feed()
    return get_session().feed_status()
