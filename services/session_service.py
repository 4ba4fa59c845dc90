"""
Interactive analysis session: owns the raw-text buffer, the active detection config and the last results, runs user-initiated full analyses behind a busy guard, and wires the synthetic feed into lightweight automatic re-analysis.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from api.requests import DetectionConfig, SessionConfigRequest
from api.responses import AnalysisReport, AnomalyResult, FeedStatus, SessionState, StatsSnapshot
from config import EMPTY_INPUT_MESSAGE, SAMPLE_LOGS, settings
from engine.analyzer import run
from engine.enums import FeedState
from engine.feed import LogBuffer, SyntheticFeed, start_feed, stop_feed
from engine.random_source import RandomSource, resolve
from services.exceptions import AnalysisBusyError, EmptyInputError

log = logging.getLogger(__name__)


class AnalysisSession:
    def __init__(self, rng: Optional[RandomSource] = None, text: Optional[str] = None) -> None:
        self._rng = rng
        if text is None:
            text = SAMPLE_LOGS if settings.preload_sample_logs else ""
        self.buffer = LogBuffer(text)
        self.config = DetectionConfig()
        self.results: Optional[List[AnomalyResult]] = None
        self.stats = StatsSnapshot()
        self.busy = False
        self._feed: Optional[SyntheticFeed] = None

    @property
    def feed_state(self) -> FeedState:
        return self._feed.state if self._feed is not None else FeedState.stopped

    def set_text(self, text: str) -> None:
        self.buffer.replace(text)

    def load_sample(self) -> None:
        self.buffer.replace(SAMPLE_LOGS)

    def configure(self, req: SessionConfigRequest) -> DetectionConfig:
        updates = req.model_dump(exclude_none=True)
        self.config = self.config.model_copy(update=updates)
        return self.config

    async def analyze(self) -> AnalysisReport:
        if self.buffer.is_blank():
            log.warning("Full analysis rejected: no log data")
            raise EmptyInputError(EMPTY_INPUT_MESSAGE)
        if self.busy:
            log.warning("Full analysis rejected: another analysis is in progress")
            raise AnalysisBusyError("An analysis is already in progress")

        text = self.buffer.text
        config = self.config
        self.busy = True
        try:
            await asyncio.sleep(settings.analysis_latency_seconds)
            report = run(text, config, update_stats=True, rng=self._rng)
        finally:
            self.busy = False

        self._apply(report)
        log.info(
            "Full analysis completed: %d anomalies in %d records",
            report.stats.anomalies, report.stats.total,
        )
        return report

    def analyze_now(self, update_stats: bool = False) -> Optional[AnalysisReport]:
        if self.buffer.is_blank():
            return None
        report = run(self.buffer.text, self.config, update_stats=update_stats, rng=self._rng)
        self._apply(report)
        return report

    def _apply(self, report: AnalysisReport) -> None:
        self.results = report.results
        if report.stats is not None:
            self.stats = report.stats

    def _on_feed_line(self, line: str) -> None:
        self.buffer.append(line)
        if resolve(self._rng).random() < settings.feed_auto_analyze_probability:
            report = self.analyze_now(update_stats=False)
            if report is not None:
                log.debug("Feed auto-analysis: %d anomalies", len(report.results))

    def start_feed(self, period_seconds: Optional[float] = None) -> FeedState:
        if self._feed is not None and self._feed.running:
            return self._feed.state
        self._feed = start_feed(self._on_feed_line, period_seconds=period_seconds, rng=self._rng)
        return self._feed.state

    def stop_feed(self) -> FeedState:
        if self._feed is not None:
            stop_feed(self._feed)
        return self.feed_state

    async def shutdown(self) -> None:
        if self._feed is not None:
            await self._feed.aclose()
            self._feed = None

    def feed_status(self) -> FeedStatus:
        return FeedStatus(
            state=self.feed_state,
            period_seconds=self._feed.period_seconds if self._feed is not None else settings.feed_period_seconds,
            line_count=self.buffer.line_count,
        )

    def state(self) -> SessionState:
        return SessionState(
            threshold=self.config.threshold,
            level_filter=self.config.level_filter,
            rca_enabled=self.config.rca_enabled,
            line_count=self.buffer.line_count,
            busy=self.busy,
            feed=self.feed_state,
            results=self.results,
            stats=self.stats,
        )


session_service = AnalysisSession()


def get_session() -> AnalysisSession:
    return session_service
