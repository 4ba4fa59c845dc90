"""
Response models for API endpoints and internal data structures.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Any, List, Optional

import numpy as np
from pydantic import BaseModel, Field, model_serializer

from engine.enums import FeedState, LogLevel


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class ParsedRecord(NpModel):

    raw_text: str
    timestamp: str
    level: LogLevel


class AnomalyResult(NpModel):

    raw_text: str
    timestamp: str
    level: LogLevel
    score: float = Field(ge=0.0, le=1.0)
    index: int = Field(ge=0)
    root_cause: str
    signals: List[str] = Field(default_factory=list)


class StatsSnapshot(NpModel):

    total: int = Field(default=0, ge=0)
    anomalies: int = Field(default=0, ge=0)
    rate: float = 0.0
    highest_score: float = 0.0


class AnalysisReport(NpModel):

    results: List[AnomalyResult]
    # None when the run was asked not to refresh headline stats
    stats: Optional[StatsSnapshot] = None
    rca_enabled: bool = True
    analyzed_at: float


class FeedStatus(BaseModel):

    state: FeedState
    period_seconds: float
    line_count: int


class SessionState(NpModel):

    threshold: float
    level_filter: str
    rca_enabled: bool
    line_count: int
    busy: bool
    feed: FeedState
    results: Optional[List[AnomalyResult]] = None
    stats: StatsSnapshot = Field(default_factory=StatsSnapshot)
