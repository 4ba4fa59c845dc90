from __future__ import annotations

from typing import List

from fastapi import APIRouter

from engine import anomaly, logs
from api.requests import DetectRequest, FilterRequest, LogTextRequest
from api.responses import AnomalyResult, ParsedRecord
from api.routes.exception import handle_exceptions

router = APIRouter(tags=["Logs"])


def _records(records: List[logs.LogRecord]) -> List[ParsedRecord]:
    return [
        ParsedRecord(raw_text=r.raw_text, timestamp=r.timestamp, level=r.level)
        for r in records
    ]


@router.post("/logs/parse", response_model=List[ParsedRecord])
@handle_exceptions
async def parse_logs(req: LogTextRequest) -> List[ParsedRecord]:
    return _records(logs.parse(req.raw_text))


@router.post("/logs/filter", response_model=List[ParsedRecord])
@handle_exceptions
async def filter_logs(req: FilterRequest) -> List[ParsedRecord]:
    return _records(logs.filter_by_level(logs.parse(req.raw_text), req.level_filter))


@router.post("/anomalies/logs", response_model=List[AnomalyResult])
@handle_exceptions
async def detect_log_anomalies(req: DetectRequest) -> List[AnomalyResult]:
    filtered = logs.filter_by_level(logs.parse(req.raw_text), req.level_filter)
    return anomaly.detect(filtered, req.threshold)
