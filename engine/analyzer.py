from __future__ import annotations

import logging
import time
from typing import List, Optional, Sequence

from engine import anomaly, logs
from engine.logs.parser import LogRecord
from engine.random_source import RandomSource, resolve
from api.requests import DetectionConfig
from api.responses import AnalysisReport, AnomalyResult, StatsSnapshot

log = logging.getLogger(__name__)


def compute_stats(filtered: Sequence[LogRecord], results: Sequence[AnomalyResult]) -> StatsSnapshot:
    total = len(filtered)
    found = len(results)
    return StatsSnapshot(
        total=total,
        anomalies=found,
        rate=(found / total) * 100 if total > 0 else 0.0,
        highest_score=results[0].score if results else 0.0,
    )


def run(
    raw_text: str,
    config: DetectionConfig,
    update_stats: bool = True,
    rng: Optional[RandomSource] = None,
) -> AnalysisReport:
    rng = resolve(rng)
    records = logs.parse(raw_text)
    filtered = logs.filter_by_level(records, config.level_filter)
    results: List[AnomalyResult] = anomaly.detect(filtered, config.threshold, rng)

    stats: Optional[StatsSnapshot] = None
    if update_stats:
        stats = compute_stats(filtered, results)

    log.debug(
        "analysis records=%d filtered=%d anomalies=%d level_filter=%s threshold=%.2f",
        len(records), len(filtered), len(results), config.level_filter, config.threshold,
    )
    return AnalysisReport(
        results=results,
        stats=stats,
        rca_enabled=config.rca_enabled,
        analyzed_at=time.time(),
    )
