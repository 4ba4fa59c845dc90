"""
Detection of anomalous log records: each filtered record is scored, records scoring strictly above the threshold are kept with a root cause hypothesis, and the survivors are ranked by score.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from engine.anomaly.scoring import matched_signals, score
from engine.logs.parser import LogRecord
from engine.random_source import RandomSource, resolve
from engine.rca.advisor import root_cause
from api.responses import AnomalyResult


def rank(results: List[AnomalyResult]) -> List[AnomalyResult]:
    # sorted() is stable, so equal scores keep their original order
    return sorted(results, key=lambda r: r.score, reverse=True)


def detect(
    records: Sequence[LogRecord],
    threshold: float,
    rng: Optional[RandomSource] = None,
) -> List[AnomalyResult]:
    rng = resolve(rng)
    results: List[AnomalyResult] = []
    for index, record in enumerate(records):
        value = score(record.raw_text, rng)
        if value <= threshold:
            continue
        results.append(AnomalyResult(
            raw_text=record.raw_text,
            timestamp=record.timestamp,
            level=record.level,
            score=value,
            index=index,
            root_cause=root_cause(record.raw_text, rng),
            signals=matched_signals(record.raw_text),
        ))
    return rank(results)
