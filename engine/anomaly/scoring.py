"""
Keyword-signal anomaly scoring for individual log lines, combining fixed per-signal weights with a bounded random jitter and clamping the result to the unit interval.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Optional

from engine.matching import contains_any
from engine.random_source import RandomSource, resolve
from config import settings


def matched_signals(text: str) -> List[str]:
    return [
        "|".join(terms)
        for terms, _ in settings.score_signals
        if contains_any(text, terms)
    ]


def base_score(text: str) -> float:
    return sum(weight for terms, weight in settings.score_signals if contains_any(text, terms))


def score(text: str, rng: Optional[RandomSource] = None) -> float:
    jitter = resolve(rng).random() * settings.score_jitter_max
    return min(base_score(text) + jitter, settings.score_cap)
