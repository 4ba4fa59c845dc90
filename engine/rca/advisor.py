"""
Root cause hypotheses for anomalous log lines, chosen by keyword priority with a random generic hypothesis as fallback.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

from engine.matching import contains_any
from engine.random_source import RandomSource, pick
from config import settings


def matching_rule(text: str) -> Optional[str]:
    for terms, hypothesis in settings.rca_rules:
        if contains_any(text, terms):
            return hypothesis
    return None


def root_cause(text: str, rng: Optional[RandomSource] = None) -> str:
    hypothesis = matching_rule(text)
    if hypothesis is not None:
        return hypothesis
    return pick(settings.rca_fallback_causes, rng)
