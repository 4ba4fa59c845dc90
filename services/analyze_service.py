"""
Analyze service implementation that runs the stateless analysis pipeline for a single request.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

from api.requests import AnalyzeRequest, DetectionConfig
from api.responses import AnalysisReport
from engine.analyzer import run


def run_analysis(req: AnalyzeRequest) -> AnalysisReport:
    config = DetectionConfig(
        threshold=req.threshold,
        level_filter=req.level_filter,
        rca_enabled=req.rca_enabled,
    )
    return run(req.raw_text, config, update_stats=req.update_stats)
