"""
Anomaly scoring and detection for parsed log records, using fixed keyword weights plus bounded random jitter and a strict score threshold, with results ranked by descending score.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.anomaly.detection import detect
from engine.anomaly.scoring import base_score, score

__all__ = ["base_score", "detect", "score"]
