"""
Constants and configuration for the LogBERT analysis engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Dict, List, Tuple

from pydantic import Field
from pydantic_settings import BaseSettings


LOGBERT_HOST: str = os.getenv("LOGBERT_HOST", "0.0.0.0")
LOGBERT_PORT: int = int(os.getenv("LOGBERT_PORT", "4322"))

LEVEL_FILTER_ALL = "all"
UNKNOWN_TIMESTAMP = "Unknown"

# total order over log levels used for "at or above" filtering
LEVEL_RANKS: Dict[str, int] = {
    "DEBUG": 0,
    "INFO": 1,
    "WARN": 2,
    "ERROR": 3,
}

TIMESTAMP_PATTERN = r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

# inclusive bounds for any detection threshold
THRESHOLD_MIN = 0.1
THRESHOLD_MAX = 0.9

EMPTY_INPUT_MESSAGE = "Please enter some log data first!"

SAMPLE_LOGS = "\n".join([
    "2024-01-15 10:30:22 INFO Application started successfully",
    "2024-01-15 10:30:45 ERROR Database connection failed - timeout after 30s",
    "2024-01-15 10:31:00 WARN Retrying connection attempt 1/3",
    "2024-01-15 10:31:15 INFO Connection established successfully",
    "2024-01-15 10:32:00 ERROR Memory usage exceeded 90% threshold",
    "2024-01-15 10:32:30 WARN Garbage collection triggered",
    "2024-01-15 10:33:00 INFO User authentication successful for user_123",
    "2024-01-15 10:33:15 ERROR API request failed - service unavailable",
    "2024-01-15 10:33:30 WARN Network latency spike detected: 2.5s",
])


class Settings(BaseSettings):
    host: str = LOGBERT_HOST
    port: int = LOGBERT_PORT

    # read from LOGBERT_DEFAULT_THRESHOLD; rejected at startup when out of range
    default_threshold: float = Field(default=0.5, ge=THRESHOLD_MIN, le=THRESHOLD_MAX)

    # anomaly scoring: each group contributes its weight at most once
    score_signals: List[Tuple[Tuple[str, ...], float]] = [
        (("ERROR", "FATAL"), 0.7),
        (("exception", "failed"), 0.6),
        (("timeout", "connection"), 0.5),
        (("memory", "disk"), 0.4),
        (("slow", "performance"), 0.3),
    ]
    score_jitter_max: float = 0.2
    score_cap: float = 1.0

    # rca heuristics, checked in order; first match wins
    rca_rules: List[Tuple[Tuple[str, ...], str]] = [
        (("database", "connection"), "Database connectivity issue - check connection pool settings"),
        (("memory", "heap"), "Memory management issue - potential memory leak detected"),
        (("timeout", "slow"), "Performance degradation - check system resources"),
    ]
    rca_fallback_causes: List[str] = [
        "Resource contention detected",
        "Authentication service timeout",
        "Cache invalidation required",
        "Load balancer health check failed",
    ]

    # log text case is not normalized unless asked for
    case_insensitive_matching: bool = False

    # synthetic feed
    feed_period_seconds: float = float(os.getenv("LOGBERT_FEED_PERIOD_SECONDS", "3.0"))
    feed_auto_analyze_probability: float = 0.3
    feed_levels: List[str] = ["INFO", "WARN", "ERROR", "DEBUG"]
    feed_messages: List[str] = [
        "User authentication successful",
        "Database connection timeout",
        "Memory usage at 85%",
        "API request processed",
        "Cache miss detected",
        "Network latency spike detected",
        "Service unavailable",
        "Configuration updated",
    ]

    # simulated processing time of a user-initiated full analysis
    analysis_latency_seconds: float = float(os.getenv("LOGBERT_ANALYSIS_LATENCY_SECONDS", "2.0"))

    # seed the session buffer with SAMPLE_LOGS on startup
    preload_sample_logs: bool = True

    model_config = {
        "env_prefix": "LOGBERT_",
        "extra": "ignore",
    }


settings = Settings()
