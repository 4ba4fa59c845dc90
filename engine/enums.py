"""
Enumerations for Log Levels and Feed States

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from enum import Enum

from config import LEVEL_RANKS


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    def rank(self) -> int:
        return LEVEL_RANKS[self.value]


class FeedState(str, Enum):
    stopped = "stopped"
    running = "running"
