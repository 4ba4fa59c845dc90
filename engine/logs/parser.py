from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List

from engine.enums import LogLevel
from config import TIMESTAMP_PATTERN, UNKNOWN_TIMESTAMP

_TIMESTAMP_RE = re.compile(TIMESTAMP_PATTERN)
_LEVEL_RE = re.compile(r"\b(DEBUG|INFO|WARN|ERROR)\b")


@dataclass(frozen=True)
class LogRecord:
    raw_text: str
    timestamp: str
    level: LogLevel


def extract_timestamp(line: str) -> str:
    match = _TIMESTAMP_RE.search(line)
    return match.group(0) if match else UNKNOWN_TIMESTAMP


def extract_level(line: str) -> LogLevel:
    match = _LEVEL_RE.search(line)
    return LogLevel(match.group(1)) if match else LogLevel.INFO


def parse_line(line: str) -> LogRecord:
    return LogRecord(
        raw_text=line,
        timestamp=extract_timestamp(line),
        level=extract_level(line),
    )


def parse(raw_text: str) -> List[LogRecord]:
    records: List[LogRecord] = []
    for line in raw_text.split("\n"):
        line = line.rstrip("\r")
        if not line.strip():
            continue
        records.append(parse_line(line))
    return records
