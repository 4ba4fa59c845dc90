from __future__ import annotations

import logging
from typing import List, Sequence

from engine.logs.parser import LogRecord
from config import LEVEL_FILTER_ALL, LEVEL_RANKS

log = logging.getLogger(__name__)


def min_rank(level_filter: str) -> int:
    rank = LEVEL_RANKS.get(str(level_filter).upper())
    if rank is None:
        log.debug("unknown level filter %r; keeping all levels", level_filter)
        return 0
    return rank


def filter_by_level(records: Sequence[LogRecord], level_filter: str) -> List[LogRecord]:
    if level_filter == LEVEL_FILTER_ALL:
        return list(records)
    floor = min_rank(level_filter)
    return [r for r in records if r.level.rank() >= floor]
