"""
Synthetic log feed for real-time demo mode. A single asyncio task fabricates one log line per period and hands it to a tick callback; the feed object doubles as the cancellation handle.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from engine.enums import FeedState
from engine.random_source import RandomSource, pick
from config import TIMESTAMP_FORMAT, settings

log = logging.getLogger(__name__)

TickCallback = Callable[[str], None]


def generate_line(rng: Optional[RandomSource] = None, now: Optional[datetime] = None) -> str:
    now = now or datetime.now(timezone.utc)
    level = pick(settings.feed_levels, rng)
    message = pick(settings.feed_messages, rng)
    return f"{now.strftime(TIMESTAMP_FORMAT)} {level} {message}"


class SyntheticFeed:
    def __init__(
        self,
        period_seconds: Optional[float] = None,
        rng: Optional[RandomSource] = None,
    ) -> None:
        self.period_seconds = period_seconds if period_seconds is not None else settings.feed_period_seconds
        self._rng = rng
        self._on_tick: Optional[TickCallback] = None
        self._task: Optional[asyncio.Task] = None
        self.state = FeedState.stopped
        self.ticks = 0

    @property
    def running(self) -> bool:
        return self.state == FeedState.running

    def start(self, on_tick: TickCallback) -> None:
        if self.running:
            return
        # raises outside an event loop; state stays stopped in that case
        loop = asyncio.get_running_loop()
        self._on_tick = on_tick
        self.state = FeedState.running
        self._task = loop.create_task(self._loop())
        log.info("Synthetic feed started (period=%.2fs)", self.period_seconds)

    def stop(self) -> None:
        if not self.running:
            return
        self.state = FeedState.stopped
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
        log.info("Synthetic feed stopped after %d tick(s)", self.ticks)

    async def aclose(self) -> None:
        task = self._task
        self.stop()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    def tick(self) -> str:
        line = generate_line(self._rng)
        self.ticks += 1
        if self._on_tick is not None:
            self._on_tick(line)
        return line

    async def _loop(self) -> None:
        while self.running:
            await asyncio.sleep(self.period_seconds)
            if not self.running:
                break
            try:
                self.tick()
            except Exception:
                log.exception("Synthetic feed tick failed")


def start_feed(
    on_tick: TickCallback,
    period_seconds: Optional[float] = None,
    rng: Optional[RandomSource] = None,
) -> SyntheticFeed:
    feed = SyntheticFeed(period_seconds=period_seconds, rng=rng)
    feed.start(on_tick)
    return feed


def stop_feed(handle: SyntheticFeed) -> None:
    handle.stop()
