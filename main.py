"""
Entry point for the LogBERT Analysis Engine API server.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncIterator

import uvicorn
from fastapi import FastAPI

from api.routes import router
from config import settings
from services import session_service as session_module

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    log.info(
        "Analysis engine starting (threshold=%.2f, feed period=%.1fs)",
        settings.default_threshold, settings.feed_period_seconds,
    )
    try:
        yield
    finally:
        # the feed timer must not outlive the app
        await session_module.get_session().shutdown()
        log.info("Analysis engine stopped")


app = FastAPI(
    title="LogBERT Analysis Engine",
    description="Heuristic log anomaly detection and root cause hints over free-text logs.",
    version="1.0.0",
    lifespan=lifespan,
)

app.include_router(router, prefix="/api/v1")


if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level="info",
        access_log=True,
    )
