from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from config import LEVEL_FILTER_ALL, THRESHOLD_MAX, THRESHOLD_MIN, settings


class DetectionConfig(BaseModel):
    threshold: float = Field(default=settings.default_threshold, ge=THRESHOLD_MIN, le=THRESHOLD_MAX)
    # unrecognised names are accepted and treated as "all"
    level_filter: str = LEVEL_FILTER_ALL
    rca_enabled: bool = True


class LogTextRequest(BaseModel):
    raw_text: str


class FilterRequest(BaseModel):
    raw_text: str
    level_filter: str = LEVEL_FILTER_ALL


class DetectRequest(BaseModel):
    raw_text: str
    threshold: float = Field(default=settings.default_threshold, ge=THRESHOLD_MIN, le=THRESHOLD_MAX)
    level_filter: str = LEVEL_FILTER_ALL


class AnalyzeRequest(DetectionConfig):
    raw_text: str
    update_stats: bool = True


class SessionConfigRequest(BaseModel):
    threshold: Optional[float] = Field(default=None, ge=THRESHOLD_MIN, le=THRESHOLD_MAX)
    level_filter: Optional[str] = None
    rca_enabled: Optional[bool] = None
