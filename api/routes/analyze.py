from __future__ import annotations

from fastapi import APIRouter

from api.requests import AnalyzeRequest
from api.responses import AnalysisReport
from api.routes.exception import handle_exceptions
from services.analyze_service import run_analysis

router = APIRouter(tags=["Analysis"])


@router.post("/analyze", response_model=AnalysisReport, summary="Parse, filter, score and rank a batch of log text")
@handle_exceptions
async def analyze(req: AnalyzeRequest) -> AnalysisReport:
    return run_analysis(req)
