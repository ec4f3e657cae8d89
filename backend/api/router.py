from fastapi import APIRouter, HTTPException, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import ATSScoreRequest, DeepAnalysisRequest
from models.responses import ATSScoreResult, DeepAnalysisResult
from services import ai_analysis
from services.ats import calculate_ats_score

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _validate_job_description(job_description: str | None) -> None:
    limit = settings.max_job_description_chars
    if job_description and len(job_description) > limit:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {limit} chars)",
        )


@router.get("/health")
async def health():
    return {
        "status": "ok",
        "gemini_configured": bool(settings.gemini_api_key),
    }


@router.post("/ats/score", response_model=ATSScoreResult)
@limiter.limit("30/minute")
def ats_score(request: Request, body: ATSScoreRequest):
    _validate_job_description(body.job_description)
    return calculate_ats_score(body.resume, body.job_description)


@router.post("/ats/deep-analysis", response_model=DeepAnalysisResult)
@limiter.limit("10/minute")
async def ats_deep_analysis(request: Request, body: DeepAnalysisRequest):
    _validate_job_description(body.job_description)
    return await ai_analysis.deep_analyze(body.resume, body.job_description)
