from fastapi import APIRouter, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from config import settings
from models.requests import CompatibilityRequest, KeywordsRequest
from models.responses import CompatibilityResponse, KeywordsResponse
from services import compatibility_scorer, keyword_extractor

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


@router.get("/health")
async def health(request: Request):
    return {"status": "ok", "version": request.app.version}


@router.post("/keywords", response_model=KeywordsResponse)
@limiter.limit(settings.rate_limit)
async def keywords(request: Request, body: KeywordsRequest):
    return KeywordsResponse(
        keywords=keyword_extractor.extract_keywords(
            body.title, body.description, body.required_skills
        )
    )


@router.post("/score", response_model=CompatibilityResponse)
@limiter.limit(settings.rate_limit)
async def score(request: Request, body: CompatibilityRequest):
    breakdown = compatibility_scorer.score_breakdown(body.job, body.candidate)
    return CompatibilityResponse(score=breakdown.total, breakdown=breakdown)
