from pydantic import BaseModel

from models.schemas.compatibility import CompatibilityBreakdown


class KeywordsResponse(BaseModel):
    keywords: list[str] = []


class CompatibilityResponse(BaseModel):
    score: int = 0
    breakdown: CompatibilityBreakdown = CompatibilityBreakdown()
