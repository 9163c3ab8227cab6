from pydantic import BaseModel, Field

from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_spec import JobSpec, RequiredSkill


class KeywordsRequest(BaseModel):
    title: str = Field(..., description="Job title")
    description: str = Field(..., description="Job description text")
    required_skills: list[RequiredSkill] = []


class CompatibilityRequest(BaseModel):
    job: JobSpec
    candidate: CandidateProfile
