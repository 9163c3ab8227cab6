"""Scorer output: per-factor breakdown of a job/candidate compatibility score."""

from pydantic import BaseModel


class CompatibilityBreakdown(BaseModel):
    """Five capped sub-scores and the rounded total they produce.

    Caps: skills 40, experience 25, education 15, location 10, salary 10.
    """
    skills: float = 0.0
    experience: float = 0.0
    education: float = 0.0
    location: float = 0.0
    salary: float = 0.0
    total: int = 0  # 0-100

    model_config = {"frozen": True}
