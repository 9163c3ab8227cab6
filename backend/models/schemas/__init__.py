"""Pydantic contracts shared by the keyword extractor, the scorer and the API."""

from models.schemas.candidate_profile import (
    CandidateLocation,
    CandidatePreferences,
    CandidateProfile,
    CandidateSkill,
    EducationEntry,
    ExperienceEntry,
    SalaryExpectation,
)
from models.schemas.compatibility import CompatibilityBreakdown
from models.schemas.job_spec import (
    EducationLevel,
    EducationRequirement,
    JobSpec,
    RequiredSkill,
    SkillImportance,
    SkillLevel,
    WorkArrangement,
)

__all__ = [
    "CandidateLocation",
    "CandidatePreferences",
    "CandidateProfile",
    "CandidateSkill",
    "CompatibilityBreakdown",
    "EducationEntry",
    "EducationLevel",
    "EducationRequirement",
    "ExperienceEntry",
    "JobSpec",
    "RequiredSkill",
    "SalaryExpectation",
    "SkillImportance",
    "SkillLevel",
    "WorkArrangement",
]
