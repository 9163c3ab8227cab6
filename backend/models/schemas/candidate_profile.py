"""Candidate-side input: the subset of an applicant's profile used for scoring."""

import logging
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError, field_validator

from models.schemas.job_spec import SkillLevel

logger = logging.getLogger(__name__)

_DATETIME = TypeAdapter(datetime)


class CandidateSkill(BaseModel):
    name: str
    level: SkillLevel | None = None  # missing level ranks as Beginner

    model_config = {"frozen": True}


class ExperienceEntry(BaseModel):
    """A single position held by the candidate.

    Unparsable dates are dropped to None, so the entry counts as zero
    years instead of rejecting the whole profile. Naive datetimes are
    taken to be UTC so durations can be computed against an aware "now".
    """
    start_date: datetime | None = None
    end_date: datetime | None = None
    is_current: bool = False

    model_config = {"frozen": True}

    @field_validator("start_date", "end_date", mode="before")
    @classmethod
    def _drop_unparsable(cls, value: Any) -> datetime | None:
        if value is None:
            return None
        try:
            return _DATETIME.validate_python(value)
        except ValidationError:
            logger.warning("Unparsable experience date %r; treating it as missing", value)
            return None

    @field_validator("start_date", "end_date")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value


class EducationEntry(BaseModel):
    degree: str = ""  # free text, e.g. "Bachelor's in Computer Science"

    model_config = {"frozen": True}


class CandidateLocation(BaseModel):
    city: str | None = None

    model_config = {"frozen": True}


class SalaryExpectation(BaseModel):
    min: float
    max: float

    model_config = {"frozen": True}


class CandidatePreferences(BaseModel):
    open_to_relocate: bool = False
    salary_expectation: SalaryExpectation | None = None

    model_config = {"frozen": True}


class CandidateProfile(BaseModel):
    """Applicant data consumed by the compatibility scorer."""
    skills: list[CandidateSkill] = []
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    location: CandidateLocation | None = None
    preferences: CandidatePreferences | None = None

    model_config = {"frozen": True}
