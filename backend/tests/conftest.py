"""Shared fixtures: a reference job, a reference candidate and a fixed clock."""

from datetime import datetime, timezone

import pytest

from models.schemas import (
    CandidatePreferences,
    CandidateProfile,
    CandidateSkill,
    ExperienceEntry,
    JobSpec,
    RequiredSkill,
    SkillImportance,
    SkillLevel,
    WorkArrangement,
)

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def go_job() -> JobSpec:
    """Remote Go role with a fixed salary and no education requirement."""
    return JobSpec(
        title="Go Developer",
        description="Write and operate distributed services in Go",
        required_skills=[
            RequiredSkill(
                name="Go",
                level=SkillLevel.ADVANCED,
                importance=SkillImportance.MUST_HAVE,
            ),
        ],
        min_experience=2,
        work_arrangement=WorkArrangement.REMOTE,
        city="Berlin",
        fixed_salary=5000,
    )


@pytest.fixture
def go_candidate() -> CandidateProfile:
    return CandidateProfile(
        skills=[CandidateSkill(name="Go", level=SkillLevel.EXPERT)],
        experience=[ExperienceEntry(start_date=datetime(2020, 1, 1), is_current=True)],
        education=[],
        preferences=CandidatePreferences(),
    )
