"""Job/candidate compatibility scoring.

Five factors, each capped at its weight before summing:

    skills      40   matched required skills, level bonus, importance weight
    experience  25   total years against the job's min/max range
    education   15   required education level found in a candidate degree
    location    10   remote, same city, or open to relocation
    salary      10   job salary against the candidate's expectation

The total is rounded half-up and clamped to 100.
"""

import logging
import math
from collections.abc import Iterable
from datetime import datetime, timedelta, timezone

from models.schemas.candidate_profile import CandidateProfile, ExperienceEntry
from models.schemas.compatibility import CompatibilityBreakdown
from models.schemas.job_spec import JobSpec, SkillImportance, SkillLevel, WorkArrangement

logger = logging.getLogger(__name__)

SKILLS_CAP = 40.0
EXPERIENCE_CAP = 25.0
EDUCATION_CAP = 15.0
LOCATION_CAP = 10.0
SALARY_CAP = 10.0
MAX_SCORE = 100

# Skills
SKILL_MATCH_POINTS = 10.0
SKILL_LEVEL_BONUS = 5.0
SKILLS_SCALE = 4.0
LEVEL_RANKS: dict[SkillLevel, int] = {
    SkillLevel.BEGINNER: 1,
    SkillLevel.INTERMEDIATE: 2,
    SkillLevel.ADVANCED: 3,
    SkillLevel.EXPERT: 4,
}
DEFAULT_LEVEL_RANK = 1
IMPORTANCE_WEIGHTS: dict[SkillImportance, float] = {
    SkillImportance.MUST_HAVE: 1.5,
    SkillImportance.NICE_TO_HAVE: 0.8,
    SkillImportance.PREFERRED: 1.0,
}
DEFAULT_IMPORTANCE_WEIGHT = 1.0

# Experience
DAYS_PER_YEAR = 365
MIN_EXPERIENCE_POINTS = 15.0
EXPERIENCE_RANGE_POINTS = 10.0

# Salary
SALARY_FULL_RATIO = 0.9
SALARY_PARTIAL_RATIO = 0.8
SALARY_PARTIAL_POINTS = 5.0
SALARY_NEUTRAL_POINTS = 5.0

RELOCATION_POINTS = 5.0


def level_rank(level: SkillLevel | None) -> int:
    return LEVEL_RANKS.get(level, DEFAULT_LEVEL_RANK)


def importance_weight(importance: SkillImportance | None) -> float:
    return IMPORTANCE_WEIGHTS.get(importance, DEFAULT_IMPORTANCE_WEIGHT)


def skills_score(job: JobSpec, candidate: CandidateProfile) -> float:
    """Average weighted points per required skill, scaled by 4 and capped at 40.

    A matched skill earns 10, plus 5 when the candidate's level meets the
    required one, multiplied by the skill's importance weight. Unmatched
    skills earn nothing but still count in the average.
    """
    if not job.required_skills or not candidate.skills:
        return 0.0

    candidate_skills: dict[str, SkillLevel | None] = {}
    for skill in candidate.skills:
        # first listed wins on duplicate names
        candidate_skills.setdefault(skill.name.lower(), skill.level)

    total = 0.0
    for required in job.required_skills:
        name = required.name.lower()
        if name not in candidate_skills:
            continue
        points = SKILL_MATCH_POINTS
        if level_rank(candidate_skills[name]) >= level_rank(required.level):
            points += SKILL_LEVEL_BONUS
        total += points * importance_weight(required.importance)

    return min(total / len(job.required_skills) * SKILLS_SCALE, SKILLS_CAP)


def _entry_years(entry: ExperienceEntry, now: datetime) -> float:
    end = now if entry.is_current else entry.end_date
    if entry.start_date is None or end is None:
        logger.warning(
            "Experience entry without usable dates (start=%s, end=%s, current=%s); counting 0 years",
            entry.start_date, entry.end_date, entry.is_current,
        )
        return 0.0
    years = (end - entry.start_date) / timedelta(days=DAYS_PER_YEAR)
    if years < 0:
        logger.warning("Experience entry ends before it starts (%s > %s); counting 0 years",
                       entry.start_date, end)
        return 0.0
    return years


def total_experience_years(entries: Iterable[ExperienceEntry], now: datetime | None = None) -> float:
    """Sum of entry durations in 365-day years. Current positions run until ``now``."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return sum(_entry_years(entry, now) for entry in entries)


def experience_score(job: JobSpec, candidate: CandidateProfile, now: datetime | None = None) -> float:
    """15 for meeting min_experience, plus 10 more when also within max_experience.

    A zero or missing max_experience means no upper bound.
    """
    if not candidate.experience:
        return 0.0

    years = total_experience_years(candidate.experience, now)
    if years < job.min_experience:
        return 0.0

    score = MIN_EXPERIENCE_POINTS
    if not job.max_experience or years <= job.max_experience:
        score += EXPERIENCE_RANGE_POINTS
    return score


def education_score(job: JobSpec, candidate: CandidateProfile) -> float:
    requirement = job.education
    if requirement is None or not requirement.required:
        return EDUCATION_CAP
    if not candidate.education or requirement.level is None:
        return 0.0

    wanted = requirement.level.value.lower()
    if any(wanted in entry.degree.lower() for entry in candidate.education if entry.degree):
        return EDUCATION_CAP
    return 0.0


def location_score(job: JobSpec, candidate: CandidateProfile) -> float:
    if job.work_arrangement == WorkArrangement.REMOTE:
        return LOCATION_CAP

    city = candidate.location.city if candidate.location else None
    if not city:
        return 0.0
    if city.lower() == job.city.lower():
        return LOCATION_CAP
    if candidate.preferences and candidate.preferences.open_to_relocate:
        return RELOCATION_POINTS
    return 0.0


def job_salary(job: JobSpec) -> float | None:
    """Fixed salary when set, otherwise the midpoint of the posted range."""
    if job.fixed_salary:
        return job.fixed_salary
    if job.salary_from is None or job.salary_to is None:
        return None
    return (job.salary_from + job.salary_to) / 2


def salary_score(job: JobSpec, candidate: CandidateProfile) -> float:
    expectation = candidate.preferences.salary_expectation if candidate.preferences else None
    if expectation is None:
        return SALARY_NEUTRAL_POINTS

    offered = job_salary(job)
    if offered is None:
        return 0.0

    expected = (expectation.min + expectation.max) / 2
    if offered >= expected * SALARY_FULL_RATIO:
        return SALARY_CAP
    if offered >= expected * SALARY_PARTIAL_RATIO:
        return SALARY_PARTIAL_POINTS
    return 0.0


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score_breakdown(
    job: JobSpec,
    candidate: CandidateProfile,
    now: datetime | None = None,
) -> CompatibilityBreakdown:
    """Score every factor and combine them into a 0-100 total."""
    skills = skills_score(job, candidate)
    experience = experience_score(job, candidate, now)
    education = education_score(job, candidate)
    location = location_score(job, candidate)
    salary = salary_score(job, candidate)

    raw = skills + experience + education + location + salary
    total = max(0, _round_half_up(min(raw, MAX_SCORE)))

    logger.debug(
        "Compatibility for %r: skills=%.2f experience=%.1f education=%.1f "
        "location=%.1f salary=%.1f total=%d",
        job.title, skills, experience, education, location, salary, total,
    )
    return CompatibilityBreakdown(
        skills=skills,
        experience=experience,
        education=education,
        location=location,
        salary=salary,
        total=total,
    )


def calculate_compatibility_score(
    job: JobSpec,
    candidate: CandidateProfile,
    now: datetime | None = None,
) -> int:
    """Compatibility of one candidate with one job, as an integer in [0, 100]."""
    return score_breakdown(job, candidate, now).total
