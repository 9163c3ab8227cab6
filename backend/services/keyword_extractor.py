"""Keyword extraction for job postings.

Builds a deduplicated, order-preserving keyword list from a job's
required skills, title and description. Skill names come first, then
title/description tokens of three or more word characters that are not
common English function words.
"""

import logging
import re
from collections.abc import Iterable
from datetime import datetime, timezone

from models.schemas.job_spec import JobSpec, RequiredSkill

logger = logging.getLogger(__name__)

MAX_KEYWORDS = 50

STOP_WORDS: frozenset[str] = frozenset({
    "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by",
    "is", "are", "was", "were", "be", "been",
    "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "must", "can", "shall",
})

# ASCII word characters only, so accented letters split tokens
_TOKEN_RE = re.compile(r"\b\w{3,}\b", re.ASCII)


def tokenize(text: str) -> list[str]:
    """Lowercased word tokens of length >= 3, in order of appearance."""
    return _TOKEN_RE.findall(text.lower())


def extract_keywords(
    title: str,
    description: str,
    required_skills: Iterable[RequiredSkill] = (),
) -> list[str]:
    """Extract at most MAX_KEYWORDS unique keywords for a job.

    Skill names are kept whole ("node.js" stays one keyword) and are not
    stop-word filtered; text tokens are.
    """
    keywords: list[str] = []
    seen: set[str] = set()

    for skill in required_skills:
        name = skill.name.lower()
        if name not in seen:
            keywords.append(name)
            seen.add(name)

    for token in tokenize(f"{title} {description}"):
        if token in STOP_WORDS or token in seen:
            continue
        keywords.append(token)
        seen.add(token)

    return keywords[:MAX_KEYWORDS]


def keywords_stale(previous: JobSpec | None, current: JobSpec) -> bool:
    """True when the fields keywords derive from differ between two versions of a job."""
    if previous is None:
        return True
    return (
        previous.title != current.title
        or previous.description != current.description
        or previous.required_skills != current.required_skills
    )


def refresh_keywords(
    job: JobSpec,
    previous: JobSpec | None = None,
    now: datetime | None = None,
) -> JobSpec:
    """Return ``job`` with recomputed keywords and a fresh ``last_updated`` stamp.

    Nothing is recomputed when ``previous`` has the same title, description
    and required skills; the input is returned as-is. Storing the result is
    the caller's job.
    """
    if not keywords_stale(previous, job):
        return job

    keywords = extract_keywords(job.title, job.description, job.required_skills)
    logger.debug("Extracted %d keywords for job %r", len(keywords), job.title)
    return job.model_copy(update={
        "keywords": keywords,
        "last_updated": now or datetime.now(timezone.utc),
    })
