import pytest

from models.schemas.job_spec import JobSpec, RequiredSkill, SkillLevel
from services.keyword_extractor import (
    MAX_KEYWORDS,
    STOP_WORDS,
    extract_keywords,
    keywords_stale,
    refresh_keywords,
    tokenize,
)


def _skill(name: str) -> RequiredSkill:
    return RequiredSkill(name=name, level=SkillLevel.INTERMEDIATE)


def test_extract_keywords_reference_example():
    keywords = extract_keywords(
        "Backend Engineer",
        "Build and maintain backend services using caching and queues",
        [_skill("Node")],
    )
    assert keywords[:9] == [
        "node", "backend", "engineer", "build", "maintain",
        "services", "using", "caching", "queues",
    ]
    assert "and" not in keywords


def test_skills_come_first_in_order():
    keywords = extract_keywords("Engineer", "", [_skill("Python"), _skill("Docker")])
    assert keywords == ["python", "docker", "engineer"]


def test_skill_names_kept_whole():
    keywords = extract_keywords("Developer", "node.js experience", [_skill("Node.js")])
    # the text tokenizer splits on the dot, the skill seed does not
    assert keywords == ["node.js", "developer", "node", "experience"]


def test_duplicate_skills_collapsed():
    keywords = extract_keywords("", "", [_skill("React"), _skill("react")])
    assert keywords == ["react"]


def test_text_token_matching_skill_not_repeated():
    keywords = extract_keywords("Python Developer", "python all day", [_skill("Python")])
    assert keywords.count("python") == 1


def test_stop_words_filtered():
    text = "The service is and will be built with the best tools for the team"
    keywords = extract_keywords(text, text)
    for word in ("the", "and", "will", "with", "for", "been"):
        assert word not in keywords
    assert not STOP_WORDS & set(keywords)


def test_short_tokens_and_punctuation_dropped():
    keywords = extract_keywords("UI/UX", "Go, C, JS... an AI role!", [])
    assert keywords == ["role"]


def test_empty_inputs_yield_empty_list():
    assert extract_keywords("", "", []) == []


def test_capped_at_max_keywords():
    description = " ".join(f"word{i:03d}" for i in range(120))
    keywords = extract_keywords("Title", description, [_skill(f"skill{i}") for i in range(10)])
    assert len(keywords) == MAX_KEYWORDS
    assert keywords[:10] == [f"skill{i}" for i in range(10)]
    assert keywords[10] == "title"


def test_no_duplicates_and_lowercase():
    keywords = extract_keywords("Data DATA data", "Pipelines PIPELINES", [_skill("SQL")])
    assert keywords == ["sql", "data", "pipelines"]
    assert len(keywords) == len(set(keywords))


def test_idempotent():
    args = ("Platform Engineer", "Kubernetes, Terraform and AWS on call", [_skill("Kubernetes")])
    assert extract_keywords(*args) == extract_keywords(*args)


def test_tokenize_ascii_word_runs():
    assert tokenize("Café re-use snake_case 42nd") == ["caf", "use", "snake_case", "42nd"]


class TestRefreshKeywords:
    def _job(self, **overrides) -> JobSpec:
        data = {
            "title": "Backend Engineer",
            "description": "Build backend services",
            "required_skills": [_skill("Node")],
        }
        data.update(overrides)
        return JobSpec(**data)

    def test_new_job_gets_keywords_and_stamp(self, now):
        job = self._job()
        refreshed = refresh_keywords(job, now=now)
        assert refreshed.keywords == ["node", "backend", "engineer", "build", "services"]
        assert refreshed.last_updated == now

    def test_input_not_mutated(self, now):
        job = self._job()
        refreshed = refresh_keywords(job, now=now)
        assert refreshed is not job
        assert job.keywords == []
        assert job.last_updated is None

    def test_unchanged_job_returned_as_is(self, now):
        previous = refresh_keywords(self._job(), now=now)
        assert refresh_keywords(previous, previous=previous) is previous

    def test_salary_change_does_not_restamp(self, now):
        previous = refresh_keywords(self._job(), now=now)
        current = previous.model_copy(update={"fixed_salary": 9000})
        assert refresh_keywords(current, previous=previous).last_updated == now

    @pytest.mark.parametrize("field,value", [
        ("title", "Frontend Engineer"),
        ("description", "Build frontend apps"),
        ("required_skills", [_skill("React")]),
    ])
    def test_text_or_skill_change_is_stale(self, field, value):
        previous = self._job()
        current = previous.model_copy(update={field: value})
        assert keywords_stale(previous, current) is True

    def test_no_previous_is_stale(self):
        assert keywords_stale(None, self._job()) is True
