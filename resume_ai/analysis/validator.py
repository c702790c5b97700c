"""Validates parsed provider JSON against each endpoint's result schema."""

from typing import Any

from resume_ai.analysis.exceptions import ProviderResponseError
from resume_ai.analysis.models import InterviewPrep, ResumeScore

_MAX_LIST_ITEMS = 50

_SCORE_LIST_FIELDS = {
    "strengths": "strengths",
    "improvements": "improvements",
    "skillsDetected": "skills_detected",
}

_PREP_FIELDS = (
    "detected_skills",
    "technical_questions",
    "project_deep_dive",
    "behavioral_scenarios",
    "skill_gaps",
)


def validate_score(data: dict[str, Any]) -> ResumeScore:
    """Validate raw parsed JSON and build a ResumeScore.

    Raises:
        ProviderResponseError: on any validation failure.
    """
    _require_fields(data, ("score", "summary", *_SCORE_LIST_FIELDS))
    score = _build_score(data["score"])
    summary = data["summary"]
    if not isinstance(summary, str) or not summary.strip():
        raise ProviderResponseError("'summary' must be a non-empty string")
    lists = {
        attr: _build_string_list(data[key], key)
        for key, attr in _SCORE_LIST_FIELDS.items()
    }
    return ResumeScore(score=score, summary=summary.strip(), **lists)


def validate_interview_prep(data: dict[str, Any]) -> InterviewPrep:
    """Validate raw parsed JSON and build an InterviewPrep.

    Raises:
        ProviderResponseError: on any validation failure.
    """
    _require_fields(data, _PREP_FIELDS)
    return InterviewPrep(
        **{name: _build_string_list(data[name], name) for name in _PREP_FIELDS}
    )


def _require_fields(data: dict[str, Any], fields: tuple[str, ...]) -> None:
    for field in fields:
        if field not in data:
            raise ProviderResponseError(f"Missing required field: {field}")


def _build_score(raw: Any) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise ProviderResponseError("'score' must be a number")
    if not 0 <= raw <= 100:
        raise ProviderResponseError(f"'score' must be between 0 and 100, got {raw}")
    return round(raw)


def _build_string_list(raw: Any, name: str) -> list[str]:
    if not isinstance(raw, list):
        raise ProviderResponseError(f"'{name}' must be a list")
    if len(raw) > _MAX_LIST_ITEMS:
        raise ProviderResponseError(
            f"Too many items in '{name}': {len(raw)} (max {_MAX_LIST_ITEMS})"
        )
    items: list[str] = []
    for i, item in enumerate(raw):
        if not isinstance(item, str):
            raise ProviderResponseError(f"'{name}' item at index {i} must be a string")
        if item.strip():
            items.append(item.strip())
    return items
