"""Plain-text views of each analysis result shape."""

from resume_ai.analysis.models import AnalysisResult, InterviewPrep, ResumeScore, TextAnalysis

_GAUGE_WIDTH = 20

PREP_SECTIONS: tuple[tuple[str, str], ...] = (
    ("technical_questions", "Technical Questions"),
    ("project_deep_dive", "Project Deep Dive"),
    ("behavioral_scenarios", "Behavioral Scenarios"),
    ("skill_gaps", "Skill Gaps"),
)


def score_label(score: int) -> str:
    if score >= 80:
        return "Elite Match"
    if score >= 60:
        return "Strong Profile"
    if score >= 40:
        return "Needs Tuning"
    return "Low Compatibility"


def render_text(result: TextAnalysis) -> str:
    return result.output


def render_score(result: ResumeScore) -> str:
    filled = round(_GAUGE_WIDTH * result.score / 100)
    gauge = "#" * filled + "-" * (_GAUGE_WIDTH - filled)
    lines = [
        f"[{gauge}] {result.score}%  {score_label(result.score)}",
        "",
        result.summary,
    ]
    lines += _section("Skills Detected", result.skills_detected)
    lines += _section("Strengths", result.strengths)
    lines += _section("Improvements", result.improvements)
    return "\n".join(lines)


def render_interview_prep(result: InterviewPrep, section: str | None = None) -> str:
    """Render every section, or only ``section`` (one of the PREP_SECTIONS keys)."""
    lines: list[str] = []
    if result.detected_skills:
        lines.append("Detected skills: " + ", ".join(result.detected_skills))
    for key, title in PREP_SECTIONS:
        if section is not None and key != section:
            continue
        lines += _section(title, getattr(result, key), numbered=True)
    return "\n".join(lines).lstrip("\n")


def render(result: AnalysisResult) -> str:
    if isinstance(result, ResumeScore):
        return render_score(result)
    if isinstance(result, InterviewPrep):
        return render_interview_prep(result)
    return render_text(result)


def _section(title: str, items: list[str], numbered: bool = False) -> list[str]:
    lines = ["", title, "-" * len(title)]
    if not items:
        lines.append("(none)")
    for i, item in enumerate(items, start=1):
        lines.append(f"{i}. {item}" if numbered else f"- {item}")
    return lines
