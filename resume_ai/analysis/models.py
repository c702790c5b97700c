from dataclasses import dataclass, field
from typing import ClassVar, Literal


@dataclass(frozen=True)
class TextAnalysis:
    """Free-form analysis text, relayed verbatim from the provider."""

    kind: ClassVar[Literal["text"]] = "text"

    output: str

    def to_payload(self) -> dict[str, object]:
        return {"output": self.output}


@dataclass(frozen=True)
class ResumeScore:
    """Scored resume review shown as a gauge plus categorized lists."""

    kind: ClassVar[Literal["score"]] = "score"

    score: int
    summary: str
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)
    skills_detected: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, object]:
        return {
            "score": self.score,
            "summary": self.summary,
            "strengths": list(self.strengths),
            "improvements": list(self.improvements),
            "skillsDetected": list(self.skills_detected),
        }


@dataclass(frozen=True)
class InterviewPrep:
    """Interview preparation material derived from a resume."""

    kind: ClassVar[Literal["interview_prep"]] = "interview_prep"

    detected_skills: list[str] = field(default_factory=list)
    technical_questions: list[str] = field(default_factory=list)
    project_deep_dive: list[str] = field(default_factory=list)
    behavioral_scenarios: list[str] = field(default_factory=list)
    skill_gaps: list[str] = field(default_factory=list)

    def to_payload(self) -> dict[str, object]:
        return {
            "detected_skills": list(self.detected_skills),
            "technical_questions": list(self.technical_questions),
            "project_deep_dive": list(self.project_deep_dive),
            "behavioral_scenarios": list(self.behavioral_scenarios),
            "skill_gaps": list(self.skill_gaps),
        }


AnalysisResult = TextAnalysis | ResumeScore | InterviewPrep
