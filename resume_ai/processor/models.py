from enum import Enum


class AnalysisKind(str, Enum):
    """Which result contract a request asks for."""

    TEXT = "text"
    SCORE = "score"
    INTERVIEW_PREP = "interview_prep"
