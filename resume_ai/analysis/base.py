from abc import ABC, abstractmethod

from resume_ai.analysis.models import InterviewPrep, ResumeScore, TextAnalysis


class BaseAnalyzer(ABC):
    """Contract for all resume analyzers."""

    @abstractmethod
    def analyze(self, resume_text: str) -> TextAnalysis:
        """Produce free-form insights for a resume.

        Raises:
            ProviderError: on any failure.
        """

    @abstractmethod
    def score(self, resume_text: str) -> ResumeScore:
        """Produce a validated score record for a resume.

        Raises:
            ProviderError: on any failure.
        """

    @abstractmethod
    def interview_prep(self, resume_text: str) -> InterviewPrep:
        """Produce validated interview preparation material for a resume.

        Raises:
            ProviderError: on any failure.
        """
