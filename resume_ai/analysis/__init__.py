from resume_ai.analysis.analyzer import ResumeAnalyzer
from resume_ai.analysis.base import BaseAnalyzer
from resume_ai.analysis.factory import AnalyzerFactory

__all__ = ["AnalyzerFactory", "BaseAnalyzer", "ResumeAnalyzer"]
