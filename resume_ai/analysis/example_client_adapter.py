"""Example analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseCompletionClient and register the provider in AnalyzerFactory.
"""

import json
from typing import ClassVar

from resume_ai.analysis.client_base import BaseCompletionClient


class ExampleClientAdapter(BaseCompletionClient):
    """Example adapter that returns fixed answers matching each endpoint's contract.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_TEXT: ClassVar[str] = (
        "The resume is clearly structured. Consider quantifying achievements "
        "and tailoring the summary to the target role."
    )

    DEFAULT_RESPONSES: ClassVar[dict[str, dict[str, object]]] = {
        "resume_score": {
            "score": 72,
            "summary": "Solid profile with room to quantify impact.",
            "strengths": ["Clear structure"],
            "improvements": ["Quantify achievements"],
            "skillsDetected": ["Python"],
        },
        "interview_prep": {
            "detected_skills": ["Python"],
            "technical_questions": ["Explain how Python manages memory."],
            "project_deep_dive": ["Walk through the architecture of your main project."],
            "behavioral_scenarios": ["Describe a time you resolved a conflict in a team."],
            "skill_gaps": ["Cloud deployment"],
        },
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object] | None = None,
        schema_name: str = "analysis_result",
    ) -> str:
        _ = model, temperature, system_prompt, user_prompt
        if json_schema is None:
            return self.DEFAULT_TEXT
        return json.dumps(self.DEFAULT_RESPONSES.get(schema_name, {}))
