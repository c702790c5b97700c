"""AI-powered resume analyzer."""

import json
import time
from collections.abc import Callable
from typing import Any, TypeVar

from resume_ai.analysis.base import BaseAnalyzer
from resume_ai.analysis.client_base import BaseCompletionClient
from resume_ai.analysis.exceptions import ProviderError, ProviderResponseError
from resume_ai.analysis.models import InterviewPrep, ResumeScore, TextAnalysis
from resume_ai.analysis.prompt_loader import load_json_schema, load_prompt_template
from resume_ai.analysis.validator import validate_interview_prep, validate_score
from resume_ai.logging.logger import Log

T = TypeVar("T")


class ResumeAnalyzer(BaseAnalyzer):
    """Sends resume text to an AI provider with a fixed instruction per result shape."""

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        temperature: float = 0.2,
        max_attempts: int = 3,
        retry_backoff_seconds: float = 1.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._max_attempts = max(1, max_attempts)
        self._retry_backoff_seconds = max(0.0, retry_backoff_seconds)
        self._sleep = sleep
        self._system_prompt = load_prompt_template("system_prompt").strip()
        self._analyze_template = load_prompt_template("analyze_prompt")
        self._score_template = load_prompt_template("score_prompt")
        self._prep_template = load_prompt_template("interview_prep_prompt")
        self._score_schema = load_json_schema("score_schema")
        self._prep_schema = load_json_schema("interview_prep_schema")

    def analyze(self, resume_text: str) -> TextAnalysis:
        prompt = self._analyze_template.format(resume_text=resume_text)
        Log.debug(f"Analysis prompt:\n{prompt}")

        raw_response = self._call_with_retry(lambda: self._call_ai(prompt))
        Log.debug(f"AI raw response:\n{raw_response}")

        Log.info(f"Analysis complete: {len(raw_response)} chars returned")
        return TextAnalysis(output=raw_response)

    def score(self, resume_text: str) -> ResumeScore:
        result = self._structured(
            self._score_template,
            self._score_schema,
            "resume_score",
            resume_text,
            validate_score,
        )
        Log.info(f"Scoring complete: score {result.score}")
        return result

    def interview_prep(self, resume_text: str) -> InterviewPrep:
        result = self._structured(
            self._prep_template,
            self._prep_schema,
            "interview_prep",
            resume_text,
            validate_interview_prep,
        )
        Log.info(
            f"Interview prep complete: {len(result.technical_questions)} technical questions"
        )
        return result

    def _structured(
        self,
        template: str,
        schema: str,
        schema_name: str,
        resume_text: str,
        build: Callable[[dict[str, Any]], T],
    ) -> T:
        prompt = template.format(resume_text=resume_text, json_schema=schema)
        Log.debug(f"{schema_name} prompt:\n{prompt}")
        schema_dict = json.loads(schema)

        raw_response = self._call_with_retry(
            lambda: self._call_ai(prompt, schema_dict, schema_name)
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        return build(self._parse_json(raw_response))

    def _call_ai(
        self,
        prompt: str,
        json_schema: dict[str, object] | None = None,
        schema_name: str = "analysis_result",
    ) -> str:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=json_schema,
            schema_name=schema_name,
        )

    def _call_with_retry(self, call: Callable[[], str]) -> str:
        """Run ``call``, retrying transient provider errors up to the attempt limit."""
        attempt = 1
        while True:
            try:
                return call()
            except ProviderError as exc:
                if not exc.retryable or attempt >= self._max_attempts:
                    Log.error(
                        f"AI provider call failed after {attempt} attempt(s): "
                        f"{type(exc).__name__}: {exc}"
                    )
                    raise
                delay = self._retry_backoff_seconds * attempt
                Log.warning(
                    f"AI provider call failed ({type(exc).__name__}), retrying in "
                    f"{delay:.1f}s (attempt {attempt + 1}/{self._max_attempts})"
                )
                self._sleep(delay)
                attempt += 1

    @staticmethod
    def _parse_json(raw: str) -> dict[str, Any]:
        cleaned = raw.strip()
        if cleaned.startswith("```"):
            lines = cleaned.splitlines()
            if lines and lines[0].startswith("```"):
                lines = lines[1:]
            if lines and lines[-1].strip() == "```":
                lines = lines[:-1]
            cleaned = "\n".join(lines)

        try:
            parsed = json.loads(cleaned)
        except json.JSONDecodeError as exc:
            raise ProviderResponseError(f"Invalid JSON response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ProviderResponseError("JSON response must be an object")
        return parsed
