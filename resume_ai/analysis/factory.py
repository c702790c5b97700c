from typing import ClassVar

from resume_ai.analysis.analyzer import ResumeAnalyzer
from resume_ai.analysis.base import BaseAnalyzer
from resume_ai.analysis.example_client_adapter import ExampleClientAdapter
from resume_ai.analysis.openai_client_adapter import OpenAIClientAdapter
from resume_ai.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured analyzer adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create a configured analyzer from application settings."""
        provider = settings.ai_provider.lower()
        if provider == "example":
            return ResumeAnalyzer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                max_attempts=1,
            )
        base_url = cls._resolve_base_url(provider, settings)
        api_key = cls._resolve_api_key(provider, settings)
        if not api_key:
            raise ValueError(f"An API key is required for ai_provider={provider}")
        model = cls._resolve_model_name(provider, settings)
        client = OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.ai_timeout_seconds,
            base_url=base_url,
        )
        return ResumeAnalyzer(
            client=client,
            model=model,
            temperature=settings.ai_temperature,
            max_attempts=settings.ai_max_attempts,
            retry_backoff_seconds=settings.ai_retry_backoff_seconds,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "ai_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown AI provider '{provider}'. Choose from: {supported}")

    @classmethod
    def _resolve_api_key(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.gemini_api_key,
            "openai": settings.openai_api_key,
            "openai_compatible": settings.openai_compatible_api_key,
            "openrouter": settings.openrouter_api_key,
            "groq": settings.groq_api_key,
            "ollama": settings.ollama_api_key,
        }
        return key_map.get(provider, "") or ""

    @classmethod
    def _resolve_model_name(cls, provider: str, settings: Settings) -> str:
        key_map = {
            "gemini": settings.gemini_model_name,
            "openai": settings.openai_model_name,
            "openai_compatible": settings.openai_compatible_model_name,
            "openrouter": settings.openrouter_model_name,
            "groq": settings.groq_model_name,
            "ollama": settings.ollama_model_name,
        }
        model = key_map.get(provider, "") or ""
        if not model:
            raise ValueError(f"A model name is required for ai_provider={provider}")
        return model
