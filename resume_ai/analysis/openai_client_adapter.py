import httpx
import openai

from resume_ai.analysis.client_base import BaseCompletionClient
from resume_ai.analysis.exceptions import (
    ProviderPermanentError,
    ProviderResponseError,
    ProviderTimeoutError,
    ProviderTransientError,
)

_TRANSIENT_STATUS_CODES = frozenset({408, 409, 429})


class OpenAIClientAdapter(BaseCompletionClient):
    """Analysis AI client adapter built on OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        # Retries are owned by the analyzer so every attempt is logged and bounded.
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

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
        request: dict[str, object] = {
            "model": model,
            "temperature": temperature,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        }
        if json_schema is not None:
            request["response_format"] = {
                "type": "json_schema",
                "json_schema": {
                    "name": schema_name,
                    "strict": True,
                    "schema": json_schema,
                },
            }

        try:
            response = self._client.chat.completions.create(**request)  # type: ignore[call-overload]
        except (openai.APITimeoutError, httpx.TimeoutException) as exc:
            raise ProviderTimeoutError(f"AI provider timed out: {exc}") from exc
        except (openai.APIConnectionError, httpx.ConnectError) as exc:
            raise ProviderTransientError(f"AI provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            if exc.status_code in _TRANSIENT_STATUS_CODES or exc.status_code >= 500:
                raise ProviderTransientError(
                    f"AI provider API error ({exc.status_code}): {exc}"
                ) from exc
            raise ProviderPermanentError(
                f"AI provider rejected the request ({exc.status_code}): {exc}"
            ) from exc
        except openai.APIError as exc:
            raise ProviderTransientError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ProviderResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None or not content.strip():
            raise ProviderResponseError("AI returned empty response")
        return content
