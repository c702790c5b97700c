class ProviderError(Exception):
    """Raised when the AI provider fails to produce a usable analysis."""

    retryable = False


class ProviderTransientError(ProviderError):
    """Raised for provider failures that may succeed on a later attempt."""

    retryable = True


class ProviderTimeoutError(ProviderTransientError):
    """Raised when the provider call exceeds its deadline."""


class ProviderPermanentError(ProviderError):
    """Raised for provider failures that will not succeed on retry (credentials, bad request)."""


class ProviderResponseError(ProviderError):
    """Raised when the provider answer is empty or does not match the expected schema."""


class PromptLoadError(Exception):
    """Raised when a bundled prompt template or JSON schema cannot be read."""
