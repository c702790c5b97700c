from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    app_version: str = "0.1.0"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["*"]

    upload_dir: str = "uploads"
    max_upload_bytes: int = 10 * 1024 * 1024
    allowed_mime_types: list[str] = [
        "application/pdf",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ]

    pdf_engine: str = "pdfplumber"

    ai_provider: str = "gemini"
    ai_timeout_seconds: int = 60
    ai_temperature: float = 0.2
    ai_max_attempts: int = 3
    ai_retry_backoff_seconds: float = 1.0

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-flash"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4.1-mini"

    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""
    openai_compatible_base_url: str = ""

    openrouter_api_key: str = ""
    openrouter_model_name: str = ""

    groq_api_key: str = ""
    groq_model_name: str = ""

    ollama_api_key: str = "ollama"
    ollama_model_name: str = "llama3.2:3b"

    backend_url: str = "http://localhost:5000"
    client_timeout_seconds: int = 120
