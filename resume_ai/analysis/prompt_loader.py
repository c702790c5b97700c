"""Instruction templates and response schemas bundled under ``prompts/``."""

import json
from pathlib import Path

from resume_ai.analysis.exceptions import PromptLoadError

PROMPT_DIR = Path(__file__).parent / "prompts"


def _read(path: Path, what: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise PromptLoadError(f"Failed to load {what}: {exc}") from exc


def load_prompt_template(name: str, path: Path | None = None) -> str:
    """Return the raw template ``prompts/{name}.txt``, or the file at ``path``.

    Placeholders are ``{resume_text}`` and, for structured results, ``{json_schema}``.
    """
    return _read(path or PROMPT_DIR / f"{name}.txt", "prompt template")


def load_json_schema(name: str, path: Path | None = None) -> str:
    """Return the schema text ``prompts/{name}.json``, or the file at ``path``.

    The text is embedded in prompts as-is, so it is only checked to be a JSON object.

    Raises:
        PromptLoadError: if the file cannot be read or is not a JSON object.
    """
    raw = _read(path or PROMPT_DIR / f"{name}.json", "JSON schema")
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise PromptLoadError(f"JSON schema '{name}' is not valid JSON: {exc}") from exc
    if not isinstance(parsed, dict):
        raise PromptLoadError(f"JSON schema '{name}' must be an object")
    return raw
