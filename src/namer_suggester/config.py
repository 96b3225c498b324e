"""Environment-based settings, AI provider configuration and its JSON files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, NoDecode

from namer_suggester.constants import (
    AI_REQUEST_TIMEOUT,
    DEFAULT_ANTHROPIC_MODEL,
    DEFAULT_GEMINI_MODEL,
    DEFAULT_OLLAMA_ENDPOINT,
    DEFAULT_OLLAMA_MODEL,
    DEFAULT_OPENAI_MODEL,
    GLOBAL_CONFIG_FILENAME,
    MAX_SCAN_DEPTH,
    PROJECT_CONFIG_FILENAME,
    ProviderName,
    ProviderSetting,
    SuggestionPolicy,
)
from namer_suggester.errors import ConfigError

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Reads from .env file and environment variables."""

    # Suggestion policy: auto, rules, or a single provider name
    ai_provider: ProviderSetting = "rules"

    # Hosted providers
    openai_api_key: str = ""
    openai_model: str = DEFAULT_OPENAI_MODEL
    anthropic_api_key: str = ""
    anthropic_model: str = DEFAULT_ANTHROPIC_MODEL
    gemini_api_key: str = ""
    gemini_model: str = DEFAULT_GEMINI_MODEL

    # Local LLM server
    ollama_endpoint: str = DEFAULT_OLLAMA_ENDPOINT
    ollama_model: str = DEFAULT_OLLAMA_MODEL

    ai_request_timeout_seconds: float = AI_REQUEST_TIMEOUT

    # Logging
    log_level: str = "WARNING"
    suggestion_log_file: Path | None = None  # None = cwd, then home

    # Scanning
    max_scan_depth: int = MAX_SCAN_DEPTH
    skip_directories: Annotated[list[str], NoDecode] = [
        "node_modules",
        "dist",
        "build",
        "coverage",
        ".next",
        ".git",
    ]

    @field_validator("skip_directories", mode="before")
    @classmethod
    def _parse_skip_directories(cls, v: Any) -> Any:
        """Accept comma-separated string or JSON array."""
        if isinstance(v, str):
            return [s.strip() for s in v.split(",") if s.strip()]
        return v

    def default_ai_config(self) -> AIConfig:
        """AIConfig built from environment values only."""
        return AIConfig(
            provider=self.ai_provider,
            openai=ProviderConfig(
                api_key=self.openai_api_key, model=self.openai_model
            ),
            anthropic=ProviderConfig(
                api_key=self.anthropic_api_key, model=self.anthropic_model
            ),
            gemini=ProviderConfig(
                api_key=self.gemini_api_key, model=self.gemini_model
            ),
            ollama=ProviderConfig(
                endpoint=self.ollama_endpoint, model=self.ollama_model
            ),
            request_timeout_seconds=self.ai_request_timeout_seconds,
        )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "",
        "extra": "ignore",
    }


class ProviderConfig(BaseModel):
    """Credentials, endpoint and model for one AI backend."""

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    api_key: str = ""
    model: str = ""
    endpoint: str = ""


class AIConfig(BaseModel):
    """Immutable AI configuration handed to the suggestion orchestrator.

    JSON files use camelCase keys (``apiKey``) so configs written by
    earlier versions of the tool keep loading.
    """

    model_config = ConfigDict(
        frozen=True, alias_generator=to_camel, populate_by_name=True
    )

    provider: ProviderSetting = "rules"
    openai: ProviderConfig = Field(
        default_factory=lambda: ProviderConfig(model=DEFAULT_OPENAI_MODEL)
    )
    anthropic: ProviderConfig = Field(
        default_factory=lambda: ProviderConfig(model=DEFAULT_ANTHROPIC_MODEL)
    )
    gemini: ProviderConfig = Field(
        default_factory=lambda: ProviderConfig(model=DEFAULT_GEMINI_MODEL)
    )
    ollama: ProviderConfig = Field(
        default_factory=lambda: ProviderConfig(
            endpoint=DEFAULT_OLLAMA_ENDPOINT, model=DEFAULT_OLLAMA_MODEL
        )
    )
    request_timeout_seconds: float = Field(default=AI_REQUEST_TIMEOUT, gt=0)

    @property
    def uses_ai(self) -> bool:
        return self.provider != SuggestionPolicy.RULES

    def provider_config(self, name: ProviderName) -> ProviderConfig:
        """Per-backend section; Copilot has none and gets an empty one."""
        section = getattr(self, str(name), None)
        return section if isinstance(section, ProviderConfig) else ProviderConfig()


# ── Config files ─────────────────────────────────────────

ConfigLocation = Literal["project", "global"]


def default_config_paths(
    cwd: Path | None = None, home: Path | None = None
) -> list[Path]:
    """Config files in lookup order: project first, then user-global."""
    return [
        (cwd or Path.cwd()) / PROJECT_CONFIG_FILENAME,
        (home or Path.home()) / GLOBAL_CONFIG_FILENAME,
    ]


def load_ai_config(
    settings: Settings | None = None,
    config_paths: list[Path] | None = None,
) -> AIConfig:
    """Merge the first readable JSON config file over environment defaults."""
    if settings is None:
        settings = Settings()
    base = settings.default_ai_config().model_dump(by_alias=True)

    for path in config_paths or default_config_paths():
        config = _read_config_file(path, base)
        if config is not None:
            return config

    return AIConfig.model_validate(base)


def load_saved_ai_config(
    location: ConfigLocation = "project",
    *,
    cwd: Path | None = None,
    home: Path | None = None,
) -> AIConfig:
    """The config file at *location* over built-in defaults.

    Environment values are not merged in, so saving the result back
    never copies API keys from the environment into the file.
    """
    project_path, global_path = default_config_paths(cwd, home)
    path = project_path if location == "project" else global_path
    base = AIConfig().model_dump(by_alias=True)
    config = _read_config_file(path, base)
    return config if config is not None else AIConfig()


def _read_config_file(path: Path, base: dict[str, Any]) -> AIConfig | None:
    if not path.is_file():
        return None
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError("config root must be a JSON object")
        config = AIConfig.model_validate(_deep_merge(base, data))
    except (OSError, ValueError, ValidationError) as exc:
        # json.JSONDecodeError is a ValueError
        logger.debug("event=config_load_failed path=%s error=%s", path, exc)
        return None
    logger.info("event=config_loaded path=%s", path)
    return config


def save_ai_config(
    config: AIConfig,
    location: ConfigLocation = "project",
    *,
    cwd: Path | None = None,
    home: Path | None = None,
) -> Path:
    """Write *config* as JSON to the project or global config file."""
    project_path, global_path = default_config_paths(cwd, home)
    path = project_path if location == "project" else global_path
    try:
        path.write_text(
            json.dumps(config.model_dump(by_alias=True), indent=2),
            encoding="utf-8",
        )
    except OSError as exc:
        msg = f"Error saving config to {path}: {exc}"
        raise ConfigError(msg) from exc
    return path


def _deep_merge(
    base: dict[str, Any], override: dict[str, Any]
) -> dict[str, Any]:
    """Recursively overlay *override* onto a copy of *base*."""
    merged = dict(base)
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)  # type: ignore[arg-type]
        else:
            merged[key] = value
    return merged


# ── Languages ────────────────────────────────────────────

# File extension → tree-sitter language name
EXTENSION_MAP: dict[str, str] = {
    ".js": "javascript",
    ".jsx": "javascript",
    ".ts": "typescript",
    ".tsx": "tsx",
}

# Language name → (grammar module, language factory)
GRAMMAR_MODULES: dict[str, tuple[str, str]] = {
    "javascript": ("tree_sitter_javascript", "language"),
    "typescript": ("tree_sitter_typescript", "language_typescript"),
    "tsx": ("tree_sitter_typescript", "language_tsx"),
}
