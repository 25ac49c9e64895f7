"""
Configuration management for docs-prebuild.

Settings are read from environment variables (and a ``.env`` file), and can
optionally be supplied through a YAML file. The resulting ``Settings`` object
is immutable and is passed explicitly into every component.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env file if present (before Settings initialization)
load_dotenv()


class ConfigurationError(ValueError):
    """Raised when required configuration is missing or invalid."""


class LanguageConfig(BaseModel):
    """A target language of the documentation site."""

    model_config = {"frozen": True}

    code: str
    name: str
    native_name: str
    dir: str


DEFAULT_TARGET_LANGUAGES: tuple[LanguageConfig, ...] = (
    LanguageConfig(code="en", name="English", native_name="英文", dir="en"),
    LanguageConfig(code="ja", name="Japanese", native_name="日文", dir="ja"),
)

# Languages the generated pages (changelog, special thanks) are rendered in
PAGE_LANGUAGES: tuple[str, ...] = ("zh", "en", "ja")


class DocsConfig(BaseSettings):
    """Layout of the documentation content tree."""

    model_config = SettingsConfigDict(frozen=True, extra="ignore")

    docs_dir: Path = Field(default=Path("content/docs"))
    source_language: str = Field(default="zh")
    target_languages: tuple[LanguageConfig, ...] = Field(default=DEFAULT_TARGET_LANGUAGES)

    @field_validator("docs_dir")
    @classmethod
    def expand_path(cls, v: Path) -> Path:
        """Expand user home directory and make path absolute."""
        return Path(v).expanduser().resolve()

    @property
    def source_root(self) -> Path:
        """Directory holding the human-authored documents."""
        return self.docs_dir / self.source_language

    def language_root(self, language: LanguageConfig) -> Path:
        """Directory mirroring the source tree for ``language``."""
        return self.docs_dir / language.dir


class TranslationConfig(BaseSettings):
    """Configuration for the translation pipeline."""

    model_config = SettingsConfigDict(frozen=True, extra="ignore")

    openai_api_key: str = Field(default="")
    openai_base_url: str = Field(default="https://api.openai.com/v1")
    openai_model: str = Field(default="gemini-2.5-flash")
    max_retries: int = Field(default=3, ge=0, le=20)
    retry_delay: float = Field(default=2.0, ge=0.0, le=600.0)
    retry_backoff: float = Field(default=2.0, ge=1.0, le=10.0)
    max_workers: int = Field(default=3, ge=1, le=64)
    force_translate: bool = Field(default=False)
    incremental_translate: bool = Field(default=True)
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    request_timeout: float = Field(default=300.0, gt=0.0)


class GitHubConfig(BaseSettings):
    """Configuration for the GitHub-backed page generators."""

    model_config = SettingsConfigDict(frozen=True, extra="ignore")

    source_repo: str = Field(default="QuantumNous/new-api")
    github_token: str = Field(default="")
    max_releases: int = Field(default=30, ge=1, le=100)
    max_contributors: int = Field(default=50, ge=1, le=100)


class AfdianConfig(BaseSettings):
    """Credentials for the Afdian sponsor API."""

    model_config = SettingsConfigDict(frozen=True, extra="ignore")

    afdian_user_id: str = Field(default="")
    afdian_token: str = Field(default="")

    @property
    def configured(self) -> bool:
        return bool(self.afdian_user_id and self.afdian_token)


class LoggingConfig(BaseSettings):
    """Configuration for logging."""

    model_config = SettingsConfigDict(frozen=True, extra="ignore", env_prefix="LOG_")

    level: str = Field(default="INFO")
    file: Path | None = Field(default=None)
    format: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    max_file_size_mb: int = Field(default=10, ge=1, le=100)
    backup_count: int = Field(default=5, ge=1, le=20)


class Settings(BaseModel):
    """Main settings object that combines all configurations."""

    model_config = {"frozen": True}

    docs: DocsConfig = Field(default_factory=DocsConfig)
    translation: TranslationConfig = Field(default_factory=TranslationConfig)
    github: GitHubConfig = Field(default_factory=GitHubConfig)
    afdian: AfdianConfig = Field(default_factory=AfdianConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @classmethod
    def from_yaml(cls, path: Path | str) -> Settings:
        """Load settings from a YAML file, with environment variable overrides."""
        path = Path(path)
        if not path.exists():
            # Return defaults if file doesn't exist
            return cls.from_env()

        with open(path, encoding="utf-8") as f:
            yaml_config = yaml.safe_load(f) or {}

        # Process environment variable substitutions in YAML values
        yaml_config = _substitute_env_vars(yaml_config)

        sections = {
            "docs": DocsConfig,
            "translation": TranslationConfig,
            "github": GitHubConfig,
            "afdian": AfdianConfig,
            "logging": LoggingConfig,
        }
        try:
            # Each section is a BaseSettings: YAML values take precedence, the
            # environment fills in whatever the file leaves out.
            return cls(
                **{
                    name: section_cls(**(yaml_config.get(name) or {}))
                    for name, section_cls in sections.items()
                }
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration in {path}: {e}") from e

    @classmethod
    def from_env(cls) -> Settings:
        """Build settings from the environment only."""
        try:
            return cls()
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    def require_translation_credentials(self) -> None:
        """Fail fast when the chat-completion API key is not configured."""
        if not self.translation.openai_api_key:
            raise ConfigurationError("OPENAI_API_KEY environment variable is not set")


def _substitute_env_vars(config: dict[str, Any]) -> dict[str, Any]:
    """Recursively substitute ${ENV_VAR} patterns in config values."""
    result = {}
    for key, value in config.items():
        if isinstance(value, dict):
            result[key] = _substitute_env_vars(value)
        elif isinstance(value, str) and value.startswith("${") and value.endswith("}"):
            env_var = value[2:-1]
            result[key] = os.getenv(env_var, "")
        elif isinstance(value, list):
            result[key] = [
                _substitute_env_vars(item) if isinstance(item, dict) else item for item in value
            ]
        else:
            result[key] = value
    return result


def load_config(path: Path | str | None = None) -> Settings:
    """
    Load configuration from YAML file or the environment.

    Args:
        path: Path to YAML config file. If None, looks for a config file in the
            current directory and falls back to the environment.

    Returns:
        Settings instance with merged YAML and environment configurations.

    Raises:
        ConfigurationError: If a value fails validation.
    """
    if path is None:
        default_paths = [
            Path("docs-prebuild.yaml"),
            Path("docs-prebuild.yml"),
            Path(".docs-prebuild.yaml"),
        ]
        for p in default_paths:
            if p.exists():
                path = p
                break

    if path is not None:
        return Settings.from_yaml(path)

    return Settings.from_env()
