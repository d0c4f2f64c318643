"""
speechscore.config - YAML config loading and validation.

Handles loading speechscore.yaml, validating scoring weights, the filler
lexicon and enrichment settings. Credentials are never stored here: the
config names the environment variable and the CLI resolves it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from speechscore.exceptions import ConfigError
from speechscore.lexicon import DEFAULT_FILLERS

CONFIG_FILENAME = "speechscore.yaml"


class ScoringWeights(BaseModel):
    """Weights for the overall score; must sum to 1.0."""

    wpm: float = Field(default=0.25, ge=0.0, le=1.0)
    filler: float = Field(default=0.20, ge=0.0, le=1.0)
    vocabulary: float = Field(default=0.20, ge=0.0, le=1.0)
    clarity: float = Field(default=0.20, ge=0.0, le=1.0)
    confidence: float = Field(default=0.15, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def validate_total(self) -> ScoringWeights:
        total = self.wpm + self.filler + self.vocabulary + self.clarity + self.confidence
        if abs(total - 1.0) > 0.01:
            raise ValueError(f"Weights must sum to 1.0 (got {total:.2f})")
        return self


class SpeechScoreConfig(BaseModel):
    """Resolved configuration for scoring and enrichment."""

    filler_words: list[str] = Field(default_factory=lambda: list(DEFAULT_FILLERS))
    weights: ScoringWeights = Field(default_factory=ScoringWeights)

    enrichment: str = "none"
    privacy_mode: str = "local"
    llm_backend: str = "ollama"
    llm_model: str = "llama3.1"
    llm_timeout: float = Field(default=20.0, gt=0.0)
    llm_api_key_env: str = "OPENAI_API_KEY"

    @field_validator("filler_words")
    @classmethod
    def validate_filler_words(cls, v: list[str]) -> list[str]:
        cleaned: list[str] = []
        for phrase in v:
            phrase = " ".join(phrase.lower().split())
            if phrase and phrase not in cleaned:
                cleaned.append(phrase)
        if not cleaned:
            raise ValueError("filler_words must contain at least one phrase")
        return cleaned

    @field_validator("enrichment")
    @classmethod
    def validate_enrichment(cls, v: str) -> str:
        valid = {"none", "lexicon", "llm"}
        if v not in valid:
            raise ValueError(f"enrichment must be one of: {valid}")
        return v

    @field_validator("privacy_mode")
    @classmethod
    def validate_privacy_mode(cls, v: str) -> str:
        valid = {"local", "hybrid"}
        if v not in valid:
            raise ValueError(f"privacy_mode must be one of: {valid}")
        return v

    @field_validator("llm_backend")
    @classmethod
    def validate_llm_backend(cls, v: str) -> str:
        valid = {"ollama", "lmstudio", "claude", "openai"}
        if v not in valid:
            raise ValueError(f"llm_backend must be one of: {valid}")
        return v


def find_config(start: Path | None = None) -> Path | None:
    """Find speechscore.yaml in start or any parent directory."""
    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.exists():
            return candidate
        if current == current.parent:
            return None
        current = current.parent


def load_config(path: Path | None = None) -> SpeechScoreConfig:
    """Load and validate configuration.

    Args:
        path: Config file or directory holding speechscore.yaml. When None,
            the current directory and its parents are searched and the
            defaults are used if nothing is found.

    Returns:
        Validated SpeechScoreConfig

    Raises:
        FileNotFoundError: If an explicit path has no config file
        ConfigError: If the file is not valid YAML or fails validation
    """
    if path is None:
        config_file = find_config()
        if config_file is None:
            return SpeechScoreConfig()
    else:
        config_file = path / CONFIG_FILENAME if path.is_dir() else path
        if not config_file.exists():
            raise FileNotFoundError(f"No {CONFIG_FILENAME} found at {path}")

    try:
        with open(config_file, encoding="utf-8") as f:
            raw_config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e

    if not isinstance(raw_config, dict):
        raise ConfigError(f"{config_file} must contain a mapping")

    try:
        return SpeechScoreConfig(**raw_config)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_file}:\n{e}") from e


def create_default_config() -> dict[str, Any]:
    """Create a default config dict suitable for write_config()."""
    return SpeechScoreConfig().model_dump()


def write_config(config: dict[str, Any], path: Path) -> None:
    """Write configuration to a YAML file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)
