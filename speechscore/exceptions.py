"""
speechscore.exceptions - Custom exception classes.

All speechscore-specific exceptions inherit from SpeechScoreError.
Nothing in the extraction or scoring core raises these; they belong to
the configuration and enrichment layers.
"""


class SpeechScoreError(Exception):
    """Base exception for all speechscore errors."""

    pass


class ConfigError(SpeechScoreError):
    """Configuration loading or validation error."""

    pass


class EnrichmentError(SpeechScoreError):
    """Enrichment adapter could not produce overrides."""

    pass


class LLMError(EnrichmentError):
    """LLM backend or prompt error."""

    pass


class LLMPrivacyError(LLMError):
    """Attempted to use cloud LLM in local privacy mode."""

    pass


class LLMCredentialsError(LLMError):
    """Cloud LLM backend selected without an API key."""

    pass


class LLMResponseError(LLMError):
    """LLM returned malformed or unexpected response."""

    pass
