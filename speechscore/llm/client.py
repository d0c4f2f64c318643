"""
speechscore.llm.client - LLM backend abstraction using litellm.

Provides a unified interface for Ollama, LM Studio, Claude, and OpenAI
with privacy mode enforcement and a hard timeout. One attempt per call:
callers fall back to heuristic values instead of retrying.
"""

from __future__ import annotations

import asyncio
from typing import Any

from speechscore.exceptions import (
    LLMCredentialsError,
    LLMError,
    LLMPrivacyError,
    LLMResponseError,
)
from speechscore.logging import logger

LOCAL_API_BASES = {
    "ollama": "http://localhost:11434",
    "lmstudio": "http://localhost:1234/v1",
}


class LLMClient:
    """LLM client wrapper with privacy mode enforcement and timeout."""

    def __init__(
        self,
        backend: str = "ollama",
        model: str = "llama3.1",
        privacy_mode: str = "local",
        api_key: str | None = None,
        timeout: float = 20.0,
    ) -> None:
        self.backend = backend
        self.model = model
        self.privacy_mode = privacy_mode
        self.api_key = api_key
        self.timeout = timeout
        self._cloud_backends = {"claude", "openai"}
        self._token_usage = {"prompt_tokens": 0, "completion_tokens": 0, "total_tokens": 0}

    def _get_model_string(self) -> str:
        """Get the model string for litellm based on backend."""
        if self.backend == "ollama":
            return f"ollama/{self.model}"
        elif self.backend == "lmstudio":
            return f"openai/{self.model}"
        elif self.backend == "claude":
            return f"anthropic/{self.model}"
        return self.model

    def _check_privacy(self) -> None:
        """Check if cloud API is allowed in current privacy mode."""
        if self.privacy_mode == "local" and self.backend in self._cloud_backends:
            raise LLMPrivacyError(
                f"Cloud LLM backend '{self.backend}' not allowed in local privacy mode. "
                f"Set privacy_mode: hybrid in speechscore.yaml to enable cloud APIs."
            )

    def _check_credentials(self) -> None:
        """Cloud backends need an API key injected at construction."""
        if self.backend in self._cloud_backends and not self.api_key:
            raise LLMCredentialsError(f"No API key configured for LLM backend '{self.backend}'")

    def _request_kwargs(self, prompt: str, max_tokens: int, temperature: float) -> dict[str, Any]:
        self._check_privacy()
        self._check_credentials()

        kwargs: dict[str, Any] = {
            "model": self._get_model_string(),
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": max_tokens,
            "temperature": temperature,
            "timeout": self.timeout,
        }
        if self.backend in LOCAL_API_BASES:
            kwargs["api_base"] = LOCAL_API_BASES[self.backend]
        if self.api_key:
            kwargs["api_key"] = self.api_key
        return kwargs

    def _extract_content(self, response: Any) -> str:
        usage = getattr(response, "usage", None)
        if usage:
            self._token_usage["prompt_tokens"] += getattr(usage, "prompt_tokens", 0) or 0
            self._token_usage["completion_tokens"] += getattr(usage, "completion_tokens", 0) or 0
            self._token_usage["total_tokens"] += getattr(usage, "total_tokens", 0) or 0

        choices = getattr(response, "choices", [])
        if not choices:
            raise LLMResponseError("Empty response from LLM")

        message = getattr(choices[0], "message", None)
        if message is None:
            raise LLMResponseError("No message in LLM response")

        content = getattr(message, "content", None)
        if content is None:
            raise LLMResponseError("No content in LLM message")

        return content

    @staticmethod
    def _import_litellm() -> Any:
        try:
            import litellm
        except ImportError as e:
            raise LLMError("litellm not installed. Install with: pip install litellm") from e

        litellm.telemetry = False
        return litellm

    def complete(self, prompt: str, max_tokens: int = 300, temperature: float = 0.2) -> str:
        """Send prompt to LLM and get completion.

        Args:
            prompt: The prompt string
            max_tokens: Maximum tokens in response
            temperature: Sampling temperature

        Returns:
            LLM response text

        Raises:
            LLMPrivacyError: If cloud API used in local mode
            LLMCredentialsError: If a cloud backend has no API key
            LLMError: If the request fails or times out
        """
        kwargs = self._request_kwargs(prompt, max_tokens, temperature)
        litellm = self._import_litellm()

        logger.debug("LLM request to %s (%d chars)", kwargs["model"], len(prompt))
        try:
            response = litellm.completion(**kwargs)
        except Exception as e:
            raise LLMError(f"LLM request failed: {e}") from e

        return self._extract_content(response)

    async def acomplete(self, prompt: str, max_tokens: int = 300, temperature: float = 0.2) -> str:
        """Async variant of complete(), bounded by asyncio.wait_for.

        Cancellation of the awaiting task propagates unchanged.
        """
        kwargs = self._request_kwargs(prompt, max_tokens, temperature)
        litellm = self._import_litellm()

        logger.debug("Async LLM request to %s (%d chars)", kwargs["model"], len(prompt))
        try:
            response = await asyncio.wait_for(litellm.acompletion(**kwargs), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise LLMError(f"LLM request timed out after {self.timeout}s") from e
        except Exception as e:
            raise LLMError(f"LLM request failed: {e}") from e

        return self._extract_content(response)

    def get_token_usage(self) -> dict[str, int]:
        """Get cumulative token usage."""
        return self._token_usage.copy()


def create_client_from_config(config: Any, api_key: str | None = None) -> LLMClient:
    """Create LLM client from SpeechScoreConfig.

    Args:
        config: SpeechScoreConfig instance
        api_key: Credential resolved by the caller

    Returns:
        Configured LLMClient
    """
    return LLMClient(
        backend=config.llm_backend,
        model=config.llm_model,
        privacy_mode=config.privacy_mode,
        api_key=api_key,
        timeout=config.llm_timeout,
    )
