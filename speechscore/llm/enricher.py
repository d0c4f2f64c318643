"""
speechscore.llm.enricher - LLM enrichment adapter.

Renders the enrichment prompt, sends it through LLMClient and returns
the recognized override keys from the JSON reply. Raises on any failure;
falling back to heuristic values is the pipeline's job.
"""

from __future__ import annotations

from typing import Any

from speechscore.lexicon import SENTIMENT_LABELS
from speechscore.llm.client import LLMClient
from speechscore.llm.parsing import parse_llm_json, validate_enrichment_response
from speechscore.llm.templates import PromptTemplateManager, format_transcript_for_prompt

TEMPLATE_NAME = "enrich.txt"


class LLMEnricher:
    """Sentiment, tone, clarity, confidence and suggestions from an LLM."""

    name = "llm"

    def __init__(
        self,
        client: LLMClient,
        template_manager: PromptTemplateManager | None = None,
        max_tokens: int = 300,
        temperature: float = 0.2,
    ) -> None:
        self.client = client
        self.template_manager = template_manager or PromptTemplateManager()
        self.max_tokens = max_tokens
        self.temperature = temperature

    def build_prompt(self, text: str) -> str:
        return self.template_manager.render(
            TEMPLATE_NAME,
            {"TRANSCRIPT": format_transcript_for_prompt(text), "LABELS": SENTIMENT_LABELS},
        )

    def enrich(self, text: str) -> dict[str, Any]:
        """Ask the LLM for overrides.

        Args:
            text: Cleaned transcript

        Returns:
            Dict of override keys present in the reply

        Raises:
            LLMError: On privacy, credential, transport or parse failure
        """
        response = self.client.complete(
            self.build_prompt(text), max_tokens=self.max_tokens, temperature=self.temperature
        )
        return validate_enrichment_response(parse_llm_json(response))

    async def aenrich(self, text: str) -> dict[str, Any]:
        """Async variant of enrich()."""
        response = await self.client.acomplete(
            self.build_prompt(text), max_tokens=self.max_tokens, temperature=self.temperature
        )
        return validate_enrichment_response(parse_llm_json(response))
