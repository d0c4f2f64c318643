"""
speechscore.enrich.lexicon - Offline sentiment adapter.

Counts positive and negative lexicon words and proposes a sentiment
score. Needs no network or credentials, so it never fails for valid text.
"""

from __future__ import annotations

from typing import Any

from speechscore.analyze.extract import clean_transcript, tokenize
from speechscore.analyze.sentiment import lexicon_sentiment


class LexiconEnricher:
    """Sentiment overrides from word-list counting."""

    name = "lexicon"

    def enrich(self, text: str) -> dict[str, Any]:
        """Return {"sentimentScore": x}, or {} when no sentiment word occurs."""
        words = [token.lower() for token in tokenize(clean_transcript(text))]
        sentiment = lexicon_sentiment(words)
        if sentiment is None:
            return {}
        return {"sentimentScore": sentiment}

    async def aenrich(self, text: str) -> dict[str, Any]:
        return self.enrich(text)
