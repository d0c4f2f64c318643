"""
speechscore.llm - Language-model enrichment.

Optional adapter that asks an LLM for sentiment, tone, clarity,
confidence and suggestions for a transcript.
"""

from __future__ import annotations
