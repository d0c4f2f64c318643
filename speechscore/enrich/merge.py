"""
speechscore.enrich.merge - Merge adapter overrides into baseline values.

Each field is taken from the payload only if present with the right
type; otherwise the baseline value is kept. A bad field never discards
the good ones.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from speechscore.analyze.sentiment import derive_sentiment_label, is_sentiment_label
from speechscore.models import Enrichment
from speechscore.utils import as_number

_MISSING = object()


def _lookup(payload: Mapping[str, Any], *keys: str) -> Any:
    """Return the first present key's value, or _MISSING."""
    for key in keys:
        if key in payload:
            return payload[key]
    return _MISSING


def _number(value: Any, fallback: float) -> float:
    number = as_number(value) if value is not _MISSING else None
    return fallback if number is None else number


def _suggestions(value: Any, fallback: tuple[str, ...]) -> tuple[str, ...]:
    if not isinstance(value, (list, tuple)):
        return fallback
    return tuple(s.strip() for s in value if isinstance(s, str) and s.strip())


def _tone(value: Any, fallback: str | None) -> str | None:
    return value if isinstance(value, str) else fallback


def merge_enrichment(baseline: Enrichment, payload: Mapping[str, Any] | None) -> Enrichment:
    """Fold an adapter payload over baseline values.

    Recognized keys (camelCase or snake_case): sentimentScore,
    sentimentLabel, clarityScore, confidenceScore, suggestions (or tips),
    tone. Unknown keys are ignored.

    Args:
        baseline: Values to fall back to, usually Enrichment.baseline()
        payload: Parsed adapter response; None means no overrides

    Returns:
        Merged Enrichment
    """
    if not isinstance(payload, Mapping):
        return baseline

    raw_sentiment = _lookup(payload, "sentimentScore", "sentiment_score")
    sentiment = as_number(raw_sentiment) if raw_sentiment is not _MISSING else None

    raw_label = _lookup(payload, "sentimentLabel", "sentiment_label")
    if is_sentiment_label(raw_label):
        label = raw_label
    elif sentiment is not None:
        label = derive_sentiment_label(sentiment)
    else:
        label = baseline.sentiment_label

    return Enrichment(
        sentiment_score=baseline.sentiment_score if sentiment is None else sentiment,
        sentiment_label=label,
        clarity_score=_number(
            _lookup(payload, "clarityScore", "clarity_score"), baseline.clarity_score
        ),
        confidence_score=_number(
            _lookup(payload, "confidenceScore", "confidence_score"), baseline.confidence_score
        ),
        suggestions=_suggestions(
            _lookup(payload, "suggestions", "tips"), baseline.suggestions
        ),
        tone=_tone(_lookup(payload, "tone"), baseline.tone),
    )
