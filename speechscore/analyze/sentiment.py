"""
speechscore.analyze.sentiment - Sentiment labels and lexicon counting.
"""

from __future__ import annotations

from speechscore.lexicon import NEGATIVE_WORDS, POSITIVE_WORDS, SENTIMENT_LABELS
from speechscore.utils import clamp, round_half_up


def derive_sentiment_label(score: float) -> str:
    """Map a sentiment score in [-1, 1] to its label.

    "Slightly Negative" is never derived here; it only arrives from an
    enrichment adapter.
    """
    if score >= 0.6:
        return "Very Positive"
    elif score >= 0.2:
        return "Positive"
    elif score > -0.2:
        return "Neutral"
    elif score > -0.6:
        return "Negative"
    return "Very Negative"


def is_sentiment_label(value: object) -> bool:
    return isinstance(value, str) and value in SENTIMENT_LABELS


def lexicon_sentiment(words: list[str]) -> float | None:
    """Score tone by counting positive and negative lexicon words.

    Args:
        words: Lower-cased tokens

    Returns:
        Score in [-1, 1] rounded to 2 decimals, or None when no
        sentiment word occurs
    """
    positive = sum(1 for w in words if w in POSITIVE_WORDS)
    negative = sum(1 for w in words if w in NEGATIVE_WORDS)
    if positive + negative == 0:
        return None
    raw = (positive - negative) / len(words) * 10
    return round_half_up(clamp(raw, -1.0, 1.0), 2)
