"""
speechscore.lexicon - Word lists used by the heuristics.

Small, hand-picked English lists without stemming. The filler lexicon is
the default for extraction and can be replaced through configuration.
"""

from __future__ import annotations

DEFAULT_FILLERS: tuple[str, ...] = (
    "um",
    "uh",
    "like",
    "you know",
    "so",
    "actually",
    "basically",
    "right",
    "i mean",
    "literally",
    "just",
    "really",
    "very",
    "kind of",
    "sort of",
)

POSITIVE_WORDS: frozenset[str] = frozenset(
    {
        "good",
        "great",
        "excellent",
        "amazing",
        "wonderful",
        "fantastic",
        "love",
        "happy",
        "excited",
        "passionate",
        "enjoy",
        "succeed",
        "success",
        "achieve",
        "accomplishment",
        "proud",
        "confident",
        "best",
        "better",
        "improve",
        "growth",
        "opportunity",
        "innovative",
        "creative",
        "effective",
        "efficient",
        "skilled",
        "experienced",
        "capable",
        "qualified",
        "professional",
        "dedicated",
        "motivated",
    }
)

NEGATIVE_WORDS: frozenset[str] = frozenset(
    {
        "bad",
        "terrible",
        "awful",
        "horrible",
        "hate",
        "worst",
        "poor",
        "fail",
        "failure",
        "difficult",
        "problem",
        "issue",
        "struggle",
        "worry",
        "concerned",
        "unfortunate",
        "disappointed",
        "frustrated",
        "hard",
        "weak",
        "unable",
        "cannot",
        "never",
        "boring",
        "tired",
        "stressed",
        "anxious",
        "nervous",
        "scared",
    }
)

SENTIMENT_LABELS: tuple[str, ...] = (
    "Very Positive",
    "Positive",
    "Neutral",
    "Slightly Negative",
    "Negative",
    "Very Negative",
)
