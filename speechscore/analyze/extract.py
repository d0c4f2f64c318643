"""
speechscore.analyze.extract - Heuristic metric extraction.

Derives word counts, pacing, filler counts, vocabulary richness,
sentence statistics and the repetition table from a transcript. Pure
and deterministic: empty or degenerate input yields zero/default metrics
rather than an error.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable

from speechscore.lexicon import DEFAULT_FILLERS
from speechscore.models import TranscriptMetrics
from speechscore.utils import as_number, round_half_up, round_int

ASSUMED_WPM = 150
MAX_REPETITIONS = 10

_NEWLINES = re.compile(r"[\n\r]+")
_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BREAK = re.compile(r"[.!?]+")
_NON_WORD_CHARS = re.compile(r"[^a-zA-Z']")


def clean_transcript(transcript: str) -> str:
    """Collapse newlines to spaces and trim."""
    return _NEWLINES.sub(" ", transcript).strip()


def tokenize(text: str) -> list[str]:
    """Split on whitespace runs; empty text gives no tokens."""
    if not text:
        return []
    return _WHITESPACE.split(text)


def normalize_token(token: str) -> str:
    """Lower-case and keep only ASCII letters and apostrophes."""
    return _NON_WORD_CHARS.sub("", token.lower())


def filler_pattern(phrase: str) -> re.Pattern[str]:
    """Whole-word, case-insensitive pattern for a filler word or phrase.

    Multi-word phrases only match as a contiguous word sequence.
    """
    return re.compile(rf"\b{re.escape(phrase)}\b", re.IGNORECASE)


def count_fillers(text: str, fillers: Iterable[str] = DEFAULT_FILLERS) -> dict[str, int]:
    """Count non-overlapping matches for every lexicon phrase.

    Args:
        text: Cleaned transcript text
        fillers: Filler lexicon

    Returns:
        Dict with an entry (possibly 0) for every phrase, in lexicon order
    """
    lower = text.lower()
    return {phrase: len(filler_pattern(phrase).findall(lower)) for phrase in fillers}


def split_sentences(text: str) -> list[str]:
    """Split on runs of . ! ? and drop empty fragments."""
    parts = (part.strip() for part in _SENTENCE_BREAK.split(text))
    return [part for part in parts if part]


def resolve_duration(duration: float | None, total_words: int) -> float:
    """Use the supplied duration if positive, else estimate from word count."""
    value = as_number(duration)
    if value is not None and value > 0:
        return value
    return float(max(1, round_int(total_words / ASSUMED_WPM * 60)))


def word_frequencies(tokens: Iterable[str]) -> Counter[str]:
    """Frequency table of normalized tokens in first-seen order."""
    freq: Counter[str] = Counter()
    for token in tokens:
        key = normalize_token(token)
        if key:
            freq[key] += 1
    return freq


def top_repetitions(freq: Counter[str], limit: int = MAX_REPETITIONS) -> tuple[tuple[str, int], ...]:
    """Most frequent words; ties keep first-seen order."""
    ranked = sorted(freq.items(), key=lambda item: item[1], reverse=True)
    return tuple(ranked[:limit])


def extract(
    transcript: str,
    duration: float | None = None,
    fillers: Iterable[str] = DEFAULT_FILLERS,
) -> TranscriptMetrics:
    """Derive baseline metrics from a transcript.

    Args:
        transcript: Raw transcript text (may be empty)
        duration: Speaking time in seconds; estimated at 150 WPM when
            missing or not positive
        fillers: Filler lexicon to count

    Returns:
        TranscriptMetrics for the transcript
    """
    cleaned = clean_transcript(transcript)
    tokens = tokenize(cleaned)
    total_words = len(tokens)

    duration_seconds = resolve_duration(duration, total_words)
    words_per_minute = round_int(total_words / duration_seconds * 60)

    filler_counts = count_fillers(cleaned, fillers)

    freq = word_frequencies(tokens)
    unique_word_count = len(freq)
    vocabulary_richness = round_int(unique_word_count / total_words * 100) if total_words else 0

    sentences = split_sentences(cleaned)
    if sentences:
        average_sentence_length = round_half_up(total_words / len(sentences), 1)
    else:
        average_sentence_length = float(total_words)

    return TranscriptMetrics(
        cleaned_text=cleaned,
        total_words=total_words,
        unique_word_count=unique_word_count,
        duration_seconds=duration_seconds,
        words_per_minute=words_per_minute,
        filler_counts=filler_counts,
        total_filler_count=sum(filler_counts.values()),
        vocabulary_richness=vocabulary_richness,
        sentence_count=len(sentences),
        average_sentence_length=average_sentence_length,
        word_repetitions=top_repetitions(freq),
    )
