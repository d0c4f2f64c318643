"""
speechscore.models - Metric and result records.

TranscriptMetrics is what the extractor produces, Enrichment carries the
overridable values (sentiment, clarity, confidence, suggestions, tone) and
ScoredResult is the scoring engine's output. All three are immutable;
to_record() gives the flat camelCase record handed to callers.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from typing import Any

from speechscore.utils import as_number

_METRIC_KEYS: dict[str, str] = {
    "cleaned_text": "cleanedText",
    "total_words": "totalWords",
    "unique_word_count": "uniqueWordCount",
    "duration_seconds": "durationSeconds",
    "words_per_minute": "wordsPerMinute",
    "filler_counts": "fillerCounts",
    "total_filler_count": "totalFillerCount",
    "vocabulary_richness": "vocabularyRichness",
    "sentence_count": "sentenceCount",
    "average_sentence_length": "averageSentenceLength",
    "word_repetitions": "wordRepetitions",
}

# Keys used by older stored records.
_LEGACY_KEYS: dict[str, str] = {
    "transcript": "cleaned_text",
    "uniqueWords": "unique_word_count",
    "duration": "duration_seconds",
}


def _pairs(value: Any) -> Any:
    """Convert [{"word": w, "count": n}, ...] or [[w, n], ...] into ((w, n), ...)."""
    if not isinstance(value, (list, tuple)):
        return value
    if all(isinstance(v, Mapping) for v in value):
        return tuple((v.get("word"), v.get("count")) for v in value)
    if all(isinstance(v, (list, tuple)) and len(v) == 2 for v in value):
        return tuple(tuple(v) for v in value)
    return value


@dataclass(frozen=True)
class TranscriptMetrics:
    """Objective metrics derived from a transcript and its duration."""

    cleaned_text: str = ""
    total_words: int = 0
    unique_word_count: int = 0
    duration_seconds: float = 1.0
    words_per_minute: int = 0
    filler_counts: dict[str, int] = field(default_factory=dict)
    total_filler_count: int = 0
    vocabulary_richness: int = 0
    sentence_count: int = 0
    average_sentence_length: float = 0.0
    word_repetitions: tuple[tuple[str, int], ...] = ()

    @property
    def filler_words(self) -> list[tuple[str, int]]:
        """Fillers that actually occurred, most frequent first."""
        used = [(word, count) for word, count in self.filler_counts.items() if count > 0]
        return sorted(used, key=lambda item: item[1], reverse=True)

    def metric_fields(self) -> dict[str, Any]:
        """Return the TranscriptMetrics fields only, as a shallow dict."""
        return {f.name: getattr(self, f.name) for f in fields(TranscriptMetrics)}

    def to_record(self) -> dict[str, Any]:
        """Serialize to a flat camelCase record."""
        record = {camel: getattr(self, name) for name, camel in _METRIC_KEYS.items()}
        record["fillerCounts"] = dict(self.filler_counts)
        record["fillerWords"] = [{"word": w, "count": c} for w, c in self.filler_words]
        record["wordRepetitions"] = [{"word": w, "count": c} for w, c in self.word_repetitions]
        return record

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> TranscriptMetrics:
        """Rebuild metrics from a flat record without validating values.

        Accepts camelCase or snake_case keys. Wrong-typed values are kept
        as-is; the scoring engine substitutes defaults for them.

        Args:
            record: Flat record, e.g. from to_record() or a stored session

        Returns:
            TranscriptMetrics instance
        """
        kwargs: dict[str, Any] = {}
        for name, camel in _METRIC_KEYS.items():
            if camel in record:
                kwargs[name] = record[camel]
            elif name in record:
                kwargs[name] = record[name]
        for legacy, name in _LEGACY_KEYS.items():
            if name not in kwargs and legacy in record:
                kwargs[name] = record[legacy]
        if "word_repetitions" in kwargs:
            kwargs["word_repetitions"] = _pairs(kwargs["word_repetitions"])
        return cls(**kwargs)


@dataclass(frozen=True)
class Enrichment:
    """Values an enrichment adapter may override before scoring.

    A sentiment_label of None means the label is derived from
    sentiment_score when scoring.
    """

    sentiment_score: float = 0.0
    sentiment_label: str | None = None
    clarity_score: float = 0.0
    confidence_score: float = 0.5
    suggestions: tuple[str, ...] = ()
    tone: str | None = None

    @classmethod
    def baseline(cls, metrics: TranscriptMetrics) -> Enrichment:
        """Heuristic values used when no adapter (or a failed one) is involved."""
        vocab = as_number(metrics.vocabulary_richness) or 0.0
        return cls(clarity_score=min(1.0, vocab / 100))


@dataclass(frozen=True)
class ScoringBreakdown:
    """Per-dimension scores, each an integer from 0 to 100."""

    wpm_score: int = 0
    filler_score: int = 0
    vocab_score: int = 0
    clarity_score: int = 0
    confidence_score: int = 0

    def to_record(self) -> dict[str, int]:
        return {
            "wpmScore": self.wpm_score,
            "fillerScore": self.filler_score,
            "vocabScore": self.vocab_score,
            "clarityScore": self.clarity_score,
            "confidenceScore": self.confidence_score,
        }


@dataclass(frozen=True)
class ScoredResult(TranscriptMetrics):
    """Transcript metrics plus sentiment, sub-scores, overall score and suggestions."""

    sentiment_score: float = 0.0
    sentiment_label: str = "Neutral"
    clarity_score: float = 0.0
    confidence_score: float = 0.5
    tone: str | None = None
    scoring_breakdown: ScoringBreakdown = field(default_factory=ScoringBreakdown)
    overall_score: int = 0
    suggestions: tuple[str, ...] = ()

    def to_record(self) -> dict[str, Any]:
        record = super().to_record()
        record.update(
            {
                "sentimentScore": self.sentiment_score,
                "sentimentLabel": self.sentiment_label,
                "clarityScore": self.clarity_score,
                "confidenceScore": self.confidence_score,
                "tone": self.tone,
                "scoringBreakdown": self.scoring_breakdown.to_record(),
                "overallScore": self.overall_score,
                "suggestions": list(self.suggestions),
            }
        )
        return record
