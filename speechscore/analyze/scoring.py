"""
speechscore.analyze.scoring - Sub-scores, weighted overall score, suggestions.

Maps each raw metric to a 0-100 desirability score, combines them with
the configured weights, subtracts a bounded long-sentence penalty and
appends threshold-triggered suggestions after any adapter suggestions.
Never raises for out-of-range or wrong-typed numbers: values are clamped
and non-numeric fields fall back to documented defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from speechscore.analyze.sentiment import derive_sentiment_label, is_sentiment_label
from speechscore.config import ScoringWeights
from speechscore.enrich.merge import merge_enrichment
from speechscore.models import Enrichment, ScoredResult, ScoringBreakdown, TranscriptMetrics
from speechscore.utils import as_number, clamp, round_int

IDEAL_WPM = 130
WPM_TOLERANCE = 60
FILLER_LIMIT = 10
SENTENCE_LENGTH_LIMIT = 25
MAX_SENTENCE_PENALTY = 10

FILLER_SUGGESTION_THRESHOLD = 2
SLOW_WPM = 100
FAST_WPM = 170
LOW_VOCABULARY = 40


def _numeric(value: Any, default: float) -> Any:
    """Return value if it is a real number, otherwise default."""
    return value if as_number(value) is not None else default


def wpm_score(wpm: float) -> float:
    """Peaks at 130 WPM, falls linearly to 0 at 60 WPM either side."""
    return max(0.0, 1 - min(1.0, abs(wpm - IDEAL_WPM) / WPM_TOLERANCE)) * 100


def filler_score(total_fillers: float) -> float:
    """100 with no fillers, 0 at ten or more."""
    return max(0.0, 1 - min(1.0, total_fillers / FILLER_LIMIT)) * 100


def sentence_penalty(average_sentence_length: float) -> float:
    """Zero up to 25 words per sentence, then grows linearly."""
    return max(0.0, (average_sentence_length - SENTENCE_LENGTH_LIMIT) / SENTENCE_LENGTH_LIMIT)


def build_suggestions(
    wpm: float,
    total_fillers: float,
    vocabulary_richness: float,
    average_sentence_length: float,
) -> list[str]:
    """Heuristic suggestions in fixed priority order."""
    suggestions = []
    if total_fillers > FILLER_SUGGESTION_THRESHOLD:
        suggestions.append(f"Reduce filler words — heard {_fmt(total_fillers)} times.")
    if wpm < SLOW_WPM:
        suggestions.append(f"Try increasing pace: current {_fmt(wpm)} WPM; aim for 110-160 WPM.")
    if wpm > FAST_WPM:
        suggestions.append(f"Try slowing down a bit: current {_fmt(wpm)} WPM.")
    if vocabulary_richness < LOW_VOCABULARY:
        suggestions.append("Work on varied vocabulary to improve richness.")
    if average_sentence_length > SENTENCE_LENGTH_LIMIT:
        suggestions.append("Use shorter sentences to improve clarity.")
    return suggestions


def _fmt(value: float) -> str:
    """Render integral floats without a trailing .0."""
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def _resolve_enrichment(
    metrics: TranscriptMetrics,
    enrichment: Enrichment | Mapping[str, Any] | None,
    record: Mapping[str, Any] | None,
) -> Enrichment:
    baseline = Enrichment.baseline(metrics)
    if isinstance(enrichment, Enrichment):
        return enrichment
    if isinstance(enrichment, Mapping):
        return merge_enrichment(baseline, enrichment)
    if record is not None:
        return merge_enrichment(baseline, record)
    return baseline


def _suggestion_list(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []
    return [s for s in value if isinstance(s, str)]


def score(
    metrics: TranscriptMetrics | Mapping[str, Any],
    enrichment: Enrichment | Mapping[str, Any] | None = None,
    weights: ScoringWeights | None = None,
) -> ScoredResult:
    """Score extracted metrics.

    Args:
        metrics: Extractor output, or a flat record (camelCase or
            snake_case keys) which may also carry enrichment fields
        enrichment: Merged Enrichment, or a raw adapter payload to merge
            field by field over the baseline
        weights: Sub-score weights; defaults to ScoringWeights()

    Returns:
        New ScoredResult; the input metrics are left untouched
    """
    record = metrics if isinstance(metrics, Mapping) else None
    if record is not None:
        metrics = TranscriptMetrics.from_record(record)
    weights = weights or ScoringWeights()

    wpm_value = _numeric(metrics.words_per_minute, 0)
    filler_value = _numeric(metrics.total_filler_count, 0)
    vocab_value = _numeric(metrics.vocabulary_richness, 0)
    sentence_value = _numeric(metrics.average_sentence_length, 0.0)

    wpm = float(wpm_value)
    total_fillers = float(filler_value)
    vocab = float(vocab_value)
    avg_len = float(sentence_value)

    overrides = _resolve_enrichment(metrics, enrichment, record)
    clarity = as_number(overrides.clarity_score)
    if clarity is None:
        clarity = min(1.0, vocab / 100)
    confidence = as_number(overrides.confidence_score)
    if confidence is None:
        confidence = 0.5
    sentiment = as_number(overrides.sentiment_score)
    if sentiment is None:
        sentiment = 0.0
    sentiment = clamp(sentiment, -1.0, 1.0)
    if is_sentiment_label(overrides.sentiment_label):
        label = overrides.sentiment_label
    else:
        label = derive_sentiment_label(sentiment)

    wpm_part = wpm_score(wpm)
    filler_part = filler_score(total_fillers)
    vocab_part = clamp(vocab, 0, 100)
    clarity_part = clamp(clarity * 100, 0, 100)
    confidence_part = clamp(confidence * 100, 0, 100)
    penalty = min(MAX_SENTENCE_PENALTY, sentence_penalty(avg_len) * 10)

    overall = round_int(
        wpm_part * weights.wpm
        + filler_part * weights.filler
        + vocab_part * weights.vocabulary
        + clarity_part * weights.clarity
        + confidence_part * weights.confidence
        - penalty
    )

    suggestions = _suggestion_list(overrides.suggestions)
    suggestions.extend(build_suggestions(wpm, total_fillers, vocab, avg_len))

    carried = metrics.metric_fields()
    carried.update(
        words_per_minute=wpm_value,
        total_filler_count=filler_value,
        vocabulary_richness=vocab_value,
        average_sentence_length=sentence_value,
    )
    if not isinstance(carried["filler_counts"], Mapping):
        carried["filler_counts"] = {}
    if not isinstance(carried["word_repetitions"], tuple):
        carried["word_repetitions"] = ()

    tone = overrides.tone if isinstance(overrides.tone, str) else None

    return ScoredResult(
        **carried,
        sentiment_score=sentiment,
        sentiment_label=label,
        clarity_score=clamp(clarity, 0.0, 1.0),
        confidence_score=clamp(confidence, 0.0, 1.0),
        tone=tone,
        scoring_breakdown=ScoringBreakdown(
            wpm_score=round_int(wpm_part),
            filler_score=round_int(filler_part),
            vocab_score=round_int(vocab_part),
            clarity_score=round_int(clarity_part),
            confidence_score=round_int(confidence_part),
        ),
        overall_score=int(clamp(overall, 0, 100)),
        suggestions=tuple(suggestions),
    )
