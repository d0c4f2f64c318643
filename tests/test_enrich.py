"""Tests for speechscore.enrich modules."""

from __future__ import annotations

import asyncio

import pytest

from speechscore.analyze.extract import extract
from speechscore.analyze.sentiment import lexicon_sentiment
from speechscore.enrich.lexicon import LexiconEnricher
from speechscore.enrich.merge import merge_enrichment
from speechscore.models import Enrichment


@pytest.fixture
def baseline(literal_transcript: str) -> Enrichment:
    return Enrichment.baseline(extract(literal_transcript, 30))


class TestBaseline:
    def test_baseline_values(self, baseline: Enrichment) -> None:
        assert baseline.sentiment_score == 0
        assert baseline.sentiment_label is None
        assert baseline.clarity_score == pytest.approx(0.94)
        assert baseline.confidence_score == 0.5
        assert baseline.suggestions == ()
        assert baseline.tone is None

    def test_clarity_capped_at_one(self) -> None:
        metrics = extract("alpha beta gamma", 10)
        assert Enrichment.baseline(metrics).clarity_score == 1.0


class TestMergeEnrichment:
    def test_none_payload_returns_baseline(self, baseline: Enrichment) -> None:
        assert merge_enrichment(baseline, None) is baseline

    def test_non_mapping_payload_returns_baseline(self, baseline: Enrichment) -> None:
        assert merge_enrichment(baseline, ["not", "a", "dict"]) is baseline  # type: ignore[arg-type]

    def test_full_payload(self, baseline: Enrichment) -> None:
        merged = merge_enrichment(
            baseline,
            {
                "sentimentScore": 0.4,
                "sentimentLabel": "Positive",
                "clarityScore": 0.8,
                "confidenceScore": 0.7,
                "suggestions": ["Slow down."],
                "tone": "warm",
            },
        )
        assert merged == Enrichment(
            sentiment_score=0.4,
            sentiment_label="Positive",
            clarity_score=0.8,
            confidence_score=0.7,
            suggestions=("Slow down.",),
            tone="warm",
        )

    def test_field_by_field_fallback(self, baseline: Enrichment) -> None:
        merged = merge_enrichment(baseline, {"sentimentScore": "0.7", "clarityScore": 0.8})
        assert merged.sentiment_score == 0
        assert merged.sentiment_label is None
        assert merged.clarity_score == 0.8
        assert merged.confidence_score == 0.5

    def test_score_without_label_derives_label(self, baseline: Enrichment) -> None:
        merged = merge_enrichment(baseline, {"sentimentScore": 0.7})
        assert merged.sentiment_label == "Very Positive"

    def test_supplied_label_kept(self, baseline: Enrichment) -> None:
        merged = merge_enrichment(
            baseline, {"sentimentScore": -0.1, "sentimentLabel": "Slightly Negative"}
        )
        assert merged.sentiment_label == "Slightly Negative"

    def test_unknown_label_rederived(self, baseline: Enrichment) -> None:
        merged = merge_enrichment(baseline, {"sentimentScore": -0.7, "sentimentLabel": "Meh"})
        assert merged.sentiment_label == "Very Negative"

    def test_wrong_type_label_without_score(self, baseline: Enrichment) -> None:
        merged = merge_enrichment(baseline, {"sentimentLabel": 5})
        assert merged.sentiment_label is None

    def test_boolean_and_nan_rejected(self, baseline: Enrichment) -> None:
        merged = merge_enrichment(
            baseline, {"confidenceScore": True, "clarityScore": float("nan")}
        )
        assert merged.confidence_score == 0.5
        assert merged.clarity_score == pytest.approx(0.94)

    def test_snake_case_keys(self, baseline: Enrichment) -> None:
        merged = merge_enrichment(baseline, {"confidence_score": 0.9})
        assert merged.confidence_score == 0.9

    def test_tips_alias(self, baseline: Enrichment) -> None:
        merged = merge_enrichment(baseline, {"tips": ["Breathe."]})
        assert merged.suggestions == ("Breathe.",)

    def test_suggestions_must_be_list(self, baseline: Enrichment) -> None:
        merged = merge_enrichment(baseline, {"suggestions": "Be concise."})
        assert merged.suggestions == ()

    def test_suggestions_filtered(self, baseline: Enrichment) -> None:
        merged = merge_enrichment(baseline, {"suggestions": [" ok ", 3, "  ", None]})
        assert merged.suggestions == ("ok",)

    def test_tone_carried_unmodified(self, baseline: Enrichment) -> None:
        assert merge_enrichment(baseline, {"tone": "  calm, measured "}).tone == "  calm, measured "
        assert merge_enrichment(baseline, {"tone": ""}).tone == ""

    def test_non_string_tone_ignored(self, baseline: Enrichment) -> None:
        assert merge_enrichment(baseline, {"tone": 3}).tone is None
        assert merge_enrichment(baseline, {"tone": ["calm"]}).tone is None

    def test_unknown_keys_ignored(self, baseline: Enrichment) -> None:
        assert merge_enrichment(baseline, {"overallScore": 100}) == baseline


class TestLexiconSentiment:
    def test_positive(self) -> None:
        assert lexicon_sentiment(["good"] + ["word"] * 19) == 0.5

    def test_negative(self) -> None:
        assert lexicon_sentiment(["bad"] + ["word"] * 39) == -0.25

    def test_clamped(self) -> None:
        assert lexicon_sentiment(["great", "love"]) == 1.0

    def test_no_sentiment_words(self) -> None:
        assert lexicon_sentiment(["plain", "words"]) is None


class TestLexiconEnricher:
    def test_positive_text(self) -> None:
        payload = LexiconEnricher().enrich("I love this great opportunity and I am proud")
        assert payload == {"sentimentScore": 1.0}

    def test_neutral_text(self) -> None:
        assert LexiconEnricher().enrich("The meeting is at noon") == {}

    def test_async(self) -> None:
        payload = asyncio.run(LexiconEnricher().aenrich("That was a terrible problem"))
        assert payload == {"sentimentScore": -1.0}
