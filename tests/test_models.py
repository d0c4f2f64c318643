"""Tests for speechscore.models module."""

from __future__ import annotations

from speechscore.analyze.extract import extract
from speechscore.analyze.scoring import score
from speechscore.models import TranscriptMetrics


class TestTranscriptMetricsRecord:
    def test_to_record_keys(self, literal_transcript: str) -> None:
        record = extract(literal_transcript, 30).to_record()
        assert record["cleanedText"] == literal_transcript
        assert record["totalWords"] == 16
        assert record["uniqueWordCount"] == 15
        assert record["durationSeconds"] == 30
        assert record["fillerWords"] == [{"word": "um", "count": 1}, {"word": "like", "count": 1}]
        assert record["wordRepetitions"][0] == {"word": "a", "count": 2}

    def test_from_record_round_trip(self, literal_transcript: str) -> None:
        metrics = extract(literal_transcript, 30)
        assert TranscriptMetrics.from_record(metrics.to_record()) == metrics

    def test_from_record_snake_case(self) -> None:
        metrics = TranscriptMetrics.from_record({"words_per_minute": 120, "total_words": 40})
        assert metrics.words_per_minute == 120
        assert metrics.total_words == 40

    def test_from_record_legacy_keys(self, literal_record: dict) -> None:
        metrics = TranscriptMetrics.from_record(literal_record)
        assert metrics.cleaned_text == literal_record["transcript"]
        assert metrics.unique_word_count == 15
        assert metrics.duration_seconds == 30

    def test_from_record_pair_lists(self) -> None:
        metrics = TranscriptMetrics.from_record({"wordRepetitions": [["so", 4], ["we", 2]]})
        assert metrics.word_repetitions == (("so", 4), ("we", 2))

    def test_from_record_ignores_unknown_keys(self) -> None:
        assert TranscriptMetrics.from_record({"speaker": "A"}) == TranscriptMetrics()


class TestScoredResultRecord:
    def test_record_extends_metrics(self, literal_transcript: str) -> None:
        record = score(extract(literal_transcript, 30)).to_record()
        assert record["wordsPerMinute"] == 32
        assert record["overallScore"] == 61
        assert record["sentimentLabel"] == "Neutral"
        assert record["tone"] is None
        assert record["suggestions"] == [
            "Try increasing pace: current 32 WPM; aim for 110-160 WPM."
        ]
        assert record["scoringBreakdown"]["fillerScore"] == 80

    def test_metric_fields_only(self, literal_transcript: str) -> None:
        result = score(extract(literal_transcript, 30))
        fields = result.metric_fields()
        assert "overall_score" not in fields
        assert fields["total_filler_count"] == 2
