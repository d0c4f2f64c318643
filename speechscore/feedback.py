"""
speechscore.feedback - Human-readable rating bands per metric.

Each function maps one metric to a short label and a line of advice.
feedback_for() collects them for a scored result.
"""

from __future__ import annotations

from dataclasses import dataclass

from speechscore.models import ScoredResult


@dataclass(frozen=True)
class Feedback:
    label: str
    advice: str


def pace_feedback(wpm: float) -> Feedback:
    if wpm < 100:
        return Feedback(
            "Too Slow",
            "Your pace is slower than ideal. Try to speak a bit faster to maintain engagement.",
        )
    elif wpm <= 160:
        return Feedback(
            "Excellent",
            "Perfect speaking pace! You're maintaining an engaging and clear delivery.",
        )
    elif wpm <= 180:
        return Feedback(
            "Slightly Fast",
            "You're speaking a bit quickly. Try to slow down slightly for better clarity.",
        )
    return Feedback(
        "Too Fast",
        "Slow down! Speaking too fast can make you harder to understand and seem nervous.",
    )


def filler_feedback(percentage: float) -> Feedback:
    """Rate filler usage given as a percentage of all words."""
    if percentage <= 2:
        return Feedback("Excellent", "Great job! You're using very few filler words.")
    elif percentage <= 5:
        return Feedback("Good", "You're doing well, but try to reduce filler words even more.")
    elif percentage <= 8:
        return Feedback(
            "Needs Improvement",
            'Focus on reducing filler words. Pause instead of saying "um" or "like".',
        )
    return Feedback("Poor", "Too many filler words! Practice pausing and thinking before speaking.")


def vocabulary_feedback(richness: float) -> Feedback:
    if richness >= 60:
        return Feedback(
            "Excellent",
            "Outstanding vocabulary variety! You're using diverse and rich language.",
        )
    elif richness >= 45:
        return Feedback(
            "Good",
            "Good vocabulary usage. Consider using more varied terms to sound more professional.",
        )
    elif richness >= 30:
        return Feedback(
            "Fair",
            "Try to use more varied vocabulary. Avoid repeating the same words frequently.",
        )
    return Feedback(
        "Limited",
        "Expand your vocabulary! Using more diverse words will make your answers more engaging.",
    )


def sentiment_feedback(label: str) -> Feedback:
    advice = {
        "Very Positive": "Great positive energy! Your enthusiasm comes through clearly.",
        "Positive": "Good positive tone. This helps create a favorable impression.",
        "Neutral": "Neutral tone. Consider adding more enthusiasm to show your passion for the role.",
        "Slightly Negative": "Try to frame things more positively, even when discussing challenges.",
    }
    default = "Reframe negative language. Focus on solutions and learning rather than problems."
    return Feedback(label, advice.get(label, default))


def clarity_feedback(score: float) -> Feedback:
    """Rate a 0-100 clarity score."""
    if score >= 80:
        return Feedback("Excellent", "Your speech is clear and easy to follow. Keep it up!")
    elif score >= 60:
        return Feedback(
            "Good",
            "Your speech is mostly clear. Try to reduce filler words and improve sentence structure.",
        )
    elif score >= 40:
        return Feedback(
            "Needs Improvement",
            "Your speech is a bit unclear. Focus on reducing filler words and improving "
            "sentence structure.",
        )
    return Feedback(
        "Poor",
        "Your speech is unclear. Practice reducing filler words and improving sentence structure.",
    )


def confidence_feedback(score: float) -> Feedback:
    """Rate a 0-100 confidence score."""
    if score >= 80:
        return Feedback("Excellent", "Your confidence is high. Keep it up!")
    elif score >= 60:
        return Feedback(
            "Good",
            "Your confidence is good. Try to speak a bit faster and use more varied vocabulary.",
        )
    elif score >= 40:
        return Feedback(
            "Needs Improvement",
            "Your confidence is a bit low. Focus on speaking faster, using varied vocabulary, "
            "and maintaining a positive tone.",
        )
    return Feedback(
        "Poor",
        "Your confidence is low. Practice speaking faster, using varied vocabulary, "
        "and maintaining a positive tone.",
    )


def repetition_feedback(repeated_words: int) -> Feedback:
    """Rate the number of noticeably repeated words."""
    if repeated_words == 0:
        return Feedback("Excellent", "You're using a variety of words. Great job!")
    elif repeated_words <= 2:
        return Feedback(
            "Good",
            "You're using a variety of words. Consider using even more varied terms.",
        )
    elif repeated_words <= 4:
        return Feedback(
            "Needs Improvement",
            "You're repeating some words. Try to use more varied vocabulary.",
        )
    return Feedback(
        "Poor",
        "You're repeating words frequently. Practice using more varied vocabulary.",
    )


def sentence_length_feedback(length: float) -> Feedback:
    if 10 <= length <= 30:
        return Feedback(
            "Excellent",
            "Your sentences are well-structured and easy to follow. Keep it up!",
        )
    elif 8 <= length <= 32:
        return Feedback(
            "Good",
            "Your sentences are mostly well-structured. Try to keep them within 10-30 words.",
        )
    elif 6 <= length <= 34:
        return Feedback(
            "Needs Improvement",
            "Your sentences are a bit long or short. Try to keep them within 10-30 words.",
        )
    return Feedback(
        "Poor",
        "Your sentences are too long or short. Practice keeping them within 10-30 words.",
    )


def count_repeated_words(result: ScoredResult, min_length: int = 5, min_count: int = 3) -> int:
    """Longer words said at least min_count times; short function words are ignored."""
    return sum(
        1 for word, count in result.word_repetitions if len(word) >= min_length and count >= min_count
    )


def feedback_for(result: ScoredResult) -> dict[str, Feedback]:
    """Collect feedback for every metric of a scored result."""
    filler_pct = result.total_filler_count / result.total_words * 100 if result.total_words else 0
    return {
        "pace": pace_feedback(result.words_per_minute),
        "fillers": filler_feedback(filler_pct),
        "vocabulary": vocabulary_feedback(result.vocabulary_richness),
        "sentiment": sentiment_feedback(result.sentiment_label),
        "clarity": clarity_feedback(result.scoring_breakdown.clarity_score),
        "confidence": confidence_feedback(result.scoring_breakdown.confidence_score),
        "repetition": repetition_feedback(count_repeated_words(result)),
        "sentence_length": sentence_length_feedback(result.average_sentence_length),
    }
