"""
speechscore.analyze - Transcript extraction and scoring core.

Two pure entry points shared by every caller: extract() derives objective
metrics from text and duration, score() turns metrics (plus optional
enrichment) into sub-scores, an overall score and suggestions.
"""

from __future__ import annotations

from speechscore.analyze.extract import extract
from speechscore.analyze.scoring import score

__all__ = ["extract", "score"]
