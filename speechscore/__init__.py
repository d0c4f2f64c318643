"""
speechscore - Speaking-performance scoring for transcripts.

Turns a transcript and its duration into pacing, filler, vocabulary,
clarity and confidence metrics, a weighted overall score and a list of
suggestions: heuristic extraction → optional enrichment → scoring.
"""

__version__ = "0.1.0"
