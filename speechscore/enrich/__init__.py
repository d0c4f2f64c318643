"""
speechscore.enrich - Enrichment adapters and override merging.

Adapters return a raw payload of optional overrides (sentiment, clarity,
confidence, suggestions, tone); merge_enrichment() folds that payload
over the heuristic baseline field by field.
"""

from __future__ import annotations
