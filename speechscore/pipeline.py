"""
speechscore.pipeline - Extract, enrich, score.

Wires the pure core to an optional enrichment adapter. Any adapter
failure (exception, timeout, cancellation of the adapter call) is
logged as a warning and scoring proceeds on the heuristic baseline, so
a ScoredResult is always produced.
"""

from __future__ import annotations

import asyncio
from typing import Any

from speechscore.analyze.extract import extract
from speechscore.analyze.scoring import score
from speechscore.config import SpeechScoreConfig
from speechscore.enrich.base import Enricher
from speechscore.enrich.merge import merge_enrichment
from speechscore.logging import logger
from speechscore.models import Enrichment, ScoredResult, TranscriptMetrics


def build_enricher(config: SpeechScoreConfig, api_key: str | None = None) -> Enricher | None:
    """Create the adapter named by config.enrichment.

    Args:
        config: Resolved configuration
        api_key: Credential for cloud LLM backends, resolved by the caller

    Returns:
        Adapter instance, or None for "none"
    """
    if config.enrichment == "lexicon":
        from speechscore.enrich.lexicon import LexiconEnricher

        return LexiconEnricher()
    if config.enrichment == "llm":
        from speechscore.llm.client import create_client_from_config
        from speechscore.llm.enricher import LLMEnricher

        return LLMEnricher(create_client_from_config(config, api_key=api_key))
    return None


def _finish(
    metrics: TranscriptMetrics,
    payload: dict[str, Any] | None,
    config: SpeechScoreConfig,
) -> ScoredResult:
    enrichment = merge_enrichment(Enrichment.baseline(metrics), payload)
    return score(metrics, enrichment, config.weights)


def _warn(enricher: Enricher, reason: object) -> None:
    name = getattr(enricher, "name", type(enricher).__name__)
    logger.warning("Enrichment via %s failed, using heuristic values: %s", name, reason)


def analyze(
    transcript: str,
    duration: float | None = None,
    enricher: Enricher | None = None,
    config: SpeechScoreConfig | None = None,
) -> ScoredResult:
    """Score a transcript, optionally enriched.

    Args:
        transcript: Transcript text; callers reject a missing transcript
        duration: Speaking time in seconds, estimated when None
        enricher: Optional adapter proposing overrides
        config: Lexicon and weights; defaults to SpeechScoreConfig()

    Returns:
        ScoredResult
    """
    config = config or SpeechScoreConfig()
    metrics = extract(transcript, duration, config.filler_words)

    payload = None
    if enricher is not None:
        try:
            payload = enricher.enrich(metrics.cleaned_text)
        except Exception as e:
            _warn(enricher, e)

    return _finish(metrics, payload, config)


async def analyze_async(
    transcript: str,
    duration: float | None = None,
    enricher: Enricher | None = None,
    config: SpeechScoreConfig | None = None,
    timeout: float | None = None,
) -> ScoredResult:
    """Async variant of analyze() with a bounded adapter call.

    The adapter runs in its own task. If it does not finish within
    timeout (default config.llm_timeout) it is cancelled and abandoned;
    an adapter task that raises or is cancelled counts as a failure.
    Cancelling the caller cancels the adapter task and propagates.
    """
    config = config or SpeechScoreConfig()
    metrics = extract(transcript, duration, config.filler_words)
    if enricher is None:
        return _finish(metrics, None, config)

    limit = config.llm_timeout if timeout is None else timeout
    task = asyncio.ensure_future(enricher.aenrich(metrics.cleaned_text))
    try:
        done, _ = await asyncio.wait({task}, timeout=limit)
    except asyncio.CancelledError:
        task.cancel()
        raise

    payload = None
    if not done:
        task.cancel()
        _warn(enricher, f"timed out after {limit}s")
    elif task.cancelled():
        _warn(enricher, "adapter call was cancelled")
    elif task.exception() is not None:
        _warn(enricher, task.exception())
    else:
        payload = task.result()

    return _finish(metrics, payload, config)
