"""
Test configuration and shared fixtures.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from types import SimpleNamespace
from typing import Any

import pytest
import yaml

LITERAL_TRANSCRIPT = (
    "This is a test transcript to exercise heuristics. I said um and like a couple times."
)


@pytest.fixture
def literal_transcript() -> str:
    """Sixteen words, two fillers, two sentences."""
    return LITERAL_TRANSCRIPT


@pytest.fixture
def literal_record() -> dict:
    """Flat record for the literal transcript spoken over 30 seconds."""
    return {
        "transcript": LITERAL_TRANSCRIPT,
        "wordsPerMinute": 32,
        "totalFillerCount": 2,
        "vocabularyRichness": 94,
        "uniqueWords": 15,
        "totalWords": 16,
        "sentimentScore": 0,
        "sentimentLabel": "Neutral",
        "duration": 30,
        "clarityScore": 0.94,
        "confidenceScore": 0.5,
        "averageSentenceLength": 8,
    }


@pytest.fixture
def base_record() -> dict:
    """Record scoring 100 on every dimension before adjustments."""
    return {
        "wordsPerMinute": 130,
        "totalFillerCount": 0,
        "vocabularyRichness": 100,
        "clarityScore": 1.0,
        "confidenceScore": 1.0,
        "averageSentenceLength": 12,
    }


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    """Directory holding a valid speechscore.yaml."""
    config = {
        "filler_words": ["um", "uh", "you know"],
        "enrichment": "lexicon",
        "weights": {
            "wpm": 0.25,
            "filler": 0.20,
            "vocabulary": 0.20,
            "clarity": 0.20,
            "confidence": 0.15,
        },
    }
    with open(tmp_path / "speechscore.yaml", "w") as f:
        yaml.dump(config, f)
    return tmp_path


def make_llm_response(content: str | None, total_tokens: int = 15) -> SimpleNamespace:
    """Build an object shaped like a litellm completion response."""
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=SimpleNamespace(
            prompt_tokens=total_tokens - 5, completion_tokens=5, total_tokens=total_tokens
        ),
    )


@pytest.fixture
def fake_litellm(monkeypatch: pytest.MonkeyPatch) -> SimpleNamespace:
    """Patch litellm's completion calls so no request leaves the process.

    Set ``fake.content`` to control the reply, ``fake.error`` to raise, or
    ``fake.delay`` to stall the async call.
    """
    import litellm

    fake = SimpleNamespace(
        calls=[],
        content='{"sentimentScore": 0.5}',
        error=None,
        delay=0.0,
    )

    def completion(**kwargs: Any) -> SimpleNamespace:
        fake.calls.append(kwargs)
        if fake.error:
            raise fake.error
        return make_llm_response(fake.content)

    async def acompletion(**kwargs: Any) -> SimpleNamespace:
        fake.calls.append(kwargs)
        if fake.delay:
            await asyncio.sleep(fake.delay)
        if fake.error:
            raise fake.error
        return make_llm_response(fake.content)

    monkeypatch.setattr(litellm, "completion", completion)
    monkeypatch.setattr(litellm, "acompletion", acompletion)
    return fake
