"""
speechscore.enrich.base - Adapter interface.
"""

from __future__ import annotations

from typing import Any, Protocol


class Enricher(Protocol):
    """Anything that can propose overrides for a cleaned transcript.

    Implementations may raise EnrichmentError (or anything else) on
    failure; the pipeline treats every failure as "no overrides".
    """

    name: str

    def enrich(self, text: str) -> dict[str, Any]: ...

    async def aenrich(self, text: str) -> dict[str, Any]: ...
