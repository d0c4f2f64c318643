"""
speechscore.llm.parsing - LLM output JSON parsing with validation.

Responses are expected to hold one JSON object, possibly wrapped in
prose or markdown fences. Parsing starts at the first "{".
"""

from __future__ import annotations

import json
import re
from typing import Any

from speechscore.exceptions import LLMResponseError

ENRICHMENT_KEYS = (
    "sentimentScore",
    "sentimentLabel",
    "clarityScore",
    "confidenceScore",
    "suggestions",
    "tone",
)


def extract_json_from_response(response: str) -> str:
    """Return the response text starting at its first "{".

    Args:
        response: Raw LLM response text

    Returns:
        Text from the first opening brace onwards

    Raises:
        LLMResponseError: If no opening brace is found
    """
    # a fence before the object is skipped by the search; one after it is
    # left for raw_decode to ignore
    text = response.strip()
    first = text.find("{")
    if first < 0:
        raise LLMResponseError("No JSON object found in response")
    return text[first:]


def repair_json(text: str) -> str:
    """Remove trailing commas before } or ]."""
    return re.sub(r",(\s*[}\]])", r"\1", text)


def parse_llm_json(response: str) -> dict[str, Any]:
    """Parse the first JSON object in an LLM response.

    Text after the object is ignored. A second attempt is made after
    removing trailing commas.

    Args:
        response: Raw LLM response text

    Returns:
        Parsed JSON dict

    Raises:
        LLMResponseError: If parsing fails
    """
    text = extract_json_from_response(response)
    decoder = json.JSONDecoder()

    for candidate in (text, repair_json(text)):
        try:
            data, _ = decoder.raw_decode(candidate)
        except json.JSONDecodeError:
            continue
        if not isinstance(data, dict):
            raise LLMResponseError("LLM response JSON is not an object")
        return data

    raise LLMResponseError(
        f"Failed to parse LLM response as JSON.\n\nResponse (first 500 chars):\n{text[:500]}"
    )


def validate_enrichment_response(data: dict[str, Any]) -> dict[str, Any]:
    """Keep only the recognized override keys.

    "tips" is accepted as an alias for "suggestions". Value types are not
    checked here; merge_enrichment() does that field by field.

    Args:
        data: Parsed JSON from LLM

    Returns:
        Dict restricted to enrichment keys
    """
    result = {key: data[key] for key in ENRICHMENT_KEYS if key in data}
    if "suggestions" not in result and "tips" in data:
        result["suggestions"] = data["tips"]
    return result
