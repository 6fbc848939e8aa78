"""JSON extraction from free-form text.

This module locates and parses a single JSON object embedded in text that
may be wrapped in markdown code fences or surrounded by prose, which is
common in LLM outputs.

Two candidate searches run in order:

1. A fenced block, ```` ```json {...} ``` ```` (the ``json`` tag is optional).
   The body is matched lazily, so it ends at the first ``}`` that lets the
   closing fence match. This is not a brace-balancing parser: an object whose
   nested ``}`` is followed by more fenced text can be cut short.
2. Only if no fenced block matched: the span from the first ``{`` to the
   last ``}`` of the whole text.

A malformed fenced candidate raises FencedJsonError. A malformed fallback
candidate is not an error: the text simply holds no extractable object.
"""

import json as _json
import logging
import re

from json_extractor.core.domain import FencedJsonError, ParsedObject

logger = logging.getLogger("json_extractor.helpers.json")

FENCED_PATTERN = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)
FALLBACK_PATTERN = re.compile(r"(\{.*\})", re.DOTALL)


def _reject_constant(name: str) -> None:
    raise ValueError(f"Invalid JSON constant: {name}")


def parse_json(candidate: str) -> ParsedObject:
    """Parse a candidate span as strict JSON.

    NaN, Infinity and -Infinity are rejected, as a standard JSON parser would.

    Raises:
        ValueError: If the candidate is not valid JSON.
    """
    return _json.loads(candidate, parse_constant=_reject_constant)


def extract_json(text: str) -> ParsedObject | None:
    """Extract and parse a JSON object from text that may contain markdown fencing or prose.

    Args:
        text: Raw text potentially containing a JSON object wrapped in
              markdown code fences or surrounding prose.

    Returns:
        The parsed JSON object, or None if no candidate was found or the
        unfenced candidate is not valid JSON.

    Raises:
        FencedJsonError: If a fenced code block was found but its body is
            not valid JSON. The unfenced search is not attempted.

    Example:
        >>> extract_json('```json\\n{"key": "value"}\\n```')
        {'key': 'value'}
        >>> extract_json('Here is some data: {"a": 1} and more text')
        {'a': 1}
        >>> extract_json('no json here') is None
        True
    """
    match = FENCED_PATTERN.search(text)
    if match:
        logger.debug(f"Fenced candidate at offset {match.start(1)}")
        try:
            return parse_json(match.group(1))
        except ValueError as e:
            raise FencedJsonError(f"Invalid JSON in fenced block: {e}") from e

    match = FALLBACK_PATTERN.search(text)
    if match:
        logger.debug(f"Unfenced candidate spanning offsets {match.start(1)}-{match.end(1)}")
        try:
            return parse_json(match.group(1))
        except ValueError as e:
            logger.debug(f"Unfenced candidate is not valid JSON: {e}")
            return None

    return None
