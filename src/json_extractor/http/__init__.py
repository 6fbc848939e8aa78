"""HTTP package for the JSON extractor server.

Provides shared utilities for HTTP route handlers: request body negotiation
and compact JSON serialization.
"""
import json

from json_extractor.core.domain import InvalidInputError

DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024


def is_json_media_type(content_type: str | None) -> bool:
    """Check whether a Content-Type header names a JSON media type.

    Args:
        content_type: Raw Content-Type header value, possibly with parameters.

    Returns:
        True for application/json and any +json structured suffix.
    """
    if not content_type:
        return False
    media_type = content_type.split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


def to_json_string(value) -> str:
    """Serialize a value as compact JSON, without ASCII escaping."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def resolve_input_text(body: bytes, content_type: str | None, max_bytes: int = DEFAULT_MAX_BODY_BYTES) -> str:
    """Resolve the text to extract from out of a raw request body.

    JSON bodies are unwrapped: a JSON string is used as-is, an object's
    truthy "text" member wins, otherwise the object's first member is used
    if it is a string, and failing that the whole object re-serialized.
    Any other content type is treated as plain UTF-8 text.

    Args:
        body: Raw request body bytes.
        content_type: The request's Content-Type header, if any.
        max_bytes: Largest accepted body size in bytes.

    Returns:
        The non-empty input text.

    Raises:
        InvalidInputError: If the body is too large (413), is JSON of an
            unusable shape, or yields empty text (400).
    """
    if len(body) > max_bytes:
        raise InvalidInputError("Request body too large", status_code=413)

    if is_json_media_type(content_type):
        try:
            payload = json.loads(body) if body else None
        except ValueError:
            raise InvalidInputError("No valid input provided")
        if isinstance(payload, str):
            text = payload
        elif isinstance(payload, dict) and payload.get("text"):
            text = payload["text"]
        elif isinstance(payload, dict):
            first = next(iter(payload.values()), None)
            text = first if isinstance(first, str) else to_json_string(payload)
        else:
            raise InvalidInputError("No valid input provided")
        if not isinstance(text, str):
            text = to_json_string(text)
    else:
        text = body.decode("utf-8", errors="replace")

    if not text:
        raise InvalidInputError("No input text provided")
    return text
