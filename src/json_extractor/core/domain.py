"""Core domain types and errors for JSON extraction.

This module defines the fundamental types used throughout the package:
- ParsedObject: Type alias for an extracted JSON object (dict[str, Any])
- FencedJsonError: Raised when a fenced code block holds malformed JSON
- InvalidInputError: Raised when a caller supplies no usable text
"""
from typing import Any, TypeAlias


ParsedObject: TypeAlias = dict[str, Any]
"""ParsedObject is a decoded JSON object, arbitrarily nested.

The extractor only ever returns JSON objects. Arrays, strings and numbers at
the top level are never extracted.
"""


class FencedJsonError(ValueError):
    """Raised when a fenced ```json block is found but its body is not valid JSON.

    Unlike a failed unfenced candidate, which simply yields no result, a
    malformed fenced block is a hard failure. Callers map it to an internal
    error rather than a "not found" outcome.
    """


class InvalidInputError(ValueError):
    """Raised when a request carries no usable text to extract from.

    Attributes:
        status_code: HTTP status the server should answer with.
    """

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message)
        self.status_code = status_code
