"""JSON extractor core components.

This module provides the domain types shared by the extractor and its
callers (the HTTP server and the CLI):
- ParsedObject: Type alias for an extracted JSON object
- FencedJsonError: Hard failure for malformed fenced JSON
- InvalidInputError: Caller-side validation failure

Typical usage:
    from json_extractor.core.domain import FencedJsonError
    from json_extractor.helpers import extract_json

    try:
        obj = extract_json(text)
    except FencedJsonError as e:
        ...
"""
