"""Helper utilities for the JSON extractor.

This module provides the extraction function used by the HTTP server and
the CLI.

Exports:
    extract_json: Extract and parse a JSON object from text with markdown or prose.
"""

from json_extractor.helpers.json import extract_json

__all__ = ["extract_json"]
