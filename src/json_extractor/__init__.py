"""JSON Extractor: locate and parse a JSON object embedded in free-form text.

The extractor looks for a fenced ```json block first and falls back to the
outermost brace span. It is served over HTTP by json_extractor.server and
from the command line by json_extractor.cli.
"""

from json_extractor.core.domain import FencedJsonError, InvalidInputError, ParsedObject
from json_extractor.helpers.json import extract_json

__all__ = [
    "extract_json",
    "ParsedObject",
    "FencedJsonError",
    "InvalidInputError",
]
