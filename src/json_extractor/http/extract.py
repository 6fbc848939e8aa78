"""Extraction endpoint logic for the JSON extractor server."""
import logging
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from json_extractor.core.domain import FencedJsonError, InvalidInputError
from json_extractor.helpers.json import extract_json
from json_extractor.http import DEFAULT_MAX_BODY_BYTES, resolve_input_text, to_json_string

logger = logging.getLogger("json_extractor.http.extract")

NOT_FOUND_MESSAGE = "No valid JSON found in the input text"
MISSING_QUERY_MESSAGE = "No input text provided in query parameter"


class ErrorResponse(BaseModel):
    """Response model for failed extractions.

    Attributes:
        status: Always "error".
        error: Short description of the failure.
        message: Detail of an internal error, when there is one.
    """
    status: str = "error"
    error: str
    message: str | None = None


class QueryExtractResponse(BaseModel):
    """Response model for the query-string extraction endpoint.

    Attributes:
        status: Always "success".
        extractedJson: The extracted JSON object.
        jsonString: The extracted object serialized as compact JSON.
    """
    status: str = "success"
    extractedJson: dict[str, Any]
    jsonString: str


def not_found_response() -> JSONResponse:
    return JSONResponse(status_code=404, content=ErrorResponse(error=NOT_FOUND_MESSAGE).model_dump(exclude_none=True))


def internal_error_response(e: Exception) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content=ErrorResponse(error="Internal server error", message=str(e)).model_dump(),
    )


def handle_extract_body(body: bytes, content_type: str | None, max_bytes: int = DEFAULT_MAX_BODY_BYTES) -> JSONResponse:
    """Handle a POST /extract request body.

    Negotiates the input text from the body, runs the extractor, and maps
    the outcome to a response. A successful extraction returns the object
    itself as the response body.

    Args:
        body: Raw request body bytes.
        content_type: The request's Content-Type header, if any.
        max_bytes: Largest accepted body size in bytes.

    Returns:
        JSONResponse: 200 with the object, 400/413 for unusable input,
        404 when nothing was found, 500 for a malformed fenced block or an
        unexpected failure.
    """
    try:
        text = resolve_input_text(body, content_type, max_bytes)
    except InvalidInputError as e:
        logger.info(f"Rejected extract request: {e}")
        if e.status_code == 413:
            return JSONResponse(status_code=413, content=ErrorResponse(error=str(e)).model_dump(exclude_none=True))
        return JSONResponse(status_code=e.status_code, content={"error": str(e)})

    try:
        extracted = extract_json(text)
    except FencedJsonError as e:
        logger.error(f"Extraction failed: {e}")
        return internal_error_response(e)
    except Exception as e:
        logger.exception("Server error during extraction")
        return internal_error_response(e)

    if extracted is None:
        return not_found_response()
    return JSONResponse(content=extracted)


def handle_extract_query(text: str | None) -> JSONResponse:
    """Handle a GET /extract request carrying the text in a query parameter.

    Args:
        text: Value of the "text" query parameter, if given.

    Returns:
        JSONResponse: 200 with a QueryExtractResponse body, 400 when the
        parameter is missing or empty, 404 when nothing was found, 500 for
        a malformed fenced block.
    """
    if not text:
        return JSONResponse(status_code=400, content={"error": MISSING_QUERY_MESSAGE})

    try:
        extracted = extract_json(text)
    except FencedJsonError as e:
        logger.error(f"Extraction failed: {e}")
        return internal_error_response(e)
    except Exception as e:
        logger.exception("Server error during extraction")
        return internal_error_response(e)

    if extracted is None:
        return not_found_response()
    response = QueryExtractResponse(extractedJson=extracted, jsonString=to_json_string(extracted))
    return JSONResponse(content=response.model_dump())
