"""FastAPI server for the JSON extractor.

This module defines the FastAPI application and HTTP endpoints for
extracting JSON objects from posted text. Routes are defined here and
delegate to library modules for implementation.
"""
import logging
import os
from contextlib import asynccontextmanager

import dotenv
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from json_extractor.http import DEFAULT_MAX_BODY_BYTES
from json_extractor.http.extract import handle_extract_body, handle_extract_query
from json_extractor.http.info import SERVICE_INFO, HealthResponse, ServiceInfo, health

logger = logging.getLogger("json_extractor.server")


def create_app(max_body_bytes: int | None = None, cors_origins: list[str] | None = None) -> FastAPI:
    """Create and configure a FastAPI application for JSON extraction.

    Creates a FastAPI server with /extract, /health and / endpoints and CORS
    enabled for all routes. Environment variables are loaded from .env file
    if present; explicit arguments take precedence over them.

    Args:
        max_body_bytes: Largest accepted POST body. Defaults to
            JSON_EXTRACTOR_MAX_BODY_BYTES env var or 10 MiB.
        cors_origins: Allowed CORS origins. Defaults to the comma-separated
            JSON_EXTRACTOR_CORS_ORIGINS env var or "*".

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    dotenv.load_dotenv()
    if max_body_bytes is None:
        max_body_bytes = int(os.environ.get("JSON_EXTRACTOR_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES))
    if cors_origins is None:
        cors_origins = [
            origin.strip()
            for origin in os.environ.get("JSON_EXTRACTOR_CORS_ORIGINS", "*").split(",")
            if origin.strip()
        ]

    @asynccontextmanager
    async def lifespan(application: FastAPI):
        logger.info("JSON extractor service started")
        yield
        logger.info("Shutdown signal received: closing HTTP server")

    api = FastAPI(title=SERVICE_INFO.name, description=SERVICE_INFO.description, lifespan=lifespan)
    api.add_middleware(CORSMiddleware, allow_origins=cors_origins, allow_methods=["*"], allow_headers=["*"])

    @api.post("/extract")
    async def extract(request: Request) -> JSONResponse:
        """Extract a JSON object from the request body.

        Accepts plain text, or JSON with a "text" member. Responds with the
        extracted object itself on success.

        Args:
            request: FastAPI Request object carrying the raw body.

        Returns:
            JSONResponse: The extracted object, or an error body.
        """
        body = await request.body()
        return await run_in_threadpool(handle_extract_body, body, request.headers.get("content-type"), max_body_bytes)

    @api.get("/extract")
    def extract_query(text: str | None = None) -> JSONResponse:
        """Extract a JSON object from the "text" query parameter."""
        return handle_extract_query(text)

    @api.get("/health", response_model=HealthResponse)
    def health_check():
        """Liveness probe."""
        return health()

    @api.get("/", response_model=ServiceInfo)
    def info():
        """Describe the service and its endpoints."""
        return SERVICE_INFO

    return api


app = create_app()
"""FastAPI application instance configured with the extraction routes.

This is the ASGI application instance that should be passed to uvicorn or
other ASGI servers.

Example:
    Run with uvicorn:
        uvicorn json_extractor.server:app --reload
"""
