"""Test suite for the JSON extractor.

This package contains unit and integration tests for the extractor, the
HTTP server, and the CLI. Tests own their setup and exercise the server
through FastAPI's TestClient rather than a bound port.
"""
