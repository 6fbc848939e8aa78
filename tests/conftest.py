"""Shared pytest fixtures.

This module provides HTTP test clients for exercising the extraction server
without binding a network port.
"""

import pytest
from fastapi.testclient import TestClient

from json_extractor.server import create_app


@pytest.fixture
def client():
    """Provide a test client for a server with default settings.

    Returns:
        TestClient: Client bound to a freshly created FastAPI app.
    """
    return TestClient(create_app(cors_origins=["*"]))


@pytest.fixture
def small_client():
    """Provide a test client for a server that accepts at most 32 body bytes.

    Returns:
        TestClient: Client bound to an app with a tiny body limit.
    """
    return TestClient(create_app(max_body_bytes=32, cors_origins=["*"]))
