"""Operational endpoints: liveness probe and capability descriptor."""
from datetime import datetime, timezone

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response model for the health endpoint."""
    status: str = "ok"
    timestamp: str
    message: str = "JSON Extractor API is running"


class EndpointInfo(BaseModel):
    path: str
    method: str
    description: str


class ServiceInfo(BaseModel):
    """Static description of the service and its endpoints."""
    name: str
    description: str
    endpoints: list[EndpointInfo]
    usage: str


SERVICE_INFO = ServiceInfo(
    name="JSON Extractor API",
    description="Extract JSON objects from text content",
    endpoints=[
        EndpointInfo(path="/extract", method="POST", description="Extract JSON from text content"),
        EndpointInfo(path="/extract", method="GET", description="Extract JSON from text query parameter"),
        EndpointInfo(path="/health", method="GET", description="Health check endpoint"),
    ],
    usage="POST text content to /extract or use GET /extract?text=yourTextHere",
)


def health() -> HealthResponse:
    """Build a liveness response stamped with the current UTC time."""
    timestamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return HealthResponse(timestamp=timestamp)
