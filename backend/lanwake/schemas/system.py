"""System schemas — health and API error bodies."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = "ok"
    version: str
    service: str = "lanwake"


class ErrorResponse(BaseModel):
    """JSON body returned for every API error."""
    status: int
    message: str
