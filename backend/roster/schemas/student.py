"""
Roster Backend — Pydantic Response Schemas
===========================================

What:  Pydantic models defining the API contract.
How:   FastAPI uses these models to serialize responses and generate
       OpenAPI documentation.

Design Decision:
    Schemas are separate from SQLAlchemy models so we control exactly which
    columns are exposed, independently of the table layout.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class StudentResponse(BaseModel):
    """
    What:  Full representation of a student.
    Who:   Returned by GET /student/{student}/detail.

    The entity is serialized at the top level of the body, with no
    {"data": ...} envelope around it.
    """
    id: int = Field(description="Primary key")
    name: str = Field(description="Full display name")
    email: str = Field(description="Contact email address")
    student_number: str = Field(description="Registrar-issued student number")
    enrolled_at: datetime = Field(description="Enrollment timestamp (UTC ISO 8601)")

    model_config = {"from_attributes": True}


class NotFoundResponse(BaseModel):
    """
    What:  Body of a 404 produced by a route binding.

    Example:
        {"message": "No query results for model [Student] 12345"}
    """
    message: str = Field(description="Names the model and the key that did not resolve")


class ErrorResponse(BaseModel):
    """
    What:  Error format for server-side failures (5xx).

    Fields:
        error: Machine-readable error code (e.g., "server_error")
        message: Human-readable description for display to users
        request_id: Correlation ID for tracing this error in server logs
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """
    What:  Health check response showing service and dependency status.
    Who:   Returned by GET /health for monitoring and load balancer probes.
    """
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
