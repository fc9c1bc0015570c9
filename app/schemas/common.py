"""
Campus Records API - Shared Schemas
====================================

What:  Base class for entity schemas plus the response shapes shared by
       every resource (delete confirmation, error payload, health).
"""

from typing import Any, List, Optional

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for entity schemas.

    Attributes are snake_case in Python and camelCase on the wire
    (`requester_email` ↔ `requesterEmail`). Instances can be built from ORM
    objects (`model_validate(row)`) or by field name.
    """

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class MessageResponse(BaseModel):
    """Body of a successful DELETE, e.g. {"message": "Articles with id 3 deleted"}."""
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    Standardized error body for all API errors.

    Example:
        {
            "type": "EntityNotFoundException",
            "message": "HelpRequest with id 123 not found",
            "request_id": "a1b2c3d4"
        }
    """
    type: str = Field(description="Machine-readable error type")
    message: str = Field(description="Human-readable error description")
    details: Optional[List[Any]] = Field(default=None, description="Per-field validation problems")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
