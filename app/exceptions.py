"""
Campus Records API - Custom Exception Hierarchy
================================================

What:  Application-specific exceptions for each error scenario.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON with the matching HTTP status code.
Who:   Raised by services and the security guard; caught by global handlers.

Exception Hierarchy:
    CampusRecordsError (base)
    ├── EntityNotFoundError   → 404 Not Found
    ├── ForbiddenError        → 403 Forbidden
    ├── DuplicateEntityError  → 409 Conflict
    └── DatabaseError         → 500 Internal Server Error

Each class names the `error_type` string that appears as the `type` field
of the JSON error body.
"""

from typing import Any, Dict, Optional


class CampusRecordsError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    error_type = "InternalServerError"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class EntityNotFoundError(CampusRecordsError):
    """
    Raised when no row exists for the requested key.

    The message is always "<Entity> with id <id> not found", e.g.
    "HelpRequest with id 123 not found".
    """

    error_type = "EntityNotFoundException"

    def __init__(
        self,
        entity: str,
        entity_id: Any,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["entity"] = entity
        ctx["entity_id"] = str(entity_id)
        super().__init__(message=f"{entity} with id {entity_id} not found", context=ctx)
        self.entity = entity
        self.entity_id = entity_id


class ForbiddenError(CampusRecordsError):
    """
    Raised by the role guard when the caller's role is not allowed.

    Anonymous callers and under-privileged callers get the same answer.
    """

    error_type = "AccessDeniedException"

    def __init__(
        self,
        message: str = "Access Denied",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DuplicateEntityError(CampusRecordsError):
    """
    Raised when a create collides with an existing primary key.

    Only reachable for entities whose key is supplied by the client
    (UCSBOrganization.orgCode).
    """

    error_type = "EntityExistsException"

    def __init__(
        self,
        entity: str,
        entity_id: Any,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["entity"] = entity
        ctx["entity_id"] = str(entity_id)
        super().__init__(message=f"{entity} with id {entity_id} already exists", context=ctx)


class DatabaseError(CampusRecordsError):
    """
    Raised when a database operation fails unexpectedly.

    The message returned to the client is always generic; the driver error
    is kept in `context` and logged server-side only.
    """

    error_type = "DatabaseException"

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
