"""OpenAPI `responses=` fragments shared by the entity routers."""

from app.schemas.common import ErrorResponse

FORBIDDEN = {403: {"description": "Caller role not allowed", "model": ErrorResponse}}
NOT_FOUND = {404: {"description": "No row with this id", "model": ErrorResponse}}
BAD_REQUEST = {400: {"description": "Missing or malformed field", "model": ErrorResponse}}
CONFLICT = {409: {"description": "A row with this key already exists", "model": ErrorResponse}}
SERVER_ERROR = {500: {"description": "Server error", "model": ErrorResponse}}

LIST_RESPONSES = {**FORBIDDEN, **SERVER_ERROR}
GET_RESPONSES = {**BAD_REQUEST, **FORBIDDEN, **NOT_FOUND, **SERVER_ERROR}
CREATE_RESPONSES = {**BAD_REQUEST, **FORBIDDEN, **SERVER_ERROR}
UPDATE_RESPONSES = {**BAD_REQUEST, **FORBIDDEN, **NOT_FOUND, **SERVER_ERROR}
DELETE_RESPONSES = {**BAD_REQUEST, **FORBIDDEN, **NOT_FOUND, **SERVER_ERROR}
