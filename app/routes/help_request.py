"""
Campus Records API - Help Request Routes
=========================================

What:  REST surface for /api/helprequest.
Who:   Course staff dashboards (list/get) and admins (create/update/delete).

Example:
    POST /api/helprequest/post?requesterEmail=ttnguyen@ucsb.edu&teamId=F24-16
         &tableOrBreakoutRoom=Table 16&explanation=Needs help with jpa03
         &solved=true&requestTime=2024-10-02T00:00:00
    → 200 {"requesterEmail": "ttnguyen@ucsb.edu", ..., "id": 1}
"""

from typing import List

from fastapi import APIRouter, Depends, Query
from pydantic import NaiveDatetime
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.models.types import KEY_MAX, KEY_MIN
from app.routes.responses import (
    CREATE_RESPONSES,
    DELETE_RESPONSES,
    GET_RESPONSES,
    LIST_RESPONSES,
    UPDATE_RESPONSES,
)
from app.schemas.common import MessageResponse
from app.schemas.help_request import HelpRequestFields, HelpRequestResponse
from app.security import require_admin, require_user
from app.services.entity_service import help_request_service

router = APIRouter(prefix="/api/helprequest", tags=["HelpRequest"])


@router.get(
    "/all",
    response_model=List[HelpRequestResponse],
    responses=LIST_RESPONSES,
    dependencies=[Depends(require_user)],
    summary="List all help requests",
)
async def list_help_requests(
    db: AsyncSession = Depends(get_db_session),
) -> List[HelpRequestResponse]:
    return await help_request_service.list_all(db)


@router.get(
    "",
    response_model=HelpRequestResponse,
    responses=GET_RESPONSES,
    dependencies=[Depends(require_user)],
    summary="Get a single help request by id",
)
async def get_help_request(
    entity_id: int = Query(
        alias="id", ge=KEY_MIN, le=KEY_MAX, description="Help request id"
    ),
    db: AsyncSession = Depends(get_db_session),
) -> HelpRequestResponse:
    return await help_request_service.get(db, entity_id)


@router.post(
    "/post",
    response_model=HelpRequestResponse,
    responses=CREATE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Create a new help request",
)
async def create_help_request(
    requester_email: str = Query(alias="requesterEmail"),
    team_id: str = Query(alias="teamId"),
    table_or_breakout_room: str = Query(alias="tableOrBreakoutRoom"),
    explanation: str = Query(),
    solved: bool = Query(),
    request_time: NaiveDatetime = Query(
        alias="requestTime",
        description="ISO 8601 local date-time, e.g. 2024-10-02T00:00:00",
    ),
    db: AsyncSession = Depends(get_db_session),
) -> HelpRequestResponse:
    fields = HelpRequestFields(
        requester_email=requester_email,
        team_id=team_id,
        table_or_breakout_room=table_or_breakout_room,
        explanation=explanation,
        solved=solved,
        request_time=request_time,
    )
    return await help_request_service.create(db, fields)


@router.put(
    "",
    response_model=HelpRequestResponse,
    responses=UPDATE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Replace the fields of a help request",
)
async def update_help_request(
    incoming: HelpRequestFields,
    entity_id: int = Query(
        alias="id", ge=KEY_MIN, le=KEY_MAX, description="Help request id"
    ),
    db: AsyncSession = Depends(get_db_session),
) -> HelpRequestResponse:
    return await help_request_service.update(db, entity_id, incoming)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=DELETE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Delete a help request",
)
async def delete_help_request(
    entity_id: int = Query(
        alias="id", ge=KEY_MIN, le=KEY_MAX, description="Help request id"
    ),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await help_request_service.delete(db, entity_id)
