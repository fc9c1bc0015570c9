"""
Campus Records API - Recommendation Request Routes
===================================================

What:  REST surface for /api/recommendationRequest (camelCase path kept for
       existing frontend clients).
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
from app.schemas.ucsb_recommendation_request import (
    UCSBRecommendationRequestFields,
    UCSBRecommendationRequestResponse,
)
from app.security import require_admin, require_user
from app.services.entity_service import recommendation_request_service

router = APIRouter(prefix="/api/recommendationRequest", tags=["UCSBRecommendationRequest"])


@router.get(
    "/all",
    response_model=List[UCSBRecommendationRequestResponse],
    responses=LIST_RESPONSES,
    dependencies=[Depends(require_user)],
    summary="List all recommendation requests",
)
async def list_recommendation_requests(
    db: AsyncSession = Depends(get_db_session),
) -> List[UCSBRecommendationRequestResponse]:
    return await recommendation_request_service.list_all(db)


@router.get(
    "",
    response_model=UCSBRecommendationRequestResponse,
    responses=GET_RESPONSES,
    dependencies=[Depends(require_user)],
    summary="Get a single recommendation request by id",
)
async def get_recommendation_request(
    entity_id: int = Query(alias="id", ge=KEY_MIN, le=KEY_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBRecommendationRequestResponse:
    return await recommendation_request_service.get(db, entity_id)


@router.post(
    "/post",
    response_model=UCSBRecommendationRequestResponse,
    responses=CREATE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Create a new recommendation request",
)
async def create_recommendation_request(
    requester_email: str = Query(alias="requesterEmail"),
    professor_email: str = Query(alias="professorEmail"),
    explanation: str = Query(),
    date_requested: NaiveDatetime = Query(alias="dateRequested"),
    date_needed: NaiveDatetime = Query(alias="dateNeeded"),
    done: bool = Query(),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBRecommendationRequestResponse:
    fields = UCSBRecommendationRequestFields(
        requester_email=requester_email,
        professor_email=professor_email,
        explanation=explanation,
        date_requested=date_requested,
        date_needed=date_needed,
        done=done,
    )
    return await recommendation_request_service.create(db, fields)


@router.put(
    "",
    response_model=UCSBRecommendationRequestResponse,
    responses=UPDATE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Replace the fields of a recommendation request",
)
async def update_recommendation_request(
    incoming: UCSBRecommendationRequestFields,
    entity_id: int = Query(alias="id", ge=KEY_MIN, le=KEY_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBRecommendationRequestResponse:
    return await recommendation_request_service.update(db, entity_id, incoming)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=DELETE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Delete a recommendation request",
)
async def delete_recommendation_request(
    entity_id: int = Query(alias="id", ge=KEY_MIN, le=KEY_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await recommendation_request_service.delete(db, entity_id)
