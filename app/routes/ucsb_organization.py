"""
Campus Records API - Organization Routes
=========================================

What:  REST surface for /api/ucsborganization.
How:   Same shape as the other families, but the key is the client-chosen
       `orgCode` string, still passed as `?id=` on get/put/delete.

Differences from integer-keyed families:
    - POST requires `orgCode`; a code that already exists answers 409
    - PUT never changes `orgCode`, even if the body carries one
"""

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db_session
from app.routes.responses import (
    CONFLICT,
    CREATE_RESPONSES,
    DELETE_RESPONSES,
    GET_RESPONSES,
    LIST_RESPONSES,
    UPDATE_RESPONSES,
)
from app.schemas.common import MessageResponse
from app.schemas.ucsb_organization import (
    UCSBOrganizationCreate,
    UCSBOrganizationFields,
    UCSBOrganizationResponse,
)
from app.security import require_admin, require_user
from app.services.entity_service import organization_service

router = APIRouter(prefix="/api/ucsborganization", tags=["UCSBOrganization"])


@router.get(
    "/all",
    response_model=List[UCSBOrganizationResponse],
    responses=LIST_RESPONSES,
    dependencies=[Depends(require_user)],
    summary="List all organizations",
)
async def list_organizations(
    db: AsyncSession = Depends(get_db_session),
) -> List[UCSBOrganizationResponse]:
    return await organization_service.list_all(db)


@router.get(
    "",
    response_model=UCSBOrganizationResponse,
    responses=GET_RESPONSES,
    dependencies=[Depends(require_user)],
    summary="Get a single organization by orgCode",
)
async def get_organization(
    org_code: str = Query(alias="id", description="Organization code, e.g. ZPR"),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBOrganizationResponse:
    return await organization_service.get(db, org_code)


@router.post(
    "/post",
    response_model=UCSBOrganizationResponse,
    responses={**CREATE_RESPONSES, **CONFLICT},
    dependencies=[Depends(require_admin)],
    summary="Create a new organization",
)
async def create_organization(
    org_code: str = Query(alias="orgCode", min_length=1),
    org_translation_short: str = Query(alias="orgTranslationShort"),
    org_translation: str = Query(alias="orgTranslation"),
    inactive: bool = Query(),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBOrganizationResponse:
    fields = UCSBOrganizationCreate(
        org_code=org_code,
        org_translation_short=org_translation_short,
        org_translation=org_translation,
        inactive=inactive,
    )
    return await organization_service.create(db, fields)


@router.put(
    "",
    response_model=UCSBOrganizationResponse,
    responses=UPDATE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Replace the fields of an organization",
)
async def update_organization(
    incoming: UCSBOrganizationFields,
    org_code: str = Query(alias="id"),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBOrganizationResponse:
    return await organization_service.update(db, org_code, incoming)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=DELETE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Delete an organization",
)
async def delete_organization(
    org_code: str = Query(alias="id"),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await organization_service.delete(db, org_code)
