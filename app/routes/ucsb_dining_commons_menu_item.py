"""
Campus Records API - Dining Commons Menu Item Routes
=====================================================

What:  REST surface for /api/ucsbdiningcommonsmenuitem.

Example:
    POST /api/ucsbdiningcommonsmenuitem/post?diningCommonsCode=ortega
         &name=Baked Pesto Pasta with Chicken&station=Entree Specials
    DELETE /api/ucsbdiningcommonsmenuitem?id=123
    → 200 {"message": "UCSBDiningCommonsMenuItem with id 123 deleted"}
"""

from typing import List

from fastapi import APIRouter, Depends, Query
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
from app.schemas.ucsb_dining_commons_menu_item import (
    UCSBDiningCommonsMenuItemFields,
    UCSBDiningCommonsMenuItemResponse,
)
from app.security import require_admin, require_user
from app.services.entity_service import menu_item_service

router = APIRouter(prefix="/api/ucsbdiningcommonsmenuitem", tags=["UCSBDiningCommonsMenuItem"])


@router.get(
    "/all",
    response_model=List[UCSBDiningCommonsMenuItemResponse],
    responses=LIST_RESPONSES,
    dependencies=[Depends(require_user)],
    summary="List all menu items",
)
async def list_menu_items(
    db: AsyncSession = Depends(get_db_session),
) -> List[UCSBDiningCommonsMenuItemResponse]:
    return await menu_item_service.list_all(db)


@router.get(
    "",
    response_model=UCSBDiningCommonsMenuItemResponse,
    responses=GET_RESPONSES,
    dependencies=[Depends(require_user)],
    summary="Get a single menu item by id",
)
async def get_menu_item(
    entity_id: int = Query(alias="id", ge=KEY_MIN, le=KEY_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDiningCommonsMenuItemResponse:
    return await menu_item_service.get(db, entity_id)


@router.post(
    "/post",
    response_model=UCSBDiningCommonsMenuItemResponse,
    responses=CREATE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Create a new menu item",
)
async def create_menu_item(
    dining_commons_code: str = Query(alias="diningCommonsCode"),
    name: str = Query(),
    station: str = Query(),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDiningCommonsMenuItemResponse:
    fields = UCSBDiningCommonsMenuItemFields(
        dining_commons_code=dining_commons_code,
        name=name,
        station=station,
    )
    return await menu_item_service.create(db, fields)


@router.put(
    "",
    response_model=UCSBDiningCommonsMenuItemResponse,
    responses=UPDATE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Replace the fields of a menu item",
)
async def update_menu_item(
    incoming: UCSBDiningCommonsMenuItemFields,
    entity_id: int = Query(alias="id", ge=KEY_MIN, le=KEY_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> UCSBDiningCommonsMenuItemResponse:
    return await menu_item_service.update(db, entity_id, incoming)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=DELETE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Delete a menu item",
)
async def delete_menu_item(
    entity_id: int = Query(alias="id", ge=KEY_MIN, le=KEY_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await menu_item_service.delete(db, entity_id)
