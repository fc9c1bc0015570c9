"""
Campus Records API - Articles Routes
=====================================

What:  REST surface for /api/articles.
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
from app.schemas.articles import ArticlesFields, ArticlesResponse
from app.schemas.common import MessageResponse
from app.security import require_admin, require_user
from app.services.entity_service import articles_service

router = APIRouter(prefix="/api/articles", tags=["Articles"])


@router.get(
    "/all",
    response_model=List[ArticlesResponse],
    responses=LIST_RESPONSES,
    dependencies=[Depends(require_user)],
    summary="List all articles",
)
async def list_articles(
    db: AsyncSession = Depends(get_db_session),
) -> List[ArticlesResponse]:
    return await articles_service.list_all(db)


@router.get(
    "",
    response_model=ArticlesResponse,
    responses=GET_RESPONSES,
    dependencies=[Depends(require_user)],
    summary="Get a single article by id",
)
async def get_article(
    entity_id: int = Query(alias="id", ge=KEY_MIN, le=KEY_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> ArticlesResponse:
    return await articles_service.get(db, entity_id)


@router.post(
    "/post",
    response_model=ArticlesResponse,
    responses=CREATE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Create a new article",
)
async def create_article(
    title: str = Query(),
    url: str = Query(),
    explanation: str = Query(),
    email: str = Query(),
    date_added: NaiveDatetime = Query(alias="dateAdded"),
    db: AsyncSession = Depends(get_db_session),
) -> ArticlesResponse:
    """
    Create an article from query parameters.

    Any `id` parameter sent by older clients is ignored; the key is always
    assigned by the database.
    """
    fields = ArticlesFields(
        title=title,
        url=url,
        explanation=explanation,
        email=email,
        date_added=date_added,
    )
    return await articles_service.create(db, fields)


@router.put(
    "",
    response_model=ArticlesResponse,
    responses=UPDATE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Replace the fields of an article",
)
async def update_article(
    incoming: ArticlesFields,
    entity_id: int = Query(alias="id", ge=KEY_MIN, le=KEY_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> ArticlesResponse:
    return await articles_service.update(db, entity_id, incoming)


@router.delete(
    "",
    response_model=MessageResponse,
    responses=DELETE_RESPONSES,
    dependencies=[Depends(require_admin)],
    summary="Delete an article",
)
async def delete_article(
    entity_id: int = Query(alias="id", ge=KEY_MIN, le=KEY_MAX),
    db: AsyncSession = Depends(get_db_session),
) -> MessageResponse:
    return await articles_service.delete(db, entity_id)
