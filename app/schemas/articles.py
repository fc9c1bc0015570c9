"""Schemas for /api/articles."""

from typing import Optional

from pydantic import NaiveDatetime

from app.schemas.common import CamelModel


class ArticlesFields(CamelModel):
    title: Optional[str] = None
    url: Optional[str] = None
    explanation: Optional[str] = None
    email: Optional[str] = None
    date_added: Optional[NaiveDatetime] = None


class ArticlesResponse(ArticlesFields):
    id: int
