"""Schemas for /api/recommendationRequest."""

from typing import Optional

from pydantic import NaiveDatetime

from app.schemas.common import CamelModel


class UCSBRecommendationRequestFields(CamelModel):
    requester_email: Optional[str] = None
    professor_email: Optional[str] = None
    explanation: Optional[str] = None
    date_requested: Optional[NaiveDatetime] = None
    date_needed: Optional[NaiveDatetime] = None
    done: bool = False


class UCSBRecommendationRequestResponse(UCSBRecommendationRequestFields):
    id: int
