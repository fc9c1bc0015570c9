"""
Campus Records API - Recommendation Request Model
==================================================

What:  ORM model for the `ucsbrecommendationrequests` table.

Timestamps are naive local date-times; clients send and receive them as
ISO 8601 strings without an offset (2024-11-23T20:40:10).
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.types import IdentityKey


class UCSBRecommendationRequest(Base):
    """A student's request for a letter of recommendation from a professor."""

    __tablename__ = "ucsbrecommendationrequests"

    id: Mapped[int] = mapped_column(IdentityKey, primary_key=True, autoincrement=True)
    requester_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    professor_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    explanation: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    date_requested: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    date_needed: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self) -> str:
        return (
            f"<UCSBRecommendationRequest(id={self.id}, "
            f"requester_email='{self.requester_email}', done={self.done})>"
        )
