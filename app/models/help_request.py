"""
Campus Records API - Help Request Model
========================================

What:  ORM model for the `helprequests` table: a team asking course staff
       for help at a table or breakout room.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.types import IdentityKey


class HelpRequest(Base):
    __tablename__ = "helprequests"

    id: Mapped[int] = mapped_column(IdentityKey, primary_key=True, autoincrement=True)
    requester_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    team_id: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    table_or_breakout_room: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    explanation: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    solved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    request_time: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<HelpRequest(id={self.id}, team_id='{self.team_id}', solved={self.solved})>"
        )
