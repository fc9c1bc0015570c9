"""
Campus Records API - Articles Model
====================================

What:  ORM model for the `articles` table (links shared with the class).
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.types import IdentityKey


class Articles(Base):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(IdentityKey, primary_key=True, autoincrement=True)
    title: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    url: Mapped[Optional[str]] = mapped_column(String(2048), nullable=True)
    explanation: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    date_added: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<Articles(id={self.id}, title='{self.title}')>"
