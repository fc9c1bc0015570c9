"""
Campus Records API - Dining Commons Menu Item Model
====================================================

What:  ORM model for the `ucsbdiningcommonsmenuitem` table.
Who:   Read and written through UCSBDiningCommonsMenuItemRepository.
"""

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.types import IdentityKey


class UCSBDiningCommonsMenuItem(Base):
    """One dish served at a station of a dining commons (e.g. "ortega")."""

    __tablename__ = "ucsbdiningcommonsmenuitem"

    id: Mapped[int] = mapped_column(IdentityKey, primary_key=True, autoincrement=True)
    dining_commons_code: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    station: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    def __repr__(self) -> str:
        return (
            f"<UCSBDiningCommonsMenuItem(id={self.id}, "
            f"dining_commons_code='{self.dining_commons_code}', name='{self.name}')>"
        )
