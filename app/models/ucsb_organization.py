"""
Campus Records API - Organization Model
========================================

What:  ORM model for the `ucsborganization` table.
How:   Keyed by the natural `org_code` supplied by the client on create;
       there is no generated id for this table.
"""

from typing import Optional

from sqlalchemy import Boolean, String, false
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class UCSBOrganization(Base):
    """A student organization at UCSB."""

    __tablename__ = "ucsborganization"

    org_code: Mapped[str] = mapped_column(String(255), primary_key=True)
    org_translation_short: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    org_translation: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    inactive: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self) -> str:
        return f"<UCSBOrganization(org_code='{self.org_code}', inactive={self.inactive})>"
