"""Schemas for /api/ucsbdiningcommonsmenuitem."""

from typing import Optional

from app.schemas.common import CamelModel


class UCSBDiningCommonsMenuItemFields(CamelModel):
    """Mutable fields; also the PUT request body."""
    dining_commons_code: Optional[str] = None
    name: Optional[str] = None
    station: Optional[str] = None


class UCSBDiningCommonsMenuItemResponse(UCSBDiningCommonsMenuItemFields):
    id: int
