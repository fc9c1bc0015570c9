"""
Schemas for /api/ucsborganization.

`orgCode` is the key: it is supplied on create and never changed by PUT,
so it only appears in the create and response schemas.
"""

from typing import Optional

from app.schemas.common import CamelModel


class UCSBOrganizationFields(CamelModel):
    org_translation_short: Optional[str] = None
    org_translation: Optional[str] = None
    inactive: bool = False


class UCSBOrganizationCreate(UCSBOrganizationFields):
    org_code: str


class UCSBOrganizationResponse(UCSBOrganizationCreate):
    pass
