"""
Data-access layer: one repository per entity.

Repositories wrap an AsyncSession and never commit; the per-request
session dependency owns the transaction.
"""

from app.repositories.base import CrudRepository
from app.repositories.entities import (
    ArticlesRepository,
    HelpRequestRepository,
    UCSBDiningCommonsMenuItemRepository,
    UCSBOrganizationRepository,
    UCSBRecommendationRequestRepository,
)

__all__ = [
    "CrudRepository",
    "ArticlesRepository",
    "HelpRequestRepository",
    "UCSBDiningCommonsMenuItemRepository",
    "UCSBOrganizationRepository",
    "UCSBRecommendationRequestRepository",
]
