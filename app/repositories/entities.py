"""Concrete repositories, one per table."""

from app.models import (
    Articles,
    HelpRequest,
    UCSBDiningCommonsMenuItem,
    UCSBOrganization,
    UCSBRecommendationRequest,
)
from app.repositories.base import CrudRepository


class UCSBDiningCommonsMenuItemRepository(CrudRepository[UCSBDiningCommonsMenuItem, int]):
    model = UCSBDiningCommonsMenuItem


class UCSBOrganizationRepository(CrudRepository[UCSBOrganization, str]):
    model = UCSBOrganization


class UCSBRecommendationRequestRepository(CrudRepository[UCSBRecommendationRequest, int]):
    model = UCSBRecommendationRequest


class HelpRequestRepository(CrudRepository[HelpRequest, int]):
    model = HelpRequest


class ArticlesRepository(CrudRepository[Articles, int]):
    model = Articles
