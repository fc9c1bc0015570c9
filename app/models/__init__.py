"""
ORM models, one module per table.

Importing this package registers every table on `Base.metadata`
(Alembic autogenerate and the test schema rely on that).
"""

from app.models.articles import Articles
from app.models.help_request import HelpRequest
from app.models.ucsb_dining_commons_menu_item import UCSBDiningCommonsMenuItem
from app.models.ucsb_organization import UCSBOrganization
from app.models.ucsb_recommendation_request import UCSBRecommendationRequest

__all__ = [
    "Articles",
    "HelpRequest",
    "UCSBDiningCommonsMenuItem",
    "UCSBOrganization",
    "UCSBRecommendationRequest",
]
