"""
Campus Records API - Entity Service
====================================

What:  The CRUD workflow shared by every resource.
Who:   Called by the route handlers in app/routes/.

Per-operation contract:
    list_all(db)            → every row, ordered by key
    get(db, key)            → one row or EntityNotFoundError
    create(db, fields)      → new row with its store-assigned key
    update(db, key, fields) → re-fetch, overwrite mutable fields, persist
    delete(db, key)         → re-fetch, delete, confirmation message

Each by-key call issues exactly one read; each mutating call exactly one
write (flush). Commit/rollback belongs to get_db_session.
"""

import logging
from contextlib import contextmanager
from typing import Any, Generic, Iterator, List, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import (
    DatabaseError,
    DuplicateEntityError,
    EntityNotFoundError,
)
from app.repositories import (
    ArticlesRepository,
    CrudRepository,
    HelpRequestRepository,
    UCSBDiningCommonsMenuItemRepository,
    UCSBOrganizationRepository,
    UCSBRecommendationRequestRepository,
)
from app.schemas.articles import ArticlesResponse
from app.schemas.common import MessageResponse
from app.schemas.help_request import HelpRequestResponse
from app.schemas.ucsb_dining_commons_menu_item import UCSBDiningCommonsMenuItemResponse
from app.schemas.ucsb_organization import UCSBOrganizationResponse
from app.schemas.ucsb_recommendation_request import UCSBRecommendationRequestResponse

logger = logging.getLogger(__name__)

ResponseT = TypeVar("ResponseT", bound=BaseModel)


class EntityService(Generic[ResponseT]):
    """
    CRUD orchestration for one entity.

    Args:
        repository_class: CrudRepository subclass for the entity's table
        entity_name:      Name used in messages ("HelpRequest with id 7 not found")
        response_schema:  Pydantic schema returned to the route layer
    """

    def __init__(
        self,
        repository_class: Type[CrudRepository],
        entity_name: str,
        response_schema: Type[ResponseT],
    ):
        self.repository_class = repository_class
        self.entity_name = entity_name
        self.response_schema = response_schema
        self.key_attribute = repository_class.primary_key().key

    def _repository(self, db: AsyncSession) -> CrudRepository:
        return self.repository_class(db)

    def _to_response(self, entity: Any) -> ResponseT:
        return self.response_schema.model_validate(entity)

    @contextmanager
    def _database_errors(self, operation: str, key: Any = None) -> Iterator[None]:
        """Wrap driver failures in DatabaseError; app exceptions pass through."""
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(
                "Database error during %s of %s %s: %s",
                operation, self.entity_name, key if key is not None else "", e,
                exc_info=True,
            )
            raise DatabaseError(
                context={
                    "entity": self.entity_name,
                    "operation": operation,
                    "error_type": type(e).__name__,
                },
            ) from e

    async def list_all(self, db: AsyncSession) -> List[ResponseT]:
        with self._database_errors("list"):
            rows = await self._repository(db).find_all()
        return [self._to_response(row) for row in rows]

    async def get(self, db: AsyncSession, key: Any) -> ResponseT:
        with self._database_errors("get", key):
            entity = await self._repository(db).find_by_id(key)
        if entity is None:
            raise EntityNotFoundError(self.entity_name, key)
        return self._to_response(entity)

    async def create(self, db: AsyncSession, fields: BaseModel) -> ResponseT:
        """
        Build a new row from `fields` and persist it.

        Raises:
            DuplicateEntityError: the key is client-supplied and already taken
            DatabaseError: any other persistence failure
        """
        repository = self._repository(db)
        entity = repository.model(**fields.model_dump())
        with self._database_errors("create"):
            try:
                await repository.save(entity)
            except IntegrityError as e:
                key = getattr(entity, self.key_attribute, None)
                logger.warning(
                    "Create of %s rejected, key %s already exists", self.entity_name, key
                )
                raise DuplicateEntityError(self.entity_name, key) from e
        key = getattr(entity, self.key_attribute)
        logger.info("Created %s with id %s", self.entity_name, key)
        return self._to_response(entity)

    async def update(self, db: AsyncSession, key: Any, fields: BaseModel) -> ResponseT:
        """Overwrite every mutable field of an existing row. The key never changes."""
        repository = self._repository(db)
        with self._database_errors("update", key):
            entity = await repository.find_by_id(key)
            if entity is None:
                raise EntityNotFoundError(self.entity_name, key)
            for name, value in fields.model_dump().items():
                if name == self.key_attribute:
                    continue
                setattr(entity, name, value)
            await repository.save(entity)
        logger.info("Updated %s with id %s", self.entity_name, key)
        return self._to_response(entity)

    async def delete(self, db: AsyncSession, key: Any) -> MessageResponse:
        repository = self._repository(db)
        with self._database_errors("delete", key):
            entity = await repository.find_by_id(key)
            if entity is None:
                raise EntityNotFoundError(self.entity_name, key)
            await repository.delete(entity)
        logger.info("Deleted %s with id %s", self.entity_name, key)
        return MessageResponse(message=f"{self.entity_name} with id {key} deleted")


# ── Singleton Instances ───────────────────────────────────────────────────
menu_item_service = EntityService(
    UCSBDiningCommonsMenuItemRepository,
    "UCSBDiningCommonsMenuItem",
    UCSBDiningCommonsMenuItemResponse,
)
organization_service = EntityService(
    UCSBOrganizationRepository,
    "UCSBOrganization",
    UCSBOrganizationResponse,
)
recommendation_request_service = EntityService(
    UCSBRecommendationRequestRepository,
    "UCSBRecommendationRequest",
    UCSBRecommendationRequestResponse,
)
help_request_service = EntityService(
    HelpRequestRepository,
    "HelpRequest",
    HelpRequestResponse,
)
articles_service = EntityService(
    ArticlesRepository,
    "Articles",
    ArticlesResponse,
)
