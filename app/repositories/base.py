"""
Campus Records API - Generic Repository
========================================

What:  find_all / find_by_id / save / delete / delete_by_id over one table.
How:   Subclasses set `model`; the primary-key column is read from the
       mapper, so integer and natural string keys work the same way.

Query plans:
    find_all:    SELECT * FROM <table> ORDER BY <pk>
    find_by_id:  SELECT * FROM <table> WHERE <pk> = :key
    save:        INSERT (new object) or UPDATE (dirty object) on flush
    delete:      DELETE FROM <table> WHERE <pk> = :key on flush
"""

from typing import Any, ClassVar, Generic, List, Optional, Type, TypeVar

from sqlalchemy import inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

ModelT = TypeVar("ModelT", bound=Base)
KeyT = TypeVar("KeyT")


class CrudRepository(Generic[ModelT, KeyT]):
    """Base repository bound to one session for the length of a request."""

    model: ClassVar[Type[Base]]

    def __init__(self, db: AsyncSession):
        self.db = db

    @classmethod
    def primary_key(cls) -> Any:
        return inspect(cls.model).primary_key[0]

    async def find_all(self) -> List[ModelT]:
        result = await self.db.execute(
            select(self.model).order_by(self.primary_key())
        )
        return list(result.scalars().all())

    async def find_by_id(self, key: KeyT) -> Optional[ModelT]:
        result = await self.db.execute(
            select(self.model).where(self.primary_key() == key)
        )
        return result.scalar_one_or_none()

    async def save(self, entity: ModelT) -> ModelT:
        """Persist a new or modified entity; generated keys are set on return."""
        self.db.add(entity)
        await self.db.flush()
        return entity

    async def delete(self, entity: ModelT) -> None:
        await self.db.delete(entity)
        await self.db.flush()

    async def delete_by_id(self, key: KeyT) -> bool:
        """Delete the row with `key`. Returns False when no such row exists."""
        entity = await self.find_by_id(key)
        if entity is None:
            return False
        await self.delete(entity)
        return True
