"""Generic async repository over a caller-supplied session."""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.db.base import Base

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """Generic save/lookup repository.

    The session is the unit of work for one request: the repository never
    commits, and store errors are left to propagate to whoever owns the
    transaction.
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _base_query(self):
        """Return a SELECT over the model in insertion order."""
        return select(self.model).order_by(self.model.id)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def find_one(self, entity_id: int) -> ModelT | None:
        return await self._session.get(self.model, entity_id)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def save(self, instance: ModelT) -> None:
        self._session.add(instance)
        await self._session.flush()  # populate id
