"""Order repository with dynamic, optional search predicates.

Each filter is a small method that turns one field of :class:`OrderSearch`
into a SQLAlchemy boolean expression, or ``None`` when that field is unset.
``find_all`` keeps the expressions that are present and ANDs them together,
so an unset filter simply adds no constraint.
"""

from __future__ import annotations

import logging

from sqlalchemy import ColumnElement, and_
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import contains_eager

from jpashop.core.config import settings
from jpashop.domain.member import Member
from jpashop.domain.order import Order, OrderSearch, OrderStatus
from jpashop.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class OrderRepository(BaseRepository[Order]):
    model = Order

    def __init__(self, session: AsyncSession, limit: int | None = None):
        super().__init__(session)
        self._limit = limit if limit is not None else settings.order_search_limit

    @property
    def limit(self) -> int:
        return self._limit

    async def find_all(self, criteria: OrderSearch) -> list[Order]:
        """Return orders matching every criteria field that is set.

        Orders are joined to their member (orders without one never match),
        returned in id order and capped at the configured limit.
        """
        q = (
            self._base_query()
            .join(Order.member)
            .options(contains_eager(Order.member))
        )

        conditions = [
            c
            for c in (
                self._status_eq(criteria.order_status),
                self._name_like(criteria.member_name),
            )
            if c is not None
        ]
        if conditions:
            q = q.where(and_(*conditions))
        q = q.limit(self._limit)

        logger.debug(
            "Searching orders: status=%s name=%r (%d condition(s), limit %d)",
            criteria.order_status, criteria.member_name, len(conditions), self._limit,
        )
        result = await self._session.execute(q)
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    @staticmethod
    def _status_eq(status: OrderStatus | None) -> ColumnElement[bool] | None:
        if status is None:
            return None
        return Order.status == status

    @staticmethod
    def _name_like(name: str | None) -> ColumnElement[bool] | None:
        if name is None or not name.strip():
            return None
        # % and _ in the name stay wildcards
        return Member.name.like(f"%{name}%")
