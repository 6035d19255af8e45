"""Order service: placing, looking up, searching and cancelling orders."""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.core.exceptions import ConflictError, NotFoundError
from jpashop.domain.order import Order, OrderSearch, OrderStatus
from jpashop.repositories.member import MemberRepository
from jpashop.repositories.order import OrderRepository
from jpashop.schemas.order import OrderCreate

logger = logging.getLogger(__name__)

class OrderService:
    def __init__(self, session: AsyncSession, search_limit: int | None = None):
        self._orders = OrderRepository(session, limit=search_limit)
        self._members = MemberRepository(session)

    @property
    def search_limit(self) -> int:
        return self._orders.limit

    async def place_order(self, data: OrderCreate) -> Order:
        member = await self._members.find_one(data.member_id)
        if member is None:
            raise NotFoundError("Member", data.member_id)
        order = Order(member=member, status=OrderStatus.ORDERED)
        await self._orders.save(order)
        logger.info("Order %s placed for member %s", order.id, member.id)
        return order

    async def get_order(self, order_id: int) -> Order:
        order = await self._orders.find_one(order_id)
        if order is None:
            raise NotFoundError("Order", order_id)
        return order

    async def search_orders(self, criteria: OrderSearch) -> list[Order]:
        return await self._orders.find_all(criteria)

    async def cancel_order(self, order_id: int) -> Order:
        order = await self.get_order(order_id)
        if order.status == OrderStatus.CANCELED:
            raise ConflictError(f"Order '{order_id}' is already canceled")
        order.cancel()
        await self._orders.save(order)
        logger.info("Order %s canceled", order.id)
        return order
