"""Member service: REFERENCE pattern for all services.

How to add a new service:
  1. Create jpashop/services/my_entity.py
  2. Inject AsyncSession via constructor
  3. Instantiate the repository
  4. Delegate all DB work to the repository
  5. Raise AppException subclasses for business rule violations

Rule: No SQLAlchemy queries / no FastAPI here. Pure Python business logic.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.core.exceptions import ConflictError, NotFoundError
from jpashop.domain.member import Member
from jpashop.domain.order import Order
from jpashop.repositories.member import MemberRepository
from jpashop.schemas.member import MemberCreate

logger = logging.getLogger(__name__)

class MemberService:
    def __init__(self, session: AsyncSession):
        self._repo = MemberRepository(session)

    async def join(self, data: MemberCreate) -> Member:
        if await self._repo.find_by_name(data.name):
            raise ConflictError(f"Member '{data.name}' already exists")
        member = Member(**data.model_dump())
        await self._repo.save(member)
        logger.info("Member %s joined as '%s'", member.id, member.name)
        return member

    async def list_members(self) -> list[Member]:
        return await self._repo.find_all()

    async def get_member(self, member_id: int) -> Member:
        member = await self._repo.find_one(member_id)
        if member is None:
            raise NotFoundError("Member", member_id)
        return member

    async def get_member_orders(self, member_id: int) -> list[Order]:
        member = await self._repo.find_one_with_orders(member_id)
        if member is None:
            raise NotFoundError("Member", member_id)
        return list(member.orders)
