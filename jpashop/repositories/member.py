"""Member repository: REFERENCE pattern for simple repositories.

How to add a new repository:
  1. Create jpashop/repositories/my_entity.py
  2. class MyEntityRepository(BaseRepository[MyEntity]):
         model = MyEntity
  3. Add any domain-specific query methods as needed
"""


from sqlalchemy.orm import selectinload

from jpashop.domain.member import Member
from jpashop.repositories.base import BaseRepository


class MemberRepository(BaseRepository[Member]):
    model = Member

    async def find_all(self) -> list[Member]:
        result = await self._session.execute(self._base_query())
        return list(result.scalars().all())

    async def find_by_name(self, name: str) -> list[Member]:
        result = await self._session.execute(
            self._base_query().where(Member.name == name)
        )
        return list(result.scalars().all())

    async def find_one_with_orders(self, member_id: int) -> Member | None:
        """Like find_one, with ``Member.orders`` loaded in id order."""
        result = await self._session.execute(
            self._base_query()
            .where(Member.id == member_id)
            .options(selectinload(Member.orders))
        )
        return result.scalars().first()
