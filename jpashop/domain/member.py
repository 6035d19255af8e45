"""SQLAlchemy ORM model for shop Members.

This is the REFERENCE module showing the pattern for all domain models:
  - Inherit Base, TimestampMixin
  - Integer autoincrement primary key (ids double as insertion order)
  - created_at / updated_at (from TimestampMixin)
Copy this pattern when adding new domain models (e.g. Item, Delivery, etc.).
"""

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jpashop.db.base import Base
from jpashop.domain.mixins import TimestampMixin


class Member(Base, TimestampMixin):
    __tablename__ = "members"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    # Address (embedded value in the shop domain)
    city: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    street: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    zipcode: Mapped[Optional[str]] = mapped_column(String(20), nullable=True)

    # Never lazy-loaded; use MemberRepository.find_one_with_orders
    orders: Mapped[List["Order"]] = relationship(
        back_populates="member", lazy="raise", order_by="Order.id"
    )
