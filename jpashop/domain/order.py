"""SQLAlchemy ORM model for Orders, plus the order search criteria value."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Enum, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from jpashop.db.base import Base
from jpashop.domain.mixins import TimestampMixin, utcnow


class OrderStatus(str, enum.Enum):
    ORDERED = "ORDERED"
    CANCELED = "CANCELED"


class Order(Base, TimestampMixin):
    __tablename__ = "orders"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    # Nullable like an unconstrained join column; member-less orders never
    # show up in searches because those inner-join members.
    member_id: Mapped[Optional[int]] = mapped_column(
        Integer, ForeignKey("members.id"), nullable=True, index=True
    )
    order_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, nullable=False
    )
    # Stored by name: "ORDERED" | "CANCELED"
    status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, native_enum=False, length=20),
        default=OrderStatus.ORDERED,
        nullable=False,
        index=True,
    )

    member: Mapped[Optional["Member"]] = relationship(back_populates="orders", lazy="selectin")

    def cancel(self) -> None:
        self.status = OrderStatus.CANCELED


@dataclass(frozen=True)
class OrderSearch:
    """Search criteria for orders. Unset fields do not constrain the result."""

    order_status: Optional[OrderStatus] = None
    member_name: Optional[str] = None
