"""Domain package: all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  member.py  - REFERENCE pattern (copy when adding Item, Delivery, etc.)
  order.py   - Orders, OrderStatus and the OrderSearch criteria value
  mixins.py  - Shared TimestampMixin
"""

from jpashop.domain.member import Member
from jpashop.domain.order import Order, OrderSearch, OrderStatus

__all__ = [
    "Member",
    "Order",
    "OrderSearch",
    "OrderStatus",
]
