"""
Unit tests for OrderRepository: save, find_one and the filtered find_all.
"""

from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError, PendingRollbackError

from jpashop.domain import Member, Order, OrderSearch, OrderStatus
from jpashop.repositories.order import OrderRepository


def _ids(orders: list[Order]) -> list[int]:
    return [o.id for o in orders]


def _sql(expr) -> str:
    return str(expr.compile(compile_kwargs={"literal_binds": True}))


class TestPredicates:
    """Tests for the per-field predicate builders."""

    def test_status_unset_gives_no_predicate(self):
        assert OrderRepository._status_eq(None) is None

    def test_status_set_compares_column(self):
        sql = _sql(OrderRepository._status_eq(OrderStatus.CANCELED))
        assert sql.startswith("orders.status = ")
        assert "CANCELED" in sql

    @pytest.mark.parametrize("name", [None, "", "   ", "\t\n"])
    def test_blank_name_gives_no_predicate(self, name):
        assert OrderRepository._name_like(name) is None

    def test_name_wrapped_as_substring_pattern(self):
        sql = _sql(OrderRepository._name_like("Bob"))
        assert sql.startswith("members.name LIKE ")
        assert "%Bob%" in sql


class TestFindAll:
    """Tests for searching orders with optional criteria."""

    @pytest.mark.asyncio
    async def test_no_filters_returns_everything(self, shop):
        """Should return all orders in id order when no criteria are set."""
        orders = await OrderRepository(shop).find_all(OrderSearch())
        assert _ids(orders) == [1, 2, 3]

    @pytest.mark.asyncio
    async def test_status_filter(self, shop):
        """Should return exactly the orders with the given status."""
        repo = OrderRepository(shop)

        ordered = await repo.find_all(OrderSearch(order_status=OrderStatus.ORDERED))
        canceled = await repo.find_all(OrderSearch(order_status=OrderStatus.CANCELED))

        assert _ids(ordered) == [1, 3]
        assert all(o.status == OrderStatus.ORDERED for o in ordered)
        assert _ids(canceled) == [2]

    @pytest.mark.asyncio
    async def test_name_filter_is_substring_match(self, shop):
        """Should match members whose name contains the given text."""
        orders = await OrderRepository(shop).find_all(OrderSearch(member_name="Bob"))
        assert _ids(orders) == [2, 3]
        assert all("Bob" in o.member.name for o in orders)

    @pytest.mark.asyncio
    async def test_name_filter_middle_of_name(self, shop):
        orders = await OrderRepository(shop).find_all(OrderSearch(member_name="lic"))
        assert _ids(orders) == [1]

    @pytest.mark.asyncio
    async def test_name_keeps_like_wildcards(self, shop):
        """Should pass LIKE wildcards in the name through to the store."""
        orders = await OrderRepository(shop).find_all(OrderSearch(member_name="B_b"))
        assert _ids(orders) == [2, 3]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("blank", ["", "   "])
    async def test_blank_name_behaves_like_unset(self, shop, blank):
        repo = OrderRepository(shop)
        with_blank = await repo.find_all(
            OrderSearch(order_status=OrderStatus.ORDERED, member_name=blank)
        )
        without = await repo.find_all(OrderSearch(order_status=OrderStatus.ORDERED))
        assert _ids(with_blank) == _ids(without) == [1, 3]

    @pytest.mark.asyncio
    async def test_both_filters(self, shop):
        """ORDERED + 'Bob' should only match Bobby's order."""
        orders = await OrderRepository(shop).find_all(
            OrderSearch(order_status=OrderStatus.ORDERED, member_name="Bob")
        )
        assert _ids(orders) == [3]

    @pytest.mark.asyncio
    async def test_both_filters_equal_intersection(self, shop):
        repo = OrderRepository(shop)
        for status in OrderStatus:
            for name in ("A", "Bob", "by", "zzz"):
                by_status = set(_ids(await repo.find_all(OrderSearch(order_status=status))))
                by_name = set(_ids(await repo.find_all(OrderSearch(member_name=name))))
                both = _ids(
                    await repo.find_all(OrderSearch(order_status=status, member_name=name))
                )
                assert set(both) == by_status & by_name

    @pytest.mark.asyncio
    async def test_no_match_returns_empty_list(self, shop):
        orders = await OrderRepository(shop).find_all(OrderSearch(member_name="Carol"))
        assert orders == []

    @pytest.mark.asyncio
    async def test_orders_without_member_are_excluded(self, shop):
        """Should skip orders whose member cannot be joined."""
        orphan = Order(status=OrderStatus.ORDERED)
        repo = OrderRepository(shop)
        await repo.save(orphan)

        orders = await repo.find_all(OrderSearch())
        assert orphan.id not in _ids(orders)
        assert _ids(orders) == [1, 2, 3]
        # Still reachable by id
        assert await repo.find_one(orphan.id) is orphan

    @pytest.mark.asyncio
    async def test_members_are_loaded_with_results(self, shop):
        orders = await OrderRepository(shop).find_all(OrderSearch())
        assert [o.member.name for o in orders] == ["Alice", "Bob", "Bobby"]

    @pytest.mark.asyncio
    async def test_custom_limit_caps_in_id_order(self, shop):
        orders = await OrderRepository(shop, limit=2).find_all(OrderSearch())
        assert _ids(orders) == [1, 2]

    @pytest.mark.asyncio
    async def test_default_limit_is_1000(self, session):
        """Should never return more than 1000 orders by default."""
        member = Member(name="Bulk")
        session.add(member)
        session.add_all([Order(member=member) for _ in range(1005)])
        await session.flush()

        repo = OrderRepository(session)
        orders = await repo.find_all(OrderSearch())

        assert repo.limit == 1000
        assert len(orders) == 1000
        assert _ids(orders) == list(range(1, 1001))


class TestFindOne:
    """Tests for id lookups."""

    @pytest.mark.asyncio
    async def test_unknown_id_returns_none(self, shop):
        assert await OrderRepository(shop).find_one(999) is None

    @pytest.mark.asyncio
    async def test_known_id(self, shop):
        order = await OrderRepository(shop).find_one(2)
        assert order is not None
        assert order.status == OrderStatus.CANCELED
        assert order.member.name == "Bob"


class TestSave:
    """Tests for registering new orders."""

    @pytest.mark.asyncio
    async def test_save_assigns_id_and_defaults(self, session):
        member = Member(name="Dana")
        session.add(member)
        order = Order(member=member)

        result = await OrderRepository(session).save(order)

        assert result is None
        assert order.id is not None
        assert order.status == OrderStatus.ORDERED
        assert order.order_date is not None

    @pytest.mark.asyncio
    async def test_read_your_write(self, session):
        """Should find a saved order in the same session."""
        member = Member(name="Eve")
        order = Order(member=member, status=OrderStatus.CANCELED)
        repo = OrderRepository(session)

        await repo.save(order)
        found = await repo.find_one(order.id)

        assert found is order
        assert found.status == OrderStatus.CANCELED
        assert found.member.name == "Eve"

    @pytest.mark.asyncio
    async def test_saved_order_visible_to_search(self, shop):
        repo = OrderRepository(shop)
        member = Member(name="Bobbie")
        await repo.save(Order(member=member))

        orders = await repo.find_all(
            OrderSearch(order_status=OrderStatus.ORDERED, member_name="Bob")
        )
        assert _ids(orders) == [3, 4]

    @pytest.mark.asyncio
    async def test_store_errors_propagate_unchanged(self, session):
        """Should let the store's own exception through untouched."""
        order = Order(member=Member(name=None))
        with pytest.raises(IntegrityError):
            await OrderRepository(session).save(order)

    @pytest.mark.asyncio
    async def test_save_on_invalid_session_raises(self, session):
        """Should surface the session's own error once a flush has failed."""
        repo = OrderRepository(session)
        with pytest.raises(IntegrityError):
            await repo.save(Order(member=Member(name=None)))

        # No rollback: the session's transaction is now unusable
        with pytest.raises(PendingRollbackError):
            await repo.save(Order(member=Member(name="Frank")))
