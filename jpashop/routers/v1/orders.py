"""Order router: search, lookup, placement and cancellation."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.core.response import DataResponse, ListResponse, listed
from jpashop.db.base import get_db
from jpashop.domain.order import OrderSearch, OrderStatus
from jpashop.schemas.order import OrderCreate, OrderOut
from jpashop.services.order import OrderService

router = APIRouter(prefix="/orders", tags=["Orders"])


@router.get("", response_model=ListResponse[OrderOut])
async def search_orders(
    order_status: Optional[OrderStatus] = Query(default=None, alias="status", description="Filter by status"),
    member_name: Optional[str] = Query(default=None, alias="memberName", description="Member name contains"),
    session: AsyncSession = Depends(get_db),
):
    """Search orders. Both filters are optional; a blank memberName is ignored."""
    svc = OrderService(session)
    orders = await svc.search_orders(
        OrderSearch(order_status=order_status, member_name=member_name)
    )
    return listed([OrderOut.model_validate(o) for o in orders], svc.search_limit)


@router.post("", response_model=DataResponse[OrderOut], status_code=status.HTTP_201_CREATED)
async def place_order(
    body: OrderCreate,
    session: AsyncSession = Depends(get_db),
):
    order = await OrderService(session).place_order(body)
    return {"data": OrderOut.model_validate(order)}


@router.get("/{order_id}", response_model=DataResponse[OrderOut])
async def get_order(
    order_id: int,
    session: AsyncSession = Depends(get_db),
):
    order = await OrderService(session).get_order(order_id)
    return {"data": OrderOut.model_validate(order)}


@router.post("/{order_id}/cancel", response_model=DataResponse[OrderOut])
async def cancel_order(
    order_id: int,
    session: AsyncSession = Depends(get_db),
):
    order = await OrderService(session).cancel_order(order_id)
    return {"data": OrderOut.model_validate(order)}
