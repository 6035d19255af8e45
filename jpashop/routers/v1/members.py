"""Member router: REFERENCE pattern for all v1 routers.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject the DB session via Depends
  3. Instantiate the service with the session
  4. Call service methods and wrap result in response envelope

Copy this file when building Item, Delivery, etc. routers.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from jpashop.core.response import DataResponse
from jpashop.db.base import get_db
from jpashop.schemas.member import MemberCreate, MemberOut
from jpashop.schemas.order import OrderOut
from jpashop.services.member import MemberService

router = APIRouter(prefix="/members", tags=["Members"])


@router.get("", response_model=DataResponse[list[MemberOut]])
async def list_members(session: AsyncSession = Depends(get_db)):
    members = await MemberService(session).list_members()
    return {"data": [MemberOut.model_validate(m) for m in members]}


@router.post("", response_model=DataResponse[MemberOut], status_code=status.HTTP_201_CREATED)
async def join_member(
    body: MemberCreate,
    session: AsyncSession = Depends(get_db),
):
    """Register a new member. Names must be unique."""
    member = await MemberService(session).join(body)
    return {"data": MemberOut.model_validate(member)}


@router.get("/{member_id}", response_model=DataResponse[MemberOut])
async def get_member(
    member_id: int,
    session: AsyncSession = Depends(get_db),
):
    member = await MemberService(session).get_member(member_id)
    return {"data": MemberOut.model_validate(member)}


@router.get("/{member_id}/orders", response_model=DataResponse[list[OrderOut]])
async def list_member_orders(
    member_id: int,
    session: AsyncSession = Depends(get_db),
):
    """All orders of one member, oldest first. Not capped."""
    orders = await MemberService(session).get_member_orders(member_id)
    return {"data": [OrderOut.model_validate(o) for o in orders]}
