"""Order Pydantic schemas (request DTOs and response models)."""


from jpashop.domain.order import OrderStatus
from jpashop.schemas.common import CamelModel, UTCDateTime
from jpashop.schemas.member import MemberSummary

class OrderCreate(CamelModel):
    member_id: int

class OrderOut(CamelModel):
    id: int
    member: MemberSummary | None = None
    order_date: UTCDateTime
    status: OrderStatus
    created_at: UTCDateTime
    updated_at: UTCDateTime
