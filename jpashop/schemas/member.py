"""Member Pydantic schemas (request DTOs and response models)."""


from pydantic import Field

from jpashop.schemas.common import CamelModel, UTCDateTime

class MemberCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    city: str | None = None
    street: str | None = None
    zipcode: str | None = None

class MemberSummary(CamelModel):
    id: int
    name: str

class MemberOut(CamelModel):
    id: int
    name: str
    city: str | None = None
    street: str | None = None
    zipcode: str | None = None
    created_at: UTCDateTime
    updated_at: UTCDateTime
