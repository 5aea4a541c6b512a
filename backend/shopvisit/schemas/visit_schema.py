# 방문 요청/응답 스키마
# - JSON 은 camelCase (shopId, enteredAt ...), 파이썬 쪽은 snake_case
# - 알 수 없는 필드는 거부 (extra="forbid")

import math
from datetime import datetime, timezone
from typing import Any, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

# 정수 가격은 JSON 에서도 정수로 유지 (10 -> 10, 10.5 -> 10.5)
Number = Union[int, float]


def is_number(value: Any) -> bool:
    """JSON number 인지 확인 (bool, 숫자 문자열, NaN/Infinity 는 제외)"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def _as_utc(value: Optional[datetime]) -> Optional[datetime]:
    # 타임존 없는 시각은 UTC 로 간주
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class VisitItemIn(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    price: Number

    @field_validator("price", mode="before")
    @classmethod
    def price_must_be_number(cls, v):
        if not is_number(v):
            raise ValueError("price must be a number")
        return v


class VisitCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")

    user: str = Field(min_length=1)
    shop_id: str = Field(min_length=1)
    entered_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    exited_at: Optional[datetime] = None
    items: List[VisitItemIn] = []
    # 생략하면 items 합계로 계산
    total: Optional[Number] = None

    @field_validator("entered_at", "exited_at")
    @classmethod
    def normalize_tz(cls, v):
        return _as_utc(v)

    @field_validator("total", mode="before")
    @classmethod
    def total_must_be_number(cls, v):
        if v is not None and not is_number(v):
            raise ValueError("total must be a number")
        return v

    @model_validator(mode="after")
    def check_total(self):
        items_sum = sum(i.price for i in self.items)
        if self.total is None:
            self.total = items_sum
        elif not math.isclose(self.total, items_sum, abs_tol=1e-9):
            raise ValueError(f"total {self.total} does not match items sum {items_sum}")
        if self.exited_at is not None and self.exited_at < self.entered_at:
            raise ValueError("exitedAt must not be earlier than enteredAt")
        return self


class AddProductRequest(BaseModel):
    # 값 검증은 VisitService.add_product 에서 (방문 존재 여부를 먼저 확인)
    name: Optional[Any] = None
    price: Optional[Any] = None


class VisitItemOut(BaseModel):
    name: str
    price: Number


class VisitPublic(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str = Field(alias="_id")
    user: str
    shop_id: str
    entered_at: datetime
    exited_at: Optional[datetime] = None
    items: List[VisitItemOut] = []
    total: Number

    @classmethod
    def from_visit(cls, visit) -> "VisitPublic":
        return cls(
            id=str(visit.id),
            user=visit.user,
            shop_id=visit.shop_id,
            entered_at=visit.entered_at,
            exited_at=visit.exited_at,
            items=[VisitItemOut(name=i.name, price=i.price) for i in visit.items],
            total=visit.total,
        )


class VisitCreated(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = "Visit saved"
    visit_id: str


class ProductAdded(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    message: str = "Product added"
    updated_visit: VisitPublic
