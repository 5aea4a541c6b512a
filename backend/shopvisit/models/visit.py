# Visit 모델
# - 고객의 매장 방문 1회 (입장/퇴장 시각, 구매 품목, 누적 합계)
# - total == sum(items[*].price) 가 유지되어야 함

from datetime import datetime
from typing import Annotated, List, Optional, Union

from beanie import Document, Indexed
from pydantic import BaseModel


class VisitItem(BaseModel):
    name: str
    price: Union[int, float]


class Visit(Document):
    user: str
    shop_id: str
    entered_at: Annotated[datetime, Indexed()]  # 최신순 정렬용
    exited_at: Optional[datetime] = None
    items: List[VisitItem] = []
    total: Union[int, float] = 0

    class Settings:
        name = "visits"
