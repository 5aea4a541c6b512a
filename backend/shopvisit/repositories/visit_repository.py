# 방문 저장소 레이어
# - 품목 추가는 $push + $inc 를 한 번의 update 로 처리 (read-modify-write 없음)

from typing import List, Optional

from beanie import PydanticObjectId, UpdateResponse
from beanie.operators import Inc, Push
from bson import ObjectId
from fastapi import Depends

from ..core.database import Database, get_database
from ..models.visit import Visit, VisitItem
from ..schemas.visit_schema import VisitCreate


def _to_object_id(visit_id: str) -> Optional[PydanticObjectId]:
    # 형식이 잘못된 id 는 "없는 방문" 으로 취급
    if not ObjectId.is_valid(visit_id):
        return None
    return PydanticObjectId(visit_id)


class VisitRepository:
    def __init__(self, database: Database = Depends(get_database)):
        # 연결 여부 확인용 의존성. 쿼리는 init_beanie 로 바인딩된 Document 를 사용합니다.
        del database

    async def create(self, payload: VisitCreate) -> Visit:
        visit = Visit(
            user=payload.user,
            shop_id=payload.shop_id,
            entered_at=payload.entered_at,
            exited_at=payload.exited_at,
            items=[VisitItem(name=i.name, price=i.price) for i in payload.items],
            total=payload.total,
        )
        return await visit.insert()

    async def get(self, visit_id: str) -> Optional[Visit]:
        oid = _to_object_id(visit_id)
        if oid is None:
            return None
        return await Visit.get(oid)

    async def push_item(self, visit_id: str, item: VisitItem) -> Optional[Visit]:
        oid = _to_object_id(visit_id)
        if oid is None:
            return None
        return await Visit.find_one(Visit.id == oid).update(
            Push({Visit.items: item.model_dump()}),
            Inc({Visit.total: item.price}),
            response_type=UpdateResponse.NEW_DOCUMENT,
        )

    async def list_recent(self) -> List[Visit]:
        return await Visit.find_all().sort(-Visit.entered_at).to_list()
