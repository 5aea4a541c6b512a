# 방문 서비스 레이어
# - 방문 생성/조회/목록, 품목 추가

import logging
from typing import Any, List

from fastapi import Depends

from ..core.exceptions import NotFoundError, ValidationError
from ..models.visit import Visit, VisitItem
from ..repositories.visit_repository import VisitRepository
from ..schemas.visit_schema import VisitCreate, is_number

logger = logging.getLogger(__name__)


class VisitService:
    def __init__(self, repo: VisitRepository):
        self.repo = repo

    async def create_visit(self, payload: VisitCreate) -> str:
        visit = await self.repo.create(payload)
        logger.info(f"[VisitService] 방문 저장: {visit.id} (user={payload.user}, shop={payload.shop_id})")
        return str(visit.id)

    async def get_visit(self, visit_id: str) -> Visit:
        visit = await self.repo.get(visit_id)
        if visit is None:
            raise NotFoundError("Visit not found")
        return visit

    async def add_product(self, visit_id: str, name: Any, price: Any) -> Visit:
        await self.get_visit(visit_id)
        if not name or not isinstance(name, str) or not is_number(price):
            raise ValidationError("Invalid product format")

        updated = await self.repo.push_item(visit_id, VisitItem(name=name, price=price))
        if updated is None:
            # 조회 이후 삭제된 경우
            raise NotFoundError("Visit not found")
        logger.info(f"[VisitService] 품목 추가: {visit_id} {name} {price} -> total {updated.total}")
        return updated

    async def list_visits(self) -> List[Visit]:
        return await self.repo.list_recent()


def get_visit_service(repo: VisitRepository = Depends(VisitRepository)) -> VisitService:
    return VisitService(repo)
