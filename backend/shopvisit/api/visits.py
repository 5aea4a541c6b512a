# 방문 라우터
# - POST /visits                      : 방문 생성
# - GET  /visits                      : 전체 목록 (입장 시각 최신순)
# - GET  /visits/{visit_id}           : 단건 조회
# - POST /visits/{visit_id}/add-product : 품목 추가 + 합계 증가

from typing import List

from fastapi import APIRouter, Depends, status

from ..schemas.visit_schema import AddProductRequest, ProductAdded, VisitCreate, VisitCreated, VisitPublic
from ..services.visit_service import VisitService, get_visit_service

router = APIRouter(prefix="/visits", tags=["visits"])


@router.post("", response_model=VisitCreated, status_code=status.HTTP_201_CREATED, summary="방문 저장")
async def create_visit(payload: VisitCreate, service: VisitService = Depends(get_visit_service)):
    visit_id = await service.create_visit(payload)
    return VisitCreated(visit_id=visit_id)


@router.get("", response_model=List[VisitPublic], summary="방문 목록 (enteredAt 내림차순)")
async def list_visits(service: VisitService = Depends(get_visit_service)):
    visits = await service.list_visits()
    return [VisitPublic.from_visit(v) for v in visits]


@router.get("/{visit_id}", response_model=VisitPublic, summary="방문 단건 조회")
async def get_visit(visit_id: str, service: VisitService = Depends(get_visit_service)):
    visit = await service.get_visit(visit_id)
    return VisitPublic.from_visit(visit)


@router.post("/{visit_id}/add-product", response_model=ProductAdded, summary="방문에 품목 추가")
async def add_product(visit_id: str, payload: AddProductRequest,
                      service: VisitService = Depends(get_visit_service)):
    visit = await service.add_product(visit_id, payload.name, payload.price)
    return ProductAdded(updated_visit=VisitPublic.from_visit(visit))
