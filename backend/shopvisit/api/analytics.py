# 분석 라우터
# - GET /analytics?range=minutes|hourly|daily|monthly|yearly

from typing import Union

from fastapi import APIRouter, Query

from ..schemas.analytics_schema import AnalyticsResponse
from ..services.analytics_service import get_analytics

router = APIRouter(tags=["analytics"])


@router.get("/analytics", response_model=AnalyticsResponse, summary="대시보드 차트 데이터")
async def analytics(range_key: Union[str, None] = Query(default=None, alias="range")):
    return get_analytics(range_key)
