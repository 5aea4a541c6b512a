# 관리자 대시보드 차트용 분석 데이터
# 참고: 저장된 방문 데이터로 계산하지 않는 고정 표입니다.

import copy
from typing import Dict, List, Optional, Union

ANALYTICS_DATA: Dict[str, Dict[str, List[Union[str, int]]]] = {
    "minutes": {"labels": ["Now", "-1m", "-2m"], "values": [4, 2, 3]},
    "hourly": {"labels": ["12 AM", "1 AM", "2 AM"], "values": [15, 12, 19]},
    "daily": {"labels": ["Mon", "Tue", "Wed"], "values": [28, 35, 31]},
    "monthly": {"labels": ["Jan", "Feb", "Mar"], "values": [120, 150, 180]},
    "yearly": {"labels": ["2022", "2023", "2024"], "values": [650, 720, 810]},
}


def get_analytics(range_key: Optional[str]) -> dict:
    data = ANALYTICS_DATA.get(range_key or "")
    if data is None:
        return {"labels": [], "values": []}
    return copy.deepcopy(data)
