# 방문 생성 스키마 검증
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from shopvisit.schemas.visit_schema import VisitCreate


def test_camel_case_input():
    visit = VisitCreate(user="u", shopId="s", enteredAt="2024-05-01T10:00:00Z")
    assert visit.shop_id == "s"
    assert visit.entered_at == datetime(2024, 5, 1, 10, tzinfo=timezone.utc)
    assert visit.items == []
    assert visit.total == 0


def test_naive_timestamp_is_utc():
    visit = VisitCreate(user="u", shopId="s", enteredAt="2024-05-01T10:00:00")
    assert visit.entered_at.tzinfo == timezone.utc


def test_total_computed_from_items():
    visit = VisitCreate(user="u", shopId="s", items=[{"name": "A", "price": 2.5}, {"name": "B", "price": 1}])
    assert visit.total == 3.5


def test_total_must_match_items():
    with pytest.raises(ValidationError):
        VisitCreate(user="u", shopId="s", items=[{"name": "A", "price": 2}], total=5)


@pytest.mark.parametrize("data", [
    {"shopId": "s"},
    {"user": "u"},
    {"user": "u", "shopId": "s", "color": "red"},
    {"user": "u", "shopId": "s", "items": [{"name": "A", "price": "2"}]},
    {"user": "u", "shopId": "s", "items": [{"name": "A", "price": True}]},
    {"user": "u", "shopId": "s", "items": [{"price": 2}]},
    {"user": "u", "shopId": "s", "enteredAt": "2024-05-02T00:00:00Z", "exitedAt": "2024-05-01T00:00:00Z"},
])
def test_malformed_visit_rejected(data):
    with pytest.raises(ValidationError):
        VisitCreate(**data)
