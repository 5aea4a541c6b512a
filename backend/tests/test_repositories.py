# Beanie 저장소 테스트 - mongomock_motor 메모리 DB 위에서 실제 쿼리 실행
import asyncio
from datetime import datetime, timedelta, timezone

import pytest
from beanie import init_beanie
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import DuplicateKeyError

from shopvisit.core.database import DOCUMENT_MODELS
from shopvisit.models.visit import VisitItem
from shopvisit.repositories.otp_repository import OtpRepository
from shopvisit.repositories.user_repository import UserRepository
from shopvisit.repositories.visit_repository import VisitRepository
from shopvisit.schemas.visit_schema import VisitCreate


async def _init_db():
    client = AsyncMongoMockClient()
    await init_beanie(database=client.get_database("shop_visits_test"), document_models=DOCUMENT_MODELS)


def _payload(day=1):
    return VisitCreate(user="a@shop.com", shopId="shop-1", enteredAt=datetime(2024, 5, day, tzinfo=timezone.utc))


def test_push_item_appends_and_increments_total():
    async def scenario():
        await _init_db()
        repo = VisitRepository(None)
        visit = await repo.create(_payload())

        await repo.push_item(str(visit.id), VisitItem(name="Apple", price=10))
        updated = await repo.push_item(str(visit.id), VisitItem(name="Pear", price=5))
        assert [(i.name, i.price) for i in updated.items] == [("Apple", 10), ("Pear", 5)]
        assert updated.total == 15

        stored = await repo.get(str(visit.id))
        assert stored.total == 15
        assert len(stored.items) == 2

    asyncio.run(scenario())


def test_unknown_or_malformed_visit_id():
    async def scenario():
        await _init_db()
        repo = VisitRepository(None)
        assert await repo.get("garbage") is None
        assert await repo.get("65f000000000000000000000") is None
        assert await repo.push_item("garbage", VisitItem(name="Apple", price=1)) is None
        assert await repo.push_item("65f000000000000000000000", VisitItem(name="Apple", price=1)) is None

    asyncio.run(scenario())


def test_list_recent_sorted_by_entered_at_desc():
    async def scenario():
        await _init_db()
        repo = VisitRepository(None)
        for day in (2, 3, 1):
            await repo.create(_payload(day))
        visits = await repo.list_recent()
        assert [v.entered_at.day for v in visits] == [3, 2, 1]

    asyncio.run(scenario())


def test_otp_find_is_exact_and_delete_is_per_email():
    async def scenario():
        await _init_db()
        repo = OtpRepository(None)
        expires_at = datetime.now(timezone.utc) + timedelta(minutes=5)
        await repo.create("a@shop.com", "AbC", expires_at)
        await repo.create("b@shop.com", "AbC", expires_at)

        assert await repo.find("a@shop.com", "abc") is None
        assert await repo.find("a@shop.com", "AbC") is not None

        await repo.delete_for_email("a@shop.com")
        assert await repo.find("a@shop.com", "AbC") is None
        assert await repo.find("b@shop.com", "AbC") is not None

    asyncio.run(scenario())


def test_user_email_unique_index():
    async def scenario():
        await _init_db()
        repo = UserRepository(None)
        await repo.create("a@shop.com", "hash")
        assert (await repo.get_by_email("a@shop.com")).hashed_password == "hash"
        with pytest.raises(DuplicateKeyError):
            await repo.create("a@shop.com", "hash2")

    asyncio.run(scenario())
