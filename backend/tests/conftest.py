# 테스트 공용 픽스처 (DB 의존성 없음)
# - 저장소를 메모리 구현으로 바꿔서 서비스/라우터를 검증합니다.

from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import DuplicateKeyError

from shopvisit.main import create_app
from shopvisit.repositories.otp_repository import OtpRepository
from shopvisit.repositories.user_repository import UserRepository
from shopvisit.repositories.visit_repository import VisitRepository


class FakeUserRepository:
    def __init__(self):
        self.users = {}

    async def get_by_email(self, email):
        return self.users.get(email)

    async def create(self, email, hashed_password):
        if email in self.users:
            raise DuplicateKeyError("E11000 duplicate key error collection: users index: email_1")
        user = SimpleNamespace(id=ObjectId(), email=email, hashed_password=hashed_password)
        self.users[email] = user
        return user


class FakeOtpRepository:
    def __init__(self):
        self.rows = []

    async def delete_for_email(self, email):
        self.rows = [r for r in self.rows if r.email != email]

    async def create(self, email, otp, expires_at):
        row = SimpleNamespace(id=ObjectId(), email=email, otp=otp, expires_at=expires_at)
        self.rows.append(row)
        return row

    async def find(self, email, otp):
        return next((r for r in self.rows if r.email == email and r.otp == otp), None)


class FakeVisitRepository:
    def __init__(self):
        self.visits = {}

    async def create(self, payload):
        visit = SimpleNamespace(
            id=ObjectId(),
            user=payload.user,
            shop_id=payload.shop_id,
            entered_at=payload.entered_at,
            exited_at=payload.exited_at,
            items=[SimpleNamespace(name=i.name, price=i.price) for i in payload.items],
            total=payload.total,
        )
        self.visits[str(visit.id)] = visit
        return visit

    async def get(self, visit_id):
        return self.visits.get(visit_id)

    async def push_item(self, visit_id, item):
        visit = self.visits.get(visit_id)
        if visit is None:
            return None
        visit.items.append(item)
        visit.total += item.price
        return visit

    async def list_recent(self):
        return sorted(self.visits.values(), key=lambda v: v.entered_at, reverse=True)


@pytest.fixture
def user_repo():
    return FakeUserRepository()


@pytest.fixture
def otp_repo():
    return FakeOtpRepository()


@pytest.fixture
def visit_repo():
    return FakeVisitRepository()


@pytest.fixture
def app(user_repo, otp_repo, visit_repo):
    application = create_app()
    application.dependency_overrides[UserRepository] = lambda: user_repo
    application.dependency_overrides[OtpRepository] = lambda: otp_repo
    application.dependency_overrides[VisitRepository] = lambda: visit_repo
    return application


@pytest.fixture
def client(app):
    # startup 이벤트(MongoDB 연결)는 실행하지 않음 (with 블록 미사용)
    return TestClient(app)

