# MongoDB 연결 관리
# - Database 객체를 명시적으로 생성하고 앱 시작 시 connect(), 종료 시 close()
# - 전역 연결 대신 app.state.database 에 보관하고 get_database 의존성으로 주입

import logging
from typing import List, Optional, Type

from beanie import Document, init_beanie
from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient

from .exceptions import ServerError
from .retry import create_db_retry_decorator
from ..models.otp import OTP
from ..models.user import User
from ..models.visit import Visit

logger = logging.getLogger(__name__)

DOCUMENT_MODELS: List[Type[Document]] = [User, OTP, Visit]


class Database:
    def __init__(
        self,
        uri: str,
        default_db: str = "shop_visits",
        server_selection_timeout_ms: int = 5000,
        connect_attempts: int = 3,
        connect_wait_seconds: float = 1.0,
    ):
        self.uri = uri
        self.default_db = default_db
        self.server_selection_timeout_ms = server_selection_timeout_ms
        self.connect_attempts = connect_attempts
        self.connect_wait_seconds = connect_wait_seconds
        self.client: Optional[AsyncIOMotorClient] = None

    @property
    def is_connected(self) -> bool:
        return self.client is not None

    async def connect(self) -> None:
        # 주니어 개발자님께: tz_aware=True 로 두면 MongoDB에서 읽은 datetime이
        # UTC 타임존 정보를 가집니다. OTP 만료 비교가 항상 aware 끼리 이루어집니다.
        client = AsyncIOMotorClient(
            self.uri,
            serverSelectionTimeoutMS=self.server_selection_timeout_ms,
            tz_aware=True,
        )
        ping = create_db_retry_decorator(
            max_attempts=self.connect_attempts,
            initial_wait=self.connect_wait_seconds,
        )(self._ping)
        try:
            await ping(client)
            db = client.get_default_database(self.default_db)
            await init_beanie(database=db, document_models=DOCUMENT_MODELS)
        except Exception:
            client.close()
            raise
        self.client = client
        logger.info(f"MongoDB 연결 성공 (db={db.name})")

    @staticmethod
    async def _ping(client: AsyncIOMotorClient) -> None:
        await client.admin.command("ping")

    async def close(self) -> None:
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("MongoDB 연결 종료")


def get_database(request: Request) -> Database:
    database: Optional[Database] = getattr(request.app.state, "database", None)
    if database is None or not database.is_connected:
        raise ServerError("Database unavailable")
    return database
