# FastAPI 진입점
# - MongoDB(Beanie) 연결: 시작 시 connect, 종료 시 close (app.state.database)
# - 라우터 등록
# - CORS 설정 (FRONTEND_URL, credentials 허용)
# - 예외 -> HTTP 상태 코드 매핑 등록 (core/exceptions.py)

import logging
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.analytics import router as analytics_router
from .api.auth import router as auth_router
from .api.otp import router as otp_router
from .api.visits import router as visits_router
from .core.config import settings
from .core.database import Database
from .core.exceptions import register_exception_handlers
from .core.logger import configure_logging

logger = logging.getLogger(__name__)


def create_app(database: Database = None) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title="매장 방문 기록 API",
        description="회원가입/로그인, OTP, 매장 방문 기록, 대시보드 분석",
        version=settings.APP_VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    app.state.database = database or Database(
        settings.MONGO_URI,
        default_db=settings.MONGO_DEFAULT_DB,
        server_selection_timeout_ms=settings.MONGO_SERVER_SELECTION_TIMEOUT_MS,
        connect_attempts=settings.DB_CONNECT_ATTEMPTS,
        connect_wait_seconds=settings.DB_CONNECT_WAIT_SECONDS,
    )

    @app.on_event("startup")
    async def app_init():
        try:
            await app.state.database.connect()
        except Exception as e:
            # MongoDB 연결 실패 시에도 서버는 시작됩니다.
            # DB가 필요한 요청은 get_database 에서 500 (Database unavailable) 으로 응답합니다.
            logger.error(f"MongoDB 연결 실패: {e}")
            logger.warning(f"MONGO_URI를 확인하세요: {settings.MONGO_URI}")

    @app.on_event("shutdown")
    async def app_shutdown():
        await app.state.database.close()

    @app.get("/", tags=["health"])
    async def root():
        return {"ok": True, "app": settings.APP_NAME, "time": datetime.now(timezone.utc).isoformat()}

    @app.get("/health", tags=["health"])
    async def health_check():
        return {
            "status": "ok",
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "database": app.state.database.is_connected,
        }

    app.include_router(auth_router)
    app.include_router(otp_router)
    app.include_router(visits_router)
    app.include_router(analytics_router)
    return app


app = create_app()


def run():
    uvicorn.run("shopvisit.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
