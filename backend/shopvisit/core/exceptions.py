# 커스텀 예외 클래스 정의
# 주니어 개발자님께: 서비스 레이어는 HTTP를 모릅니다.
# 서비스는 아래 예외만 발생시키고, HTTP 상태 코드 변환은
# ERROR_STATUS_CODES 표 하나에서만 처리합니다 (register_exception_handlers 참고).

import logging
from typing import Dict, Type

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)


class ShopVisitError(Exception):
    """모든 워크플로 예외의 기본 클래스

    Attributes:
        message: 클라이언트에게 그대로 전달되는 평문 메시지
    """
    default_message = "Server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ShopVisitError):
    """필수 필드 누락 또는 형식 오류"""
    default_message = "Invalid request"


class AuthError(ShopVisitError):
    """잘못된 자격 증명 또는 OTP"""
    default_message = "Invalid credentials"


class NotFoundError(ShopVisitError):
    default_message = "Not found"


class ConflictError(ShopVisitError):
    """이미 존재하는 리소스 (중복 가입 등)"""
    default_message = "Already exists"


class ExpiredError(ShopVisitError):
    """만료된 OTP"""
    default_message = "Expired"


class ServerError(ShopVisitError):
    """예상하지 못한 실패 (DB 연결 불가 포함)"""


# 예외 → HTTP 상태 코드 매핑 표 (이 표 외에 상태 코드를 결정하는 곳은 없습니다)
ERROR_STATUS_CODES: Dict[Type[ShopVisitError], int] = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    AuthError: status.HTTP_401_UNAUTHORIZED,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    ExpiredError: status.HTTP_410_GONE,
    ServerError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


# 본문이 깨진 요청도 인증 실패로 응답하는 경로 (400 대신 401)
INVALID_BODY_ERRORS: Dict[str, ShopVisitError] = {
    "/login": AuthError("Invalid credentials"),
    "/verify-otp": AuthError("Invalid OTP"),
}


def status_code_for(exc: ShopVisitError) -> int:
    # 하위 클래스도 부모의 상태 코드를 따르도록 MRO 순서로 조회
    for cls in type(exc).__mro__:
        if cls in ERROR_STATUS_CODES:
            return ERROR_STATUS_CODES[cls]
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(ShopVisitError)
    async def shop_visit_error_handler(request: Request, exc: ShopVisitError):
        code = status_code_for(exc)
        if code >= 500:
            logger.error(f"[{request.method} {request.url.path}] {exc.message}")
        return PlainTextResponse(exc.message, status_code=code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        # 주니어 개발자님께: FastAPI 기본값은 422지만, 이 API는 400으로 통일합니다.
        # 입력값(비밀번호 등)은 로그에 남기지 않음
        fields = [".".join(str(p) for p in e.get("loc", ())) + ":" + e.get("type", "") for e in exc.errors()]
        logger.info(f"[{request.method} {request.url.path}] 요청 검증 실패: {fields}")
        error = INVALID_BODY_ERRORS.get(request.url.path)
        if error is not None:
            return PlainTextResponse(error.message, status_code=status_code_for(error))
        return PlainTextResponse("Invalid request body", status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(PyMongoError)
    async def storage_error_handler(request: Request, exc: PyMongoError):
        logger.error(f"[{request.method} {request.url.path}] MongoDB 오류: {exc}", exc_info=exc)
        return PlainTextResponse(ServerError.default_message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(f"[{request.method} {request.url.path}] 처리되지 않은 예외: {exc}", exc_info=exc)
        return PlainTextResponse(ServerError.default_message, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
