# OTP 서비스 레이어
# 이메일별 상태: NONE -> ISSUED -> (VERIFIED | EXPIRED) -> NONE
# - 발급: 기존 코드 전부 삭제 후 새 코드 저장 (동시 발급 시 마지막 요청이 이김)
# - 검증: 성공/만료 모두 해당 이메일의 코드를 삭제 (한 번 쓰면 끝)

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends

from ..core.config import settings
from ..core.exceptions import AuthError, ExpiredError, ValidationError
from ..models.otp import OTP
from ..repositories.otp_repository import OtpRepository

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OtpService:
    def __init__(self, repo: OtpRepository, ttl_minutes: Optional[int] = None):
        self.repo = repo
        self.ttl = timedelta(minutes=ttl_minutes or settings.OTP_TTL_MINUTES)

    async def issue(self, email: str, otp: str) -> OTP:
        if not email or not otp:
            raise ValidationError("Email and OTP required")
        await self.repo.delete_for_email(email)
        expires_at = _utcnow() + self.ttl
        record = await self.repo.create(email, otp, expires_at)
        # 코드 값은 로그에 남기지 않음
        logger.info(f"[OtpService] OTP 발급: {email} (만료: {expires_at.isoformat()})")
        return record

    async def verify(self, email: str, otp: str) -> None:
        if not email or not otp:
            raise AuthError("Invalid OTP")
        record = await self.repo.find(email, otp)
        if record is None:
            # 발급된 적 없음 / 코드 불일치를 구분하지 않음
            raise AuthError("Invalid OTP")

        await self.repo.delete_for_email(email)

        expires_at = record.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if expires_at < _utcnow():
            logger.info(f"[OtpService] 만료된 OTP: {email}")
            raise ExpiredError("OTP expired")
        logger.info(f"[OtpService] OTP 검증 성공: {email}")


def get_otp_service(repo: OtpRepository = Depends(OtpRepository)) -> OtpService:
    return OtpService(repo)
