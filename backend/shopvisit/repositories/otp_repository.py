# OTP 저장소 레이어

from datetime import datetime
from typing import Optional

from fastapi import Depends

from ..core.database import Database, get_database
from ..models.otp import OTP


class OtpRepository:
    def __init__(self, database: Database = Depends(get_database)):
        # 연결 여부 확인용 의존성. 쿼리는 init_beanie 로 바인딩된 Document 를 사용합니다.
        del database

    async def delete_for_email(self, email: str) -> None:
        await OTP.find(OTP.email == email).delete()

    async def create(self, email: str, otp: str, expires_at: datetime) -> OTP:
        record = OTP(email=email, otp=otp, expires_at=expires_at)
        return await record.insert()

    async def find(self, email: str, otp: str) -> Optional[OTP]:
        # 대소문자 구분, 정규화 없음
        return await OTP.find_one(OTP.email == email, OTP.otp == otp)
