# OTP 모델
# - 이메일별로 논리적으로 살아있는 코드는 최대 1개
#   (발급/검증 시 해당 이메일의 기존 레코드를 모두 삭제)

from datetime import datetime, timezone
from typing import Annotated

from beanie import Document, Indexed
from pydantic import Field


class OTP(Document):
    email: Annotated[str, Indexed()]
    otp: str = Field(repr=False)
    expires_at: datetime
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "otps"
