# User 도메인 모델 (Beanie Document)
# - 이메일, 비밀번호 해시, 생성일
# - 이메일은 unique 인덱스 (동시 가입 경쟁 조건을 저장소 레벨에서 차단)

from datetime import datetime, timezone
from typing import Annotated

from beanie import Document, Indexed
from pydantic import Field


class User(Document):
    email: Annotated[str, Indexed(unique=True)]  # 중복 방지 인덱스
    hashed_password: str = Field(repr=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    class Settings:
        name = "users"  # 컬렉션명
