# 사용자 저장소 레이어
# - 데이터 접근(조회/생성)만 담당 (서비스 로직 분리)

from typing import Optional

from fastapi import Depends

from ..core.database import Database, get_database
from ..models.user import User


class UserRepository:
    def __init__(self, database: Database = Depends(get_database)):
        # 연결 여부 확인용 의존성. 쿼리는 init_beanie 로 바인딩된 Document 를 사용합니다.
        del database

    async def get_by_email(self, email: str) -> Optional[User]:
        return await User.find_one(User.email == email)

    async def create(self, email: str, hashed_password: str) -> User:
        # 이메일 unique 인덱스 위반 시 pymongo DuplicateKeyError 발생
        user = User(email=email, hashed_password=hashed_password)
        return await user.insert()
