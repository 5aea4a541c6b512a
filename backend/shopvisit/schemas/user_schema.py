# 요청/응답 스키마 정의 (Pydantic 모델)
# 필드 누락은 서비스 레이어에서 ValidationError 로 처리하므로 Optional 로 둡니다.

from typing import Optional

from pydantic import BaseModel, EmailStr


class UserCreate(BaseModel):
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class UserLogin(BaseModel):
    # 로그인은 형식 검사 없이 그대로 조회 (형식이 틀리면 일치하는 사용자가 없을 뿐)
    email: Optional[str] = None
    password: Optional[str] = None
