# 인증 서비스 레이어
# - 이메일 중복 체크, 회원가입 (bcrypt 해시 저장)
# - 로그인 (비밀번호 검증만, 토큰 발급 없음)

import logging

from email_validator import EmailNotValidError, validate_email
from fastapi import Depends
from pymongo.errors import DuplicateKeyError

from ..core.exceptions import AuthError, ConflictError, ValidationError
from ..core.security import get_password_hash, verify_password
from ..models.user import User
from ..repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


def normalize_email(email: str) -> str:
    # 가입 시 EmailStr 과 같은 정규화 (도메인 소문자화). 형식이 틀리면 원본 그대로
    try:
        return validate_email(email, check_deliverability=False).normalized
    except EmailNotValidError:
        return email


class AuthService:
    def __init__(self, repo: UserRepository):
        self.repo = repo

    async def register(self, email: str, password: str) -> User:
        if not email or not password:
            raise ValidationError("Email and password required")
        email = normalize_email(email)
        existing = await self.repo.get_by_email(email)
        if existing:
            raise ConflictError("User already exists")
        hashed = get_password_hash(password)
        try:
            user = await self.repo.create(email, hashed)
        except DuplicateKeyError:
            # 조회와 삽입 사이에 같은 이메일로 가입한 요청이 있었던 경우 (unique 인덱스)
            raise ConflictError("User already exists")
        logger.info(f"[AuthService] 회원가입 완료: {email}")
        return user

    async def login(self, email: str, password: str) -> User:
        if not email or not password:
            raise AuthError("Invalid credentials")
        email = normalize_email(email)
        user = await self.repo.get_by_email(email)
        if not user or not verify_password(password, user.hashed_password):
            raise AuthError("Invalid credentials")
        logger.info(f"[AuthService] 로그인 성공: {email}")
        return user


def get_auth_service(repo: UserRepository = Depends(UserRepository)) -> AuthService:
    return AuthService(repo)
