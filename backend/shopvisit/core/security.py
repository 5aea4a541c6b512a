# 보안 유틸리티
# - 비밀번호 해싱/검증 (bcrypt, 솔트 포함)
# 참고: 이 API는 로그인 시 토큰을 발급하지 않습니다. 성공 여부는 상태 코드로만 전달됩니다.

from passlib.context import CryptContext

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)
