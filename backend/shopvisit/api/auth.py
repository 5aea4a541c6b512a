# 인증 라우터
# - 회원가입: POST /register
# - 로그인: POST /login

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse

from ..schemas.user_schema import UserCreate, UserLogin
from ..services.auth_service import AuthService, get_auth_service

router = APIRouter(tags=["auth"])


@router.post("/register", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED,
             summary="회원가입 (이메일 중복 체크 포함)")
async def register(payload: UserCreate, service: AuthService = Depends(get_auth_service)):
    await service.register(payload.email, payload.password)
    return "User registered"


@router.post("/login", response_class=PlainTextResponse, summary="로그인 (토큰 발급 없음)")
async def login(payload: UserLogin, service: AuthService = Depends(get_auth_service)):
    await service.login(payload.email, payload.password)
    return "Login successful"
