# OTP 라우터
# - POST /send-otp   : 프론트엔드가 생성/발송한 코드를 저장
# - POST /verify-otp : 코드 검증 (성공/만료 모두 소모됨)

from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from ..schemas.otp_schema import OtpRequest
from ..services.otp_service import OtpService, get_otp_service

router = APIRouter(tags=["otp"])


@router.post("/send-otp", response_class=PlainTextResponse, summary="OTP 저장 (5분 유효)")
async def send_otp(payload: OtpRequest, service: OtpService = Depends(get_otp_service)):
    await service.issue(payload.email, payload.otp)
    return "OTP stored"


@router.post("/verify-otp", response_class=PlainTextResponse, summary="OTP 검증")
async def verify_otp(payload: OtpRequest, service: OtpService = Depends(get_otp_service)):
    await service.verify(payload.email, payload.otp)
    return "OTP verified"
