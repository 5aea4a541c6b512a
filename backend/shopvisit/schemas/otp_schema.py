# OTP 요청 스키마

from typing import Optional

from pydantic import BaseModel, ConfigDict


class OtpRequest(BaseModel):
    # 프론트엔드가 숫자로 보내도 문자열 코드로 저장
    model_config = ConfigDict(coerce_numbers_to_str=True)

    email: Optional[str] = None
    otp: Optional[str] = None
