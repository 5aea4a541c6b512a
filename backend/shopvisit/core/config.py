# 설정 모듈
# - .env 값들을 한 곳에서 관리
# - 기본값을 제공하여 로컬 실행 편의성 확보

from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 프로젝트 루트 디렉토리 경로 찾기
# 주니어 개발자님께: 이 파일은 backend/shopvisit/core/config.py에 있으므로,
# 3단계 상위로 올라가면 프로젝트 루트가 됩니다.
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent
ENV_FILE_PATH = PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    APP_NAME: str = "shop-visit-api"
    APP_VERSION: str = "1.0.0"
    ENV: str = "dev"
    HOST: str = "0.0.0.0"
    PORT: int = 3000

    MONGO_URI: str = "mongodb://localhost:27017/shop_visits"
    # 기본 데이터베이스 이름. MONGO_URI에 DB 이름이 없을 때 사용합니다.
    MONGO_DEFAULT_DB: str = "shop_visits"
    MONGO_SERVER_SELECTION_TIMEOUT_MS: int = 5000
    # 시작 시 MongoDB ping 재시도 설정 (tenacity)
    DB_CONNECT_ATTEMPTS: int = 3
    DB_CONNECT_WAIT_SECONDS: float = 1.0

    # 프론트엔드 주소 (쉼표로 여러 개 지정 가능). credentials 허용 CORS에 사용됩니다.
    FRONTEND_URL: str = "http://localhost:3000"

    OTP_TTL_MINUTES: int = Field(default=5, ge=1, description="OTP 유효 시간(분)")

    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH) if ENV_FILE_PATH.exists() else ".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

    @property
    def cors_origins(self) -> List[str]:
        return [o.strip() for o in self.FRONTEND_URL.split(",") if o.strip()]


settings = Settings()
