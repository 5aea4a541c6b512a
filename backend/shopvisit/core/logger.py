# 로깅 설정
# - 앱 시작 시 1회 호출 (create_app 참고)
# - 각 모듈은 logging.getLogger(__name__) 사용

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    # pymongo 드라이버의 DEBUG 로그는 너무 많으므로 WARNING 이상만
    logging.getLogger("pymongo").setLevel(logging.WARNING)
