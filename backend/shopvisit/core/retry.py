# 재시도 로직 유틸리티
# 주니어 개발자님께: MongoDB 서버가 앱보다 늦게 뜨는 경우(예: docker compose)
# 시작 시 ping이 잠깐 실패할 수 있습니다. 이런 경우 몇 번 재시도하면 성공합니다.
# 워크플로(요청 처리) 안에서는 재시도하지 않습니다. 시작 시 연결에만 사용합니다.

import logging
from typing import Tuple, Type

from pymongo.errors import ConnectionFailure, ServerSelectionTimeoutError
from tenacity import (
    after_log,
    before_sleep_log,
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = logging.getLogger(__name__)


def create_db_retry_decorator(
    max_attempts: int = 3,
    initial_wait: float = 1.0,
    max_wait: float = 10.0,
    exceptions: Tuple[Type[Exception], ...] = (ConnectionFailure, ServerSelectionTimeoutError)
):
    """
    DB 연결용 재시도 데코레이터를 생성하는 팩토리 함수입니다.

    지수 백오프(Exponential Backoff):
    - 1번째 실패 후: initial_wait 대기
    - 이후 매번 2배, 최대 max_wait 까지

    모든 시도가 실패하면 마지막 예외를 그대로 다시 발생시킵니다 (reraise=True).
    async 함수에도 그대로 사용할 수 있습니다.
    """
    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential(multiplier=2, min=initial_wait, max=max_wait),
        retry=retry_if_exception_type(exceptions),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        after=after_log(logger, logging.ERROR),
        reraise=True,
    )
