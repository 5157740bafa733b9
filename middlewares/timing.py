import logging
import time
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

logger = logging.getLogger(__name__)


def _log_level(status_code: int) -> int:
    # 저장 실패 등 5xx 는 WARNING, 검증/중복/없음(4xx)은 INFO, 나머지는 DEBUG
    if status_code >= 500:
        return logging.WARNING
    if status_code >= 400:
        return logging.INFO
    return logging.DEBUG


class TimingMiddleware(BaseHTTPMiddleware):
    """요청 처리 시간을 X-Latency-Ms 헤더로 내려주고, 결과 코드에 따라 요청 로그를 남김"""

    async def dispatch(self, request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        latency_ms = int((time.perf_counter() - start) * 1000)
        response.headers["X-Latency-Ms"] = str(latency_ms)
        logger.log(
            _log_level(response.status_code),
            f"{request.method} {request.url.path} -> {response.status_code} ({latency_ms}ms)",
        )
        return response
