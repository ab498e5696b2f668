"""
请求日志中间件：记录每个 HTTP 请求的开始/结束 + trace_id 注入
"""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

log = structlog.get_logger()

TRACE_ID_HEADER = "X-Trace-ID"
DURATION_HEADER = "X-Duration-Ms"


class RequestLoggerMiddleware(BaseHTTPMiddleware):
    """HTTP 请求日志 + trace_id 上下文注入"""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        # 调用方带了 X-Trace-ID 就沿用，否则新生成
        trace_id = request.headers.get(TRACE_ID_HEADER) or str(uuid.uuid4())

        # 绑定到 structlog 上下文，后续所有日志自动带 trace_id
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(trace_id=trace_id)

        start = time.monotonic()

        log.info(
            "请求开始",
            method=request.method,
            path=request.url.path,
            client_ip=request.client.host if request.client else "unknown",
        )

        response = await call_next(request)

        duration_ms = int((time.monotonic() - start) * 1000)

        log.info(
            "请求结束",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=duration_ms,
        )

        response.headers[TRACE_ID_HEADER] = trace_id
        response.headers[DURATION_HEADER] = str(duration_ms)

        return response
