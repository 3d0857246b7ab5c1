"""LoggingMiddleware -- 请求级日志

为每个 HTTP 请求生成 request_id，绑定到 structlog contextvars。
request_completed 附带状态码、耗时，以及 TraceMiddleware 绑定的 task_key。
"""

import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from ulid import ULID


class LoggingMiddleware(BaseHTTPMiddleware):
    """请求级日志中间件 -- 为每个请求生成 request_id"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = str(ULID())

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        log = structlog.get_logger()
        started = time.perf_counter()

        response = await call_next(request)

        fields = {
            "status_code": response.status_code,
            "duration_ms": round((time.perf_counter() - started) * 1000, 2),
        }
        # TraceMiddleware 在内层写入，仅任务详情请求存在
        task_key = getattr(request.state, "task_key", None)
        if task_key is not None:
            fields["task_key"] = task_key

        if response.status_code >= 500:
            await log.awarning("request_completed", **fields)
        else:
            await log.ainfo("request_completed", **fields)

        response.headers["X-Request-ID"] = request_id
        return response
