"""TraceMiddleware -- 为任务详情请求绑定 task_key

task_key 从 /views/tasks/{key} 路径中提取，贯穿表单渲染日志；
同时写入 request.state，供外层 LoggingMiddleware 读取。
"""

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

_TASK_VIEW_PREFIX = "/views/tasks/"


class TraceMiddleware(BaseHTTPMiddleware):
    """任务级追踪中间件"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path

        if path.startswith(_TASK_VIEW_PREFIX):
            task_key = path[len(_TASK_VIEW_PREFIX):].split("/", 1)[0]
            # 非数字 key 交给路由校验；isdigit 对 "²" 等 Unicode 数字也为真
            if task_key.isascii() and task_key.isdigit():
                request.state.task_key = int(task_key)
                structlog.contextvars.bind_contextvars(task_key=request.state.task_key)

        return await call_next(request)
