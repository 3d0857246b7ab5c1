"""FastAPI 应用主文件

app 创建 + lifespan 管理：DB 初始化/关闭 + 默认表单模板加载 + 路由注册。
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from tasklist.core.config import get_db_path, get_default_task_form
from tasklist.core.store import create_store_group

from .middleware.logging_config import setup_logfire, setup_logging
from .middleware.logging_mw import LoggingMiddleware
from .middleware.trace_mw import TraceMiddleware
from .routes import chat, health, views
from .services.form_renderer import TaskFormRenderer, load_default_template
from .services.message_hub import MessageHub

log = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """应用生命周期管理：启动时加载模板并初始化 DB，关闭时清理连接"""
    # 默认表单模板加载失败直接中止启动（TemplateLoadError）
    default_template = load_default_template(get_default_task_form())
    app.state.form_renderer = TaskFormRenderer(default_template)

    db_path = get_db_path()
    app.state.store_group = await create_store_group(db_path)
    log.info("store_initialized", db_path=db_path)

    app.state.message_hub = MessageHub()

    yield

    if hasattr(app.state, "store_group") and app.state.store_group:
        await app.state.store_group.conn.close()


def create_app() -> FastAPI:
    """创建 FastAPI 应用实例"""
    app = FastAPI(
        title="Tasklist",
        version="0.1.0",
        description="任务列表与任务表单渲染",
        lifespan=lifespan,
    )

    # 注册中间件（顺序：先 Trace 后 Logging）
    app.add_middleware(TraceMiddleware)
    app.add_middleware(LoggingMiddleware)

    setup_logging()
    setup_logfire()

    app.include_router(views.router, tags=["views"])
    app.include_router(chat.router, tags=["chat"])
    app.include_router(health.router, tags=["health"])

    return app


# 默认 app 实例（uvicorn 入口）
app = create_app()
