"""apps/gateway 测试配置 -- FastAPI app + async DB fixture"""

import os
from collections.abc import AsyncGenerator, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tasklist.core.models import TaskEntity
from tasklist.core.store import StoreGroup, create_store_group
from tasklist.gateway.services.form_renderer import TaskFormRenderer, load_default_template
from tasklist.gateway.services.message_hub import MessageHub

DEFAULT_FORM = "templates/default-task-form.html"


@pytest.fixture
def renderer() -> TaskFormRenderer:
    """使用内置默认模板的渲染器"""
    return TaskFormRenderer(load_default_template(DEFAULT_FORM))


@pytest_asyncio.fixture
async def store_group(tmp_path: Path) -> AsyncGenerator[StoreGroup, None]:
    """临时数据库上的 StoreGroup"""
    group = await create_store_group(str(tmp_path / "sqlite" / "test.db"))
    yield group
    await group.conn.close()


@pytest.fixture
def seed_tasks(store_group: StoreGroup) -> Callable:
    """写入任务的辅助函数"""

    async def _seed(*tasks: TaskEntity) -> None:
        for task in tasks:
            await store_group.task_store.save_task(task)
        await store_group.conn.commit()

    return _seed


@pytest_asyncio.fixture
async def app(store_group: StoreGroup, renderer: TaskFormRenderer):
    """创建测试用 FastAPI app，手动初始化 lifespan 状态"""
    os.environ["LOGFIRE_SEND_TO_LOGFIRE"] = "false"

    from fastapi import FastAPI
    from tasklist.gateway.routes import chat, health, views

    application = FastAPI()
    application.include_router(views.router)
    application.include_router(chat.router)
    application.include_router(health.router)

    application.state.store_group = store_group
    application.state.form_renderer = renderer
    application.state.message_hub = MessageHub()

    yield application

    os.environ.pop("LOGFIRE_SEND_TO_LOGFIRE", None)


@pytest_asyncio.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试"""
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac
