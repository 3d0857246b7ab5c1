"""依赖注入模块 -- 通过 FastAPI Depends 注入 Store / 渲染器 / 广播器

实例通过 app.state 管理，在 lifespan 中初始化/清理。
"""

from fastapi import Request
from tasklist.core.store import StoreGroup

from .services.form_renderer import TaskFormRenderer
from .services.message_hub import MessageHub


def get_store_group(request: Request) -> StoreGroup:
    """从 app.state 获取 StoreGroup 实例"""
    return request.app.state.store_group


def get_form_renderer(request: Request) -> TaskFormRenderer:
    """从 app.state 获取 TaskFormRenderer 实例"""
    return request.app.state.form_renderer


def get_message_hub(request: Request) -> MessageHub:
    """从 app.state 获取 MessageHub 实例"""
    return request.app.state.message_hub
