"""TaskViewService -- 任务列表页模型构建

1. 查询任务总数与当前页任务
2. 投影为 TaskDto（相对时间 + 选中标记）
3. 选中任务存在时渲染其表单
4. 计算分页信息
"""

import time
from typing import Any

import structlog
from tasklist.core.models import PageRequest, TaskDto, TaskEntity
from tasklist.core.store.protocols import TaskStore

from .form_renderer import TaskFormRenderer

log = structlog.get_logger()

TASK_LIST_VIEW = "task-list-view.html"

_MINUTE_MS = 60 * 1000
_HOUR_MS = 60 * _MINUTE_MS
_DAY_MS = 24 * _HOUR_MS


def relative_age(timestamp_ms: int, now_ms: int | None = None) -> str:
    """粗粒度相对时间：N days / N hours / N minutes / few seconds

    按单位截断；未来时间戳归入 few seconds。
    """
    if now_ms is None:
        now_ms = int(time.time() * 1000)
    elapsed = now_ms - timestamp_ms

    days = elapsed // _DAY_MS
    if days > 0:
        return f"{days} days"
    hours = elapsed // _HOUR_MS
    if hours > 0:
        return f"{hours} hours"
    minutes = elapsed // _MINUTE_MS
    if minutes > 0:
        return f"{minutes} minutes"
    return "few seconds"


def to_dto(entity: TaskEntity, now_ms: int | None = None) -> TaskDto:
    """TaskEntity -> TaskDto"""
    return TaskDto(
        key=entity.key,
        name=entity.name,
        description=entity.description,
        created=relative_age(entity.timestamp, now_ms),
    )


def add_pagination(model: dict[str, Any], page: PageRequest, count: int) -> None:
    """写入分页信息；prevPage / nextPage 仅在存在时写入"""
    current_page = page.page
    model["currentPage"] = current_page
    model["page"] = current_page + 1
    if current_page > 0:
        model["prevPage"] = current_page - 1
    if count > (current_page + 1) * page.size:
        model["nextPage"] = current_page + 1


class TaskViewService:
    """任务列表视图服务"""

    def __init__(self, task_store: TaskStore, renderer: TaskFormRenderer) -> None:
        self._store = task_store
        self._renderer = renderer

    async def task_list(
        self,
        page: PageRequest,
        selected_key: int | None = None,
    ) -> dict[str, Any]:
        """构建列表页模型

        Args:
            page: 分页请求
            selected_key: 选中任务 key；None 表示无选中

        Returns:
            页面模型 dict
        """
        model: dict[str, Any] = {}

        count = await self._store.count()
        entities = await self._store.find_all(page)

        tasks = []
        for entity in entities:
            dto = to_dto(entity)
            if selected_key is not None:
                dto.active = entity.key == selected_key
            tasks.append(dto)

        if selected_key is not None:
            task = await self._store.find_by_id(selected_key)
            if task is not None:
                model["taskForm"] = self._renderer.render(task)
                model["task"] = to_dto(task)
                # 只标记当前页内的任务；选中任务不在本页时给页面一个提示标记
                if not any(dto.active for dto in tasks):
                    model["selectedOutsidePage"] = True
                    log.info(
                        "selected_task_outside_page",
                        task_key=selected_key,
                        page=page.page,
                    )
            else:
                log.info("selected_task_not_found", task_key=selected_key)

        model["tasks"] = tasks
        model["count"] = count

        add_pagination(model, page, count)

        return model
