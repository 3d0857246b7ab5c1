"""Store Protocol 接口定义

视图层依赖的仓储接口，使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from typing import Protocol

from ..models.page import PageRequest
from ..models.task import TaskEntity


class TaskStore(Protocol):
    """Task 仓储接口"""

    async def count(self) -> int:
        """任务总数"""
        ...

    async def find_all(self, page: PageRequest) -> list[TaskEntity]:
        """查询一页任务"""
        ...

    async def find_by_id(self, key: int) -> TaskEntity | None:
        """根据 key 查询任务"""
        ...

    async def save_task(self, task: TaskEntity) -> None:
        """写入或覆盖任务记录"""
        ...

    async def delete_task(self, key: int) -> None:
        """删除任务记录"""
        ...
