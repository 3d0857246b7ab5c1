"""TaskStore SQLite 实现

JOB 表只读查询 + 供导入 CLI 使用的写入路径。
"""

import aiosqlite
import structlog

from ..models.page import PageRequest
from ..models.task import TaskEntity

log = structlog.get_logger()

_COLUMNS = "KEY_, PAYLOAD_, TIMESTAMP_, NAME_, DESCRIPTION_, TASK_FORM_, FORM_FIELDS_"


class SqliteTaskStore:
    """TaskStore 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    async def count(self) -> int:
        """任务总数"""
        cursor = await self._conn.execute("SELECT COUNT(*) FROM JOB")
        row = await cursor.fetchone()
        return row[0] if row else 0

    async def find_all(self, page: PageRequest) -> list[TaskEntity]:
        """查询一页任务，默认按 KEY_ 升序"""
        order = page.sort_order()
        if order is None:
            if page.sort:
                log.warning("invalid_sort_ignored", sort=page.sort)
            order_by = "KEY_ ASC"
        else:
            column, direction = order
            # KEY_ 作为次级排序保证分页稳定
            order_by = f"{column} {direction}, KEY_ ASC"

        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM JOB ORDER BY {order_by} LIMIT ? OFFSET ?",
            (page.size, page.offset),
        )
        rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    async def find_by_id(self, key: int) -> TaskEntity | None:
        """根据 key 查询任务"""
        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM JOB WHERE KEY_ = ?",
            (key,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_task(row)

    async def save_task(self, task: TaskEntity) -> None:
        """写入或覆盖任务记录（外部写入路径）"""
        await self._conn.execute(
            f"""
            INSERT OR REPLACE INTO JOB ({_COLUMNS})
            VALUES (?, ?, ?, ?, ?, ?, ?)
            """,
            (
                task.key,
                task.payload,
                task.timestamp,
                task.name,
                task.description,
                task.task_form,
                task.form_fields,
            ),
        )

    async def delete_task(self, key: int) -> None:
        """删除任务记录（外部写入路径）"""
        await self._conn.execute("DELETE FROM JOB WHERE KEY_ = ?", (key,))

    @staticmethod
    def _row_to_task(row: aiosqlite.Row) -> TaskEntity:
        """将数据库行转换为 TaskEntity 模型"""
        return TaskEntity(
            key=row[0],
            payload=row[1],
            timestamp=row[2],
            name=row[3],
            description=row[4],
            task_form=row[5],
            form_fields=row[6],
        )
