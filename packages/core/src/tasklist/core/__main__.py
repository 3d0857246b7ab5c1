"""CLI 入口模块 -- python -m tasklist.core <command>

支持的命令：
  init-db                 创建 JOB 表
  import-tasks <file>     从 JSON 文件导入任务
  delete-task <key>       删除指定任务
"""

import asyncio
import json
import sys
from pathlib import Path

from .config import get_db_path
from .models.task import TaskEntity
from .serializer import TaskDataSerializer


def main() -> None:
    """CLI 主入口"""
    if len(sys.argv) < 2:
        print("用法: python -m tasklist.core <command>")
        print("命令:")
        print("  init-db                 创建 JOB 表")
        print("  import-tasks <file>     从 JSON 文件导入任务")
        print("  delete-task <key>       删除指定任务")
        sys.exit(1)

    command = sys.argv[1]

    if command == "init-db":
        asyncio.run(init_database())
    elif command == "import-tasks":
        if len(sys.argv) < 3:
            print("用法: python -m tasklist.core import-tasks <file>")
            sys.exit(1)
        asyncio.run(import_tasks(Path(sys.argv[2])))
    elif command == "delete-task":
        if len(sys.argv) < 3 or not sys.argv[2].isdigit():
            print("用法: python -m tasklist.core delete-task <key>")
            sys.exit(1)
        asyncio.run(delete_task(int(sys.argv[2])))
    else:
        print(f"未知命令: {command}")
        print("可用命令: init-db, import-tasks, delete-task")
        sys.exit(1)


async def init_database() -> None:
    """创建数据库与 JOB 表"""
    from .store import create_store_group

    db_path = get_db_path()
    print(f"数据库路径: {db_path}")

    store_group = await create_store_group(db_path)
    await store_group.conn.close()
    print("初始化完成")


def parse_task_records(records: list[dict]) -> list[TaskEntity]:
    """将导入文件中的记录转换为 TaskEntity

    payload / form_fields 可以是 JSON 文本，也可以是已解析的对象/列表。
    """
    serializer = TaskDataSerializer()
    tasks = []
    for record in records:
        data = dict(record)
        if isinstance(data.get("payload"), dict):
            data["payload"] = serializer.write_variables(data["payload"])
        if isinstance(data.get("form_fields"), list):
            data["form_fields"] = json.dumps(data["form_fields"], ensure_ascii=False)
        tasks.append(TaskEntity(**data))
    return tasks


async def import_tasks(path: Path) -> None:
    """从 JSON 文件（任务对象列表）导入任务"""
    from .store import create_store_group

    db_path = get_db_path()
    print(f"数据库路径: {db_path}")
    print(f"导入文件: {path}")

    tasks = parse_task_records(json.loads(path.read_text(encoding="utf-8")))

    store_group = await create_store_group(db_path)
    try:
        for task in tasks:
            await store_group.task_store.save_task(task)
        await store_group.conn.commit()
        print(f"导入完成，共 {len(tasks)} 个任务")
    finally:
        await store_group.conn.close()


async def delete_task(key: int) -> None:
    """删除指定任务"""
    from .store import create_store_group

    store_group = await create_store_group(get_db_path())
    try:
        await store_group.task_store.delete_task(key)
        await store_group.conn.commit()
        print(f"已删除任务 {key}")
    finally:
        await store_group.conn.close()


if __name__ == "__main__":
    main()
