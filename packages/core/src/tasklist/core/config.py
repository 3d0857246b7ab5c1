"""配置常量模块 -- 可通过环境变量覆盖

包含数据库路径、默认任务表单模板位置、分页大小等可配置常量。
"""

import os
from pathlib import Path


def _get_base_dir() -> Path:
    """获取项目 data 基础目录"""
    return Path(os.environ.get("TASKLIST_DATA_DIR", "data"))


def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return os.environ.get(
        "TASKLIST_DB_PATH",
        str(_get_base_dir() / "sqlite" / "tasklist.db"),
    )


def get_default_task_form() -> str:
    """获取默认任务表单模板位置

    先按 tasklist.gateway 包内资源解析，找不到时按文件系统路径解析。
    """
    return os.environ.get(
        "TASKLIST_DEFAULT_TASK_FORM",
        "templates/default-task-form.html",
    )


# 列表页默认分页大小
DEFAULT_PAGE_SIZE: int = int(os.environ.get("TASKLIST_PAGE_SIZE", "10"))

# 单页最大条数
MAX_PAGE_SIZE: int = 2000

# SQLite INTEGER 上限（有符号 64 位）
SQLITE_MAX_INT: int = 2**63 - 1

# 最大页码，保证 page * size 不超出 SQLite INTEGER
MAX_PAGE: int = SQLITE_MAX_INT // MAX_PAGE_SIZE

# SSE 心跳间隔（秒）
SSE_HEARTBEAT_INTERVAL: int = int(
    os.environ.get("TASKLIST_SSE_HEARTBEAT_INTERVAL", "15")
)

# 消息广播 topic
MESSAGES_TOPIC: str = "/topic/messages"
