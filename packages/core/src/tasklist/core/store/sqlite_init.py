"""SQLite 数据库初始化

PRAGMA 配置 + JOB 表 DDL + 索引创建。
JOB 表由外部写入方维护，此处 CREATE IF NOT EXISTS 仅保证本地/测试可用。
"""

import aiosqlite

# JOB 表 DDL
_JOB_DDL = """
CREATE TABLE IF NOT EXISTS JOB (
    KEY_          INTEGER PRIMARY KEY,
    PAYLOAD_      TEXT,
    TIMESTAMP_    INTEGER NOT NULL DEFAULT 0,
    NAME_         TEXT,
    DESCRIPTION_  TEXT,
    TASK_FORM_    TEXT,
    FORM_FIELDS_  TEXT
);
"""

_JOB_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_job_timestamp ON JOB(TIMESTAMP_ DESC);",
]


async def init_db(conn: aiosqlite.Connection) -> None:
    """初始化数据库：设置 PRAGMA + 创建表 + 创建索引

    Args:
        conn: aiosqlite 数据库连接
    """
    await conn.execute("PRAGMA journal_mode = WAL;")
    await conn.execute("PRAGMA busy_timeout = 5000;")

    await conn.execute(_JOB_DDL)
    for idx_sql in _JOB_INDEXES:
        await conn.execute(idx_sql)

    await conn.commit()
