"""PageRequest -- 分页请求参数

与 ?page=&size=&sort= 查询参数约定一致：page 从 0 开始。
"""

from pydantic import BaseModel, Field

from ..config import DEFAULT_PAGE_SIZE, MAX_PAGE, MAX_PAGE_SIZE

# 允许排序的字段 -> JOB 表列名
SORTABLE_COLUMNS: dict[str, str] = {
    "key": "KEY_",
    "timestamp": "TIMESTAMP_",
    "name": "NAME_",
}


class PageRequest(BaseModel):
    """分页请求"""

    page: int = Field(default=0, ge=0, le=MAX_PAGE, description="页码，从 0 开始")
    size: int = Field(
        default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, description="每页条数"
    )
    sort: str | None = Field(default=None, description="排序，如 'timestamp,desc'")

    @property
    def offset(self) -> int:
        return self.page * self.size

    def sort_order(self) -> tuple[str, str] | None:
        """解析 sort 参数为 (列名, 方向)，字段不合法时返回 None"""
        if not self.sort:
            return None
        field, _, direction = self.sort.partition(",")
        column = SORTABLE_COLUMNS.get(field.strip())
        if column is None:
            return None
        direction = direction.strip().upper() or "ASC"
        if direction not in ("ASC", "DESC"):
            return None
        return column, direction
