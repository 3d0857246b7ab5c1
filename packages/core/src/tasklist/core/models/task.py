"""Task Domain Model -- JOB 表实体与列表展示投影

JOB 表由外部进程写入，本系统只读。
"""

from pydantic import BaseModel, Field


class TaskEntity(BaseModel):
    """TaskEntity -- JOB 表的一行

    payload / form_fields 以 JSON 文本存储，渲染时才解析。
    """

    key: int = Field(description="唯一数字主键")
    payload: str | None = Field(default=None, description="JSON 编码的任务变量")
    timestamp: int = Field(description="创建时间，epoch 毫秒")
    name: str | None = Field(default=None, description="任务名称")
    description: str | None = Field(default=None, description="任务描述")
    task_form: str | None = Field(default=None, description="自定义表单模板源码")
    form_fields: str | None = Field(default=None, description="JSON 编码的表单字段列表")


class TaskDto(BaseModel):
    """列表项展示投影（请求级，渲染后丢弃）"""

    key: int
    name: str | None = None
    description: str | None = None
    created: str = Field(description="粗粒度相对时间，如 '3 hours'")
    active: bool = Field(default=False, description="是否为当前选中任务")
