"""Tasklist Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .form import FormField
from .message import ChatMessage, OutputMessage
from .page import SORTABLE_COLUMNS, PageRequest
from .task import TaskDto, TaskEntity

__all__ = [
    # Task
    "TaskEntity",
    "TaskDto",
    # Form
    "FormField",
    # Page
    "PageRequest",
    "SORTABLE_COLUMNS",
    # Message
    "ChatMessage",
    "OutputMessage",
]
