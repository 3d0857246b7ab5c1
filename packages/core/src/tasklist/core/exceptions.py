"""Tasklist 异常体系"""


class TasklistError(Exception):
    """Tasklist 基础异常"""


class TaskDataError(TasklistError):
    """任务 payload 或表单字段 JSON 无法解析"""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        """
        Args:
            message: 错误描述
            original_error: 原始异常（如 json.JSONDecodeError）
        """
        super().__init__(message)
        self.original_error = original_error


class TemplateLoadError(TasklistError):
    """默认任务表单模板加载失败

    启动期致命错误：lifespan 中抛出后应用不会启动。
    """

    def __init__(self, location: str, original_error: Exception) -> None:
        """
        Args:
            location: 尝试加载的模板位置
            original_error: 原始异常
        """
        super().__init__(
            f"Failed to load default task template: {location} -- {original_error}"
        )
        self.location = location
        self.original_error = original_error
