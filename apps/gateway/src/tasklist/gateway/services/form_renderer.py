"""TaskFormRenderer -- 任务表单渲染

模板选择：
1. 任务自带 task_form：编译该模板，payload 变量直接平铺到模板命名空间
2. 否则使用默认模板：variables 为 key/value 列表，formFields 为已映射 input type 的字段列表

渲染过程中任何异常都被吞掉，记录日志后返回固定警告文本。
"""

import json
from pathlib import Path
from typing import Any

import structlog
from jinja2 import Template
from jinja2.sandbox import SandboxedEnvironment
from tasklist.core.exceptions import TemplateLoadError
from tasklist.core.models import FormField, TaskEntity
from tasklist.core.serializer import TaskDataSerializer

log = structlog.get_logger()

RENDER_FAILURE_MESSAGE = "⚠ Failure while rendering task form."

# 声明类型 -> HTML input type，未知类型一律 text
_INPUT_TYPES: dict[str, str] = {
    "string": "text",
    "number": "number",
    "boolean": "checkbox",
}

_GATEWAY_ROOT = Path(__file__).resolve().parents[1]

# 表单模板来自数据库，使用沙箱环境并开启 HTML 转义
_env = SandboxedEnvironment(autoescape=True)


def input_type_for(field_type: str | None) -> str:
    """将表单字段声明类型映射为 HTML input type"""
    return _INPUT_TYPES.get(field_type or "", "text")


def compile_template(source: str) -> Template:
    """编译表单模板源码"""
    return _env.from_string(source)


def load_default_template(location: str) -> Template:
    """加载并编译默认任务表单模板

    先按 tasklist.gateway 包内资源解析，找不到时按文件系统路径解析。

    Raises:
        TemplateLoadError: 模板不存在或无法编译
    """
    try:
        resource = _GATEWAY_ROOT / location
        path = resource if resource.is_file() else Path(location)
        source = path.read_text(encoding="utf-8")
        template = compile_template(source)
    except Exception as e:
        raise TemplateLoadError(location, e) from e

    log.info("default_task_template_loaded", location=str(path))
    return template


class TaskFormRenderer:
    """任务表单渲染器 -- 默认模板在启动时编译一次"""

    def __init__(
        self,
        default_template: Template,
        serializer: TaskDataSerializer | None = None,
    ) -> None:
        self._default_template = default_template
        self._serializer = serializer or TaskDataSerializer()

    def render(self, task: TaskEntity) -> str:
        """渲染任务表单 HTML，失败时返回固定警告文本"""
        try:
            variables = self._serializer.read_variables(task.payload)

            if task.task_form is not None:
                template = compile_template(task.task_form)
                template_data: dict[str, Any] = dict(variables)
            else:
                template = self._default_template
                template_data = {"variables": self._variable_items(variables)}
                if task.form_fields is not None:
                    template_data["formFields"] = self._html_form_fields(
                        self._serializer.read_form_fields(task.form_fields)
                    )

            return template.render(template_data)

        except Exception:
            log.exception("task_form_render_failed", task_key=task.key)
            return RENDER_FAILURE_MESSAGE

    @staticmethod
    def _variable_items(variables: dict[str, Any]) -> list[dict[str, str]]:
        """payload 变量转为 key/value 列表，非字符串值以 JSON 形式展示"""
        return [
            {
                "key": key,
                "value": value if isinstance(value, str) else json.dumps(
                    value, ensure_ascii=False
                ),
            }
            for key, value in variables.items()
        ]

    @staticmethod
    def _html_form_fields(fields: list[FormField]) -> list[FormField]:
        return [
            field.model_copy(update={"type": input_type_for(field.type)})
            for field in fields
        ]
