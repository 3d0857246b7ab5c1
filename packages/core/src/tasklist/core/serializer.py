"""TaskDataSerializer -- 任务 payload / 表单字段 JSON 编解码"""

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError

from .exceptions import TaskDataError
from .models.form import FormField

_FORM_FIELDS_ADAPTER = TypeAdapter(list[FormField])


class TaskDataSerializer:
    """JOB 表 JSON 列的读写"""

    def read_variables(self, payload: str | None) -> dict[str, Any]:
        """解析 payload 为 变量名 -> 值 映射

        空 payload 视为无变量。
        """
        if not payload:
            return {}
        try:
            variables = json.loads(payload)
        except json.JSONDecodeError as e:
            raise TaskDataError("payload is not valid JSON", e) from e
        if not isinstance(variables, dict):
            raise TaskDataError(
                f"payload must be a JSON object, got {type(variables).__name__}"
            )
        return variables

    def read_form_fields(self, form_fields: str) -> list[FormField]:
        """解析表单字段列表 JSON"""
        try:
            return _FORM_FIELDS_ADAPTER.validate_json(form_fields)
        except ValidationError as e:
            raise TaskDataError("form fields are not a valid field list", e) from e

    def write_variables(self, variables: dict[str, Any]) -> str:
        """将变量映射编码为 payload JSON"""
        return json.dumps(variables, ensure_ascii=False)
