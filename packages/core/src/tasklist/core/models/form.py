"""FormField Domain Model -- 默认表单的字段描述"""

from pydantic import BaseModel, Field, model_validator


class FormField(BaseModel):
    """表单字段描述

    type 在渲染前会被映射为 HTML input type。
    """

    key: str = Field(description="对应的 payload 变量名")
    label: str | None = Field(default=None, description="显示标签，缺省为 key")
    type: str = Field(default="string", description="声明类型：string/number/boolean/...")

    @model_validator(mode="after")
    def _default_label(self) -> "FormField":
        if not self.label:
            self.label = self.key
        return self
