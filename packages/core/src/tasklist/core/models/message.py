"""Chat Message Domain Model -- 广播 topic 的入站/出站消息

线上字段名为 "from"，Python 属性名为 from_。
"""

from pydantic import BaseModel, ConfigDict, Field


class ChatMessage(BaseModel):
    """入站消息"""

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from", description="发送者")
    text: str = Field(description="文本内容")


class OutputMessage(BaseModel):
    """出站消息 -- 入站消息附加当前时刻（HH:MM）"""

    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(alias="from", description="发送者")
    text: str = Field(description="文本内容")
    time: str = Field(description="本地时刻，HH:MM")
