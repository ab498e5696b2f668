"""
Todo 数据模型

Todo 是唯一的实体；TodoPayload 是创建/更新请求体。
请求体里的 id 一律忽略，id 只由服务端生成。
"""

import uuid

from pydantic import BaseModel, ConfigDict, Field


class Todo(BaseModel):
    """单个 Todo 条目（序列化为 {"id", "title", "completed"}）"""

    id: uuid.UUID
    title: str
    completed: bool


class TodoPayload(BaseModel):
    """POST/PUT /todos 请求体，类型严格校验，多余字段（含 id）忽略"""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(strict=True)
    completed: bool = Field(strict=True)  # 不接受 "true" / 1 之类的隐式转换
