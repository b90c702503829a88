"""查询构建器共享状态契约。"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from apps.query_builder.compat import Field, model_validator

from apps.query_builder.contracts.metadata import ContractModel


class QueryState(ContractModel):
    """单个查询（图表）的共享状态快照。

    ``unit`` 为 ``None`` 表示未选择单位；空字符串是合法且独立的取值，
    不会被视为清空。
    """

    @classmethod
    def schema_name(cls) -> str:
        """返回查询状态契约名称。"""

        return "query_state"

    query_id: str = Field(description="查询唯一标识。", min_length=1)
    unit: Optional[str] = Field(
        default=None,
        description="当前选中的 Y 轴单位，None 表示未选择。",
    )
    updated_at: Optional[datetime] = Field(
        default=None,
        description="最近一次写入单位的 UTC 时间。",
    )

    @model_validator(mode="after")
    def ensure_timezone(self) -> "QueryState":
        """确保更新时间带有时区信息。"""

        if self.updated_at is not None and self.updated_at.tzinfo is None:
            raise ValueError("updated_at 必须携带时区信息。")
        return self
