"""后端 API 请求与响应模型。"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from apps.query_builder.compat import BaseModel, ConfigDict, Field

from apps.query_builder.contracts.navigation import NavMenuItem
from apps.query_builder.contracts.units import UnitGroup, UnitOption


class ApiModel(BaseModel):
    """统一约束的 API 模型基类，强制禁止额外字段。"""

    model_config = ConfigDict(extra="forbid")


class UnitOptionsResponse(ApiModel):
    """单位分组列表响应。"""

    groups: List[UnitGroup] = Field(description="按分类分组的单位选项。")
    search: Optional[str] = Field(
        default=None,
        description="本次应用的搜索文本，未搜索时为空。",
    )


class CategoryOptionsResponse(ApiModel):
    """单个分类的单位选项响应。"""

    category: str = Field(description="请求的分类名称。", min_length=1)
    options: List[UnitOption] = Field(description="分类下的单位选项，未知分类为空。")


class UnitSelectionRequest(ApiModel):
    """单位选择变更请求，unit 必须显式给出，null 表示清空。"""

    unit: Optional[str] = Field(description="新选中的单位。")


class UnitSelectionResponse(ApiModel):
    """当前单位选择响应。"""

    query_id: str = Field(description="查询标识。", min_length=1)
    unit: Optional[str] = Field(default=None, description="当前选中的单位。")
    updated_at: Optional[datetime] = Field(
        default=None,
        description="最近一次写入时间。",
    )


class NavigationMenuResponse(ApiModel):
    """侧边栏菜单响应。"""

    items: List[NavMenuItem] = Field(description="按展示顺序排列的菜单项。")


class SchemaExportResponse(ApiModel):
    """JSONSchema 批量导出响应。"""

    schemas: Dict[str, object] = Field(description="按 schema_name 索引的 JSONSchema 内容。")
