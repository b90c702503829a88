"""侧边栏导航菜单契约。"""

from __future__ import annotations

from typing import List

from apps.query_builder.compat import Field

from apps.query_builder.contracts.metadata import ContractModel


class NavMenuItem(ContractModel):
    """单个侧边栏菜单项，图标以标识字符串给出，由前端自行渲染。"""

    @classmethod
    def schema_name(cls) -> str:
        """返回导航菜单项契约名称。"""

        return "nav_menu_item"

    to: str = Field(description="目标路由路径。", min_length=1)
    name: str = Field(description="菜单展示名称。", min_length=1)
    icon: str = Field(description="图标标识。", min_length=1)
    tags: List[str] = Field(
        default_factory=list,
        description="附加标签，例如 Beta。",
    )
