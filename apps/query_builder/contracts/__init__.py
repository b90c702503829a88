"""数据契约模型包。

该模块提供查询构建器后端与前端交互所需的契约：单位目录、查询共享状态
以及侧边栏导航。所有模型均可导出带版本元数据的 JSONSchema。
"""

from apps.query_builder.contracts.metadata import ContractModel, SCHEMA_VERSION
from apps.query_builder.contracts.navigation import NavMenuItem
from apps.query_builder.contracts.query_state import QueryState
from apps.query_builder.contracts.units import UnitCategory, UnitGroup, UnitOption

__all__ = [
    "ContractModel",
    "SCHEMA_VERSION",
    "NavMenuItem",
    "QueryState",
    "UnitCategory",
    "UnitGroup",
    "UnitOption",
]
