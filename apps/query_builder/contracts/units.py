"""单位分类与可选单位契约。

该模块描述 Y 轴单位选择器消费的全部结构：

* ``UnitOption``：单个可选单位，``value`` 为规范标识，写入查询状态；
  ``label`` 为展示文本，不保证跨分类唯一。
* ``UnitCategory``：一组互相兼容的单位，例如时间、数据量。
* ``UnitGroup``：面向展示层的分组结构，``label`` 即分类名称。

``UnitOption`` 与 ``UnitCategory`` 构成进程级共享的单位目录，均为不可变模型。
"""

from __future__ import annotations

from typing import List, Tuple

from apps.query_builder.compat import ConfigDict, Field, model_validator

from apps.query_builder.contracts.metadata import ContractModel


class UnitOption(ContractModel):
    """单个可选单位。"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def schema_name(cls) -> str:
        """返回单位选项契约名称。"""

        return "unit_option"

    value: str = Field(description="单位规范标识，作为选中值写入查询状态。", min_length=1)
    label: str = Field(description="单位的可读展示文本。", min_length=1)


class UnitCategory(ContractModel):
    """单位分类，按声明顺序保存其下的单位选项。"""

    model_config = ConfigDict(extra="forbid", frozen=True)

    @classmethod
    def schema_name(cls) -> str:
        """返回单位分类契约名称。"""

        return "unit_category"

    name: str = Field(description="分类名称，在单位目录内唯一。", min_length=1)
    formats: Tuple[UnitOption, ...] = Field(
        default=(),
        description="按声明顺序排列的单位选项。",
    )

    @model_validator(mode="after")
    def ensure_unique_values(self) -> "UnitCategory":
        """确保同一分类内单位标识不重复。"""

        seen: set[str] = set()
        for option in self.formats:
            if option.value in seen:
                message = f"分类 {self.name} 中单位 {option.value} 重复。"
                raise ValueError(message)
            seen.add(option.value)
        return self


class UnitGroup(ContractModel):
    """展示层使用的单位分组。"""

    @classmethod
    def schema_name(cls) -> str:
        """返回单位分组契约名称。"""

        return "unit_group"

    label: str = Field(description="分组标题，即分类名称。", min_length=1)
    options: List[UnitOption] = Field(
        default_factory=list,
        description="该分组下的单位选项，未知分类时为空。",
    )
