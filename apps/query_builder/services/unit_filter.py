"""Y 轴单位筛选控制器，衔接单位目录、展示层与查询共享状态。"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from apps.query_builder.contracts.units import UnitGroup
from apps.query_builder.services import unit_options
from apps.query_builder.stores.query_state_store import UnitStateAccessor
from apps.query_builder.stores.unit_taxonomy import CategoryNames, UnitTaxonomy

LOGGER = logging.getLogger(__name__)

CATEGORIES_TO_SUPPORT: Tuple[str, ...] = (
    CategoryNames.TIME,
    CategoryNames.DATA,
    CategoryNames.DATA_RATE,
    CategoryNames.THROUGHPUT,
    CategoryNames.MISCELLANEOUS,
    CategoryNames.BOOLEAN,
)
"""单位选择器默认展示的分类及其顺序。"""

UnitChangeCallback = Callable[[Optional[str]], None]


@dataclass(frozen=True)
class UnitFilterConfig:
    """控制器配置。

    Attributes
    ----------
    on_change: Optional[UnitChangeCallback]
        选中值变化时通知上层的回调，未提供时跳过通知。
    categories_to_support: Tuple[str, ...]
        需要展示的分类，顺序即分组顺序。
    """

    on_change: Optional[UnitChangeCallback] = None
    categories_to_support: Tuple[str, ...] = CATEGORIES_TO_SUPPORT


class UnitFilterController:
    """无状态控制器，所有持久状态都保存在注入的共享 Store 中。"""

    def __init__(
        self,
        taxonomy: UnitTaxonomy,
        accessor: UnitStateAccessor,
        config: Optional[UnitFilterConfig] = None,
    ) -> None:
        """初始化控制器。

        Parameters
        ----------
        taxonomy: UnitTaxonomy
            静态单位目录。
        accessor: UnitStateAccessor
            查询共享状态的单位读写入口。
        config: Optional[UnitFilterConfig]
            回调与分类配置，缺省时使用默认分类且不通知上层。
        """

        self._taxonomy = taxonomy
        self._accessor = accessor
        self._config = config or UnitFilterConfig()

    def build_options(self) -> List[UnitGroup]:
        """构造全部展示分组，每次调用重新计算。"""

        return unit_options.build_grouped_options(
            taxonomy=self._taxonomy,
            categories=self._config.categories_to_support,
        )

    def current_selection(self) -> Optional[str]:
        """返回共享状态中当前选中的单位。"""

        return self._accessor.get_unit()

    def on_selection_change(self, value: Optional[str]) -> None:
        """应用选中值变化。

        先通知上层回调（若已配置），再写入共享状态；写入总会执行。
        值不会与单位目录比对，按原样透传。

        Parameters
        ----------
        value: Optional[str]
            新选中的单位，None 表示清空。
        """

        if self._config.on_change is not None:
            self._config.on_change(value)
        self._accessor.set_unit(value)
        LOGGER.debug("单位选择已变更", extra={"unit": value})

    def matches(self, input_text: str, candidate_label: str) -> bool:
        """供展示层在输入时裁剪可见选项。"""

        return unit_options.matches(input_text, candidate_label)
