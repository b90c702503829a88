"""查询共享状态 Store，集中保存每个查询当前选中的单位。"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional, Protocol

from apps.query_builder.contracts.query_state import QueryState
from apps.query_builder.infra.clock import Clock, UtcClock

LOGGER = logging.getLogger(__name__)


class UnitStateAccessor(Protocol):
    """单位读写入口，控制器只通过该协议访问共享状态。"""

    def get_unit(self) -> Optional[str]:
        """返回当前选中的单位。"""

    def set_unit(self, value: Optional[str]) -> None:
        """写入选中的单位，None 表示清空。"""


@dataclass
class QueryStateStore:
    """维护查询状态的内存缓存，单位字段仅可经由 set_unit 修改。"""

    clock: Clock = field(default_factory=UtcClock)
    _states: Dict[str, QueryState] = field(default_factory=dict)

    def get(self, query_id: str) -> QueryState:
        """读取查询状态，不存在时返回未选择单位的初始状态。

        Parameters
        ----------
        query_id: str
            查询标识。

        Returns
        -------
        QueryState
            当前状态快照。
        """

        state = self._states.get(query_id)
        if state is None:
            return QueryState(query_id=query_id)
        return state

    def require(self, query_id: str) -> QueryState:
        """读取已写入过的查询状态，不存在时立即失败。"""

        if query_id not in self._states:
            message = f"query_id={query_id} 尚未写入任何状态。"
            raise KeyError(message)
        return self._states[query_id]

    def get_unit(self, query_id: str) -> Optional[str]:
        """返回查询当前选中的单位。"""

        return self.get(query_id=query_id).unit

    def set_unit(self, query_id: str, value: Optional[str]) -> QueryState:
        """写入查询的单位，后写覆盖先写。

        Parameters
        ----------
        query_id: str
            查询标识。
        value: Optional[str]
            新单位；None 表示清空，空字符串按原值保存。

        Returns
        -------
        QueryState
            写入后的状态快照。
        """

        state = QueryState(query_id=query_id, unit=value, updated_at=self.clock.now())
        self._states[query_id] = state
        LOGGER.debug("查询单位已更新", extra={"query_id": query_id, "unit": value})
        return state

    def handle(self, query_id: str) -> "QueryUnitHandle":
        """返回绑定单个查询的单位读写句柄。"""

        return QueryUnitHandle(store=self, query_id=query_id)


@dataclass(frozen=True)
class QueryUnitHandle:
    """将 QueryStateStore 中的单个查询适配为 UnitStateAccessor。"""

    store: QueryStateStore
    query_id: str

    def get_unit(self) -> Optional[str]:
        """读取绑定查询的单位。"""

        return self.store.get_unit(query_id=self.query_id)

    def set_unit(self, value: Optional[str]) -> None:
        """写入绑定查询的单位。"""

        self.store.set_unit(query_id=self.query_id, value=value)
