"""FastAPI 依赖注入配置。"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from apps.query_builder.infra.clock import UtcClock
from apps.query_builder.infra.persistence import ApiRecorder
from apps.query_builder.services.unit_filter import UnitFilterConfig
from apps.query_builder.stores import QueryStateStore, UnitTaxonomy


@lru_cache
def get_clock() -> UtcClock:
    """提供全局 UTC 时钟实例。"""

    return UtcClock()


@lru_cache
def get_unit_taxonomy() -> UnitTaxonomy:
    """提供内置单位目录，进程内只构造一次。"""

    return UnitTaxonomy.builtin()


@lru_cache
def get_query_state_store() -> QueryStateStore:
    """提供查询共享状态 Store。"""

    return QueryStateStore(clock=get_clock())


@lru_cache
def get_unit_filter_config() -> UnitFilterConfig:
    """提供单位筛选控制器配置，默认不注册上层回调。"""

    return UnitFilterConfig()


@lru_cache
def get_api_recorder() -> ApiRecorder:
    """提供 API 请求/响应落盘器。"""

    base_path = Path("var/api_logs")
    return ApiRecorder(base_path=base_path, clock=get_clock())
