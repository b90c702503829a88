"""测试前置配置与共享夹具。"""

from __future__ import annotations

import sys
from datetime import datetime, timezone
from pathlib import Path

import pytest


def pytest_configure() -> None:
    """确保仓库根目录位于 Python 模块搜索路径。"""

    root = Path(__file__).resolve().parents[3]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


class FixedClock:
    """返回固定时间的时钟。"""

    def __init__(self, moment: datetime) -> None:
        self._moment = moment

    def now(self) -> datetime:
        return self._moment


@pytest.fixture
def fixed_clock() -> FixedClock:
    """固定在 2024-01-01 UTC 的时钟。"""

    return FixedClock(datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def small_taxonomy():
    """仅包含 time 与 data 两个分类的目录。"""

    from apps.query_builder.contracts.units import UnitCategory, UnitOption
    from apps.query_builder.stores.unit_taxonomy import UnitTaxonomy

    return UnitTaxonomy.from_categories(
        [
            UnitCategory(
                name="time",
                formats=[
                    UnitOption(value="s", label="seconds"),
                    UnitOption(value="ms", label="milliseconds"),
                ],
            ),
            UnitCategory(name="data", formats=[UnitOption(value="B", label="bytes")]),
        ]
    )
