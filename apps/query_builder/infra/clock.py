"""统一的时钟接口，查询状态的写入时间均由此获取。"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """可注入的时钟协议，测试中可替换为固定时钟。"""

    def now(self) -> datetime:
        """返回带时区的当前时间。"""


class UtcClock:
    """UTC 时钟。"""

    def now(self) -> datetime:
        """返回当前 UTC 时间。

        Returns
        -------
        datetime
            带有 UTC 时区信息的当前时间。
        """

        # QueryState 校验要求时区信息，必须使用 timezone.utc。
        return datetime.now(timezone.utc)
