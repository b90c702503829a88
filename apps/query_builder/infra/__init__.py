"""基础设施组件导出。"""

from apps.query_builder.infra.clock import Clock, UtcClock
from apps.query_builder.infra.persistence import ApiRecorder

__all__ = [
    "ApiRecorder",
    "Clock",
    "UtcClock",
]
