"""API 请求/响应审计落盘工具。"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional
from uuid import uuid4

from apps.query_builder.compat import model_dump
from apps.query_builder.infra.clock import Clock, UtcClock

_DIRECTIONS = frozenset({"request", "response", "error"})


class ApiRecorder:
    """将单位选择相关的请求、响应与错误以 JSON 落盘，便于审计与回放。

    落盘内容仅包含查询标识、单位与状态快照，不做字段脱敏。
    """

    def __init__(
        self,
        base_path: Path,
        *,
        max_bytes: int = 256_000,
        clock: Optional[Clock] = None,
    ) -> None:
        """初始化落盘器。

        Parameters
        ----------
        base_path: Path
            存放落盘文件的根目录。
        max_bytes: int
            单个 JSON 文件允许的最大字节数，超过时写入截断提示。
        clock: Optional[Clock]
            生成文件名时间戳的时钟，默认使用 UTC 时钟。
        """

        if base_path is None:
            raise ValueError("base_path 不能为空。")
        if max_bytes <= 0:
            raise ValueError("max_bytes 必须为正数。")
        self._base_path = base_path
        self._base_path.mkdir(parents=True, exist_ok=True)
        self._max_bytes = max_bytes
        self._clock = clock or UtcClock()

    def record(self, endpoint: str, direction: str, payload: Any) -> Path:
        """将给定 payload 序列化后写入磁盘。

        Parameters
        ----------
        endpoint: str
            逻辑端点名称，用于生成子目录。
        direction: str
            request、response 或 error。
        payload: Any
            基础 JSON 结构或 Pydantic 模型。

        Returns
        -------
        Path
            落盘文件路径。
        """

        if not endpoint:
            raise ValueError("endpoint 不能为空。")
        if direction not in _DIRECTIONS:
            raise ValueError("direction 仅支持 request、response 或 error。")
        path = self._build_target_path(endpoint=endpoint, direction=direction)
        normalized = self._to_serializable(payload=payload)
        content = self._serialize_with_limit(payload=normalized)
        path.write_text(content, encoding="utf-8")
        return path

    def _build_target_path(self, endpoint: str, direction: str) -> Path:
        """生成落盘路径，同一时刻的多次写入通过随机后缀区分。"""

        timestamp = self._clock.now().strftime("%Y%m%dT%H%M%S%fZ")
        suffix = uuid4().hex[:8]
        safe_endpoint = endpoint.strip("/").replace("/", "__") or "root"
        target_dir = self._base_path / safe_endpoint
        target_dir.mkdir(parents=True, exist_ok=True)
        return target_dir / f"{timestamp}_{suffix}_{direction}.json"

    @staticmethod
    def _to_serializable(payload: Any) -> Any:
        """将输入对象转换为可 JSON 序列化的结构。"""

        if payload is None:
            return None
        if isinstance(payload, (dict, list, int, float, str, bool)):
            return payload
        if isinstance(payload, tuple):
            return [ApiRecorder._to_serializable(payload=item) for item in payload]
        return model_dump(payload, mode="json")

    def _serialize_with_limit(self, payload: Any) -> str:
        """写入前评估大小，超限则替换为截断提示。"""

        serialized = json.dumps(payload, ensure_ascii=False, indent=2)
        size = len(serialized.encode("utf-8"))
        if size <= self._max_bytes:
            return serialized
        fallback = {
            "truncated": True,
            "original_size": size,
            "max_bytes": self._max_bytes,
            "message": "payload 超过大小门限，已被截断。",
        }
        return json.dumps(fallback, ensure_ascii=False, indent=2)
