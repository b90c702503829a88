"""pydantic 统一入口，集中序列化行为。"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator


def model_dump(payload: Any, *, mode: str = "python") -> Any:
    """将契约模型序列化为基础 Python 结构。

    Parameters
    ----------
    payload: Any
        需要序列化的 Pydantic 模型。
    mode: str
        ``python`` 保留原生类型，``json`` 输出可直接 JSON 化的结构。

    Returns
    -------
    Any
        序列化后的字典。
    """

    if not isinstance(payload, BaseModel):
        message = f"无法序列化 {type(payload).__name__}，需为 Pydantic 模型。"
        raise TypeError(message)
    return payload.model_dump(mode=mode)


__all__ = [
    "BaseModel",
    "Field",
    "ConfigDict",
    "model_validator",
    "model_dump",
]
