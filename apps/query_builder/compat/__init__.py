"""pydantic 接口的统一出口。"""

from apps.query_builder.compat.pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    model_dump,
    model_validator,
)

__all__ = [
    "BaseModel",
    "ConfigDict",
    "Field",
    "model_dump",
    "model_validator",
]
