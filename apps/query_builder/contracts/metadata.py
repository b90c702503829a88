"""契约模型基类，统一 Schema 标识与版本。"""

from __future__ import annotations

from typing import Any

from apps.query_builder.compat import BaseModel, ConfigDict

SCHEMA_VERSION: str = "1.0.0"
"""契约 Schema 的版本号。"""

SCHEMA_BASE_URI: str = "https://schemas.query-builder.local/contracts"
"""所有契约 Schema `$id` 的统一前缀。"""

JSON_SCHEMA_DIALECT: str = "https://json-schema.org/draft/2020-12/schema"


class ContractModel(BaseModel):
    """查询构建器契约的基类。

    子类通过 ``schema_name()`` 声明名称，导出的 JSONSchema 顶层据此补充
    ``$id``、``$schema`` 与 ``version``。额外字段一律拒绝。
    """

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def schema_name(cls) -> str:
        """返回模型对应的 Schema 名称。"""

        msg = f"{cls.__name__} 未实现 schema_name() 方法。"
        raise NotImplementedError(msg)

    @classmethod
    def schema_uri(cls) -> str:
        """返回模型 Schema 的 `$id`。"""

        return f"{SCHEMA_BASE_URI}/{cls.schema_name()}.json"

    @classmethod
    def model_json_schema(cls, *args: Any, **kwargs: Any) -> dict[str, Any]:
        """在默认 Schema 顶层追加契约标识与版本。"""

        schema = super().model_json_schema(*args, **kwargs)
        schema["$id"] = cls.schema_uri()
        schema["$schema"] = JSON_SCHEMA_DIALECT
        schema["version"] = SCHEMA_VERSION
        return schema
