"""Store 层导出。"""

from apps.query_builder.stores.query_state_store import (
    QueryStateStore,
    QueryUnitHandle,
    UnitStateAccessor,
)
from apps.query_builder.stores.unit_taxonomy import CategoryNames, UnitTaxonomy, builtin_categories

__all__ = [
    "CategoryNames",
    "QueryStateStore",
    "QueryUnitHandle",
    "UnitStateAccessor",
    "UnitTaxonomy",
    "builtin_categories",
]
