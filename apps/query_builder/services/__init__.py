"""服务层导出。"""

from apps.query_builder.services.navigation import find_menu_item, list_menu_items
from apps.query_builder.services.unit_filter import (
    CATEGORIES_TO_SUPPORT,
    UnitFilterConfig,
    UnitFilterController,
)
from apps.query_builder.services.unit_options import (
    build_grouped_options,
    filter_grouped_options,
    matches,
    options_for_category,
)

__all__ = [
    "CATEGORIES_TO_SUPPORT",
    "UnitFilterConfig",
    "UnitFilterController",
    "build_grouped_options",
    "filter_grouped_options",
    "find_menu_item",
    "list_menu_items",
    "matches",
    "options_for_category",
]
