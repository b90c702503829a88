"""侧边栏导航菜单配置。

菜单以纯数据描述：路由路径、展示名称、图标标识与可选标签。图标渲染
与路由跳转都由前端负责，这里只提供有序的只读查询。
"""

from __future__ import annotations

from typing import Dict, List, Optional

from apps.query_builder.contracts.navigation import NavMenuItem


class Routes:
    """前端路由路径。"""

    APPLICATION = "/application"
    TRACE = "/trace"
    ALL_DASHBOARD = "/dashboard"
    LIST_ALL_ALERT = "/alerts"
    ALL_ERROR = "/exceptions"
    SERVICE_MAP = "/service-map"
    USAGE_EXPLORER = "/usage-explorer"
    SETTINGS = "/settings"
    INSTRUMENTATION = "/get-started"


SIDEBAR_MENU: List[Dict[str, object]] = [
    {"icon": "BarChartOutlined", "to": Routes.APPLICATION, "name": "Services"},
    {"icon": "AlignLeftOutlined", "to": Routes.TRACE, "name": "Traces"},
    {"icon": "DashboardFilled", "to": Routes.ALL_DASHBOARD, "name": "Dashboards"},
    {"icon": "AlertOutlined", "to": Routes.LIST_ALL_ALERT, "name": "Alerts"},
    {"icon": "BugOutlined", "to": Routes.ALL_ERROR, "name": "Exceptions"},
    {
        "icon": "DeploymentUnitOutlined",
        "to": Routes.SERVICE_MAP,
        "name": "Service Map",
        "tags": ["Beta"],
    },
    {"icon": "LineChartOutlined", "to": Routes.USAGE_EXPLORER, "name": "Usage Explorer"},
    {"icon": "SettingOutlined", "to": Routes.SETTINGS, "name": "Settings"},
    {"icon": "ApiOutlined", "to": Routes.INSTRUMENTATION, "name": "Add instrumentation"},
]
"""侧边栏菜单，顺序即展示顺序。"""


def list_menu_items() -> List[NavMenuItem]:
    """按展示顺序返回全部菜单项。"""

    return [NavMenuItem.model_validate(entry) for entry in SIDEBAR_MENU]


def find_menu_item(route: str) -> Optional[NavMenuItem]:
    """根据路由路径查找菜单项，未配置的路由返回 None。

    Parameters
    ----------
    route: str
        前端路由路径。

    Returns
    -------
    Optional[NavMenuItem]
        匹配的菜单项。
    """

    for item in list_menu_items():
        if item.to == route:
            return item
    return None
