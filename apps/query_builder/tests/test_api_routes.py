"""单位服务 HTTP 接口测试。"""

from __future__ import annotations

import json
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

from apps.query_builder.api import dependencies
from apps.query_builder.api.app import create_app
from apps.query_builder.infra.persistence import ApiRecorder
from apps.query_builder.services.unit_filter import UnitFilterConfig
from apps.query_builder.stores.query_state_store import QueryStateStore


@pytest.fixture
def received() -> List[Optional[str]]:
    """收集上层回调收到的值。"""

    return []


@pytest.fixture
def client(tmp_path, fixed_clock, received) -> TestClient:
    """替换 Store、回调与落盘目录后的测试客户端。"""

    app = create_app()
    store = QueryStateStore(clock=fixed_clock)
    recorder = ApiRecorder(base_path=tmp_path, clock=fixed_clock)
    config = UnitFilterConfig(on_change=received.append)
    app.dependency_overrides[dependencies.get_query_state_store] = lambda: store
    app.dependency_overrides[dependencies.get_api_recorder] = lambda: recorder
    app.dependency_overrides[dependencies.get_unit_filter_config] = lambda: config
    return TestClient(app)


def test_list_unit_options_returns_supported_groups(client: TestClient) -> None:
    """默认返回全部支持分类。"""

    response = client.get("/api/units/options")
    assert response.status_code == 200
    body = response.json()
    labels = [group["label"] for group in body["groups"]]
    assert labels == ["Time", "Data", "Data Rate", "Throughput", "Miscellaneous", "Boolean"]
    assert body["search"] is None
    time_values = [option["value"] for option in body["groups"][0]["options"]]
    assert time_values == ["ns", "µs", "ms", "s", "m", "h", "d"]


def test_list_unit_options_with_search(client: TestClient) -> None:
    """搜索 MIL 只保留 milliseconds。"""

    response = client.get("/api/units/options", params={"search": "MIL"})
    assert response.status_code == 200
    body = response.json()
    assert body["search"] == "MIL"
    assert body["groups"] == [
        {"label": "Time", "options": [{"value": "ms", "label": "milliseconds (ms)"}]},
    ]


def test_category_options_known_and_unknown(client: TestClient) -> None:
    """已知分类返回选项，未知分类返回空列表。"""

    response = client.get("/api/units/categories/Data%20Rate")
    assert response.status_code == 200
    assert response.json()["options"][0] == {"value": "binBps", "label": "bytes/sec(IEC)"}
    response = client.get("/api/units/categories/Distance")
    assert response.status_code == 200
    assert response.json() == {"category": "Distance", "options": []}


def test_selection_round_trip_and_clear(client: TestClient, received) -> None:
    """写入后读取一致，null 清空选择，回调逐次收到取值。"""

    assert client.get("/api/query/q-1/unit").json()["unit"] is None
    response = client.put("/api/query/q-1/unit", json={"unit": "ms"})
    assert response.status_code == 200
    assert response.json()["unit"] == "ms"
    assert client.get("/api/query/q-1/unit").json()["unit"] == "ms"
    response = client.put("/api/query/q-1/unit", json={"unit": None})
    assert response.status_code == 200
    assert client.get("/api/query/q-1/unit").json()["unit"] is None
    assert received == ["ms", None]


def test_selection_request_requires_unit_field(client: TestClient) -> None:
    """请求体缺少 unit 字段时返回 422。"""

    response = client.put("/api/query/q-1/unit", json={})
    assert response.status_code == 422


def test_selection_change_is_recorded(client: TestClient, tmp_path) -> None:
    """单位变更的请求与响应都会落盘。"""

    client.put("/api/query/q-2/unit", json={"unit": "percent"})
    target = tmp_path / "api_query_unit_update"
    assert list(target.glob("*_request.json"))
    assert list(target.glob("*_response.json"))


def test_query_state_not_found_then_found(client: TestClient) -> None:
    """未写入的查询状态返回 404，写入后可读取。"""

    assert client.get("/api/query/q-3/state").status_code == 404
    client.put("/api/query/q-3/unit", json={"unit": "bool"})
    response = client.get("/api/query/q-3/state")
    assert response.status_code == 200
    assert response.json()["unit"] == "bool"


def test_navigation_menu(client: TestClient) -> None:
    """菜单项按声明顺序返回。"""

    items = client.get("/api/navigation/menu").json()["items"]
    assert items[0] == {"to": "/application", "name": "Services", "icon": "BarChartOutlined", "tags": []}
    assert len(items) == 9


def test_schema_export(client: TestClient) -> None:
    """导出全部契约 Schema。"""

    schemas = client.get("/api/schema/export").json()["schemas"]
    assert set(schemas) == {"unit_option", "unit_category", "unit_group", "query_state", "nav_menu_item"}


def test_selection_read_matches_last_write_snapshot(client: TestClient) -> None:
    """读取到的单位与写入时间来自同一次写入。"""

    written = client.put("/api/query/q-4/unit", json={"unit": "cps"}).json()
    read = client.get("/api/query/q-4/unit").json()
    assert read == written


def test_failing_callback_is_logged_and_recorded(tmp_path, fixed_clock) -> None:
    """回调失败时返回 500，落盘错误信息且不写入状态。"""

    def explode(value: Optional[str]) -> None:
        raise RuntimeError(f"拒绝单位 {value}")

    app = create_app()
    store = QueryStateStore(clock=fixed_clock)
    recorder = ApiRecorder(base_path=tmp_path, clock=fixed_clock)
    config = UnitFilterConfig(on_change=explode)
    app.dependency_overrides[dependencies.get_query_state_store] = lambda: store
    app.dependency_overrides[dependencies.get_api_recorder] = lambda: recorder
    app.dependency_overrides[dependencies.get_unit_filter_config] = lambda: config
    client = TestClient(app, raise_server_exceptions=False)

    response = client.put("/api/query/q-5/unit", json={"unit": "ms"})
    assert response.status_code == 500
    error_files = list((tmp_path / "api_query_unit_update").glob("*_error.json"))
    assert len(error_files) == 1
    payload = json.loads(error_files[0].read_text(encoding="utf-8"))
    assert payload["error_type"] == "RuntimeError"
    assert payload["status_code"] == 500
    assert store.get_unit(query_id="q-5") is None
