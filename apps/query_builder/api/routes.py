"""FastAPI 路由定义。"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from apps.query_builder.api.dependencies import (
    get_api_recorder,
    get_query_state_store,
    get_unit_filter_config,
    get_unit_taxonomy,
)
from apps.query_builder.api.schemas import (
    CategoryOptionsResponse,
    NavigationMenuResponse,
    SchemaExportResponse,
    UnitOptionsResponse,
    UnitSelectionRequest,
    UnitSelectionResponse,
)
from apps.query_builder.contracts.navigation import NavMenuItem
from apps.query_builder.contracts.query_state import QueryState
from apps.query_builder.contracts.units import UnitCategory, UnitGroup, UnitOption
from apps.query_builder.infra.persistence import ApiRecorder
from apps.query_builder.services import navigation, unit_options
from apps.query_builder.services.unit_filter import UnitFilterConfig, UnitFilterController
from apps.query_builder.stores import QueryStateStore, UnitTaxonomy

LOGGER = logging.getLogger(__name__)

router = APIRouter()

SCHEMA_EXPORT_MODELS: dict[str, type] = {
    UnitOption.schema_name(): UnitOption,
    UnitCategory.schema_name(): UnitCategory,
    UnitGroup.schema_name(): UnitGroup,
    QueryState.schema_name(): QueryState,
    NavMenuItem.schema_name(): NavMenuItem,
}


def _record_request(api_recorder: ApiRecorder, endpoint: str, payload: object) -> None:
    """统一请求落盘入口。"""

    api_recorder.record(endpoint=endpoint, direction="request", payload=payload)


def _record_response(api_recorder: ApiRecorder, endpoint: str, payload: object) -> None:
    """统一响应落盘入口。"""

    api_recorder.record(endpoint=endpoint, direction="response", payload=payload)


def _record_error(
    api_recorder: ApiRecorder,
    endpoint: str,
    *,
    error_type: str,
    error_message: str,
    status_code: int,
) -> None:
    """落盘错误信息并记录日志。"""

    LOGGER.warning(
        "API 调用失败",
        extra={
            "endpoint": endpoint,
            "error_type": error_type,
            "status_code": status_code,
        },
    )
    api_recorder.record(
        endpoint=endpoint,
        direction="error",
        payload={
            "error_type": error_type,
            "error_message": error_message,
            "status_code": status_code,
        },
    )


def _build_controller(
    *,
    taxonomy: UnitTaxonomy,
    store: QueryStateStore,
    query_id: str,
    config: UnitFilterConfig,
) -> UnitFilterController:
    """为单个查询构造单位筛选控制器。"""

    return UnitFilterController(
        taxonomy=taxonomy,
        accessor=store.handle(query_id=query_id),
        config=config,
    )


def _selection_response(*, store: QueryStateStore, query_id: str) -> UnitSelectionResponse:
    """由 Store 快照生成单位选择响应。"""

    state = store.get(query_id=query_id)
    return UnitSelectionResponse(
        query_id=state.query_id,
        unit=state.unit,
        updated_at=state.updated_at,
    )


@router.get("/api/units/options", response_model=UnitOptionsResponse)
def list_unit_options(
    search: Optional[str] = None,
    taxonomy: UnitTaxonomy = Depends(get_unit_taxonomy),
    config: UnitFilterConfig = Depends(get_unit_filter_config),
) -> UnitOptionsResponse:
    """返回全部单位分组，提供 search 时按展示文本裁剪。"""

    groups = unit_options.build_grouped_options(
        taxonomy=taxonomy,
        categories=config.categories_to_support,
    )
    if search:
        groups = unit_options.filter_grouped_options(groups=groups, input_text=search)
    return UnitOptionsResponse(groups=groups, search=search or None)


@router.get("/api/units/categories/{name}", response_model=CategoryOptionsResponse)
def get_category_options(
    name: str,
    taxonomy: UnitTaxonomy = Depends(get_unit_taxonomy),
) -> CategoryOptionsResponse:
    """返回单个分类的单位选项，未知分类返回空列表。"""

    options = unit_options.options_for_category(taxonomy=taxonomy, name=name)
    return CategoryOptionsResponse(category=name, options=options)


@router.get("/api/query/{query_id}/unit", response_model=UnitSelectionResponse)
def get_unit_selection(
    query_id: str,
    store: QueryStateStore = Depends(get_query_state_store),
) -> UnitSelectionResponse:
    """读取查询当前选中的单位，从未写入时 unit 为 null。"""

    # unit 与 updated_at 取自同一快照。
    return _selection_response(store=store, query_id=query_id)


@router.put("/api/query/{query_id}/unit", response_model=UnitSelectionResponse)
def update_unit_selection(
    query_id: str,
    request: UnitSelectionRequest,
    taxonomy: UnitTaxonomy = Depends(get_unit_taxonomy),
    store: QueryStateStore = Depends(get_query_state_store),
    config: UnitFilterConfig = Depends(get_unit_filter_config),
    api_recorder: ApiRecorder = Depends(get_api_recorder),
) -> UnitSelectionResponse:
    """应用单位选择变更，unit 为 null 时清空选择。"""

    endpoint = "api_query_unit_update"
    _record_request(
        api_recorder=api_recorder,
        endpoint=endpoint,
        payload={"query_id": query_id, "unit": request.unit},
    )
    try:
        controller = _build_controller(taxonomy=taxonomy, store=store, query_id=query_id, config=config)
        controller.on_selection_change(request.unit)
        response = _selection_response(store=store, query_id=query_id)
    except Exception as error:  # noqa: BLE001 - 兜底记录异常
        LOGGER.exception("单位选择更新失败", extra={"endpoint": endpoint})
        _record_error(
            api_recorder=api_recorder,
            endpoint=endpoint,
            error_type=error.__class__.__name__,
            error_message=str(error),
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
        raise
    _record_response(api_recorder=api_recorder, endpoint=endpoint, payload=response)
    return response


@router.get("/api/query/{query_id}/state", response_model=QueryState)
def get_query_state(
    query_id: str,
    store: QueryStateStore = Depends(get_query_state_store),
    api_recorder: ApiRecorder = Depends(get_api_recorder),
) -> QueryState:
    """读取已写入过的查询状态，未写入时返回 404。"""

    endpoint = "api_query_state_get"
    try:
        state = store.require(query_id=query_id)
    except KeyError as error:
        _record_error(
            api_recorder=api_recorder,
            endpoint=endpoint,
            error_type=error.__class__.__name__,
            error_message=str(error),
            status_code=status.HTTP_404_NOT_FOUND,
        )
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error)) from error
    return state


@router.get("/api/navigation/menu", response_model=NavigationMenuResponse)
def get_navigation_menu() -> NavigationMenuResponse:
    """返回侧边栏菜单。"""

    return NavigationMenuResponse(items=navigation.list_menu_items())


@router.get("/api/schema/export", response_model=SchemaExportResponse)
def export_contract_schemas() -> SchemaExportResponse:
    """导出核心契约的 JSONSchema。"""

    schemas: dict[str, object] = {}
    for schema_name, model in SCHEMA_EXPORT_MODELS.items():
        schemas[schema_name] = model.model_json_schema()
    return SchemaExportResponse(schemas=schemas)
