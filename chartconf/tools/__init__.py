"""工具包注册"""

from typing import Any, Dict

from chartconf.tools.update_chart import (
    UpdateChartInput,
    UpdateChartOutput,
    TOOL_NAME as UPDATE_CHART_NAME,
    TOOL_DESCRIPTION as UPDATE_CHART_DESC
)
from chartconf.tools.get_chart import (
    GetChartInput,
    GetChartOutput,
    TOOL_NAME as GET_CHART_NAME,
    TOOL_DESCRIPTION as GET_CHART_DESC
)
from chartconf.tools.add_series import (
    AddSeriesInput,
    AddSeriesOutput,
    TOOL_NAME as ADD_SERIES_NAME,
    TOOL_DESCRIPTION as ADD_SERIES_DESC
)
from chartconf.tools.set_extremes import (
    SetExtremesInput,
    SetExtremesOutput,
    TOOL_NAME as SET_EXTREMES_NAME,
    TOOL_DESCRIPTION as SET_EXTREMES_DESC
)
from chartconf.tools.reset_zoom import (
    ResetZoomInput,
    ResetZoomOutput,
    TOOL_NAME as RESET_ZOOM_NAME,
    TOOL_DESCRIPTION as RESET_ZOOM_DESC
)


# 工具注册表
TOOL_REGISTRY: Dict[str, Dict[str, Any]] = {
    UPDATE_CHART_NAME: {
        "name": UPDATE_CHART_NAME,
        "description": UPDATE_CHART_DESC,
        "input_schema": UpdateChartInput,
        "output_schema": UpdateChartOutput,
    },
    GET_CHART_NAME: {
        "name": GET_CHART_NAME,
        "description": GET_CHART_DESC,
        "input_schema": GetChartInput,
        "output_schema": GetChartOutput,
    },
    ADD_SERIES_NAME: {
        "name": ADD_SERIES_NAME,
        "description": ADD_SERIES_DESC,
        "input_schema": AddSeriesInput,
        "output_schema": AddSeriesOutput,
    },
    SET_EXTREMES_NAME: {
        "name": SET_EXTREMES_NAME,
        "description": SET_EXTREMES_DESC,
        "input_schema": SetExtremesInput,
        "output_schema": SetExtremesOutput,
    },
    RESET_ZOOM_NAME: {
        "name": RESET_ZOOM_NAME,
        "description": RESET_ZOOM_DESC,
        "input_schema": ResetZoomInput,
        "output_schema": ResetZoomOutput,
    },
}


def get_tool_schema(tool_name: str) -> Dict[str, Any]:
    """获取工具的 JSON Schema（用于 LLM）"""
    if tool_name not in TOOL_REGISTRY:
        raise ValueError(f"未知工具: {tool_name}")

    tool = TOOL_REGISTRY[tool_name]
    return {
        "name": tool["name"],
        "description": tool["description"],
        "parameters": tool["input_schema"].model_json_schema()
    }


def get_all_tool_schemas() -> list[Dict[str, Any]]:
    """获取所有工具的 Schema"""
    return [get_tool_schema(name) for name in TOOL_REGISTRY.keys()]


__all__ = [
    "TOOL_REGISTRY",
    "get_tool_schema",
    "get_all_tool_schemas",
    # Tool Names
    "UPDATE_CHART_NAME",
    "GET_CHART_NAME",
    "ADD_SERIES_NAME",
    "SET_EXTREMES_NAME",
    "RESET_ZOOM_NAME",
]
