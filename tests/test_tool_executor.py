"""工具执行器测试"""

import pytest

from chartconf.engines.chart_manager import get_chart_manager
from chartconf.engines.tool_executor import ToolExecutionError, get_tool_executor
from chartconf.tools import TOOL_REGISTRY, get_all_tool_schemas, get_tool_schema


@pytest.fixture
def chart_id():
    manager = get_chart_manager()
    chart_id = manager.create_chart("line")
    manager.get_chart(chart_id).drain_calls()
    yield chart_id
    if manager.chart_exists(chart_id):
        manager.delete_chart(chart_id)


def test_registry():
    """测试工具注册表"""
    assert set(TOOL_REGISTRY) == {
        "update_chart", "get_chart", "add_series", "set_extremes", "reset_zoom"
    }
    schema = get_tool_schema("set_extremes")
    assert schema["name"] == "set_extremes"
    assert "chart_id" in schema["parameters"]["properties"]
    assert len(get_all_tool_schemas()) == 5

    with pytest.raises(ValueError):
        get_tool_schema("nope")


def test_update_chart(chart_id):
    """测试合并配置并重新绘制"""
    result = get_tool_executor().execute("update_chart", {
        "chart_id": chart_id,
        "options": {"title": "库存", "legend": {"enabled": False}},
    })

    assert result == {"chart_id": chart_id, "applied": ["title", "legend"]}
    chart = get_chart_manager().get_chart(chart_id)
    assert chart.configuration.title.text == "库存"
    assert chart.pending_calls()[-1].function == "update"


def test_get_chart(chart_id):
    """测试获取图表配置"""
    result = get_tool_executor().execute("get_chart", {"chart_id": chart_id})

    assert result["chart_id"] == chart_id
    assert result["configuration"]["chart"] == {"type": "line"}
    assert result["series_count"] == 0


def test_add_series(chart_id):
    """测试添加数据序列"""
    result = get_tool_executor().execute("add_series", {
        "chart_id": chart_id,
        "rows": [{"month": "1月", "sales": 10}, {"month": "2月", "sales": 20}],
        "name": "销量",
        "type": "column",
    })

    assert result == {"chart_id": chart_id, "series_index": 0, "point_count": 2}
    chart = get_chart_manager().get_chart(chart_id)
    series = chart.configuration.series[0]
    assert series.name == "销量"
    assert series.configuration is chart.configuration
    assert chart.pending_calls()[-1].args[0] == "addSeries"


def test_set_extremes(chart_id):
    """测试设置坐标轴范围"""
    executor = get_tool_executor()
    result = executor.execute("set_extremes", {
        "chart_id": chart_id, "dimension": 1, "min": 0, "max": 50,
    })

    assert result == {"chart_id": chart_id, "min": 0, "max": 50}
    chart = get_chart_manager().get_chart(chart_id)
    assert chart.configuration.get_y_axis().get_extremes() == (0, 50)
    assert chart.pending_calls()[-1].args == ["setExtremes", 1, 0, 0, 50, True, True]

    with pytest.raises(ToolExecutionError) as exc_info:
        executor.execute("set_extremes", {"chart_id": chart_id, "axis_index": 3})
    assert exc_info.value.code == "TOOL_ERROR"


def test_reset_zoom(chart_id):
    """测试重置缩放"""
    result = get_tool_executor().execute("reset_zoom", {"chart_id": chart_id})

    assert result == {"chart_id": chart_id, "pending_calls": 1}
    chart = get_chart_manager().get_chart(chart_id)
    assert chart.pending_calls()[0].args == ["zoomOut"]


def test_validation_error():
    """测试参数校验失败"""
    with pytest.raises(ToolExecutionError) as exc_info:
        get_tool_executor().execute("get_chart", {})

    assert exc_info.value.code == "VALIDATION_ERROR"
    assert exc_info.value.detail["errors"][0]["loc"] == ("chart_id",)


def test_unknown_tool():
    """测试未知工具"""
    with pytest.raises(ToolExecutionError) as exc_info:
        get_tool_executor().execute("drop_table", {})

    assert exc_info.value.code == "TOOL_ERROR"
    assert exc_info.value.detail == {"exception": "ValueError"}


def test_unknown_chart():
    """测试图表不存在"""
    with pytest.raises(ToolExecutionError) as exc_info:
        get_tool_executor().execute("reset_zoom", {"chart_id": "ch_missing"})

    assert exc_info.value.code == "TOOL_ERROR"
    assert "ch_missing" in str(exc_info.value)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
