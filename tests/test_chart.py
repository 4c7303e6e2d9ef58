"""图表绑定测试"""

import pytest

from chartconf.core.config import settings
from chartconf.engines.chart import Chart
from chartconf.models import (
    ChartType, Configuration, DataSeries, DataSeriesItem, ListSeries,
)


def test_attach_draws_chart():
    """测试挂载时绘制图表"""
    chart = Chart("line")
    chart.configuration.title.text = "趋势"
    chart.attach()

    calls = chart.drain_calls()
    assert len(calls) == 1
    assert calls[0].function == "update"
    payload, reset = calls[0].args
    assert payload["chart"] == {"type": "line"}
    assert payload["title"] == {"text": "趋势"}
    assert reset is False
    assert chart.drain_calls() == []


def test_changes_ignored_before_attach():
    """测试挂载前的变更不产生客户端调用"""
    chart = Chart()
    chart.configuration.get_x_axis().set_extremes(1, 2)
    assert chart.pending_calls() == []


def test_forward_axis_rescaled():
    """测试极值变更转发"""
    chart = Chart()
    chart.attach()
    chart.drain_calls()

    chart.configuration.get_y_axis().set_extremes(5, 10)

    calls = chart.drain_calls()
    assert len(calls) == 1
    assert calls[0].function == "__callAxisFunction"
    assert calls[0].args == ["setExtremes", 1, 0, 5, 10, True, True]


def test_forward_reset_zoom():
    """测试重置缩放转发"""
    chart = Chart()
    chart.attach()
    chart.drain_calls()

    chart.configuration.reset_zoom()
    calls = chart.drain_calls()
    assert calls[0].function == "__callChartFunction"
    assert calls[0].args == ["zoomOut"]


def test_forward_series_changes():
    """测试序列与数据点变更转发"""
    chart = Chart(ChartType.LINE)
    chart.attach()
    chart.drain_calls()

    series = ListSeries("s", 1, 2)
    chart.configuration.add_series(series)
    series.add_data(3)
    series.update_point(0, 7)
    series.remove_point(1)
    series.set_visible(False)

    calls = chart.drain_calls()
    assert [call.function for call in calls] == [
        "__callChartFunction",
        "__callSeriesFunction",
        "__callPointFunction",
        "__callPointFunction",
        "__callSeriesFunction",
    ]
    assert calls[0].args == ["addSeries", {"name": "s", "data": [1, 2]}]
    assert calls[1].args == ["addPoint", 0, 3, True, False]
    assert calls[2].args == ["update", 0, 0, 7]
    assert calls[3].args == ["remove", 0, 1]
    assert calls[4].args == ["hide", 0]


def test_forward_data_series_item():
    """测试数据点按紧凑形式转发"""
    chart = Chart(ChartType.PIE)
    series = DataSeries("share")
    chart.configuration.add_series(series)
    chart.attach()
    chart.drain_calls()

    series.add(DataSeriesItem("A", 30))
    series.set_item_sliced(0, True)
    series.set_data([1, 2], categories=["X", "Y"])
    series.update_series()

    calls = chart.drain_calls()
    assert calls[0].args == ["addPoint", 0, {"name": "A", "y": 30}, True, False]
    assert calls[1].args == ["slice", 0, 0, True, True, True]
    assert calls[2].args == [
        "setData", 0, [{"name": "X", "y": 1}, {"name": "Y", "y": 2}]
    ]


def test_detach_stops_forwarding():
    """测试卸载后不再转发"""
    chart = Chart()
    chart.attach()
    chart.detach()
    chart.drain_calls()

    chart.configuration.reset_zoom()
    assert chart.pending_calls() == []


def test_timeline_not_supported():
    """测试时间轴模式不支持饼图"""
    chart = Chart(ChartType.PIE)
    chart.timeline = True
    with pytest.raises(ValueError):
        chart.draw_chart()

    chart.configuration.chart.type = ChartType.LINE
    chart.draw_chart()
    assert chart.pending_calls()[0].function == "update"


def test_apply_options_redraws_when_attached():
    """测试合并选项后重新绘制"""
    chart = Chart("line")
    assert chart.apply_options({"title": "未挂载"}) == ["title"]
    assert chart.pending_calls() == []

    chart.attach()
    chart.drain_calls()
    applied = chart.apply_options('{"legend": {"enabled": false}}')

    assert applied == ["legend"]
    calls = chart.drain_calls()
    assert [call.function for call in calls] == ["update"]
    assert calls[0].args[0]["legend"] == {"enabled": False}


def test_apply_options_timeline_check_before_merge():
    """测试时间轴模式下不支持的类型在合并前被拒绝"""
    chart = Chart("line")
    chart.timeline = True
    chart.attach()
    chart.drain_calls()

    with pytest.raises(ValueError):
        chart.apply_options({"title": "x", "type": "pie"})
    with pytest.raises(ValueError):
        chart.apply_options({"chart": {"type": "gauge"}})

    assert chart.configuration.chart.type == ChartType.LINE
    assert chart.configuration.title.text is None
    assert chart.pending_calls() == []

    assert chart.apply_options({"type": "column"}) == ["type"]
    assert chart.configuration.chart.type == ChartType.COLUMN


def test_set_configuration_redraws():
    """测试替换配置后重新绘制并转发新配置的变更"""
    chart = Chart()
    old = chart.configuration
    chart.attach()
    chart.drain_calls()

    replacement = Configuration()
    chart.set_configuration(replacement)
    calls = chart.drain_calls()
    assert calls[0].function == "update"
    assert calls[0].args[1] is True

    old.reset_zoom()
    assert chart.pending_calls() == []
    replacement.reset_zoom()
    assert len(chart.pending_calls()) == 1


def test_pending_calls_limit(monkeypatch):
    """测试待发送调用超过上限时丢弃最早的调用"""
    monkeypatch.setattr(settings, "max_pending_calls", 2)
    chart = Chart()
    chart.call_function("a")
    chart.call_function("b")
    chart.call_function("c")

    assert [call.function for call in chart.pending_calls()] == ["b", "c"]


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
