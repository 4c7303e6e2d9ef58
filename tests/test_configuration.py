"""配置聚合根测试"""

import pytest
from pydantic import ValidationError

from chartconf.models import (
    ChartType, ColorAxis, Configuration, ConfigurationChangeListener,
    ConfigurationStateError, DataSeries, DataSeriesItem, ListSeries, Pane,
    PlotOptionsColumn, PlotOptionsLine, PlotOptionsPie, PlotOptionsSeries,
    XAxis, YAxis,
)


class RecordingListener(ConfigurationChangeListener):
    """按顺序记录所有回调"""

    def __init__(self, name="listener", log=None):
        self.name = name
        self.log = log if log is not None else []

    def data_added(self, event):
        self.log.append((self.name, "data_added", event))

    def data_removed(self, event):
        self.log.append((self.name, "data_removed", event))

    def data_updated(self, event):
        self.log.append((self.name, "data_updated", event))

    def series_added(self, event):
        self.log.append((self.name, "series_added", event))

    def series_changed(self, event):
        self.log.append((self.name, "series_changed", event))

    def series_state_changed(self, event):
        self.log.append((self.name, "series_state_changed", event))

    def axis_rescaled(self, event):
        self.log.append((self.name, "axis_rescaled", event))

    def reset_zoom(self, redraw, animate):
        self.log.append((self.name, "reset_zoom", (redraw, animate)))

    def item_sliced(self, event):
        self.log.append((self.name, "item_sliced", event))


def test_defaults():
    """测试默认选项组"""
    configuration = Configuration()
    assert configuration.chart is not None
    assert configuration.title is not None
    assert configuration.exporting.enabled is False
    assert configuration.series == []
    assert configuration.x_axis is None


def test_chart_cannot_be_none():
    """测试 chart 不可为空"""
    configuration = Configuration()
    with pytest.raises(ValidationError):
        configuration.chart = None


def test_add_series_order_and_back_reference():
    """测试 add_series 保持顺序并建立反向引用"""
    configuration = Configuration()
    first = ListSeries("a", 1, 2)
    second = DataSeries("b")
    configuration.add_series(first)
    configuration.add_series(second)

    assert configuration.series[0] is first
    assert configuration.series[1] is second
    assert first.configuration is configuration
    assert second.configuration is configuration


def test_add_series_notifies():
    """测试 add_series 通知监听者"""
    configuration = Configuration()
    listener = RecordingListener()
    configuration.add_change_listener(listener)

    series = ListSeries("a", 1)
    configuration.add_series(series)

    assert [entry[1] for entry in listener.log] == ["series_added"]
    assert listener.log[0][2].series is series


def test_set_series_links_without_notification():
    """测试 set_series 替换序列且不通知"""
    configuration = Configuration()
    listener = RecordingListener()
    configuration.add_change_listener(listener)

    configuration.add_series(ListSeries("old"))
    listener.log.clear()

    first, second = ListSeries("a"), ListSeries("b")
    configuration.set_series(first, second)

    assert configuration.series == [first, second]
    assert second.configuration is configuration
    assert listener.log == []


def test_get_x_axis_same_instance():
    """测试两次获取 X 轴返回同一对象"""
    configuration = Configuration()
    first = configuration.get_x_axis()
    second = configuration.get_x_axis()

    assert first is second
    assert first.configuration is configuration
    assert configuration.get_number_of_x_axes() == 1


def test_lazy_axes_per_dimension():
    """测试各维度按需创建轴"""
    configuration = Configuration()
    assert isinstance(configuration.get_y_axis(), YAxis)
    assert isinstance(configuration.get_color_axis(), ColorAxis)
    assert configuration.get_z_axis() is configuration.get_z_axes()[0]


def test_axis_at_out_of_range():
    """测试越界序号返回 None"""
    configuration = Configuration()
    assert configuration.get_x_axis_at(0) is None
    assert configuration.get_color_axis_at(0) is None

    configuration.add_color_axis(ColorAxis())
    assert configuration.get_color_axis_at(0) is not None
    assert configuration.get_color_axis_at(1) is None
    assert configuration.get_color_axis_at(-1) is None


def test_add_axis_keeps_existing_link():
    """测试已挂载的轴不重新挂载"""
    owner = Configuration()
    other = Configuration()
    axis = owner.get_x_axis()

    other.add_x_axis(axis)
    assert axis.configuration is owner
    assert other.get_x_axes() == [axis]


def test_add_axis_by_dimension():
    """测试按维度标签添加轴"""
    configuration = Configuration()
    axis = YAxis()
    configuration.add_axis(axis)
    assert configuration.get_y_axis() is axis

    with pytest.raises(TypeError):
        configuration.add_x_axis(YAxis())


def test_remove_axes():
    """测试移除某维度全部轴"""
    configuration = Configuration()
    configuration.add_x_axis(XAxis())
    configuration.add_x_axis(XAxis())
    assert configuration.get_number_of_x_axes() == 2

    configuration.remove_x_axes()
    assert configuration.x_axis is None
    assert configuration.get_number_of_x_axes() == 0


def test_axis_without_dimension_is_ignored():
    """测试无维度的轴不广播事件"""
    from chartconf.models.axis import Axis

    configuration = Configuration()
    listener = RecordingListener()
    configuration.add_change_listener(listener)

    configuration.fire_axes_rescaled(Axis(), 1, 2)
    assert listener.log == []


def test_unknown_axis_index_is_minus_one():
    """测试不在配置中的轴序号为 -1"""
    configuration = Configuration()
    listener = RecordingListener()
    configuration.add_change_listener(listener)

    configuration.fire_axes_rescaled(XAxis(), 1, 2)
    assert listener.log[0][2].axis_index == -1


def test_listeners_in_registration_order():
    """测试按注册顺序通知并去重"""
    configuration = Configuration()
    calls = []
    first = RecordingListener("first", calls)
    second = RecordingListener("second", calls)
    configuration.add_change_listener(first)
    configuration.add_change_listener(second)
    configuration.add_change_listener(first)

    configuration.get_x_axis().set_extremes(0, 1)
    assert [entry[0] for entry in calls] == ["first", "second"]

    configuration.remove_change_listener(first)
    calls.clear()
    configuration.reset_zoom()
    assert calls == [("second", "reset_zoom", (True, True))]


def test_reset_zoom_keeps_extremes():
    """测试重置缩放不修改轴极值"""
    configuration = Configuration()
    axis = configuration.get_x_axis()
    axis.set_extremes(3, 7)

    configuration.reset_zoom(False, False)
    assert axis.get_extremes() == (3, 7)


def test_reverse_list_series():
    """测试按分类转置 ListSeries"""
    configuration = Configuration()
    configuration.get_x_axis().set_categories("A", "B")
    configuration.set_series(ListSeries("s1", 1, 2), ListSeries("s2", 3, 4))

    configuration.reverse_list_series()

    assert configuration.get_x_axis().categories == ["s1", "s2"]
    assert [series.name for series in configuration.series] == ["A", "B"]
    assert configuration.series[0].data == [1, 3]
    assert configuration.series[1].data == [2, 4]
    assert configuration.series[0].configuration is configuration


def test_reverse_list_series_rejects_other_series():
    """测试存在非 ListSeries 时报错"""
    configuration = Configuration()
    configuration.get_x_axis().set_categories("A")
    configuration.set_series(ListSeries("s1", 1), DataSeries("d"))

    with pytest.raises(ConfigurationStateError):
        configuration.reverse_list_series()


def test_reverse_list_series_short_data():
    """测试数据少于分类时报错"""
    configuration = Configuration()
    configuration.get_x_axis().set_categories("A", "B", "C")
    configuration.set_series(ListSeries("s1", 1))

    with pytest.raises(ConfigurationStateError):
        configuration.reverse_list_series()


def test_plot_options_registry():
    """测试按图表类型存取绘图选项"""
    configuration = Configuration()
    line = PlotOptionsLine()
    pie = PlotOptionsPie()
    configuration.add_plot_options(line)
    configuration.add_plot_options(pie)

    assert configuration.get_plot_options(ChartType.LINE) is line
    assert configuration.get_plot_options("pie") is pie
    assert configuration.get_plot_options(ChartType.COLUMN) is None
    assert configuration.get_all_plot_options() == [line, pie]

    column = PlotOptionsColumn()
    series = PlotOptionsSeries()
    configuration.set_plot_options(column, series)
    assert configuration.get_plot_options(ChartType.LINE) is None
    assert configuration.get_plot_options("series") is series
    assert configuration.get_all_plot_options() == [column, series]


def test_add_plot_options_replaces_same_type():
    """测试同类型绘图选项覆盖"""
    configuration = Configuration()
    configuration.add_plot_options(PlotOptionsLine(line_width=1))
    replacement = PlotOptionsLine(line_width=3)
    configuration.add_plot_options(replacement)

    assert configuration.get_all_plot_options() == [replacement]


def test_panes():
    """测试面板的增删"""
    configuration = Configuration()
    pane = Pane(start_angle=-90, end_angle=90)
    configuration.add_pane(pane)
    assert configuration.pane == [pane]

    configuration.remove_pane(pane)
    assert configuration.pane == []


def test_list_series_events():
    """测试 ListSeries 数据变更通知"""
    configuration = Configuration()
    series = ListSeries("s", 1, 2)
    configuration.add_series(series)
    listener = RecordingListener()
    configuration.add_change_listener(listener)

    series.add_data(3, shift=True)
    series.update_point(0, 9)
    series.remove_point(1)
    series.set_data([4, 5])
    series.set_visible(False)

    kinds = [entry[1] for entry in listener.log]
    assert kinds == [
        "data_added", "data_updated", "data_removed", "series_changed",
        "series_state_changed",
    ]
    added = listener.log[0][2]
    assert added.value == 3
    assert added.shift is True
    assert listener.log[1][2].point_index == 0
    assert listener.log[4][2].enabled is False
    assert series.data == [4, 5]


def test_add_data_without_update():
    """测试 update=False 时不通知"""
    configuration = Configuration()
    series = ListSeries("s")
    configuration.add_series(series)
    listener = RecordingListener()
    configuration.add_change_listener(listener)

    series.add_data(1, update=False)
    assert listener.log == []
    assert series.data == [1]


def test_data_series_events():
    """测试 DataSeries 数据变更通知"""
    configuration = Configuration()
    series = DataSeries("d")
    configuration.add_series(series)
    listener = RecordingListener()
    configuration.add_change_listener(listener)

    item = DataSeriesItem("A", 1)
    series.add(item)
    item.y = 5
    series.update(item)
    series.set_item_sliced(0, True)
    series.remove(item)

    kinds = [entry[1] for entry in listener.log]
    assert kinds == ["data_added", "data_updated", "item_sliced", "data_removed"]
    assert listener.log[0][2].item is item
    assert listener.log[1][2].point_index == 0
    assert listener.log[2][2].sliced is True
    assert listener.log[3][2].index == 0


def test_drilldown_registered_on_add():
    """测试未挂载序列的下钻序列在添加时注册"""
    drill = DataSeries("detail", id="detail")
    series = DataSeries("main")
    series.add_item_with_drilldown(DataSeriesItem("A", 1), drill)
    assert series.has_drilldown_series()

    configuration = Configuration()
    configuration.add_series(series)

    assert configuration.drilldown.series == [drill]
    assert drill.configuration is configuration
    assert series.get("A").drilldown == "detail"
    assert not series.has_drilldown_series()


def test_nested_drilldown_registered_recursively():
    """测试下钻序列自身的下钻序列也被注册"""
    grand = DataSeries("grand", id="grand")
    child = DataSeries("child", id="child")
    child.add_item_with_drilldown(DataSeriesItem("B", 2), grand)
    main = DataSeries("main")
    main.add_item_with_drilldown(DataSeriesItem("A", 1), child)

    configuration = Configuration()
    configuration.add_series(main)

    assert configuration.drilldown.series == [child, grand]
    assert child.configuration is configuration
    assert grand.configuration is configuration
    assert child.get("B").drilldown == "grand"
    assert not child.has_drilldown_series()


def test_drilldown_on_attached_series():
    """测试已挂载序列添加下钻点时立即注册下钻序列"""
    configuration = Configuration()
    main = DataSeries("main")
    configuration.add_series(main)
    listener = RecordingListener()
    configuration.add_change_listener(listener)

    grand = DataSeries("grand", id="grand")
    drill = DataSeries("detail", id="detail")
    drill.add_item_with_drilldown(DataSeriesItem("C", 3), grand)
    main.add_item_with_drilldown(DataSeriesItem("A", 1), drill)

    assert configuration.drilldown.series == [drill, grand]
    assert drill.configuration is configuration
    assert not main.has_drilldown_series()
    assert main.get("A").drilldown == "detail"
    assert [entry[1] for entry in listener.log] == ["data_added"]


def test_constructor_axes_linked():
    """测试构造时传入的坐标轴和序列建立反向引用"""
    series = ListSeries("s", 1, 2)
    configuration = Configuration(x_axis=[XAxis()], series=[series])
    listener = RecordingListener()
    configuration.add_change_listener(listener)

    axis = configuration.get_x_axis()
    assert axis.configuration is configuration
    assert series.configuration is configuration

    axis.set_extremes(5, 10)
    assert len(listener.log) == 1
    event = listener.log[0][2]
    assert (event.axis_index, event.minimum, event.maximum) == (0, 5, 10)


def test_assigned_axes_linked():
    """测试整体赋值的坐标轴建立反向引用"""
    configuration = Configuration()
    listener = RecordingListener()
    configuration.add_change_listener(listener)

    configuration.y_axis = [YAxis(), YAxis()]
    second = configuration.get_y_axis_at(1)
    assert second.configuration is configuration

    second.set_extremes(1, 2)
    assert [entry[1] for entry in listener.log] == ["axis_rescaled"]
    assert listener.log[0][2].axis_index == 1


def test_validated_axes_linked():
    """测试从字典校验得到的坐标轴建立反向引用"""
    configuration = Configuration.model_validate({"xAxis": [{"min": 1}], "colorAxis": [{}]})

    assert configuration.get_x_axis().min == 1
    assert configuration.get_x_axis().configuration is configuration
    assert configuration.get_color_axis().configuration is configuration


def test_assigned_axis_keeps_existing_link():
    """测试赋值不改变已挂载轴的反向引用"""
    owner = Configuration()
    axis = owner.get_x_axis()

    other = Configuration(x_axis=[axis])
    assert axis.configuration is owner
    assert other.get_x_axes() == [axis]


def test_drilldown_requires_id():
    """测试下钻序列必须有 id"""
    series = DataSeries("main")
    with pytest.raises(ValueError):
        series.add_item_with_drilldown(DataSeriesItem("A", 1), DataSeries("no-id"))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
