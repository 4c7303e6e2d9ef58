"""图表配置（聚合根）"""

from typing import Any, Dict, List, Optional, Union
from pydantic import Field, PrivateAttr, SerializeAsAny, field_serializer, model_validator

from chartconf.models.axis import Axis, ColorAxis, XAxis, YAxis, ZAxis
from chartconf.models.base import IdentityModel
from chartconf.models.chart import (
    Accessibility, ChartModel, Credits, Exporting, Legend, Loading, Navigator,
    NoData, Number, Pane, RangeSelector, Scrollbar, Subtitle, Time, Title, Tooltip,
)
from chartconf.models.enums import AxisDimension, ChartType
from chartconf.models.events import (
    AxisRescaledEvent, ConfigurationChangeListener, DataAddedEvent, DataRemovedEvent,
    DataUpdatedEvent, ItemSlicedEvent, SeriesAddedEvent, SeriesChangedEvent,
    SeriesStateEvent,
)
from chartconf.models.plot_options import SERIES_KEY, AbstractPlotOptions
from chartconf.models.series import DataSeries, DataSeriesItem, Drilldown, ListSeries, Series


class ConfigurationStateError(Exception):
    """配置状态不满足操作前提"""
    pass


# 维度 -> (字段名, 轴类型)
AXIS_FIELDS: Dict[AxisDimension, tuple] = {
    AxisDimension.X_AXIS: ("x_axis", XAxis),
    AxisDimension.Y_AXIS: ("y_axis", YAxis),
    AxisDimension.Z_AXIS: ("z_axis", ZAxis),
    AxisDimension.COLOR_AXIS: ("color_axis", ColorAxis),
}


class Configuration(IdentityModel):
    """
    图表配置

    持有全部选项组、各维度的坐标轴、序列与按图表类型索引的绘图选项，
    并把运行时变更（极值、缩放、序列与数据点变化）广播给已注册的监听者。

    监听者列表不做同步，只能在单线程中使用。
    """

    chart: ChartModel = Field(default_factory=ChartModel, description="图表全局设置，不可为空")
    title: Optional[Title] = Field(default_factory=Title)
    subtitle: Optional[Subtitle] = Field(default_factory=Subtitle)
    tooltip: Optional[Tooltip] = Field(default_factory=Tooltip)
    legend: Optional[Legend] = Field(default_factory=Legend)
    credits: Optional[Credits] = Field(default_factory=Credits)
    exporting: Optional[Exporting] = Field(default_factory=lambda: Exporting(enabled=False))
    accessibility: Optional[Accessibility] = Field(default_factory=Accessibility)
    range_selector: Optional[RangeSelector] = Field(default_factory=RangeSelector)
    navigator: Optional[Navigator] = Field(default_factory=Navigator)
    scrollbar: Optional[Scrollbar] = Field(default_factory=Scrollbar)
    loading: Optional[Loading] = Field(default_factory=Loading)
    no_data: Optional[NoData] = Field(default_factory=NoData)
    time: Optional[Time] = Field(default_factory=Time)
    pane: Optional[List[Pane]] = None
    x_axis: Optional[List[SerializeAsAny[XAxis]]] = None
    y_axis: Optional[List[SerializeAsAny[YAxis]]] = None
    z_axis: Optional[List[SerializeAsAny[ZAxis]]] = None
    color_axis: Optional[List[SerializeAsAny[ColorAxis]]] = None
    series: List[SerializeAsAny[Series]] = Field(default_factory=list)
    drilldown: Optional[Drilldown] = None
    plot_options: Dict[str, SerializeAsAny[AbstractPlotOptions]] = Field(default_factory=dict)

    _listeners: List[ConfigurationChangeListener] = PrivateAttr(default_factory=list)

    @model_validator(mode="after")
    def link_children(self) -> "Configuration":
        # 构造或整体赋值传入的坐标轴与序列建立反向引用
        for field, _ in AXIS_FIELDS.values():
            for axis in getattr(self, field) or []:
                if axis.configuration is None:
                    axis.set_configuration(self)
        for series in self.series:
            if series.configuration is None:
                series.set_configuration(self)
        return self

    @field_serializer("x_axis", "y_axis", "z_axis", "color_axis", "pane", mode="wrap")
    def single_or_list(self, value: Any, handler: Any) -> Any:
        # 单个对象直接输出，多个输出数组
        data = handler(value)
        if isinstance(data, list) and len(data) == 1:
            return data[0]
        return data

    # ---------- 坐标轴 ----------

    def _axes(self, dimension: AxisDimension, create: bool = False) -> Optional[List[Axis]]:
        field, _ = AXIS_FIELDS[dimension]
        if getattr(self, field) is None and create:
            setattr(self, field, [])
        return getattr(self, field)

    def _first_axis(self, dimension: AxisDimension) -> Axis:
        axes = self._axes(dimension, create=True)
        if not axes:
            _, axis_class = AXIS_FIELDS[dimension]
            axis = axis_class()
            axis.set_configuration(self)
            axes.append(axis)
        return axes[0]

    def _axis_at(self, dimension: AxisDimension, index: int) -> Optional[Axis]:
        axes = self._axes(dimension)
        if axes is None or not 0 <= index < len(axes):
            return None
        return axes[index]

    def _add_axis(self, dimension: AxisDimension, axis: Axis) -> None:
        _, axis_class = AXIS_FIELDS[dimension]
        if not isinstance(axis, axis_class):
            raise TypeError(f"需要 {axis_class.__name__}，实际为 {type(axis).__name__}")
        if axis.configuration is None:
            axis.set_configuration(self)
        self._axes(dimension, create=True).append(axis)

    def _number_of_axes(self, dimension: AxisDimension) -> int:
        return len(self._axes(dimension) or [])

    def get_x_axis(self) -> XAxis:
        """第一个 X 轴（不存在时创建）"""
        return self._first_axis(AxisDimension.X_AXIS)

    def get_x_axis_at(self, index: int) -> Optional[XAxis]:
        return self._axis_at(AxisDimension.X_AXIS, index)

    def get_x_axes(self) -> List[XAxis]:
        return self._axes(AxisDimension.X_AXIS, create=True)

    def get_number_of_x_axes(self) -> int:
        return self._number_of_axes(AxisDimension.X_AXIS)

    def add_x_axis(self, axis: XAxis) -> None:
        self._add_axis(AxisDimension.X_AXIS, axis)

    def remove_x_axes(self) -> None:
        self.x_axis = None

    def get_y_axis(self) -> YAxis:
        """第一个 Y 轴（不存在时创建）"""
        return self._first_axis(AxisDimension.Y_AXIS)

    def get_y_axis_at(self, index: int) -> Optional[YAxis]:
        return self._axis_at(AxisDimension.Y_AXIS, index)

    def get_y_axes(self) -> List[YAxis]:
        return self._axes(AxisDimension.Y_AXIS, create=True)

    def get_number_of_y_axes(self) -> int:
        return self._number_of_axes(AxisDimension.Y_AXIS)

    def add_y_axis(self, axis: YAxis) -> None:
        self._add_axis(AxisDimension.Y_AXIS, axis)

    def remove_y_axes(self) -> None:
        self.y_axis = None

    def get_z_axis(self) -> ZAxis:
        """第一个 Z 轴（不存在时创建）"""
        return self._first_axis(AxisDimension.Z_AXIS)

    def get_z_axis_at(self, index: int) -> Optional[ZAxis]:
        return self._axis_at(AxisDimension.Z_AXIS, index)

    def get_z_axes(self) -> List[ZAxis]:
        return self._axes(AxisDimension.Z_AXIS, create=True)

    def get_number_of_z_axes(self) -> int:
        return self._number_of_axes(AxisDimension.Z_AXIS)

    def add_z_axis(self, axis: ZAxis) -> None:
        self._add_axis(AxisDimension.Z_AXIS, axis)

    def remove_z_axes(self) -> None:
        self.z_axis = None

    def get_color_axis(self) -> ColorAxis:
        """第一个颜色轴（不存在时创建）"""
        return self._first_axis(AxisDimension.COLOR_AXIS)

    def get_color_axis_at(self, index: int) -> Optional[ColorAxis]:
        return self._axis_at(AxisDimension.COLOR_AXIS, index)

    def get_color_axes(self) -> List[ColorAxis]:
        return self._axes(AxisDimension.COLOR_AXIS, create=True)

    def get_number_of_color_axes(self) -> int:
        return self._number_of_axes(AxisDimension.COLOR_AXIS)

    def add_color_axis(self, axis: ColorAxis) -> None:
        self._add_axis(AxisDimension.COLOR_AXIS, axis)

    def remove_color_axes(self) -> None:
        self.color_axis = None

    def get_axes(self, dimension: AxisDimension) -> List[Axis]:
        """按维度获取坐标轴列表（不存在时创建）"""
        return self._axes(dimension, create=True)

    def get_axis_at(self, dimension: AxisDimension, index: int) -> Optional[Axis]:
        return self._axis_at(dimension, index)

    def add_axis(self, axis: Axis) -> None:
        """按轴自身的维度标签添加坐标轴"""
        if axis.dimension is None:
            raise TypeError(f"{type(axis).__name__} 没有维度，无法添加")
        self._add_axis(axis.dimension, axis)

    def add_pane(self, pane: Pane) -> None:
        self._append_item("pane", pane)

    def remove_pane(self, pane: Pane) -> None:
        self._remove_item("pane", pane)

    # ---------- 序列 ----------

    def add_series(self, series: Series) -> None:
        """
        添加序列

        建立反向引用，注册嵌套的下钻序列，并通知监听者。
        """
        self.series.append(series)
        self._link_series(series)
        self.fire_series_added(series)

    def set_series(self, *series: Series) -> None:
        """替换全部序列（不通知监听者）"""
        self.series = list(series)
        for item in self.series:
            self._link_series(item)

    def _link_series(self, series: Series) -> None:
        series.set_configuration(self)
        if isinstance(series, DataSeries) and series.has_drilldown_series():
            drilldown = self.get_drilldown()
            for nested in series.pop_drilldown_series():
                drilldown.add_series(nested)

    def get_drilldown(self) -> Drilldown:
        """下钻配置（不存在时创建）"""
        if self.drilldown is None:
            self.drilldown = Drilldown(self)
        return self.drilldown

    def reverse_list_series(self) -> None:
        """
        以 X 轴分类转置 ListSeries

        转置后每个分类成为一个序列，原序列名成为新的分类。

        Raises:
            ConfigurationStateError: 存在非 ListSeries 序列或数据与分类数量不匹配
        """
        for series in self.series:
            if not isinstance(series, ListSeries):
                raise ConfigurationStateError(
                    f"只能转置 ListSeries，发现 {type(series).__name__}"
                )

        x_axis = self.get_x_axis()
        categories = x_axis.categories or []
        for series in self.series:
            if len(series.data) < len(categories):
                raise ConfigurationStateError(
                    f"序列 {series.name} 的数据少于分类数量 {len(categories)}"
                )

        new_categories = [series.name for series in self.series]
        new_series = []
        for index, category in enumerate(categories):
            values = [series.data[index] for series in self.series]
            new_series.append(ListSeries(category, *values))

        self.set_series(*new_series)
        x_axis.categories = new_categories

    # ---------- 绘图选项 ----------

    def add_plot_options(self, plot_options: AbstractPlotOptions) -> None:
        """按图表类型添加绘图选项（同类型覆盖）"""
        self.plot_options[plot_options.options_key] = plot_options

    def set_plot_options(self, *plot_options: AbstractPlotOptions) -> None:
        self.plot_options = {}
        for options in plot_options:
            self.add_plot_options(options)

    def get_plot_options(self, chart_type: Union[ChartType, str]) -> Optional[AbstractPlotOptions]:
        key = SERIES_KEY if chart_type == SERIES_KEY else ChartType(chart_type).value
        return self.plot_options.get(key)

    def get_all_plot_options(self) -> List[AbstractPlotOptions]:
        return list(self.plot_options.values())

    # ---------- 监听者 ----------

    def add_change_listener(self, listener: ConfigurationChangeListener) -> None:
        """注册监听者（同一对象只注册一次）"""
        if not any(registered is listener for registered in self._listeners):
            self._listeners.append(listener)

    def remove_change_listener(self, listener: ConfigurationChangeListener) -> None:
        self._listeners = [registered for registered in self._listeners if registered is not listener]

    @property
    def change_listeners(self) -> List[ConfigurationChangeListener]:
        return list(self._listeners)

    def fire_data_added(self, series: Series, value: Optional[Number] = None,
                        item: Optional[DataSeriesItem] = None, shift: bool = False) -> None:
        event = DataAddedEvent(series=series, value=value, item=item, shift=shift)
        for listener in list(self._listeners):
            listener.data_added(event)

    def fire_data_removed(self, series: Series, index: int) -> None:
        event = DataRemovedEvent(series=series, index=index)
        for listener in list(self._listeners):
            listener.data_removed(event)

    def fire_data_updated(self, series: Series, point_index: int, value: Optional[Number] = None,
                          item: Optional[DataSeriesItem] = None) -> None:
        event = DataUpdatedEvent(series=series, point_index=point_index, value=value, item=item)
        for listener in list(self._listeners):
            listener.data_updated(event)

    def fire_series_added(self, series: Series) -> None:
        event = SeriesAddedEvent(series=series)
        for listener in list(self._listeners):
            listener.series_added(event)

    def fire_series_changed(self, series: Series) -> None:
        event = SeriesChangedEvent(series=series)
        for listener in list(self._listeners):
            listener.series_changed(event)

    def fire_series_enabled(self, series: Series, enabled: bool) -> None:
        event = SeriesStateEvent(series=series, enabled=enabled)
        for listener in list(self._listeners):
            listener.series_state_changed(event)

    def fire_item_sliced(self, series: Series, index: int, sliced: bool,
                         redraw: bool = True, animation: bool = True) -> None:
        event = ItemSlicedEvent(series=series, index=index, sliced=sliced,
                                redraw=redraw, animation=animation)
        for listener in list(self._listeners):
            listener.item_sliced(event)

    def fire_axes_rescaled(self, axis: Axis, minimum: Optional[Number], maximum: Optional[Number],
                           redraw: bool = True, animate: bool = True) -> None:
        """
        广播坐标轴极值变更

        Args:
            axis: 事件来源轴，按其维度标签和在该维度列表中的位置定位
            minimum: 新最小值
            maximum: 新最大值
            redraw: 是否重绘
            animate: 是否动画
        """
        dimension = axis.dimension
        if dimension is None:
            return

        axes = self._axes(dimension) or []
        axis_index = next((i for i, candidate in enumerate(axes) if candidate is axis), -1)
        event = AxisRescaledEvent(
            dimension=dimension.index,
            axis_index=axis_index,
            minimum=minimum,
            maximum=maximum,
            redraw=redraw,
            animate=animate,
        )
        for listener in list(self._listeners):
            listener.axis_rescaled(event)

    def reset_zoom(self, redraw: bool = True, animate: bool = True) -> None:
        """通知监听者重置缩放（不修改任何轴的极值）"""
        for listener in list(self._listeners):
            listener.reset_zoom(redraw, animate)
