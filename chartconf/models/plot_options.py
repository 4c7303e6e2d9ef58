"""绘图选项（每种图表类型一个记录，通过 chart_type 标签分发）"""

from typing import Any, ClassVar, Dict, List, Optional, Type, Union
from pydantic import Field, field_validator

from chartconf.models.base import ConfigurationObject
from chartconf.models.chart import (
    Animation, DataLabels, Events, Marker, Number, SeriesTooltip, States, Zones,
)
from chartconf.models.enums import (
    ChartType, Cursor, DashStyle, Dimension, Stacking, ZoneAxis,
)
from chartconf.models.style import Color, Style
from chartconf.utils.timestamp import coerce_timestamp

SERIES_KEY = "series"


class AbstractPlotOptions(ConfigurationObject):
    """
    绘图选项公共能力集

    所有图表类型共享的选项；具体类型通过 chart_type 标签区分，
    PlotOptionsSeries 的标签为空，作用于所有序列。
    """

    chart_type: ClassVar[Optional[ChartType]] = None

    allow_point_select: Optional[bool] = None
    animation: Optional[Union[bool, Animation]] = None
    animation_limit: Optional[Number] = None
    class_name: Optional[str] = None
    clip: Optional[bool] = None
    color: Optional[Color] = None
    color_index: Optional[int] = None
    cursor: Optional[Cursor] = None
    data_labels: Optional[DataLabels] = None
    description: Optional[str] = None
    enable_mouse_tracking: Optional[bool] = None
    events: Optional[Events] = None
    expose_element_to_a11y: Optional[bool] = None
    find_nearest_point_by: Optional[Dimension] = None
    get_extremes_from_all: Optional[bool] = None
    keys: Optional[List[str]] = None
    linked_to: Optional[str] = None
    opacity: Optional[Number] = None
    point_description_formatter: Optional[str] = Field(None, alias="_fn_pointDescriptionFormatter")
    selected: Optional[bool] = None
    shadow: Optional[bool] = None
    show_checkbox: Optional[bool] = None
    show_in_legend: Optional[bool] = None
    skip_keyboard_navigation: Optional[bool] = None
    states: Optional[States] = None
    sticky_tracking: Optional[bool] = None
    tooltip: Optional[SeriesTooltip] = None
    turbo_threshold: Optional[Number] = None
    visible: Optional[bool] = None
    zone_axis: Optional[ZoneAxis] = None
    zones: Optional[List[Zones]] = None

    @property
    def options_key(self) -> str:
        """在 plotOptions 中使用的键（图表类型名或 series）"""
        if self.chart_type is None:
            return SERIES_KEY
        return self.chart_type.value

    def add_key(self, key: str) -> None:
        self._append_item("keys", key)

    def remove_key(self, key: str) -> None:
        self._remove_item("keys", key)

    def add_zone(self, zone: Zones) -> None:
        self._append_item("zones", zone)

    def remove_zone(self, zone: Zones) -> None:
        self._remove_item("zones", zone)


class ColorsMixin(ConfigurationObject):
    """按点着色的颜色列表"""
    color_by_point: Optional[bool] = None
    colors: Optional[List[Color]] = None

    def set_colors(self, *colors: Color) -> None:
        self.colors = list(colors)

    def add_color(self, color: Union[Color, str]) -> None:
        self._append_item("colors", color)

    def remove_color(self, color: Union[Color, str]) -> None:
        self._remove_item("colors", color)


class CartesianPlotOptions(AbstractPlotOptions):
    """直角坐标系序列的公共选项"""
    connect_ends: Optional[bool] = None
    connect_nulls: Optional[bool] = None
    crop_threshold: Optional[Number] = None
    dash_style: Optional[DashStyle] = None
    line_width: Optional[Number] = None
    marker: Optional[Marker] = None
    negative_color: Optional[Color] = None
    point_interval: Optional[Number] = None
    point_interval_unit: Optional[str] = None
    point_placement: Optional[Union[str, Number]] = None
    point_start: Optional[Number] = None
    soft_threshold: Optional[bool] = None
    stacking: Optional[Stacking] = None
    step: Optional[str] = None
    threshold: Optional[Number] = None

    @field_validator("point_start", mode="before")
    @classmethod
    def convert_dates(cls, value: Any) -> Any:
        return coerce_timestamp(value)


class PlotOptionsSeries(CartesianPlotOptions, ColorsMixin):
    """作用于所有序列的通用绘图选项"""


class PlotOptionsLine(CartesianPlotOptions):
    chart_type: ClassVar[Optional[ChartType]] = ChartType.LINE
    linecap: Optional[str] = None


class PlotOptionsSpline(CartesianPlotOptions):
    chart_type: ClassVar[Optional[ChartType]] = ChartType.SPLINE


class PlotOptionsArea(CartesianPlotOptions):
    """面积图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.AREA
    fill_color: Optional[Color] = None
    fill_opacity: Optional[Number] = None
    line_color: Optional[Color] = None
    negative_fill_color: Optional[Color] = None
    track_by_area: Optional[bool] = None


class PlotOptionsAreaspline(PlotOptionsArea):
    chart_type: ClassVar[Optional[ChartType]] = ChartType.AREASPLINE


class PlotOptionsArearange(PlotOptionsArea):
    """区间面积图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.AREARANGE


class PlotOptionsAreasplinerange(PlotOptionsArea):
    chart_type: ClassVar[Optional[ChartType]] = ChartType.AREASPLINERANGE


class PlotOptionsScatter(CartesianPlotOptions):
    """散点图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.SCATTER
    jitter: Optional[Dict[str, Number]] = None


class PlotOptionsPolygon(CartesianPlotOptions):
    chart_type: ClassVar[Optional[ChartType]] = ChartType.POLYGON


class PlotOptionsBubble(CartesianPlotOptions):
    """气泡图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.BUBBLE
    display_negative: Optional[bool] = None
    max_size: Optional[Union[Number, str]] = None
    min_size: Optional[Union[Number, str]] = None
    size_by: Optional[str] = Field(None, description="area 或 width")
    size_by_absolute_value: Optional[bool] = None
    z_max: Optional[Number] = None
    z_min: Optional[Number] = None
    z_threshold: Optional[Number] = None


class ColumnPlotOptions(CartesianPlotOptions, ColorsMixin):
    """柱状类图表的公共选项"""
    border_color: Optional[Color] = None
    border_radius: Optional[Number] = None
    border_width: Optional[Number] = None
    depth: Optional[Number] = None
    group_padding: Optional[Number] = None
    grouping: Optional[bool] = None
    max_point_width: Optional[Number] = None
    min_point_length: Optional[Number] = None
    point_padding: Optional[Number] = None
    point_range: Optional[Number] = None
    point_width: Optional[Number] = None


class PlotOptionsColumn(ColumnPlotOptions):
    """柱状图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.COLUMN


class PlotOptionsBar(ColumnPlotOptions):
    """条形图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.BAR


class PlotOptionsColumnrange(ColumnPlotOptions):
    chart_type: ClassVar[Optional[ChartType]] = ChartType.COLUMNRANGE


class PlotOptionsWaterfall(ColumnPlotOptions):
    """瀑布图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.WATERFALL
    line_color: Optional[Color] = None
    up_color: Optional[Color] = None


class PlotOptionsXrange(ColumnPlotOptions):
    chart_type: ClassVar[Optional[ChartType]] = ChartType.XRANGE
    partial_fill: Optional[Dict[str, Any]] = None


class PlotOptionsBullet(ColumnPlotOptions):
    chart_type: ClassVar[Optional[ChartType]] = ChartType.BULLET
    target_options: Optional[Dict[str, Any]] = None


class BoxPlotOptions(ColumnPlotOptions):
    """箱线图与误差线的须线选项"""
    stem_color: Optional[Color] = None
    stem_dash_style: Optional[DashStyle] = None
    stem_width: Optional[Number] = None
    whisker_color: Optional[Color] = None
    whisker_length: Optional[Union[Number, str]] = None
    whisker_width: Optional[Number] = None


class PlotOptionsBoxplot(BoxPlotOptions):
    """箱线图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.BOXPLOT
    fill_color: Optional[Color] = None
    median_color: Optional[Color] = None
    median_width: Optional[Number] = None


class PlotOptionsErrorbar(BoxPlotOptions):
    """误差线"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.ERRORBAR


class PlotOptionsOhlc(ColumnPlotOptions):
    """OHLC 图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.OHLC
    up_color: Optional[Color] = None
    point_val_key: Optional[str] = None


class PlotOptionsCandlestick(PlotOptionsOhlc):
    chart_type: ClassVar[Optional[ChartType]] = ChartType.CANDLESTICK
    line_color: Optional[Color] = None
    up_line_color: Optional[Color] = None


class PlotOptionsGantt(PlotOptionsXrange):
    chart_type: ClassVar[Optional[ChartType]] = ChartType.GANTT


class PlotOptionsFlags(CartesianPlotOptions):
    """标记旗（股票图）"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.FLAGS
    fill_color: Optional[Color] = None
    line_color: Optional[Color] = None
    on_key: Optional[str] = None
    on_series: Optional[str] = None
    shape: Optional[str] = None
    stack_distance: Optional[Number] = None
    style: Optional[Style] = None
    title: Optional[str] = None
    y: Optional[Number] = None
    use_html: Optional[bool] = Field(None, alias="useHTML")


class PlotOptionsPie(AbstractPlotOptions, ColorsMixin):
    """饼图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.PIE
    border_color: Optional[Color] = None
    border_width: Optional[Number] = None
    center: Optional[List[Union[Number, str]]] = None
    depth: Optional[Number] = None
    end_angle: Optional[Number] = None
    ignore_hidden_point: Optional[bool] = None
    inner_size: Optional[Union[Number, str]] = None
    min_size: Optional[Union[Number, str]] = None
    size: Optional[Union[Number, str]] = None
    sliced_offset: Optional[Number] = None
    start_angle: Optional[Number] = None

    def set_center(self, x: Union[Number, str], y: Union[Number, str]) -> None:
        self.center = [x, y]


class PlotOptionsPyramid(PlotOptionsPie):
    """金字塔图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.PYRAMID
    height: Optional[Union[Number, str]] = None
    width: Optional[Union[Number, str]] = None
    reversed: Optional[bool] = None


class PlotOptionsFunnel(PlotOptionsPyramid):
    """漏斗图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.FUNNEL
    neck_height: Optional[Union[Number, str]] = None
    neck_width: Optional[Union[Number, str]] = None


class PlotOptionsGauge(AbstractPlotOptions):
    """仪表盘"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.GAUGE
    dial: Optional[Dict[str, Any]] = None
    pivot: Optional[Dict[str, Any]] = None
    overshoot: Optional[Number] = None
    wrap: Optional[bool] = None
    threshold: Optional[Number] = None


class PlotOptionsSolidgauge(AbstractPlotOptions):
    """实心仪表盘"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.SOLIDGAUGE
    inner_radius: Optional[Union[Number, str]] = None
    linecap: Optional[str] = None
    overshoot: Optional[Number] = None
    radius: Optional[Union[Number, str]] = None
    rounded: Optional[bool] = None
    threshold: Optional[Number] = None
    wrap: Optional[bool] = None


class PlotOptionsHeatmap(AbstractPlotOptions, ColorsMixin):
    """热力图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.HEATMAP
    border_color: Optional[Color] = None
    border_radius: Optional[Number] = None
    border_width: Optional[Number] = None
    color_key: Optional[str] = None
    colsize: Optional[Number] = None
    crisp: Optional[bool] = None
    crop_threshold: Optional[Number] = None
    max_point_width: Optional[Number] = None
    rowsize: Optional[Number] = None


class PlotOptionsTreemap(AbstractPlotOptions, ColorsMixin):
    """矩形树图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.TREEMAP
    allow_traversing_tree: Optional[bool] = None
    alternate_starting_direction: Optional[bool] = None
    border_color: Optional[Color] = None
    border_width: Optional[Number] = None
    interact_by_leaf: Optional[bool] = None
    layout_algorithm: Optional[str] = None
    layout_starting_direction: Optional[str] = None
    level_is_constant: Optional[bool] = None
    levels: Optional[List[Dict[str, Any]]] = None
    sort_index: Optional[Number] = None


class PlotOptionsOrganization(AbstractPlotOptions, ColorsMixin):
    """组织结构图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.ORGANIZATION
    border_color: Optional[Color] = None
    border_radius: Optional[Number] = None
    border_width: Optional[Number] = None
    hanging_indent: Optional[Number] = None
    levels: Optional[List[Dict[str, Any]]] = None
    link_color: Optional[Color] = None
    link_line_width: Optional[Number] = None
    link_radius: Optional[Number] = None
    node_padding: Optional[Number] = None
    node_width: Optional[Number] = None


class PlotOptionsSankey(AbstractPlotOptions, ColorsMixin):
    """桑基图"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.SANKEY
    curve_factor: Optional[Number] = None
    link_opacity: Optional[Number] = None
    min_link_width: Optional[Number] = None
    node_padding: Optional[Number] = None
    node_width: Optional[Number] = None


class PlotOptionsTimeline(AbstractPlotOptions, ColorsMixin):
    """时间线"""
    chart_type: ClassVar[Optional[ChartType]] = ChartType.TIMELINE
    ignore_hidden_point: Optional[bool] = None
    legend_type: Optional[str] = None
    marker: Optional[Marker] = None


PLOT_OPTIONS_TYPES: Dict[ChartType, Type[AbstractPlotOptions]] = {
    cls.chart_type: cls
    for cls in (
        PlotOptionsArea, PlotOptionsArearange, PlotOptionsAreaspline,
        PlotOptionsAreasplinerange, PlotOptionsBar, PlotOptionsBoxplot,
        PlotOptionsBubble, PlotOptionsBullet, PlotOptionsCandlestick,
        PlotOptionsColumn, PlotOptionsColumnrange, PlotOptionsErrorbar,
        PlotOptionsFlags, PlotOptionsFunnel, PlotOptionsGantt, PlotOptionsGauge,
        PlotOptionsHeatmap, PlotOptionsLine, PlotOptionsOhlc,
        PlotOptionsOrganization, PlotOptionsPie, PlotOptionsPolygon,
        PlotOptionsPyramid, PlotOptionsSankey, PlotOptionsScatter,
        PlotOptionsSolidgauge, PlotOptionsSpline, PlotOptionsTimeline,
        PlotOptionsTreemap, PlotOptionsWaterfall, PlotOptionsXrange,
    )
}


def plot_options_class(key: Union[ChartType, str]) -> Type[AbstractPlotOptions]:
    """
    按键查找绘图选项类型

    Args:
        key: 图表类型或 "series"

    Returns:
        对应的绘图选项类
    """
    if key == SERIES_KEY:
        return PlotOptionsSeries
    try:
        return PLOT_OPTIONS_TYPES[ChartType(key)]
    except ValueError:
        raise ValueError(f"不支持的图表类型: {key}")


def plot_options_for(chart_type: Union[ChartType, str], **options: Any) -> AbstractPlotOptions:
    """创建指定图表类型的绘图选项"""
    return plot_options_class(chart_type)(**options)
