"""图表级选项组"""

from typing import Any, Dict, List, Optional, Union
from pydantic import Field, model_validator

from chartconf.models.base import ConfigurationObject
from chartconf.models.enums import (
    ChartType, DashStyle, Dimension, HorizontalAlign, LayoutDirection,
    PanKey, Shape, VerticalAlign,
)
from chartconf.models.style import Color, Style

Number = Union[int, float]


class TextObject(ConfigurationObject):
    """带文本的选项组（可直接由字符串构造）"""
    text: Optional[str] = None

    @model_validator(mode="before")
    @classmethod
    def from_text(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"text": value}
        return value


class Title(TextObject):
    """图表主标题"""
    align: Optional[HorizontalAlign] = None
    vertical_align: Optional[VerticalAlign] = None
    floating: Optional[bool] = None
    margin: Optional[Number] = None
    x: Optional[Number] = None
    y: Optional[Number] = None
    style: Optional[Style] = None
    use_html: Optional[bool] = Field(None, alias="useHTML")
    width_adjust: Optional[Number] = None


class Subtitle(Title):
    """图表副标题"""


class ChartModel(ConfigurationObject):
    """图表全局设置（边距、间距、背景、缩放）"""
    type: Optional[ChartType] = Field(None, description="默认序列类型")
    zoom_type: Optional[Dimension] = None
    pan_key: Optional[PanKey] = None
    panning: Optional[bool] = None
    polar: Optional[bool] = None
    inverted: Optional[bool] = None
    animation: Optional[bool] = None
    reflow: Optional[bool] = None
    width: Optional[Union[Number, str]] = None
    height: Optional[Union[Number, str]] = None
    margin: Optional[List[Number]] = None
    margin_top: Optional[Number] = None
    margin_right: Optional[Number] = None
    margin_bottom: Optional[Number] = None
    margin_left: Optional[Number] = None
    spacing: Optional[List[Number]] = None
    spacing_top: Optional[Number] = None
    spacing_right: Optional[Number] = None
    spacing_bottom: Optional[Number] = None
    spacing_left: Optional[Number] = None
    background_color: Optional[Color] = None
    border_color: Optional[Color] = None
    border_radius: Optional[Number] = None
    border_width: Optional[Number] = None
    plot_background_color: Optional[Color] = None
    plot_background_image: Optional[str] = None
    plot_border_color: Optional[Color] = None
    plot_border_width: Optional[Number] = None
    plot_shadow: Optional[bool] = None
    shadow: Optional[bool] = None
    class_name: Optional[str] = None
    styled_mode: Optional[bool] = None
    style: Optional[Style] = None
    options3d: Optional[Dict[str, Any]] = None

    def set_margin(self, *margin: Number) -> None:
        """按 CSS 顺序设置外边距（上、右、下、左）"""
        self.margin = list(margin)

    def set_spacing(self, *spacing: Number) -> None:
        self.spacing = list(spacing)


class Position(ConfigurationObject):
    align: Optional[HorizontalAlign] = None
    vertical_align: Optional[VerticalAlign] = None
    x: Optional[Number] = None
    y: Optional[Number] = None


class Credits(ConfigurationObject):
    """版权信息"""
    enabled: Optional[bool] = None
    href: Optional[str] = None
    text: Optional[str] = None
    position: Optional[Position] = None
    style: Optional[Style] = None

    @model_validator(mode="before")
    @classmethod
    def from_flag(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return {"enabled": value}
        return value


class Exporting(ConfigurationObject):
    """导出设置"""
    enabled: Optional[bool] = None
    filename: Optional[str] = None
    url: Optional[str] = None
    type: Optional[str] = None
    scale: Optional[Number] = None
    source_width: Optional[Number] = None
    source_height: Optional[Number] = None
    fallback_to_export_server: Optional[bool] = None
    print_max_width: Optional[Number] = None


class KeyboardNavigation(ConfigurationObject):
    enabled: Optional[bool] = None


class Accessibility(ConfigurationObject):
    """无障碍设置"""
    enabled: Optional[bool] = None
    description: Optional[str] = None
    type_description: Optional[str] = None
    keyboard_navigation: Optional[KeyboardNavigation] = None


class LegendTitle(TextObject):
    style: Optional[Style] = None


class Legend(ConfigurationObject):
    """图例"""
    enabled: Optional[bool] = None
    layout: Optional[LayoutDirection] = None
    align: Optional[HorizontalAlign] = None
    vertical_align: Optional[VerticalAlign] = None
    floating: Optional[bool] = None
    reversed: Optional[bool] = None
    rtl: Optional[bool] = None
    x: Optional[Number] = None
    y: Optional[Number] = None
    width: Optional[Number] = None
    max_height: Optional[Number] = None
    margin: Optional[Number] = None
    padding: Optional[Number] = None
    item_distance: Optional[Number] = None
    item_margin_top: Optional[Number] = None
    item_margin_bottom: Optional[Number] = None
    background_color: Optional[Color] = None
    border_color: Optional[Color] = None
    border_radius: Optional[Number] = None
    border_width: Optional[Number] = None
    shadow: Optional[bool] = None
    symbol_height: Optional[Number] = None
    symbol_width: Optional[Number] = None
    symbol_radius: Optional[Number] = None
    symbol_padding: Optional[Number] = None
    square_symbol: Optional[bool] = None
    item_style: Optional[Style] = None
    item_hover_style: Optional[Style] = None
    item_hidden_style: Optional[Style] = None
    title: Optional[LegendTitle] = None
    label_format: Optional[str] = None
    label_formatter: Optional[str] = Field(None, alias="_fn_labelFormatter")
    use_html: Optional[bool] = Field(None, alias="useHTML")


class SeriesTooltip(ConfigurationObject):
    """序列级提示框选项"""
    header_format: Optional[str] = None
    point_format: Optional[str] = None
    footer_format: Optional[str] = None
    value_decimals: Optional[int] = None
    value_prefix: Optional[str] = None
    value_suffix: Optional[str] = None
    x_date_format: Optional[str] = None
    follow_pointer: Optional[bool] = None
    follow_touch_move: Optional[bool] = None
    cluster_format: Optional[str] = None


class Tooltip(SeriesTooltip):
    """提示框"""
    enabled: Optional[bool] = None
    shared: Optional[bool] = None
    split: Optional[bool] = None
    outside: Optional[bool] = None
    snap: Optional[Number] = None
    hide_delay: Optional[Number] = None
    animation: Optional[bool] = None
    background_color: Optional[Color] = None
    border_color: Optional[Color] = None
    border_radius: Optional[Number] = None
    border_width: Optional[Number] = None
    padding: Optional[Number] = None
    shadow: Optional[bool] = None
    shape: Optional[Shape] = None
    style: Optional[Style] = None
    use_html: Optional[bool] = Field(None, alias="useHTML")
    formatter: Optional[str] = Field(None, alias="_fn_formatter")
    positioner: Optional[str] = Field(None, alias="_fn_positioner")
    point_formatter: Optional[str] = Field(None, alias="_fn_pointFormatter")


class Background(ConfigurationObject):
    """仪表盘背景"""
    background_color: Optional[Color] = None
    border_color: Optional[Color] = None
    border_width: Optional[Number] = None
    inner_radius: Optional[Union[Number, str]] = None
    outer_radius: Optional[Union[Number, str]] = None
    shape: Optional[str] = None
    class_name: Optional[str] = None


class Pane(ConfigurationObject):
    """极坐标/仪表盘面板"""
    center: Optional[List[Union[Number, str]]] = None
    size: Optional[Union[Number, str]] = None
    inner_size: Optional[Union[Number, str]] = None
    start_angle: Optional[Number] = None
    end_angle: Optional[Number] = None
    background: Optional[List[Background]] = None

    def set_center(self, x: Union[Number, str], y: Union[Number, str]) -> None:
        self.center = [x, y]

    def add_background(self, background: Background) -> None:
        self._append_item("background", background)

    def remove_background(self, background: Background) -> None:
        self._remove_item("background", background)


class RangeSelectorButton(ConfigurationObject):
    """时间范围按钮"""
    type: Optional[str] = Field(None, description="millisecond/second/minute/hour/day/week/month/ytd/year/all")
    count: Optional[Number] = None
    text: Optional[str] = None
    offset_min: Optional[Number] = None
    offset_max: Optional[Number] = None


class RangeSelector(ConfigurationObject):
    """时间范围选择器（股票图）"""
    enabled: Optional[bool] = None
    selected: Optional[int] = None
    floating: Optional[bool] = None
    all_buttons_enabled: Optional[bool] = None
    input_enabled: Optional[bool] = None
    input_date_format: Optional[str] = None
    input_edit_date_format: Optional[str] = None
    button_spacing: Optional[Number] = None
    buttons: Optional[List[RangeSelectorButton]] = None
    label_style: Optional[Style] = None
    input_style: Optional[Style] = None

    def add_button(self, button: RangeSelectorButton) -> None:
        self._append_item("buttons", button)

    def remove_button(self, button: RangeSelectorButton) -> None:
        self._remove_item("buttons", button)


class Navigator(ConfigurationObject):
    """导航器（股票图）"""
    enabled: Optional[bool] = None
    height: Optional[Number] = None
    margin: Optional[Number] = None
    mask_fill: Optional[Color] = None
    mask_inside: Optional[bool] = None
    outline_color: Optional[Color] = None
    outline_width: Optional[Number] = None
    adapt_to_updated_data: Optional[bool] = None
    opposite: Optional[bool] = None


class Scrollbar(ConfigurationObject):
    """滚动条"""
    enabled: Optional[bool] = None
    height: Optional[Number] = None
    min_width: Optional[Number] = None
    live_redraw: Optional[bool] = None
    show_full: Optional[bool] = None
    bar_background_color: Optional[Color] = None
    bar_border_color: Optional[Color] = None
    bar_border_radius: Optional[Number] = None
    bar_border_width: Optional[Number] = None
    button_background_color: Optional[Color] = None
    button_arrow_color: Optional[Color] = None
    track_background_color: Optional[Color] = None
    track_border_color: Optional[Color] = None


class Loading(ConfigurationObject):
    """加载提示"""
    hide_duration: Optional[Number] = None
    show_duration: Optional[Number] = None
    label_style: Optional[Style] = None
    style: Optional[Style] = None


class NoData(ConfigurationObject):
    """无数据提示"""
    position: Optional[Position] = None
    style: Optional[Style] = None
    use_html: Optional[bool] = Field(None, alias="useHTML")


class Time(ConfigurationObject):
    """时间设置"""
    use_utc: Optional[bool] = Field(None, alias="useUTC")
    timezone: Optional[str] = None
    timezone_offset: Optional[Number] = None


class DataLabels(ConfigurationObject):
    """数据标签"""
    enabled: Optional[bool] = None
    align: Optional[HorizontalAlign] = None
    vertical_align: Optional[VerticalAlign] = None
    allow_overlap: Optional[bool] = None
    crop: Optional[bool] = None
    inside: Optional[bool] = None
    overflow: Optional[str] = None
    rotation: Optional[Number] = None
    x: Optional[Number] = None
    y: Optional[Number] = None
    z_index: Optional[Number] = None
    distance: Optional[Number] = Field(None, description="饼图标签与扇区的距离")
    color: Optional[Color] = None
    background_color: Optional[Color] = None
    border_color: Optional[Color] = None
    border_radius: Optional[Number] = None
    border_width: Optional[Number] = None
    connector_color: Optional[Color] = None
    connector_width: Optional[Number] = None
    padding: Optional[Number] = None
    shadow: Optional[bool] = None
    shape: Optional[Shape] = None
    style: Optional[Style] = None
    format: Optional[str] = None
    formatter: Optional[str] = Field(None, alias="_fn_formatter")
    use_html: Optional[bool] = Field(None, alias="useHTML")


class Hover(ConfigurationObject):
    enabled: Optional[bool] = None
    brightness: Optional[Number] = None
    color: Optional[Color] = None
    border_color: Optional[Color] = None
    fill_color: Optional[Color] = None
    line_color: Optional[Color] = None
    line_width: Optional[Number] = None
    line_width_plus: Optional[Number] = None
    radius: Optional[Number] = None
    radius_plus: Optional[Number] = None


class Select(ConfigurationObject):
    enabled: Optional[bool] = None
    color: Optional[Color] = None
    border_color: Optional[Color] = None
    fill_color: Optional[Color] = None
    line_color: Optional[Color] = None
    line_width: Optional[Number] = None
    radius: Optional[Number] = None


class States(ConfigurationObject):
    """交互状态（悬停、选中）"""
    hover: Optional[Hover] = None
    select: Optional[Select] = None


class Marker(ConfigurationObject):
    """数据点标记"""
    enabled: Optional[bool] = None
    symbol: Optional[str] = None
    radius: Optional[Number] = None
    width: Optional[Number] = None
    height: Optional[Number] = None
    fill_color: Optional[Color] = None
    line_color: Optional[Color] = None
    line_width: Optional[Number] = None
    states: Optional[States] = None


class Zones(ConfigurationObject):
    """分区（按阈值区分颜色与样式）"""
    value: Optional[Number] = None
    color: Optional[Color] = None
    fill_color: Optional[Color] = None
    dash_style: Optional[DashStyle] = None
    class_name: Optional[str] = None


class Animation(ConfigurationObject):
    duration: Optional[Number] = None
    easing: Optional[str] = None


class Events(ConfigurationObject):
    """客户端事件回调（JavaScript 源码）"""
    click: Optional[str] = Field(None, alias="_fn_click")
    legend_item_click: Optional[str] = Field(None, alias="_fn_legendItemClick")
    show: Optional[str] = Field(None, alias="_fn_show")
    hide: Optional[str] = Field(None, alias="_fn_hide")


__all__ = [
    "Number", "TextObject", "Title", "Subtitle", "ChartModel", "Position", "Credits",
    "Exporting", "KeyboardNavigation", "Accessibility", "LegendTitle", "Legend",
    "SeriesTooltip", "Tooltip", "Background", "Pane", "RangeSelectorButton",
    "RangeSelector", "Navigator", "Scrollbar", "Loading", "NoData", "Time",
    "DataLabels", "Hover", "Select", "States", "Marker", "Zones", "Animation",
    "Events",
]
