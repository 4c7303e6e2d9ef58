"""坐标轴模型"""

from typing import Any, ClassVar, Dict, List, Optional, Tuple, Union
from pydantic import Field, field_validator, model_serializer

from chartconf.models.base import ConfigurationObject, LinkedModel
from chartconf.models.chart import Number, TextObject, Marker
from chartconf.models.enums import (
    AxisDimension, AxisType, DashStyle, HorizontalAlign, TickmarkPlacement,
    TickPosition, VerticalAlign,
)
from chartconf.models.style import Color, Style
from chartconf.utils.timestamp import coerce_timestamp


class AxisTitle(TextObject):
    """坐标轴标题"""
    align: Optional[str] = Field(None, description="low / middle / high")
    enabled: Optional[bool] = None
    margin: Optional[Number] = None
    offset: Optional[Number] = None
    rotation: Optional[Number] = None
    x: Optional[Number] = None
    y: Optional[Number] = None
    style: Optional[Style] = None
    use_html: Optional[bool] = Field(None, alias="useHTML")


class Labels(ConfigurationObject):
    """刻度标签"""
    enabled: Optional[bool] = None
    align: Optional[HorizontalAlign] = None
    auto_rotation: Optional[List[Number]] = None
    auto_rotation_limit: Optional[Number] = None
    distance: Optional[Union[Number, str]] = None
    rotation: Optional[Number] = None
    step: Optional[Number] = None
    stagger_lines: Optional[Number] = None
    overflow: Optional[str] = None
    reserve_space: Optional[bool] = None
    x: Optional[Number] = None
    y: Optional[Number] = None
    z_index: Optional[Number] = None
    style: Optional[Style] = None
    format: Optional[str] = None
    formatter: Optional[str] = Field(None, alias="_fn_formatter")
    use_html: Optional[bool] = Field(None, alias="useHTML")


class Label(ConfigurationObject):
    """绘图带/绘图线上的文字"""
    text: Optional[str] = None
    align: Optional[HorizontalAlign] = None
    vertical_align: Optional[VerticalAlign] = None
    rotation: Optional[Number] = None
    text_align: Optional[HorizontalAlign] = None
    x: Optional[Number] = None
    y: Optional[Number] = None
    style: Optional[Style] = None
    use_html: Optional[bool] = Field(None, alias="useHTML")


class PlotBand(ConfigurationObject):
    """绘图带"""
    id: Optional[str] = None
    color: Optional[Color] = None
    border_color: Optional[Color] = None
    border_width: Optional[Number] = None
    from_: Optional[Number] = Field(None, alias="from")
    to: Optional[Number] = None
    inner_radius: Optional[Union[Number, str]] = None
    outer_radius: Optional[Union[Number, str]] = None
    thickness: Optional[Union[Number, str]] = None
    z_index: Optional[Number] = None
    label: Optional[Label] = None
    class_name: Optional[str] = None

    def __init__(self, from_: Optional[Number] = None, to: Optional[Number] = None, /,
                 color: Any = None, **data: Any):
        if from_ is not None:
            data["from_"] = from_
        if to is not None:
            data["to"] = to
        if color is not None:
            data["color"] = color
        super().__init__(**data)

    @field_validator("from_", "to", mode="before")
    @classmethod
    def convert_dates(cls, value: Any) -> Any:
        return coerce_timestamp(value)


class PlotLine(ConfigurationObject):
    """绘图线"""
    id: Optional[str] = None
    value: Optional[Number] = None
    color: Optional[Color] = None
    width: Optional[Number] = None
    dash_style: Optional[DashStyle] = None
    z_index: Optional[Number] = None
    label: Optional[Label] = None
    class_name: Optional[str] = None

    @field_validator("value", mode="before")
    @classmethod
    def convert_dates(cls, value: Any) -> Any:
        return coerce_timestamp(value)


class Crosshair(ConfigurationObject):
    """十字准线"""
    color: Optional[Color] = None
    width: Optional[Number] = None
    dash_style: Optional[DashStyle] = None
    snap: Optional[bool] = None
    z_index: Optional[Number] = None
    class_name: Optional[str] = None


class StackLabels(ConfigurationObject):
    """堆叠总计标签（仅 Y 轴）"""
    enabled: Optional[bool] = None
    align: Optional[HorizontalAlign] = None
    vertical_align: Optional[VerticalAlign] = None
    allow_overlap: Optional[bool] = None
    crop: Optional[bool] = None
    rotation: Optional[Number] = None
    x: Optional[Number] = None
    y: Optional[Number] = None
    style: Optional[Style] = None
    format: Optional[str] = None
    formatter: Optional[str] = Field(None, alias="_fn_formatter")
    use_html: Optional[bool] = Field(None, alias="useHTML")


class TimeUnit(ConfigurationObject):
    """日期轴允许的刻度单位，如 ("month", [1, 3, 6])"""
    unit: str
    multiples: Optional[List[Number]] = None

    @model_serializer
    def serialize(self) -> List[Any]:
        return [self.unit, self.multiples]


class Axis(LinkedModel):
    """
    坐标轴基类

    min/max 为轴的极值，其余为展示选项；所有选项为空时使用客户端默认值。
    轴通过 Configuration 的反向引用触发缩放事件。
    """

    dimension: ClassVar[Optional[AxisDimension]] = None

    id: Optional[str] = None
    description: Optional[str] = None
    type: Optional[AxisType] = None
    visible: Optional[bool] = None
    reversed: Optional[bool] = None
    opposite: Optional[bool] = None
    linked_to: Optional[int] = None
    pane: Optional[int] = Field(None, description="极坐标图使用的面板序号")
    offset: Optional[Number] = None
    margin: Optional[Number] = None
    class_name: Optional[str] = None
    min: Optional[Number] = None
    max: Optional[Number] = None
    soft_min: Optional[Number] = None
    soft_max: Optional[Number] = None
    floor: Optional[Number] = None
    ceiling: Optional[Number] = None
    min_padding: Optional[Number] = None
    max_padding: Optional[Number] = None
    min_range: Optional[Number] = None
    allow_decimals: Optional[bool] = None
    start_on_tick: Optional[bool] = None
    end_on_tick: Optional[bool] = None
    show_empty: Optional[bool] = None
    show_first_label: Optional[bool] = None
    show_last_label: Optional[bool] = None
    start_of_week: Optional[int] = None
    zoom_enabled: Optional[bool] = None
    categories: Optional[List[str]] = None
    alternate_grid_color: Optional[Color] = None
    grid_line_color: Optional[Color] = None
    grid_line_dash_style: Optional[DashStyle] = None
    grid_line_width: Optional[Number] = None
    grid_z_index: Optional[Number] = None
    line_color: Optional[Color] = None
    line_width: Optional[Number] = None
    tick_amount: Optional[int] = None
    tick_color: Optional[Color] = None
    tick_interval: Optional[Number] = None
    tick_length: Optional[Number] = None
    tick_pixel_interval: Optional[Number] = None
    tick_position: Optional[TickPosition] = None
    tick_positions: Optional[List[Number]] = None
    tick_width: Optional[Number] = None
    tickmark_placement: Optional[TickmarkPlacement] = None
    tick_positioner: Optional[str] = Field(None, alias="_fn_tickPositioner")
    min_tick_interval: Optional[Number] = None
    minor_grid_line_color: Optional[Color] = None
    minor_grid_line_dash_style: Optional[DashStyle] = None
    minor_grid_line_width: Optional[Number] = None
    minor_tick_color: Optional[Color] = None
    minor_tick_interval: Optional[Union[Number, str]] = Field(None, description="数值或 \"auto\"")
    minor_tick_length: Optional[Number] = None
    minor_tick_position: Optional[TickPosition] = None
    minor_tick_width: Optional[Number] = None
    date_time_label_formats: Optional[Dict[str, str]] = None
    units: Optional[List[TimeUnit]] = None
    labels: Optional[Labels] = None
    title: Optional[AxisTitle] = None
    crosshair: Optional[Crosshair] = None
    plot_bands: Optional[List[PlotBand]] = None
    plot_lines: Optional[List[PlotLine]] = None

    @field_validator("min", "max", "soft_min", "soft_max", "floor", "ceiling", mode="before")
    @classmethod
    def convert_dates(cls, value: Any) -> Any:
        return coerce_timestamp(value)

    def set_extremes(self, minimum: Any, maximum: Any,
                     redraw: bool = True, animate: bool = True) -> None:
        """
        设置轴极值并通知所属配置

        Args:
            minimum: 新最小值（数值、date 或 datetime）
            maximum: 新最大值
            redraw: 是否重绘
            animate: 是否动画
        """
        minimum = coerce_timestamp(minimum)
        maximum = coerce_timestamp(maximum)
        self.min = minimum
        self.max = maximum
        if self._configuration is not None:
            self._configuration.fire_axes_rescaled(self, minimum, maximum, redraw, animate)

    def get_extremes(self) -> Tuple[Optional[Number], Optional[Number]]:
        return self.min, self.max

    def set_categories(self, *categories: str) -> None:
        self.categories = list(categories)

    def add_category(self, category: str) -> None:
        self._append_item("categories", category)

    def remove_category(self, category: str) -> None:
        self._remove_item("categories", category)

    def add_plot_band(self, plot_band: PlotBand) -> None:
        self._append_item("plot_bands", plot_band)

    def remove_plot_band(self, plot_band: PlotBand) -> None:
        self._remove_item("plot_bands", plot_band)

    def add_plot_line(self, plot_line: PlotLine) -> None:
        self._append_item("plot_lines", plot_line)

    def remove_plot_line(self, plot_line: PlotLine) -> None:
        self._remove_item("plot_lines", plot_line)

    def add_unit(self, unit: TimeUnit) -> None:
        self._append_item("units", unit)

    def remove_unit(self, unit: TimeUnit) -> None:
        self._remove_item("units", unit)


class PositionedAxis(Axis):
    """可定位的坐标轴（股票图多面板布局）"""
    height: Optional[Union[Number, str]] = None
    width: Optional[Union[Number, str]] = None
    top: Optional[Union[Number, str]] = None
    left: Optional[Union[Number, str]] = None


class XAxis(PositionedAxis):
    """X 轴"""
    dimension: ClassVar[Optional[AxisDimension]] = AxisDimension.X_AXIS


class YAxis(PositionedAxis):
    """Y 轴"""
    dimension: ClassVar[Optional[AxisDimension]] = AxisDimension.Y_AXIS

    stack_labels: Optional[StackLabels] = None
    max_color: Optional[Color] = Field(None, description="实心仪表盘的最大值颜色")
    min_color: Optional[Color] = None
    stops: Optional[List[Tuple[Number, Color]]] = None


class ZAxis(Axis):
    """Z 轴（3D 图表）"""
    dimension: ClassVar[Optional[AxisDimension]] = AxisDimension.Z_AXIS


class DataClass(ConfigurationObject):
    """颜色轴的离散分类"""
    color: Optional[Color] = None
    from_: Optional[Number] = Field(None, alias="from")
    to: Optional[Number] = None
    name: Optional[str] = None


class ColorAxis(Axis):
    """颜色轴（热力图、树图等）"""
    dimension: ClassVar[Optional[AxisDimension]] = AxisDimension.COLOR_AXIS

    min_color: Optional[Color] = None
    max_color: Optional[Color] = None
    stops: Optional[List[Tuple[Number, Color]]] = None
    data_classes: Optional[List[DataClass]] = None
    data_class_color: Optional[str] = Field(None, description="tween 或 category")
    layout: Optional[str] = None
    marker: Optional[Marker] = None

    def add_stop(self, offset: Number, color: Color) -> None:
        self._append_item("stops", (offset, color))

    def add_data_class(self, data_class: DataClass) -> None:
        self._append_item("data_classes", data_class)

    def remove_data_class(self, data_class: DataClass) -> None:
        self._remove_item("data_classes", data_class)
