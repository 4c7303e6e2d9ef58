"""数据序列模型"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import pandas as pd
from pydantic import (
    Field, PrivateAttr, SerializationInfo, SerializeAsAny,
    SerializerFunctionWrapHandler, computed_field, field_validator, model_serializer,
)

from chartconf.models.base import IdentityModel, LinkedModel
from chartconf.models.chart import DataLabels, Marker, Number
from chartconf.models.enums import ChartType, Cursor
from chartconf.models.plot_options import AbstractPlotOptions
from chartconf.models.style import Color
from chartconf.utils.timestamp import coerce_timestamp

# DataFrameSeries 的属性映射：列名或以行字典为参数的函数
ColumnMapping = Union[str, Callable[[Dict[str, Any]], Any]]


class Series(LinkedModel):
    """
    序列基类

    plot_options 在序列化时展开到序列对象中，未指定 type 时取绘图选项的图表类型。
    """

    name: Optional[str] = None
    id: Optional[str] = None
    type: Optional[ChartType] = None
    stack: Optional[str] = None
    x_axis: Optional[Union[int, str]] = None
    y_axis: Optional[Union[int, str]] = None
    z_index: Optional[Number] = None
    color: Optional[Color] = None
    visible: Optional[bool] = None
    plot_options: Optional[SerializeAsAny[AbstractPlotOptions]] = None

    @model_serializer(mode="wrap")
    def merge_plot_options(self, handler: SerializerFunctionWrapHandler, info: SerializationInfo) -> Any:
        data = handler(self)
        if self.plot_options is None or not isinstance(data, dict):
            return data
        data.pop("plotOptions" if info.by_alias else "plot_options", None)
        merged = self.plot_options.to_dict()
        merged.update(data)
        if self.type is None and self.plot_options.chart_type is not None:
            merged["type"] = self.plot_options.chart_type.value
        return merged

    def set_visible(self, visible: bool) -> None:
        """显示/隐藏序列，已挂载时通知客户端"""
        self.visible = visible
        if self._configuration is not None:
            self._configuration.fire_series_enabled(self, visible)

    def update_series(self) -> None:
        """通知监听者整个序列已变更"""
        if self._configuration is not None:
            self._configuration.fire_series_changed(self)


class ListSeries(Series):
    """数值列表序列"""

    data: List[Optional[Number]] = Field(default_factory=list)

    def __init__(self, name: Optional[str] = None, /, *values: Optional[Number], **data: Any):
        if name is not None:
            data["name"] = name
        if values:
            data["data"] = list(values)
        super().__init__(**data)

    def add_data(self, value: Optional[Number], update: bool = True, shift: bool = False) -> None:
        """
        追加数据点

        Args:
            value: 数值
            update: 是否立即通知客户端
            shift: 是否同时移除第一个数据点
        """
        if shift and self.data:
            self.data.pop(0)
        self.data.append(value)
        if update and self._configuration is not None:
            self._configuration.fire_data_added(self, value=value, shift=shift)

    def update_point(self, index: int, value: Optional[Number]) -> None:
        self.data[index] = value
        if self._configuration is not None:
            self._configuration.fire_data_updated(self, index, value=value)

    def remove_point(self, index: int) -> None:
        del self.data[index]
        if self._configuration is not None:
            self._configuration.fire_data_removed(self, index)

    def set_data(self, values: Sequence[Optional[Number]], update: bool = True) -> None:
        self.data = list(values)
        if update:
            self.update_series()


class DataSeriesItem(IdentityModel):
    """
    数据点

    只有 y 时序列化为数值，只有 x、y 时序列化为 [x, y]，其余情况为对象。
    """

    name: Optional[str] = None
    id: Optional[str] = None
    x: Optional[Number] = None
    y: Optional[Number] = None
    z: Optional[Number] = None
    low: Optional[Number] = None
    high: Optional[Number] = None
    open: Optional[Number] = None
    close: Optional[Number] = None
    q1: Optional[Number] = None
    median: Optional[Number] = None
    q3: Optional[Number] = None
    value: Optional[Number] = Field(None, description="热力图/树图的数值")
    x2: Optional[Number] = None
    from_: Optional[str] = Field(None, alias="from", description="桑基图起点")
    to: Optional[str] = Field(None, description="桑基图终点")
    weight: Optional[Number] = None
    target: Optional[Number] = Field(None, description="子弹图目标值")
    parent: Optional[str] = None
    color: Optional[Color] = None
    color_index: Optional[int] = None
    legend_index: Optional[int] = None
    sliced: Optional[bool] = None
    selected: Optional[bool] = None
    drilldown: Optional[Union[bool, str]] = None
    cursor: Optional[Cursor] = None
    description: Optional[str] = None
    class_name: Optional[str] = None
    marker: Optional[Marker] = None
    data_labels: Optional[DataLabels] = None

    def __init__(self, *args: Any, **data: Any):
        # (name, y[, color]) / (x, y[, color]) / (x, low, high)
        if len(args) == 2:
            key = "name" if isinstance(args[0], str) else "x"
            data[key], data["y"] = args
        elif len(args) == 3 and isinstance(args[0], str):
            data["name"], data["y"], data["color"] = args
        elif len(args) == 3:
            data["x"], data["low"], data["high"] = args
        elif args:
            raise TypeError(f"DataSeriesItem 不支持 {len(args)} 个位置参数")
        super().__init__(**data)

    @field_validator("x", "x2", mode="before")
    @classmethod
    def convert_dates(cls, value: Any) -> Any:
        return coerce_timestamp(value)

    @model_serializer(mode="wrap")
    def compact(self, handler: SerializerFunctionWrapHandler) -> Any:
        data = handler(self)
        if not isinstance(data, dict):
            return data
        keys = {key for key, value in data.items() if value is not None}
        if keys == {"y"}:
            return data["y"]
        if keys == {"x", "y"}:
            return [data["x"], data["y"]]
        return data


class DataSeries(Series):
    """由 DataSeriesItem 组成的序列"""

    data: List[DataSeriesItem] = Field(default_factory=list)

    _drilldown_series: List[Series] = PrivateAttr(default_factory=list)

    def __init__(self, name: Optional[str] = None, /, *items: DataSeriesItem, **data: Any):
        if name is not None:
            data["name"] = name
        if items:
            data["data"] = list(items)
        super().__init__(**data)

    def _index_of(self, item: DataSeriesItem) -> int:
        for index, candidate in enumerate(self.data):
            if candidate is item:
                return index
        return -1

    def add(self, item: DataSeriesItem, update: bool = True, shift: bool = False) -> None:
        """
        追加数据点

        Args:
            item: 数据点
            update: 是否立即通知客户端
            shift: 是否同时移除第一个数据点
        """
        if shift and self.data:
            self.data.pop(0)
        self.data.append(item)
        if update and self._configuration is not None:
            self._configuration.fire_data_added(self, item=item, shift=shift)

    def add_data(self, entries: Sequence[Sequence[Number]]) -> None:
        """批量追加 [x, y] 数据点（不通知客户端）"""
        for x, y in entries:
            self.data.append(DataSeriesItem(x, y))

    def set_data(self, values: Sequence[Union[Number, DataSeriesItem]],
                 categories: Optional[Sequence[str]] = None,
                 colors: Optional[Sequence[Color]] = None) -> None:
        """
        替换全部数据

        Args:
            values: 数值或数据点
            categories: 与数值一一对应的名称，缺省时使用数值本身
            colors: 与数值一一对应的颜色
        """
        if categories is not None and len(categories) != len(values):
            raise ValueError("categories 与 values 长度不一致")
        if colors is not None and len(colors) != len(values):
            raise ValueError("colors 与 values 长度不一致")

        items = []
        for index, value in enumerate(values):
            if isinstance(value, DataSeriesItem):
                items.append(value)
                continue
            name = categories[index] if categories is not None else str(value)
            item = DataSeriesItem(name, value)
            if colors is not None:
                item.color = colors[index]
            items.append(item)
        self.data = items

    def remove(self, item: DataSeriesItem) -> None:
        index = self._index_of(item)
        if index < 0:
            raise ValueError("数据点不在序列中")
        del self.data[index]
        if self._configuration is not None:
            self._configuration.fire_data_removed(self, index)

    def update(self, item: DataSeriesItem) -> None:
        """通知客户端数据点已修改"""
        if self._configuration is not None:
            self._configuration.fire_data_updated(self, self._index_of(item), item=item)

    def get(self, key: Union[int, str]) -> Optional[DataSeriesItem]:
        """按序号或名称获取数据点（名称不存在时返回 None）"""
        if isinstance(key, int):
            return self.data[key]
        for item in self.data:
            if item.name == key:
                return item
        return None

    def size(self) -> int:
        return len(self.data)

    def clear(self) -> None:
        self.data.clear()

    def set_item_sliced(self, index: int, sliced: bool,
                        redraw: bool = True, animation: bool = True) -> None:
        """设置饼图扇区的分离状态"""
        self.data[index].sliced = sliced
        if self._configuration is not None:
            self._configuration.fire_item_sliced(self, index, sliced, redraw, animation)

    def add_item_with_drilldown(self, item: DataSeriesItem, series: Optional[Series] = None) -> None:
        """
        追加带下钻的数据点

        Args:
            item: 数据点
            series: 下钻序列（必须有 id）；为空时下钻由客户端异步加载
        """
        if series is not None and series.id is None:
            raise ValueError("下钻序列必须设置 id")
        self.add(item)
        if series is None:
            item.drilldown = True
            return
        item.drilldown = series.id
        if self._configuration is not None:
            self._configuration.get_drilldown().add_series(series)
        else:
            self._drilldown_series.append(series)

    def has_drilldown_series(self) -> bool:
        return bool(self._drilldown_series)

    def pop_drilldown_series(self) -> List[Series]:
        """取出尚未注册的下钻序列"""
        pending, self._drilldown_series = self._drilldown_series, []
        return pending


class DataFrameSeries(Series):
    """
    DataFrame 数据源序列

    每个图表属性（x、y、name、low、high...）映射到一列或一个按行求值的函数，
    序列化时逐行生成数据点。
    """

    automatic_update: bool = Field(True, exclude=True, description="刷新数据后是否自动通知客户端")

    _frame: pd.DataFrame = PrivateAttr()
    _mappings: Dict[str, ColumnMapping] = PrivateAttr(default_factory=dict)

    def __init__(self, frame: pd.DataFrame, y: Optional[ColumnMapping] = None, /, **data: Any):
        super().__init__(**data)
        self._frame = frame
        if y is not None:
            self.set_y(y)

    @property
    def frame(self) -> pd.DataFrame:
        return self._frame

    def add_attribute(self, attribute: str, mapping: ColumnMapping) -> None:
        """
        添加属性映射

        Args:
            attribute: Highcharts 数据点属性名
            mapping: 列名或 callable(row)
        """
        if isinstance(mapping, str) and mapping not in self._frame.columns:
            raise ValueError(f"列不存在: {mapping}")
        self._mappings[attribute] = mapping

    def remove_attribute(self, attribute: str) -> None:
        self._mappings.pop(attribute, None)

    def attributes(self) -> List[str]:
        return list(self._mappings)

    def set_x(self, mapping: ColumnMapping) -> None:
        self.add_attribute("x", mapping)

    def set_y(self, mapping: ColumnMapping) -> None:
        self.add_attribute("y", mapping)

    def set_point_name(self, mapping: ColumnMapping) -> None:
        self.add_attribute("name", mapping)

    def set_low(self, mapping: ColumnMapping) -> None:
        self.add_attribute("low", mapping)

    def set_high(self, mapping: ColumnMapping) -> None:
        self.add_attribute("high", mapping)

    def set_open(self, mapping: ColumnMapping) -> None:
        self.add_attribute("open", mapping)

    def set_close(self, mapping: ColumnMapping) -> None:
        self.add_attribute("close", mapping)

    def values(self) -> List[Dict[str, Any]]:
        """逐行求值所有属性映射"""
        rows = []
        for record in self._frame.to_dict("records"):
            point = {}
            for attribute, mapping in self._mappings.items():
                value = mapping(record) if callable(mapping) else record.get(mapping)
                # NaN / NaT / None 均输出为空
                if pd.api.types.is_scalar(value) and pd.isna(value):
                    value = None
                point[attribute] = coerce_timestamp(value)
            rows.append(point)
        return rows

    @computed_field
    @property
    def data(self) -> List[Dict[str, Any]]:
        return self.values()

    def refresh(self, frame: Optional[pd.DataFrame] = None) -> None:
        """替换（或重新读取）数据，开启自动更新时通知客户端"""
        if frame is not None:
            self._frame = frame
        if self.automatic_update:
            self.update_series()


class Drilldown(LinkedModel):
    """下钻配置"""

    series: List[SerializeAsAny[Series]] = Field(default_factory=list)
    allow_point_drilldown: Optional[bool] = None
    animation: Optional[bool] = None
    active_axis_label_style: Optional[Dict[str, Any]] = None
    active_data_label_style: Optional[Dict[str, Any]] = None
    drill_up_button: Optional[Dict[str, Any]] = None

    def __init__(self, configuration: Any = None, /, **data: Any):
        super().__init__(**data)
        self._configuration = configuration

    def add_series(self, series: Series) -> None:
        """注册下钻序列（递归注册其嵌套的下钻序列）"""
        self.series.append(series)
        series.set_configuration(self._configuration)
        if isinstance(series, DataSeries):
            for nested in series.pop_drilldown_series():
                self.add_series(nested)

    def remove_series(self, series: Series) -> None:
        self._remove_item("series", series)
