"""Chart - 图表绑定（把配置变更转发为客户端调用）"""

from collections import deque
from typing import Any, Deque, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from chartconf.core.config import settings
from chartconf.core.constants import (
    AXIS_FUNCTION, CHART_FUNCTION, POINT_FUNCTION, SERIES_FUNCTION,
    TIMELINE_NOT_SUPPORTED, UPDATE_FUNCTION,
)
from chartconf.engines.config_applier import get_config_applier
from chartconf.engines.serializer import to_dict
from chartconf.models.base import ConfigurationObject
from chartconf.models.configuration import Configuration
from chartconf.models.enums import ChartType
from chartconf.models.events import (
    AxisRescaledEvent, ConfigurationChangeListener, DataAddedEvent, DataRemovedEvent,
    DataUpdatedEvent, ItemSlicedEvent, SeriesAddedEvent, SeriesChangedEvent,
    SeriesStateEvent,
)
from chartconf.models.series import Series
from chartconf.utils.logger import log


class ClientCall(BaseModel):
    """待发送给浏览器端渲染器的函数调用"""
    function: str = Field(..., description="客户端函数名")
    args: List[Any] = Field(default_factory=list, description="调用参数（JSON 值）")


def _json_value(obj: ConfigurationObject) -> Any:
    """单个模型对象转为 JSON 值（数据点可能是数值或数组）"""
    data = obj.model_dump(by_alias=True, exclude_none=True, mode="json")
    if isinstance(data, dict):
        return to_dict(obj)
    return data


class ProxyChangeForwarder(ConfigurationChangeListener):
    """把配置变更事件转换为对应的客户端调用"""

    def __init__(self, chart: "Chart"):
        self.chart = chart

    def _series_index(self, series: Series) -> int:
        for index, candidate in enumerate(self.chart.configuration.series):
            if candidate is series:
                return index
        return -1

    def data_added(self, event: DataAddedEvent) -> None:
        point = _json_value(event.item) if event.item is not None else event.value
        self.chart.call_function(
            SERIES_FUNCTION, "addPoint", self._series_index(event.series),
            point, True, event.shift
        )

    def data_removed(self, event: DataRemovedEvent) -> None:
        self.chart.call_function(
            POINT_FUNCTION, "remove", self._series_index(event.series), event.index
        )

    def data_updated(self, event: DataUpdatedEvent) -> None:
        point = _json_value(event.item) if event.item is not None else event.value
        self.chart.call_function(
            POINT_FUNCTION, "update", self._series_index(event.series),
            event.point_index, point
        )

    def series_added(self, event: SeriesAddedEvent) -> None:
        self.chart.call_function(CHART_FUNCTION, "addSeries", to_dict(event.series))

    def series_changed(self, event: SeriesChangedEvent) -> None:
        data = to_dict(event.series).get("data", [])
        self.chart.call_function(
            SERIES_FUNCTION, "setData", self._series_index(event.series), data
        )

    def series_state_changed(self, event: SeriesStateEvent) -> None:
        function = "show" if event.enabled else "hide"
        self.chart.call_function(SERIES_FUNCTION, function, self._series_index(event.series))

    def axis_rescaled(self, event: AxisRescaledEvent) -> None:
        self.chart.call_function(
            AXIS_FUNCTION, "setExtremes", event.dimension, event.axis_index,
            event.minimum, event.maximum, event.redraw, event.animate
        )

    def reset_zoom(self, redraw: bool, animate: bool) -> None:
        self.chart.call_function(CHART_FUNCTION, "zoomOut")

    def item_sliced(self, event: ItemSlicedEvent) -> None:
        self.chart.call_function(
            POINT_FUNCTION, "slice", self._series_index(event.series), event.index,
            event.sliced, event.redraw, event.animation
        )


class Chart:
    """
    图表

    持有一个 Configuration；attach 后绘制图表并开始转发配置变更，
    转发产生的客户端调用排队等待 drain_calls 取走。
    """

    def __init__(self, chart_type: Optional[Union[ChartType, str]] = None,
                 configuration: Optional[Configuration] = None):
        self.configuration = configuration or Configuration()
        if chart_type is not None:
            self.configuration.chart.type = chart_type
        self.timeline = False
        self.attached = False
        self._forwarder = ProxyChangeForwarder(self)
        self._calls: Deque[ClientCall] = deque()

    def attach(self) -> None:
        """绘制图表并开始监听配置变更"""
        self.draw_chart()
        self.configuration.add_change_listener(self._forwarder)
        self.attached = True

    def detach(self) -> None:
        self.configuration.remove_change_listener(self._forwarder)
        self.attached = False

    def set_configuration(self, configuration: Configuration) -> None:
        """替换配置，已挂载时重新绘制"""
        self.configuration.remove_change_listener(self._forwarder)
        self.configuration = configuration
        if self.attached:
            self.draw_chart(reset_configuration=True)
            configuration.add_change_listener(self._forwarder)

    def draw_chart(self, reset_configuration: bool = False) -> None:
        """
        用当前配置绘制图表

        Args:
            reset_configuration: 是否丢弃客户端已有的配置
        """
        self._validate_timeline(self.configuration.chart.type)
        self.call_function(UPDATE_FUNCTION, to_dict(self.configuration), reset_configuration)

    def apply_options(self, options: Union[str, Dict[str, Any]]) -> List[str]:
        """
        合并 Highcharts 选项，已挂载时重新绘制

        时间轴模式下先校验选项中的图表类型，校验失败时配置保持不变。

        Returns:
            成功应用的顶层键列表

        Raises:
            ValueError: 选项无法解析或图表类型不支持时间轴模式
        """
        applier = get_config_applier()
        options = applier.parse(options)
        for chart_type in applier.requested_chart_types(options):
            self._validate_timeline(chart_type)

        applied = applier.apply(self.configuration, options)
        if self.attached:
            self.draw_chart()
        return applied

    def _validate_timeline(self, chart_type: Optional[ChartType]) -> None:
        if not self.timeline or chart_type is None:
            return
        chart_type = ChartType(chart_type)
        if chart_type.value in TIMELINE_NOT_SUPPORTED:
            raise ValueError(f"图表类型 '{chart_type.value}' 不支持时间轴模式")

    def call_function(self, function: str, *args: Any) -> None:
        """排队一个客户端调用"""
        if len(self._calls) >= settings.max_pending_calls:
            dropped = self._calls.popleft()
            log.warning(f"待发送调用过多，丢弃最早的调用: {dropped.function}")
        self._calls.append(ClientCall(function=function, args=list(args)))

    def pending_calls(self) -> List[ClientCall]:
        return list(self._calls)

    def drain_calls(self) -> List[ClientCall]:
        """取出并清空待发送的客户端调用"""
        calls = list(self._calls)
        self._calls.clear()
        return calls
