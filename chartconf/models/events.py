"""配置变更事件与监听者"""

from typing import Optional
from pydantic import BaseModel, Field

from chartconf.models.chart import Number
from chartconf.models.series import DataSeriesItem, Series


class DataAddedEvent(BaseModel):
    """数据点已追加"""
    series: Series
    value: Optional[Number] = Field(None, description="ListSeries 追加的数值")
    item: Optional[DataSeriesItem] = Field(None, description="DataSeries 追加的数据点")
    shift: bool = False


class DataRemovedEvent(BaseModel):
    """数据点已移除"""
    series: Series
    index: int


class DataUpdatedEvent(BaseModel):
    """数据点已更新"""
    series: Series
    point_index: int
    value: Optional[Number] = None
    item: Optional[DataSeriesItem] = None


class SeriesAddedEvent(BaseModel):
    """序列已添加"""
    series: Series


class SeriesChangedEvent(BaseModel):
    """序列整体变更"""
    series: Series


class SeriesStateEvent(BaseModel):
    """序列显示状态变更"""
    series: Series
    enabled: bool


class AxisRescaledEvent(BaseModel):
    """坐标轴极值变更"""
    dimension: int = Field(..., description="维度序号：0=x, 1=y, 2=z, 3=color")
    axis_index: int = Field(..., description="轴在该维度中的序号，未找到为 -1")
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    redraw: bool = True
    animate: bool = True


class ItemSlicedEvent(BaseModel):
    """饼图扇区分离状态变更"""
    series: Series
    index: int
    sliced: bool
    redraw: bool = True
    animation: bool = True


class ConfigurationChangeListener:
    """
    配置变更监听者

    所有回调默认不做任何处理，子类按需覆盖。
    回调在修改配置的线程中同步执行，不做任何加锁。
    """

    def data_added(self, event: DataAddedEvent) -> None:
        pass

    def data_removed(self, event: DataRemovedEvent) -> None:
        pass

    def data_updated(self, event: DataUpdatedEvent) -> None:
        pass

    def series_added(self, event: SeriesAddedEvent) -> None:
        pass

    def series_changed(self, event: SeriesChangedEvent) -> None:
        pass

    def series_state_changed(self, event: SeriesStateEvent) -> None:
        pass

    def axis_rescaled(self, event: AxisRescaledEvent) -> None:
        pass

    def reset_zoom(self, redraw: bool, animate: bool) -> None:
        pass

    def item_sliced(self, event: ItemSlicedEvent) -> None:
        pass
