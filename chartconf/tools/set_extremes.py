"""Tool 定义：set_extremes"""

from datetime import datetime
from typing import Optional, Union

from pydantic import BaseModel, Field

from chartconf.models.enums import AxisDimension


class SetExtremesInput(BaseModel):
    """设置坐标轴范围输入"""
    chart_id: str = Field(..., description="图表ID")
    dimension: AxisDimension = Field(AxisDimension.X_AXIS, description="坐标轴维度（0=X, 1=Y, 2=Z, 3=颜色轴）")
    axis_index: int = Field(0, ge=0, description="坐标轴序号")
    min: Optional[Union[int, float, datetime]] = Field(None, description="最小值（数值或日期）")
    max: Optional[Union[int, float, datetime]] = Field(None, description="最大值（数值或日期）")
    redraw: bool = Field(True, description="是否立即重绘")
    animate: bool = Field(True, description="是否使用动画")


class SetExtremesOutput(BaseModel):
    """设置坐标轴范围输出"""
    chart_id: str = Field(..., description="图表ID")
    min: Optional[float] = Field(None, description="生效的最小值")
    max: Optional[float] = Field(None, description="生效的最大值")


# Tool 元数据
TOOL_NAME = "set_extremes"
TOOL_DESCRIPTION = """
设置坐标轴的显示范围（缩放到指定区间）。

参数：
- chart_id: 图表ID
- dimension: 坐标轴维度，0=X 轴，1=Y 轴，2=Z 轴，3=颜色轴
- axis_index: 同一维度下的坐标轴序号（默认 0）
- min / max: 范围，日期会转换为时间戳
- redraw / animate: 是否重绘、是否动画

返回：
- min / max: 坐标轴上生效的范围
"""
