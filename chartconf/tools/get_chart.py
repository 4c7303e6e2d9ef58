"""Tool 定义：get_chart"""

from typing import Any, Dict

from pydantic import BaseModel, Field


class GetChartInput(BaseModel):
    """获取图表配置输入"""
    chart_id: str = Field(..., description="图表ID")


class GetChartOutput(BaseModel):
    """获取图表配置输出"""
    chart_id: str = Field(..., description="图表ID")
    configuration: Dict[str, Any] = Field(..., description="序列化后的 Highcharts 配置")
    series_count: int = Field(..., description="序列数量")


# Tool 元数据
TOOL_NAME = "get_chart"
TOOL_DESCRIPTION = """
获取图表当前的 Highcharts 配置。

参数：
- chart_id: 图表ID

返回：
- configuration: Highcharts 配置对象（空值已省略）
- series_count: 序列数量

使用场景：
1. 修改配置前查看当前状态
2. 确认配置修改是否生效
"""
