"""API 请求/响应模型"""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, Field

from chartconf.models.enums import ChartType


class CreateChartRequest(BaseModel):
    """创建图表请求"""
    type: Optional[ChartType] = Field(None, description="图表类型")
    timeline: bool = Field(False, description="是否启用时间轴模式")
    options: Optional[Dict[str, Any]] = Field(None, description="初始 Highcharts 选项")


class ApplyOptionsRequest(BaseModel):
    """合并配置请求"""
    options: Union[Dict[str, Any], str] = Field(..., description="Highcharts 选项（对象或 JSON 字符串）")


class AddSeriesRequest(BaseModel):
    """添加序列请求"""
    rows: List[Dict[str, Any]] = Field(..., min_length=1, description="查询结果行")
    name: Optional[str] = Field(None, description="序列名称")
    type: Optional[ChartType] = Field(None, description="序列图表类型")


class ExtremesRequest(BaseModel):
    """坐标轴范围请求"""
    min: Optional[Union[int, float, datetime]] = Field(None, description="最小值")
    max: Optional[Union[int, float, datetime]] = Field(None, description="最大值")
    redraw: bool = Field(True, description="是否立即重绘")
    animate: bool = Field(True, description="是否使用动画")


class ChartResponse(BaseModel):
    """图表响应"""
    chart_id: str = Field(..., description="图表ID")
    configuration: Dict[str, Any] = Field(..., description="Highcharts 配置")
    applied: List[str] = Field(default_factory=list, description="已应用的配置项")


class ClientCallsResponse(BaseModel):
    """客户端调用响应"""
    chart_id: str = Field(..., description="图表ID")
    calls: List[Dict[str, Any]] = Field(default_factory=list, description="待执行的客户端调用")


class ToolRequest(BaseModel):
    """工具调用请求"""
    args: Dict[str, Any] = Field(default_factory=dict, description="工具参数")


class ToolResponse(BaseModel):
    """工具调用响应（统一结构）"""
    success: bool = Field(True, description="是否成功")
    result: Optional[Dict[str, Any]] = Field(None, description="工具结果")
    error: Optional[str] = Field(None, description="错误信息")
    error_code: Optional[str] = Field(None, description="错误代码")
    error_detail: Optional[Dict[str, Any]] = Field(None, description="错误详情")
