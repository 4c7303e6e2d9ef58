"""Tool 定义：add_series"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from chartconf.core.constants import MAX_TOOL_ROWS
from chartconf.models.enums import ChartType


class AddSeriesInput(BaseModel):
    """添加数据序列输入"""
    chart_id: str = Field(..., description="图表ID")
    rows: List[Dict[str, Any]] = Field(..., min_length=1, max_length=MAX_TOOL_ROWS, description="查询结果行")
    name: Optional[str] = Field(None, description="序列名称")
    type: Optional[ChartType] = Field(None, description="序列图表类型（可选，默认跟随图表）")


class AddSeriesOutput(BaseModel):
    """添加数据序列输出"""
    chart_id: str = Field(..., description="图表ID")
    series_index: int = Field(..., description="新序列的序号")
    point_count: int = Field(..., description="数据点数量")


# Tool 元数据
TOOL_NAME = "add_series"
TOOL_DESCRIPTION = """
把表格查询结果转换为数据序列并添加到图表。

参数：
- chart_id: 图表ID
- rows: 行对象数组，列数决定数据点形态：
  1 列计数；2 列分类/数值或散点；3 列区间（low/high）或气泡；
  5 列 OHLC（open/high/low/close）或箱线；其余取前两列
- name: 序列名称（可选）
- type: 序列图表类型（可选）

返回：
- series_index: 新序列的序号
- point_count: 数据点数量
"""
