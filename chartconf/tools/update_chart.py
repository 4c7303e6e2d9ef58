"""Tool 定义：update_chart"""

from typing import Any, Dict, List, Union

from pydantic import BaseModel, Field


class UpdateChartInput(BaseModel):
    """合并图表配置输入"""
    chart_id: str = Field(..., description="图表ID")
    options: Union[Dict[str, Any], str] = Field(..., description="Highcharts 选项（对象或 JSON 字符串）")


class UpdateChartOutput(BaseModel):
    """合并图表配置输出"""
    chart_id: str = Field(..., description="图表ID")
    applied: List[str] = Field(..., description="成功应用的顶层配置项")


# Tool 元数据
TOOL_NAME = "update_chart"
TOOL_DESCRIPTION = """
把 Highcharts 选项合并到已有图表配置，并重新绘制图表。

参数：
- chart_id: 图表ID
- options: Highcharts 选项，支持 type、chart、title、subtitle、tooltip、legend、
  credits、exporting、xAxis、yAxis、zAxis、colorAxis、pane、plotOptions

返回：
- applied: 成功应用的配置项列表（无效的配置项会被跳过）

使用场景：
1. 修改标题、图例、提示框等展示选项
2. 调整坐标轴（分类、范围、标题）
3. 切换图表类型
"""
