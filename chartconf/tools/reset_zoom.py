"""Tool 定义：reset_zoom"""

from pydantic import BaseModel, Field


class ResetZoomInput(BaseModel):
    """重置缩放输入"""
    chart_id: str = Field(..., description="图表ID")
    redraw: bool = Field(True, description="是否立即重绘")
    animate: bool = Field(True, description="是否使用动画")


class ResetZoomOutput(BaseModel):
    """重置缩放输出"""
    chart_id: str = Field(..., description="图表ID")
    pending_calls: int = Field(..., description="待发送的客户端调用数")


# Tool 元数据
TOOL_NAME = "reset_zoom"
TOOL_DESCRIPTION = """
重置图表缩放，恢复默认显示范围。

参数：
- chart_id: 图表ID

注意：只通知客户端恢复缩放，不修改配置中的坐标轴范围。
"""
