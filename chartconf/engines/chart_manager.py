"""Chart Manager - 图表管理引擎"""

import uuid
from datetime import datetime, timedelta
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from chartconf.core.config import settings
from chartconf.engines.chart import Chart
from chartconf.models.enums import ChartType
from chartconf.utils.logger import log


class ChartEntry(BaseModel):
    """已注册的图表"""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    chart_id: str = Field(..., description="图表ID")
    chart: Chart = Field(..., description="图表对象")
    created_at: datetime = Field(default_factory=datetime.now, description="创建时间")


class ChartManager:
    """图表管理器"""

    def __init__(self):
        self.charts: Dict[str, ChartEntry] = {}

    def create_chart(self, chart_type: Optional[Union[ChartType, str]] = None,
                     timeline: bool = False) -> str:
        """
        创建并挂载图表

        Args:
            chart_type: 图表类型
            timeline: 是否启用时间轴模式

        Returns:
            图表ID
        """
        if len(self.charts) >= settings.max_charts:
            self.cleanup_expired_charts()
        if len(self.charts) >= settings.max_charts:
            raise ValueError(f"图表数量超过限制: {settings.max_charts}")

        chart_id = f"ch_{uuid.uuid4().hex[:12]}"
        chart = Chart(chart_type)
        chart.timeline = timeline
        chart.attach()

        self.charts[chart_id] = ChartEntry(chart_id=chart_id, chart=chart)
        log.info(f"图表 {chart_id} 已创建 (type={chart.configuration.chart.type})")
        return chart_id

    def get_chart(self, chart_id: str) -> Chart:
        """获取图表"""
        if chart_id not in self.charts:
            raise ValueError(f"图表不存在: {chart_id}")
        return self.charts[chart_id].chart

    def chart_exists(self, chart_id: str) -> bool:
        return chart_id in self.charts

    def delete_chart(self, chart_id: str) -> None:
        """
        删除图表

        Args:
            chart_id: 图表ID
        """
        if chart_id not in self.charts:
            raise ValueError(f"图表不存在: {chart_id}")

        self.charts[chart_id].chart.detach()
        del self.charts[chart_id]
        log.info(f"图表 {chart_id} 已删除")

    def cleanup_expired_charts(self) -> int:
        """
        清理过期的图表

        Returns:
            清理的图表数量
        """
        now = datetime.now()
        ttl = timedelta(hours=settings.chart_ttl_hours)
        expired_ids = [
            chart_id for chart_id, entry in self.charts.items()
            if now - entry.created_at > ttl
        ]

        for chart_id in expired_ids:
            self.delete_chart(chart_id)

        if expired_ids:
            log.info(f"已清理 {len(expired_ids)} 个过期图表")

        return len(expired_ids)

    def get_all_charts(self) -> List[str]:
        return list(self.charts.keys())

    def get_stats(self) -> Dict[str, Any]:
        """获取图表统计信息"""
        pending = sum(len(entry.chart.pending_calls()) for entry in self.charts.values())

        return {
            "total_charts": len(self.charts),
            "pending_calls": pending,
            "max_charts": settings.max_charts,
            "ttl_hours": settings.chart_ttl_hours
        }


# 全局单例
_chart_manager = None


def get_chart_manager() -> ChartManager:
    """获取 ChartManager 单例"""
    global _chart_manager
    if _chart_manager is None:
        _chart_manager = ChartManager()
    return _chart_manager
