"""Tool Executor - 工具执行器"""

import time
from typing import Any, Dict

from pydantic import ValidationError

from chartconf.engines.chart_manager import get_chart_manager
from chartconf.engines.data_converter import get_data_converter
from chartconf.engines.serializer import to_dict
from chartconf.models.configuration import AXIS_FIELDS, ConfigurationStateError
from chartconf.tools import TOOL_REGISTRY
from chartconf.utils.logger import log


class ToolExecutionError(Exception):
    """工具执行错误（结构化）"""

    def __init__(self, code: str, message: str, detail: Dict[str, Any] | None = None):
        super().__init__(message)
        self.code = code
        self.detail = detail or {}


class ToolExecutor:
    """工具执行器"""

    def __init__(self):
        self.chart_manager = get_chart_manager()
        self.data_converter = get_data_converter()

    def execute(self, tool_name: str, args: Dict[str, Any]) -> Dict[str, Any]:
        """
        执行工具调用

        Args:
            tool_name: 工具名称
            args: 工具参数

        Returns:
            执行结果
        """
        log.info(f"执行工具: {tool_name}")
        start_time = time.time()

        try:
            # 验证工具存在
            if tool_name not in TOOL_REGISTRY:
                raise ValueError(f"未知工具: {tool_name}")

            tool_def = TOOL_REGISTRY[tool_name]
            validated_args = tool_def["input_schema"](**args)

            if tool_name == "update_chart":
                result = self._execute_update_chart(validated_args)
            elif tool_name == "get_chart":
                result = self._execute_get_chart(validated_args)
            elif tool_name == "add_series":
                result = self._execute_add_series(validated_args)
            elif tool_name == "set_extremes":
                result = self._execute_set_extremes(validated_args)
            elif tool_name == "reset_zoom":
                result = self._execute_reset_zoom(validated_args)
            else:
                raise ValueError(f"工具未实现: {tool_name}")

            # 校验输出结构
            output = tool_def["output_schema"](**result)

            latency = (time.time() - start_time) * 1000
            log.info(f"工具执行成功: {tool_name} ({latency:.2f}ms)")

            return output.model_dump(mode="json")

        except ValidationError as e:
            latency = (time.time() - start_time) * 1000
            log.error(f"工具执行失败: {tool_name} - {e} ({latency:.2f}ms)")
            raise ToolExecutionError(
                code="VALIDATION_ERROR",
                message="参数校验失败",
                detail={"errors": e.errors(include_url=False, include_context=False)}
            ) from e
        except ConfigurationStateError as e:
            latency = (time.time() - start_time) * 1000
            log.error(f"工具执行失败: {tool_name} - {e} ({latency:.2f}ms)")
            raise ToolExecutionError(
                code="STATE_ERROR",
                message=str(e),
                detail={"exception": type(e).__name__}
            ) from e
        except Exception as e:
            latency = (time.time() - start_time) * 1000
            log.error(f"工具执行失败: {tool_name} - {e} ({latency:.2f}ms)")
            raise ToolExecutionError(
                code="TOOL_ERROR",
                message=str(e),
                detail={"exception": type(e).__name__}
            ) from e

    def _execute_update_chart(self, args: Any) -> Dict[str, Any]:
        """执行 update_chart"""
        chart = self.chart_manager.get_chart(args.chart_id)
        applied = chart.apply_options(args.options)

        return {
            "chart_id": args.chart_id,
            "applied": applied
        }

    def _execute_get_chart(self, args: Any) -> Dict[str, Any]:
        """执行 get_chart"""
        chart = self.chart_manager.get_chart(args.chart_id)

        return {
            "chart_id": args.chart_id,
            "configuration": to_dict(chart.configuration),
            "series_count": len(chart.configuration.series)
        }

    def _execute_add_series(self, args: Any) -> Dict[str, Any]:
        """执行 add_series"""
        chart = self.chart_manager.get_chart(args.chart_id)
        series = self.data_converter.convert(args.rows)
        series.name = args.name
        series.type = args.type
        chart.configuration.add_series(series)

        return {
            "chart_id": args.chart_id,
            "series_index": len(chart.configuration.series) - 1,
            "point_count": series.size()
        }

    def _execute_set_extremes(self, args: Any) -> Dict[str, Any]:
        """执行 set_extremes"""
        chart = self.chart_manager.get_chart(args.chart_id)
        configuration = chart.configuration

        axis = configuration.get_axis_at(args.dimension, args.axis_index)
        if axis is None and args.axis_index == 0:
            # 首个轴按需创建
            _, axis_class = AXIS_FIELDS[args.dimension]
            axis = axis_class()
            configuration.add_axis(axis)
        if axis is None:
            raise ValueError(f"坐标轴不存在: {args.dimension.name}[{args.axis_index}]")

        axis.set_extremes(args.min, args.max, redraw=args.redraw, animate=args.animate)

        return {
            "chart_id": args.chart_id,
            "min": axis.min,
            "max": axis.max
        }

    def _execute_reset_zoom(self, args: Any) -> Dict[str, Any]:
        """执行 reset_zoom"""
        chart = self.chart_manager.get_chart(args.chart_id)
        chart.configuration.reset_zoom(args.redraw, args.animate)

        return {
            "chart_id": args.chart_id,
            "pending_calls": len(chart.pending_calls())
        }


# 全局单例
_tool_executor = None


def get_tool_executor() -> ToolExecutor:
    """获取 ToolExecutor 单例"""
    global _tool_executor
    if _tool_executor is None:
        _tool_executor = ToolExecutor()
    return _tool_executor
