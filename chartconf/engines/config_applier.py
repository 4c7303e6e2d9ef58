"""Config Applier - 将 Highcharts 选项字典合并到已有配置"""

import json
from typing import Any, Callable, Dict, List, Optional, Union

from pydantic import ValidationError

from chartconf.models.base import ConfigurationObject
from chartconf.models.chart import Pane
from chartconf.models.configuration import AXIS_FIELDS, Configuration
from chartconf.models.enums import AxisDimension, ChartType
from chartconf.models.plot_options import plot_options_class
from chartconf.utils.logger import log

# 直接合并到同名选项组的键
GROUP_KEYS = {
    "chart": "chart",
    "tooltip": "tooltip",
    "legend": "legend",
    "credits": "credits",
    "exporting": "exporting",
    "accessibility": "accessibility",
    "rangeSelector": "range_selector",
    "navigator": "navigator",
    "scrollbar": "scrollbar",
    "loading": "loading",
    "noData": "no_data",
    "time": "time",
}

CHART_TYPE_VALUES = {chart_type.value for chart_type in ChartType}

AXIS_KEYS = {
    "xAxis": AxisDimension.X_AXIS,
    "yAxis": AxisDimension.Y_AXIS,
    "zAxis": AxisDimension.Z_AXIS,
    "colorAxis": AxisDimension.COLOR_AXIS,
}


class ConfigurationApplier:
    """
    配置合并器

    把（可能由 LLM 生成的）Highcharts 选项逐项合并到已有 Configuration：
    已存在的选项组与坐标轴原地修改，不替换对象；无效的值记录警告后跳过。
    """

    def parse(self, options: Union[str, Dict[str, Any]]) -> Dict[str, Any]:
        """解析选项（JSON 字符串转为字典）"""
        if isinstance(options, str):
            try:
                options = json.loads(options)
            except json.JSONDecodeError as e:
                raise ValueError(f"配置 JSON 无法解析: {e}") from e
        if not isinstance(options, dict):
            raise ValueError("配置必须是 JSON 对象")
        return options

    def requested_chart_types(self, options: Dict[str, Any]) -> List[ChartType]:
        """选项中将要设置的图表类型（顶层 type 与 chart.type）"""
        chart_types = []
        if options.get("type") is not None:
            chart_types.append(self._parse_chart_type(options["type"]))
        chart_node = options.get("chart")
        if isinstance(chart_node, dict) and chart_node.get("type") in CHART_TYPE_VALUES:
            chart_types.append(ChartType(chart_node["type"]))
        return chart_types

    def apply(self, configuration: Configuration, options: Union[str, Dict[str, Any]]) -> List[str]:
        """
        合并选项

        Args:
            configuration: 目标配置
            options: Highcharts 选项（字典或 JSON 字符串）

        Returns:
            成功应用的顶层键列表
        """
        options = self.parse(options)

        applied = []
        for key, node in options.items():
            handler = self._handler_for(key)
            if handler is None:
                log.warning(f"忽略不支持的配置项: {key}")
                continue
            try:
                handler(configuration, node)
                applied.append(key)
            except (ValueError, TypeError) as e:
                log.warning(f"配置项 {key} 无效，已跳过: {e}")

        log.info(f"已应用配置项: {applied}")
        return applied

    def _handler_for(self, key: str) -> Optional[Callable[[Configuration, Any], None]]:
        if key == "type":
            return self._apply_chart_type
        if key in ("title", "subtitle"):
            return lambda configuration, node: self._apply_text_group(configuration, key, node)
        if key in GROUP_KEYS:
            field = GROUP_KEYS[key]
            return lambda configuration, node: self._apply_group(configuration, field, node)
        if key in AXIS_KEYS:
            dimension = AXIS_KEYS[key]
            return lambda configuration, node: self._apply_axes(configuration, dimension, node)
        if key == "pane":
            return self._apply_pane
        if key == "plotOptions":
            return self._apply_plot_options
        return None

    def merge(self, target: ConfigurationObject, node: Any) -> List[str]:
        """
        逐字段合并到选项对象（原地修改）

        Args:
            target: 目标选项对象
            node: 选项字典

        Returns:
            已合并的字段名
        """
        if not isinstance(node, dict):
            raise TypeError(f"{type(target).__name__} 需要对象，实际为 {type(node).__name__}")

        merged = []
        model_class = type(target)
        for key, value in node.items():
            try:
                update = model_class.model_validate({key: value})
            except ValidationError as e:
                log.warning(f"{model_class.__name__}.{key} 无效，已跳过: {e.errors()[0]['msg']}")
                continue
            for field in update.model_fields_set:
                setattr(target, field, getattr(update, field))
                merged.append(field)
        return merged

    def _parse_chart_type(self, node: Any) -> ChartType:
        try:
            return ChartType(str(node).lower())
        except ValueError:
            log.warning(f"未知图表类型 {node}，使用 line")
            return ChartType.LINE

    def _apply_chart_type(self, configuration: Configuration, node: Any) -> None:
        configuration.chart.type = self._parse_chart_type(node)

    def _apply_text_group(self, configuration: Configuration, field: str, node: Any) -> None:
        target = getattr(configuration, field)
        if target is None:
            setattr(configuration, field, {})
            target = getattr(configuration, field)
        if isinstance(node, str):
            target.text = node
            return
        self.merge(target, node)

    def _apply_group(self, configuration: Configuration, field: str, node: Any) -> None:
        target = getattr(configuration, field)
        if target is None:
            setattr(configuration, field, {})
            target = getattr(configuration, field)
        if field == "credits" and isinstance(node, bool):
            target.enabled = node
            return
        self.merge(target, node)

    def _apply_axes(self, configuration: Configuration, dimension: AxisDimension, node: Any) -> None:
        nodes = node if isinstance(node, list) else [node]
        _, axis_class = AXIS_FIELDS[dimension]
        for index, axis_node in enumerate(nodes):
            axis = configuration.get_axis_at(dimension, index)
            if axis is None:
                axis = axis_class()
                configuration.add_axis(axis)
            self.merge(axis, axis_node)

    def _apply_pane(self, configuration: Configuration, node: Any) -> None:
        nodes = node if isinstance(node, list) else [node]
        for pane_node in nodes:
            pane = Pane()
            self.merge(pane, pane_node)
            configuration.add_pane(pane)

    def _apply_plot_options(self, configuration: Configuration, node: Any) -> None:
        if not isinstance(node, dict):
            raise TypeError("plotOptions 需要对象")
        for key, options_node in node.items():
            try:
                options_class = plot_options_class(key)
            except ValueError as e:
                log.warning(f"忽略绘图选项 {key}: {e}")
                continue
            target = configuration.get_plot_options(key)
            if target is None:
                target = options_class()
                configuration.add_plot_options(target)
            self.merge(target, options_node)


# 全局单例
_config_applier = None


def get_config_applier() -> ConfigurationApplier:
    """获取 ConfigurationApplier 单例"""
    global _config_applier
    if _config_applier is None:
        _config_applier = ConfigurationApplier()
    return _config_applier
