"""Serializer - 配置序列化"""

import json
from typing import Any, Dict

from chartconf.models.base import ConfigurationObject


def to_dict(obj: ConfigurationObject) -> Dict[str, Any]:
    """
    转为 Highcharts 选项字典

    字段名使用 Highcharts 约定（camelCase），空值与空选项组被省略，
    反向引用和监听者不参与序列化。

    Args:
        obj: 配置或任意选项组

    Returns:
        可直接 JSON 编码的字典
    """
    return obj.to_dict()


def to_json(obj: ConfigurationObject, indent: int | None = None) -> str:
    """转为 Highcharts 选项 JSON"""
    return json.dumps(to_dict(obj), ensure_ascii=False, indent=indent)
