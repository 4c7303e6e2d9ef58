"""Highcharts 时间戳转换"""

from datetime import date, datetime, timezone
from typing import Any


def to_highcharts_ts(value: date | datetime) -> int:
    """
    将日期/时间转换为 Highcharts 时间戳（UTC 毫秒）

    无时区的 datetime 按 UTC 处理，date 取当天 UTC 零点。

    Args:
        value: 日期或时间

    Returns:
        自 epoch 起的毫秒数
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return int(round(value.timestamp() * 1000))
    if isinstance(value, date):
        midnight = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
        return int(midnight.timestamp() * 1000)
    raise TypeError(f"不支持的时间类型: {type(value).__name__}")


def coerce_timestamp(value: Any) -> Any:
    """日期类型转为时间戳，其它值原样返回"""
    if isinstance(value, (date, datetime)):
        return to_highcharts_ts(value)
    return value
