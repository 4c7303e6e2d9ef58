"""Data Converter - 表格数据转换为数据序列"""

import math
import numbers
from datetime import date, datetime
from typing import Any, Dict, List, Sequence, Union

import pandas as pd

from chartconf.core.constants import MAX_TOOL_ROWS, UNKNOWN_CATEGORY
from chartconf.models.series import DataSeries, DataSeriesItem
from chartconf.utils.logger import log
from chartconf.utils.timestamp import to_highcharts_ts

Rows = Union[pd.DataFrame, Sequence[Dict[str, Any]]]


class DataConverter:
    """
    数据转换器

    按列数与列名选择数据点形态：
    1 列 → 计数；2 列 → 散点或分类/数值；
    3 列 → 桑基、甘特（xrange）、子弹、区间、气泡或回退；
    4 列 → 前两列；5 列 → OHLC 或箱线；6 列及以上 → 前两列。
    """

    def convert(self, rows: Rows) -> DataSeries:
        """
        转换查询结果

        Args:
            rows: 行字典列表或 DataFrame

        Returns:
            DataSeries: 未挂载的数据序列
        """
        records = self._to_records(rows)
        if not records:
            raise ValueError("数据为空，无法转换")
        if len(records) > MAX_TOOL_ROWS:
            log.warning(f"数据行数 {len(records)} 超过限制，截断为 {MAX_TOOL_ROWS}")
            records = records[:MAX_TOOL_ROWS]

        columns = list(records[0].keys())
        if not columns:
            raise ValueError("数据至少需要 1 列")

        log.info(f"转换数据: {len(records)} 行, {len(columns)} 列")

        if len(columns) == 1:
            return self._convert_counts(records, columns[0])
        if len(columns) == 2:
            return self._convert_pairs(records, columns)
        if len(columns) == 3:
            return self._convert_three(records, columns)
        if len(columns) == 5:
            return self._convert_five(records, columns)
        return self._convert_pairs(records, columns[:2])

    def _to_records(self, rows: Rows) -> List[Dict[str, Any]]:
        if rows is None:
            return []
        if isinstance(rows, pd.DataFrame):
            return rows.to_dict("records")
        return list(rows)

    def _convert_counts(self, records: List[Dict[str, Any]], column: str) -> DataSeries:
        counts: Dict[str, int] = {}
        for row in records:
            category = self._to_category(row.get(column))
            counts[category] = counts.get(category, 0) + 1

        series = DataSeries()
        for category, count in counts.items():
            series.add(DataSeriesItem(category, count), update=False)
        return series

    def _convert_pairs(self, records: List[Dict[str, Any]], columns: List[str]) -> DataSeries:
        first, second = columns[0], columns[1]
        series = DataSeries()
        for row in records:
            value1 = row.get(first)
            value2 = row.get(second)
            if self._is_numeric(value1) and self._is_numeric(value2):
                item = DataSeriesItem(self._to_number(value1), self._to_number(value2))
            else:
                item = DataSeriesItem(self._to_category(value1), self._to_number(value2))
            series.add(item, update=False)
        return series

    def _convert_three(self, records: List[Dict[str, Any]], columns: List[str]) -> DataSeries:
        names = [column.lower() for column in columns]

        # from, to, weight
        if (
            ("from" in names[0] or "source" in names[0])
            and ("to" in names[1] or "target" in names[1] or "dest" in names[1])
            and ("weight" in names[2] or "value" in names[2] or "flow" in names[2])
        ):
            series = DataSeries()
            for row in records:
                item = DataSeriesItem(
                    from_=str(row.get(columns[0])),
                    to=str(row.get(columns[1])),
                    weight=self._to_number(row.get(columns[2]))
                )
                series.add(item, update=False)
            return series

        # start, end, y
        if (
            ("start" in names[0] or names[0] == "x")
            and ("end" in names[1] or names[1] == "x2")
            and (names[2] == "y" or "category" in names[2] or "row" in names[2])
        ):
            series = DataSeries()
            for row in records:
                x, x2, y = (self._to_number(row.get(column)) for column in columns)
                series.add(DataSeriesItem(x=x, x2=x2, y=y), update=False)
            return series

        # category, y, target
        if "target" in names[2]:
            series = DataSeries()
            for row in records:
                category = row.get(columns[0])
                y = self._to_number(row.get(columns[1]))
                target = self._to_number(row.get(columns[2]))
                if self._is_numeric(category):
                    item = DataSeriesItem(x=self._to_number(category), y=y, target=target)
                else:
                    item = DataSeriesItem(name=self._to_category(category), y=y, target=target)
                series.add(item, update=False)
            return series

        # x, low, high
        if ("low" in names[1] or "min" in names[1]) and ("high" in names[2] or "max" in names[2]):
            series = DataSeries()
            for row in records:
                x = row.get(columns[0])
                low = self._to_number(row.get(columns[1]))
                high = self._to_number(row.get(columns[2]))
                if self._is_numeric(x):
                    item = DataSeriesItem(self._to_number(x), low, high)
                else:
                    item = DataSeriesItem(name=self._to_category(x), low=low, high=high)
                series.add(item, update=False)
            return series

        first = records[0]
        if all(self._is_numeric(first.get(column)) for column in columns):
            series = DataSeries()
            for row in records:
                x, y, z = (self._to_number(row.get(column)) for column in columns)
                series.add(DataSeriesItem(x=x, y=y, z=z), update=False)
            return series

        return self._convert_pairs(records, columns[:2])

    def _convert_five(self, records: List[Dict[str, Any]], columns: List[str]) -> DataSeries:
        names = [column.lower() for column in columns]

        is_ohlc = (
            ("open" in names[1] or names[1] == "o")
            and ("high" in names[2] or names[2] == "h")
            and ("low" in names[3] or names[3] == "l")
            and ("close" in names[4] or names[4] == "c")
        )
        if is_ohlc:
            series = DataSeries()
            for row in records:
                x, open_, high, low, close = (self._to_number(row.get(column)) for column in columns)
                series.add(
                    DataSeriesItem(x=x, open=open_, high=high, low=low, close=close),
                    update=False
                )
            return series

        is_boxplot = (
            ("low" in names[0] or "min" in names[0])
            and ("q1" in names[1] or "lower" in names[1])
            and ("median" in names[2] or "q2" in names[2] or "mid" in names[2])
            and ("q3" in names[3] or "upper" in names[3])
            and ("high" in names[4] or "max" in names[4])
        )
        first = records[0]
        if is_boxplot or all(self._is_numeric(first.get(column)) for column in columns):
            series = DataSeries()
            for row in records:
                low, q1, median, q3, high = (self._to_number(row.get(column)) for column in columns)
                series.add(
                    DataSeriesItem(low=low, q1=q1, median=median, q3=q3, high=high),
                    update=False
                )
            return series

        return self._convert_pairs(records, columns[:2])

    def _is_numeric(self, value: Any) -> bool:
        if value is None or isinstance(value, bool):
            return False
        if isinstance(value, numbers.Number):
            return not (isinstance(value, float) and math.isnan(value))
        try:
            float(str(value))
            return True
        except ValueError:
            return False

    def _to_number(self, value: Any) -> Union[int, float]:
        """转为数值：日期转时间戳，无法解析时为 0"""
        if value is None or value is pd.NaT or isinstance(value, bool):
            return 0
        if isinstance(value, (date, datetime)):
            return to_highcharts_ts(value)
        if isinstance(value, numbers.Integral):
            return int(value)
        if isinstance(value, numbers.Real):
            return 0 if math.isnan(value) else float(value)
        try:
            return float(str(value))
        except ValueError:
            return 0

    def _to_category(self, value: Any) -> str:
        if value is None or (isinstance(value, float) and math.isnan(value)):
            return UNKNOWN_CATEGORY
        return str(value)


# 全局单例
_data_converter = None


def get_data_converter() -> DataConverter:
    """获取 DataConverter 单例"""
    global _data_converter
    if _data_converter is None:
        _data_converter = DataConverter()
    return _data_converter
