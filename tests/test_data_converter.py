"""数据转换测试"""

from datetime import date, datetime

import pandas as pd
import pytest

from chartconf.engines.data_converter import DataConverter, get_data_converter


@pytest.fixture
def converter():
    return DataConverter()


def test_singleton():
    """测试单例"""
    assert get_data_converter() is get_data_converter()


def test_single_column_counts(converter):
    """测试单列按取值计数"""
    series = converter.convert([{"city": "北京"}, {"city": "上海"}, {"city": "北京"}, {"city": None}])

    assert [(item.name, item.y) for item in series.data] == [
        ("北京", 2), ("上海", 1), ("Unknown", 1)
    ]


def test_two_columns_category(converter):
    """测试分类 + 数值"""
    series = converter.convert([
        {"month": "Jan", "sales": 10},
        {"month": "Feb", "sales": "12.5"},
        {"month": None, "sales": "n/a"},
    ])

    assert [(item.name, item.y) for item in series.data] == [
        ("Jan", 10), ("Feb", 12.5), ("Unknown", 0)
    ]


def test_two_columns_scatter(converter):
    """测试两列数值为散点"""
    series = converter.convert([{"height": 170, "weight": 65.5}, {"height": "180", "weight": 80}])

    first, second = series.data
    assert (first.x, first.y) == (170, 65.5)
    assert (second.x, second.y) == (180.0, 80)
    assert first.name is None


def test_three_columns_range(converter):
    """测试三列区间数据"""
    series = converter.convert([
        {"day": "Mon", "low_temp": 1, "high_temp": 8},
        {"day": 2, "min": 3, "max": 9},
    ])

    first = series.data[0]
    assert (first.name, first.low, first.high) == ("Mon", 1, 8)


def test_three_columns_numeric_range(converter):
    """测试数值 x 的区间数据"""
    series = converter.convert([{"x": 1, "min": 3, "max": 9}])
    item = series.data[0]
    assert (item.x, item.low, item.high) == (1, 3, 9)


def test_three_columns_bubble(converter):
    """测试三列数值为气泡"""
    series = converter.convert([{"a": 1, "b": 2, "c": 3}])
    item = series.data[0]
    assert (item.x, item.y, item.z) == (1, 2, 3)


def test_three_columns_fallback(converter):
    """测试三列无法识别时取前两列"""
    series = converter.convert([{"name": "A", "value": 5, "note": "x"}])
    item = series.data[0]
    assert (item.name, item.y) == ("A", 5)


def test_three_columns_sankey(converter):
    """测试桑基图连线数据"""
    series = converter.convert([
        {"source": "A", "target": "B", "weight": 5},
        {"source": "B", "target": "C", "weight": "2.5"},
    ])

    first, second = series.data
    assert (first.from_, first.to, first.weight) == ("A", "B", 5)
    assert second.weight == 2.5
    assert first.to_dict() == {"from": "A", "to": "B", "weight": 5}


def test_three_columns_xrange(converter):
    """测试 start/end/y 转为甘特区间而不是气泡"""
    series = converter.convert([{"start": 1, "end": 5, "y": 0}])

    item = series.data[0]
    assert (item.x, item.x2, item.y) == (1, 5, 0)
    assert item.z is None
    assert item.to_dict() == {"x": 1, "x2": 5, "y": 0}


def test_three_columns_xrange_dates(converter):
    """测试甘特区间的日期列转为时间戳"""
    series = converter.convert([
        {"x": date(2020, 1, 1), "x2": date(2020, 1, 2), "row": 1},
    ])
    item = series.data[0]
    assert (item.x, item.x2, item.y) == (1577836800000, 1577923200000, 1)


def test_three_columns_bullet(converter):
    """测试子弹图：分类或数值 x + 实际值 + 目标值"""
    series = converter.convert([
        {"kpi": "收入", "actual": 80, "target": 100},
        {"kpi": 3, "actual": 50, "target": 60},
    ])

    first, second = series.data
    assert (first.name, first.y, first.target) == ("收入", 80, 100)
    assert (second.x, second.y, second.target) == (3, 50, 60)
    assert second.name is None


def test_four_columns_first_two(converter):
    """测试四列取前两列"""
    series = converter.convert([{"name": "A", "value": 5, "c": 1, "d": 2}])
    assert (series.data[0].name, series.data[0].y) == ("A", 5)


def test_five_columns_ohlc(converter):
    """测试 OHLC 数据，日期转为时间戳"""
    series = converter.convert([
        {"date": date(2020, 1, 1), "open": 1, "high": 4, "low": 0.5, "close": 3},
    ])
    item = series.data[0]
    assert item.x == 1577836800000
    assert (item.open, item.high, item.low, item.close) == (1, 4, 0.5, 3)


def test_five_columns_boxplot(converter):
    """测试箱线数据"""
    series = converter.convert([
        {"min": 1, "q1": 2, "median": 3, "q3": 4, "max": 5},
        {"a": "1", "b": "2", "c": "3", "d": "4", "e": "5"},
    ])
    item = series.data[0]
    assert (item.low, item.q1, item.median, item.q3, item.high) == (1, 2, 3, 4, 5)


def test_five_columns_fallback(converter):
    """测试五列非数值时取前两列"""
    series = converter.convert([{"a": "X", "b": 2, "c": "y", "d": "z", "e": "w"}])
    assert (series.data[0].name, series.data[0].y) == ("X", 2)


def test_six_columns_first_two(converter):
    """测试六列及以上取前两列"""
    row = {"name": "A", "value": 1, "c": 1, "d": 1, "e": 1, "f": 1}
    series = converter.convert([row])
    assert series.size() == 1
    assert series.data[0].name == "A"


def test_dataframe_input(converter):
    """测试 DataFrame 输入"""
    frame = pd.DataFrame({"region": ["东", "西"], "amount": [100, 200]})
    series = converter.convert(frame)
    assert [(item.name, item.y) for item in series.data] == [("东", 100), ("西", 200)]


def test_datetime_values(converter):
    """测试日期时间数值转为时间戳"""
    series = converter.convert([
        {"t": datetime(2020, 1, 1), "o": 1, "h": 2, "l": 0, "c": 1},
    ])
    assert series.data[0].x == 1577836800000


def test_empty_data(converter):
    """测试空数据"""
    with pytest.raises(ValueError):
        converter.convert([])

    with pytest.raises(ValueError):
        converter.convert(pd.DataFrame())

    with pytest.raises(ValueError):
        converter.convert([{}])


def test_result_is_detached(converter):
    """测试转换结果未挂载到任何配置"""
    series = converter.convert([{"a": "x"}])
    assert series.configuration is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
