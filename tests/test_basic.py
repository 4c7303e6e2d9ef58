"""基础测试"""

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from chartconf.core.config import settings
from chartconf.models import (
    AxisDimension, ChartType, GradientColor, SolidColor, Style, Title,
)
from chartconf.models.chart import Credits
from chartconf.utils.timestamp import coerce_timestamp, to_highcharts_ts


def test_settings():
    """测试配置加载"""
    assert settings is not None
    assert settings.max_charts == 1000
    assert settings.chart_ttl_hours == 24
    assert settings.max_pending_calls == 500


def test_axis_dimension_index():
    """测试坐标轴维度序号"""
    assert AxisDimension.X_AXIS.index == 0
    assert AxisDimension.Y_AXIS.index == 1
    assert AxisDimension.Z_AXIS.index == 2
    assert AxisDimension.COLOR_AXIS.index == 3


def test_chart_type_value():
    """测试图表类型取值"""
    assert ChartType("pie") is ChartType.PIE
    assert str(ChartType.COLUMN) == "column"


def test_solid_color():
    """测试纯色"""
    assert SolidColor("#FF0000").to_dict() == "#FF0000"
    assert SolidColor.named("Red") == "#FF0000"
    assert SolidColor.rgb(1, 2, 3).color == "rgb(1,2,3)"
    assert SolidColor.rgb(1, 2, 3, 0.5).color == "rgba(1,2,3,0.5)"
    assert SolidColor("#000") == SolidColor("#000")

    with pytest.raises(ValueError):
        SolidColor.named("no-such-color")


def test_gradient_color():
    """测试渐变色"""
    gradient = GradientColor.linear(0, 0, 0, 1)
    gradient.add_color_stop(0, "#FFFFFF")
    gradient.add_color_stop(1, SolidColor("#000000"))

    data = gradient.to_dict()
    assert data["linearGradient"] == {"x1": 0.0, "y1": 0.0, "x2": 0.0, "y2": 1.0}
    assert data["stops"] == [[0.0, "#FFFFFF"], [1.0, "#000000"]]

    with pytest.raises(ValidationError):
        GradientColor()


def test_style_keeps_unknown_css():
    """测试样式保留未知 CSS 属性"""
    style = Style(font_size="12px", textDecoration="underline")
    data = style.to_dict()
    assert data["fontSize"] == "12px"
    assert data["textDecoration"] == "underline"


def test_text_object_from_string():
    """测试字符串构造标题"""
    title = Title.model_validate("销售额")
    assert title.text == "销售额"


def test_credits_from_flag():
    """测试布尔值构造版权信息"""
    assert Credits.model_validate(False).enabled is False


def test_to_highcharts_ts():
    """测试时间戳转换"""
    assert to_highcharts_ts(date(2020, 1, 1)) == 1577836800000
    assert to_highcharts_ts(datetime(2020, 1, 1, 0, 0, 1)) == 1577836801000

    shanghai = timezone(timedelta(hours=8))
    assert to_highcharts_ts(datetime(2020, 1, 1, 8, tzinfo=shanghai)) == 1577836800000

    with pytest.raises(TypeError):
        to_highcharts_ts("2020-01-01")


def test_coerce_timestamp_passthrough():
    """测试非日期值原样返回"""
    assert coerce_timestamp(5) == 5
    assert coerce_timestamp(None) is None
    assert coerce_timestamp(date(2020, 1, 1)) == 1577836800000


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
