"""枚举类型"""

from enum import Enum


class ChartType(str, Enum):
    """图表类型"""
    AREA = "area"
    AREARANGE = "arearange"
    AREASPLINE = "areaspline"
    AREASPLINERANGE = "areasplinerange"
    BAR = "bar"
    BOXPLOT = "boxplot"
    BUBBLE = "bubble"
    BULLET = "bullet"
    CANDLESTICK = "candlestick"
    COLUMN = "column"
    COLUMNRANGE = "columnrange"
    ERRORBAR = "errorbar"
    FLAGS = "flags"
    FUNNEL = "funnel"
    GANTT = "gantt"
    GAUGE = "gauge"
    HEATMAP = "heatmap"
    LINE = "line"
    OHLC = "ohlc"
    ORGANIZATION = "organization"
    PIE = "pie"
    POLYGON = "polygon"
    PYRAMID = "pyramid"
    SANKEY = "sankey"
    SCATTER = "scatter"
    SOLIDGAUGE = "solidgauge"
    SPLINE = "spline"
    TIMELINE = "timeline"
    TREEMAP = "treemap"
    WATERFALL = "waterfall"
    XRANGE = "xrange"

    def __str__(self) -> str:
        return self.value


class AxisDimension(Enum):
    """坐标轴维度（值为客户端使用的维度序号）"""
    X_AXIS = 0
    Y_AXIS = 1
    Z_AXIS = 2
    COLOR_AXIS = 3

    @property
    def index(self) -> int:
        return self.value


class Dimension(str, Enum):
    """缩放/平移维度"""
    X = "x"
    Y = "y"
    XY = "xy"


class DashStyle(str, Enum):
    SOLID = "Solid"
    SHORTDASH = "ShortDash"
    SHORTDOT = "ShortDot"
    SHORTDASHDOT = "ShortDashDot"
    SHORTDASHDOTDOT = "ShortDashDotDot"
    DOT = "Dot"
    DASH = "Dash"
    LONGDASH = "LongDash"
    DASHDOT = "DashDot"
    LONGDASHDOT = "LongDashDot"
    LONGDASHDOTDOT = "LongDashDotDot"


class AxisType(str, Enum):
    LINEAR = "linear"
    LOGARITHMIC = "logarithmic"
    DATETIME = "datetime"
    CATEGORY = "category"


class TickPosition(str, Enum):
    INSIDE = "inside"
    OUTSIDE = "outside"


class TickmarkPlacement(str, Enum):
    BETWEEN = "between"
    ON = "on"


class HorizontalAlign(str, Enum):
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class VerticalAlign(str, Enum):
    TOP = "top"
    MIDDLE = "middle"
    BOTTOM = "bottom"


class LayoutDirection(str, Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"
    PROXIMATE = "proximate"


class Cursor(str, Enum):
    NONE = "none"
    DEFAULT = "default"
    HELP = "help"
    POINTER = "pointer"
    CROSSHAIR = "crosshair"


class Stacking(str, Enum):
    NORMAL = "normal"
    PERCENT = "percent"


class PanKey(str, Enum):
    ALT = "alt"
    CTRL = "ctrl"
    META = "meta"
    SHIFT = "shift"


class ZoneAxis(str, Enum):
    X = "x"
    Y = "y"
    Z = "z"


class Shape(str, Enum):
    CALLOUT = "callout"
    SQUARE = "square"
    CIRCLE = "circle"
