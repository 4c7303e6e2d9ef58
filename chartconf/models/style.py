"""颜色与样式"""

from typing import Any, List, Optional, Tuple, Union
from pydantic import ConfigDict, Field, model_serializer, model_validator

from chartconf.core.constants import NAMED_COLORS
from chartconf.models.base import ConfigurationObject


class SolidColor(ConfigurationObject):
    """纯色（序列化为 CSS 颜色字符串）"""
    color: str = Field(..., description="CSS 颜色值，如 #FF0000、rgba(0,0,0,0.5)")

    def __init__(self, color: Optional[str] = None, /, **data: Any):
        if color is not None:
            data["color"] = color
        super().__init__(**data)

    @model_validator(mode="before")
    @classmethod
    def from_string(cls, value: Any) -> Any:
        if isinstance(value, str):
            return {"color": value}
        return value

    @model_serializer
    def serialize(self) -> str:
        return self.color

    @classmethod
    def named(cls, name: str) -> "SolidColor":
        """按 CSS 颜色名创建"""
        key = name.lower()
        if key not in NAMED_COLORS:
            raise ValueError(f"未知颜色名: {name}")
        return cls(NAMED_COLORS[key])

    @classmethod
    def rgb(cls, red: int, green: int, blue: int, opacity: Optional[float] = None) -> "SolidColor":
        """按 RGB(A) 分量创建"""
        if opacity is None:
            return cls(f"rgb({red},{green},{blue})")
        return cls(f"rgba({red},{green},{blue},{opacity})")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str):
            return self.color == other
        if isinstance(other, SolidColor):
            return self.color == other.color
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.color)

    def __str__(self) -> str:
        return self.color


class LinearGradient(ConfigurationObject):
    """线性渐变方向（取值 0-1 的相对坐标）"""
    x1: float = 0
    y1: float = 0
    x2: float = 0
    y2: float = 1


class RadialGradient(ConfigurationObject):
    """径向渐变"""
    cx: float = 0.5
    cy: float = 0.5
    r: float = 0.5


class GradientColor(ConfigurationObject):
    """渐变色"""
    linear_gradient: Optional[LinearGradient] = None
    radial_gradient: Optional[RadialGradient] = None
    stops: List[Tuple[float, SolidColor]] = Field(default_factory=list)

    @classmethod
    def linear(cls, x1: float, y1: float, x2: float, y2: float) -> "GradientColor":
        return cls(linear_gradient=LinearGradient(x1=x1, y1=y1, x2=x2, y2=y2))

    @classmethod
    def radial(cls, cx: float, cy: float, r: float) -> "GradientColor":
        return cls(radial_gradient=RadialGradient(cx=cx, cy=cy, r=r))

    def add_color_stop(self, offset: float, color: Union[SolidColor, str]) -> None:
        self._append_item("stops", (offset, color))

    @model_validator(mode="after")
    def check_direction(self):
        if self.linear_gradient is None and self.radial_gradient is None:
            raise ValueError("渐变色必须指定 linearGradient 或 radialGradient")
        return self


Color = Union[SolidColor, GradientColor]


class Style(ConfigurationObject):
    """CSS 样式（允许任意额外的 CSS 属性）"""

    model_config = ConfigDict(extra="allow")

    color: Optional[Color] = None
    cursor: Optional[str] = None
    font_family: Optional[str] = None
    font_size: Optional[str] = None
    font_weight: Optional[str] = None
    font_style: Optional[str] = None
    line_height: Optional[str] = None
    text_outline: Optional[str] = None
    text_overflow: Optional[str] = None
    white_space: Optional[str] = None
    width: Optional[str] = None
    padding: Optional[str] = None
