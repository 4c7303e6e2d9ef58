"""配置对象基类"""

from typing import TYPE_CHECKING, Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, PrivateAttr
from pydantic.alias_generators import to_camel

if TYPE_CHECKING:
    from chartconf.models.configuration import Configuration


def prune_empty(value: Any) -> Any:
    """递归移除空对象（未设置任何选项的配置组）"""
    if isinstance(value, dict):
        pruned = {}
        for key, item in value.items():
            item = prune_empty(item)
            if isinstance(item, dict) and not item:
                continue
            pruned[key] = item
        return pruned
    if isinstance(value, list):
        return [prune_empty(item) for item in value]
    return value


class ConfigurationObject(BaseModel):
    """
    配置对象基类

    所有选项均可为空，为空时由客户端渲染器使用默认值；
    序列化时字段名按 Highcharts 约定转为 camelCase。
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_dict(self) -> Dict[str, Any]:
        """转为 Highcharts 选项字典"""
        data = self.model_dump(by_alias=True, exclude_none=True, mode="json")
        return prune_empty(data)

    def _append_item(self, field: str, item: Any) -> None:
        """向列表型选项追加元素（列表不存在时创建）"""
        items = list(getattr(self, field) or [])
        items.append(item)
        setattr(self, field, items)

    def _remove_item(self, field: str, item: Any) -> None:
        """移除列表型选项中第一个相等的元素"""
        items = getattr(self, field)
        if not items or item not in items:
            return
        remaining = list(items)
        remaining.remove(item)
        setattr(self, field, remaining)


class IdentityModel(ConfigurationObject):
    """按对象身份比较的配置对象（持有反向引用，避免递归比较）"""

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


class LinkedModel(IdentityModel):
    """持有所属 Configuration 反向引用的配置对象（坐标轴、序列）"""

    _configuration: Optional["Configuration"] = PrivateAttr(None)

    @property
    def configuration(self) -> Optional["Configuration"]:
        """所属配置（非拥有引用，不参与序列化）"""
        return self._configuration

    def set_configuration(self, configuration: Optional["Configuration"]) -> None:
        self._configuration = configuration
