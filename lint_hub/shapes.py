# lint_hub/shapes.py
"""
本模块把资源收窄为一个封闭的“形态对”联合类型。

`narrow_resource` 是唯一的分派点：声明形态与内容一致时返回
`StringPair`、`ArrayPair` 或 `PluralPair`，否则返回 None，
调用方据此静默跳过该资源。
"""

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Optional, Union

from lint_hub.types import PLURAL_CATEGORIES, Resource, ResourceType


@dataclass(frozen=True)
class StringPair:
    source: str
    target: str


@dataclass(frozen=True)
class ArrayPair:
    source: tuple[str, ...]
    target: tuple[str, ...]


@dataclass(frozen=True)
class PluralPair:
    # 保持原始的类别顺序
    source: dict[str, str]
    target: dict[str, str]


ResourcePair = Union[StringPair, ArrayPair, PluralPair]


def _is_string_list(value: Any) -> bool:
    return (
        isinstance(value, Sequence)
        and not isinstance(value, (str, bytes))
        and all(isinstance(item, str) for item in value)
    )


def _is_plural_map(value: Any) -> bool:
    return isinstance(value, Mapping) and all(
        key in PLURAL_CATEGORIES and isinstance(text, str)
        for key, text in value.items()
    )


def narrow_resource(resource: Resource) -> Optional[ResourcePair]:
    """
    按资源声明的形态校验其内容，返回对应的形态对。

    Args:
        resource: 待检查的资源。

    Returns:
        形态与内容一致时返回形态对；形态未知或内容不符时返回 None。
    """
    source, target = resource.source, resource.target

    if resource.resource_type == ResourceType.STRING.value:
        if isinstance(source, str) and isinstance(target, str):
            return StringPair(source, target)
        return None

    if resource.resource_type == ResourceType.ARRAY.value:
        if _is_string_list(source) and _is_string_list(target):
            return ArrayPair(tuple(source), tuple(target))
        return None

    if resource.resource_type == ResourceType.PLURAL.value:
        if _is_plural_map(source) and _is_plural_map(target):
            return PluralPair(dict(source), dict(target))
        return None

    return None


def iter_string_pairs(pair: ResourcePair) -> Iterator[tuple[str, str]]:
    """
    将形态对展开为逐条的 (source, target) 字符串对，供逐字符串检查的规则使用。

    - 数组：按目标的下标对齐，源中缺失的下标被跳过；
    - 复数：按目标的类别对齐，源中缺失的类别回退到 "other"。
    """
    if isinstance(pair, StringPair):
        yield pair.source, pair.target
    elif isinstance(pair, ArrayPair):
        for idx, target_item in enumerate(pair.target):
            if idx < len(pair.source):
                yield pair.source[idx], target_item
    elif isinstance(pair, PluralPair):
        for category, target_item in pair.target.items():
            source_item = pair.source.get(category, pair.source.get("other"))
            if source_item is not None:
                yield source_item, target_item
    else:
        raise TypeError(f"未知的资源形态对: {type(pair).__name__}")
