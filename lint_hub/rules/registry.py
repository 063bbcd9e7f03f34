# lint_hub/rules/registry.py
"""
本模块提供规则注册表：按名称登记规则类、按 `type` 登记声明式规则类型，
并管理具名规则集。所有定义在加入时立即校验，未知的规则类型直接报错。
"""

from collections.abc import Iterable, Mapping
from typing import Any, Optional, Union

import structlog
from pydantic import ValidationError

from lint_hub.config import RuleDefinition
from lint_hub.exceptions import ConfigurationError, RuleNotFoundError
from lint_hub.rules.base import Rule
from lint_hub.rules.builtin import (
    BUILTIN_RULE_DEFINITIONS,
    DECLARATIVE_RULE_TYPES,
    RULE_CLASSES,
)

logger = structlog.get_logger(__name__)


class RuleManager:
    """规则与规则集的注册表。"""

    def __init__(self, include_builtins: bool = True) -> None:
        self._rule_classes: dict[str, type[Rule]] = {}
        self._declarative_rules: dict[str, Rule] = {}
        self._ruleset_definitions: dict[str, dict[str, Any]] = {}

        if include_builtins:
            for rule_class in RULE_CLASSES.values():
                self.add_rule_class(rule_class)
            self.add(BUILTIN_RULE_DEFINITIONS)

    def add_rule_class(self, rule_class: type[Rule], name: Optional[str] = None) -> None:
        """登记一个规则类，规则名称默认取类属性 `name`。"""
        rule_name = name or rule_class.name
        if not rule_name:
            raise ConfigurationError(f"规则类 {rule_class.__name__} 没有名称")
        self._rule_classes[rule_name] = rule_class

    def add(
        self, definitions: Iterable[Union[RuleDefinition, Mapping[str, Any]]]
    ) -> None:
        """
        登记一组声明式规则定义。

        每条定义都会立即编译，正则表达式错误或未知的 `type`
        会在这里抛出 ConfigurationError。
        """
        for definition in definitions:
            if not isinstance(definition, RuleDefinition):
                try:
                    definition = RuleDefinition.model_validate(definition)
                except ValidationError as e:
                    raise ConfigurationError(f"声明式规则定义无效: {e}") from e

            rule_class = DECLARATIVE_RULE_TYPES.get(definition.type)
            if rule_class is None:
                raise ConfigurationError(
                    f"规则 '{definition.name}' 的类型 '{definition.type}' 未知，"
                    f"可用类型: {sorted(DECLARATIVE_RULE_TYPES)}"
                )
            self._declarative_rules[definition.name] = rule_class(
                **definition.model_dump(exclude={"type"})
            )
            logger.debug("声明式规则已注册。", rule=definition.name, type=definition.type)

    def add_rule_set_definitions(self, definitions: Mapping[str, Mapping[str, Any]]) -> None:
        for name, definition in definitions.items():
            self._ruleset_definitions[name] = dict(definition)

    def get_rule_set_definition(self, name: str) -> Optional[dict[str, Any]]:
        definition = self._ruleset_definitions.get(name)
        return dict(definition) if definition is not None else None

    def get_rule_set_definitions(self) -> dict[str, dict[str, Any]]:
        return {name: dict(d) for name, d in self._ruleset_definitions.items()}

    def get_rule_names(self) -> list[str]:
        return sorted({*self._rule_classes, *self._declarative_rules})

    def __contains__(self, name: object) -> bool:
        return name in self._rule_classes or name in self._declarative_rules

    def __len__(self) -> int:
        return len(self._rule_classes) + len(self._declarative_rules)

    def get(self, name: str, param: Any = True) -> Optional[Rule]:
        """
        按名称获取规则实例。

        Args:
            name: 规则名称。
            param: 规则集中的取值。`True` 表示使用默认参数，映射表示关键字参数，
                其他值以 `param=` 传给规则的构造函数。

        Returns:
            规则实例；名称未注册时返回 None。
        """
        if name in self._declarative_rules:
            return self._declarative_rules[name]

        rule_class = self._rule_classes.get(name)
        if rule_class is None:
            return None
        if param is True:
            return rule_class()
        if isinstance(param, Mapping):
            return rule_class(**param)
        return rule_class(param=param)

    def require(self, name: str, param: Any = True) -> Rule:
        rule = self.get(name, param)
        if rule is None:
            raise RuleNotFoundError(name)
        return rule

    def get_rules(self, ruleset: Mapping[str, Any]) -> list[Rule]:
        """实例化规则集中所有已启用的规则，跳过未注册的规则名称。"""
        rules: list[Rule] = []
        for name, param in ruleset.items():
            if param is False or param is None:
                continue
            rule = self.get(name, param)
            if rule is None:
                logger.warning("规则集引用了未注册的规则，已跳过。", rule=name)
                continue
            rules.append(rule)
        return rules
