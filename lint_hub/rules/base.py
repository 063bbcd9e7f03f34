# lint_hub/rules/base.py
"""
本模块定义了所有规则必须继承的抽象基类（ABC）。
"""

from abc import ABC, abstractmethod
from typing import Optional, Union

from lint_hub.shapes import iter_string_pairs, narrow_resource
from lint_hub.types import Resource, Result, Severity

MatchResult = Optional[list[Result]]


class Rule(ABC):
    """
    规则的抽象基类。

    规则实例在构造后不可变，匹配过程不保存任何状态，
    因此同一个实例可以被多个线程同时用于不同的文件。
    """

    name: str = ""
    description: str = ""
    link: Optional[str] = None
    severity: Severity = Severity.ERROR
    rule_type: str = "resource"

    def get_name(self) -> str:
        return self.name

    def get_description(self) -> str:
        return self.description

    def get_link(self) -> Optional[str]:
        return self.link

    def get_rule_type(self) -> str:
        return self.rule_type

    @abstractmethod
    def match(
        self, resource: Resource, file: str, locale: Optional[str] = None
    ) -> MatchResult:
        """
        检查单个资源。

        Returns:
            结果列表；规则不适用或没有发现问题时返回 None。
        """
        ...

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {self.name!r}>"


class ResourceRule(Rule):
    """
    逐字符串检查资源的规则基类。

    `match` 负责按资源形态展开出 (source, target) 字符串对，
    子类只需实现 `match_string`。
    """

    @abstractmethod
    def match_string(
        self,
        source: str,
        target: str,
        file: str,
        resource: Resource,
        locale: Optional[str] = None,
    ) -> Union[Result, list[Result], None]:
        """[子类实现] 检查一对源/目标字符串。`locale` 为调用方给出的目标区域设置。"""
        ...

    def match(
        self, resource: Resource, file: str, locale: Optional[str] = None
    ) -> MatchResult:
        pair = narrow_resource(resource)
        if pair is None:
            return None

        results: list[Result] = []
        for source, target in iter_string_pairs(pair):
            found = self.match_string(source, target, file, resource, locale)
            if isinstance(found, Result):
                results.append(found)
            elif found:
                results.extend(r for r in found if r)
        return results or None
