# lint_hub/rules/declarative.py
"""
本模块实现基于正则表达式列表的声明式资源规则。

`DeclarativeResourceRule` 在构造时一次性编译所有正则表达式，
并对每一个表达式调用子类提供的 `check_string`；三个具体子类对应
配置文件中可声明的三种规则类型。
"""

import re
from abc import abstractmethod
from typing import Any, Optional, Union

from lint_hub.exceptions import ConfigurationError
from lint_hub.rules.base import ResourceRule
from lint_hub.types import Resource, Result, Severity

CheckResult = Union[Result, list[Result], None]


class DeclarativeResourceRule(ResourceRule):
    """
    由一组正则表达式驱动的资源规则。

    除了 `ResourceRule` 的通用属性外，构造参数必须包含：

    - name, description, note: 规则名称、描述与结果说明，
      note 中的 `{matchString}` 会被替换为实际匹配到的文本；
    - regexps: 需要查找的正则表达式字符串列表。
    """

    def __init__(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        note: Optional[str] = None,
        regexps: Optional[list[str]] = None,
        link: Optional[str] = None,
        severity: Union[Severity, str, None] = None,
        source_locale: Optional[str] = None,
        **_: Any,
    ):
        if not name or not description or not note or not regexps:
            raise ConfigurationError(
                "DeclarativeResourceRule 缺少必需的参数: name, description, note, regexps"
            )
        if not isinstance(regexps, (list, tuple)) or not all(
            isinstance(regexp, str) for regexp in regexps
        ):
            raise ConfigurationError(
                f"规则 '{name}' 的 regexps 必须是正则表达式字符串列表，实际为: {regexps!r}"
            )

        self.name = name
        self.description = description
        self.note = note
        self.link = link
        self.severity = Severity(severity) if severity else Severity.ERROR
        self.source_locale = source_locale or "en-US"

        compiled: list[re.Pattern[str]] = []
        for regexp in regexps:
            try:
                compiled.append(re.compile(regexp))
            except re.error as e:
                raise ConfigurationError(
                    f"规则 '{name}' 的正则表达式 '{regexp}' 语法错误: {e}"
                ) from e
        self.patterns: tuple[re.Pattern[str], ...] = tuple(compiled)

    @abstractmethod
    def check_string(
        self,
        pattern: "re.Pattern[str]",
        source: str,
        target: str,
        file: str,
        resource: Resource,
        locale: Optional[str] = None,
    ) -> CheckResult:
        """
        [子类实现] 用给定的正则表达式检查一对源/目标字符串。

        Returns:
            零个、一个或多个 Result。
        """
        ...

    def match_string(
        self,
        source: str,
        target: str,
        file: str,
        resource: Resource,
        locale: Optional[str] = None,
    ) -> Optional[list[Result]]:
        results: list[Result] = []
        for pattern in self.patterns:
            found = self.check_string(pattern, source, target, file, resource, locale)
            if isinstance(found, list):
                results.extend(found)
            else:
                results.append(found)
        results = [result for result in results if result]
        return results or None

    def _make_result(
        self,
        match_string: str,
        source: str,
        highlight: str,
        file: str,
        resource: Resource,
        locale: Optional[str] = None,
    ) -> Result:
        return Result(
            rule=self,
            severity=self.severity,
            id=resource.key,
            path_name=file,
            locale=locale or resource.target_locale,
            source=source,
            highlight=highlight,
            description=self.note.replace("{matchString}", match_string),
        )


def _highlight_match(text: str, match: "re.Match[str]") -> str:
    return f"{text[: match.start()]}<e0>{match.group(0)}</e0>{text[match.end():]}"


class ResourceMatcher(DeclarativeResourceRule):
    """源字符串中的每一处匹配都必须原样出现在目标字符串中。"""

    def check_string(self, pattern, source, target, file, resource, locale=None):
        source_matches = [m.group(0) for m in pattern.finditer(source) if m.group(0)]
        if not source_matches:
            return None

        target_matches = {m.group(0) for m in pattern.finditer(target)}
        return [
            self._make_result(
                missing, source, f"Target: {target}<e0></e0>", file, resource, locale
            )
            for missing in source_matches
            if missing not in target_matches
        ]


class ResourceSourceChecker(DeclarativeResourceRule):
    """源字符串中不允许出现匹配的文本。"""

    def check_string(self, pattern, source, target, file, resource, locale=None):
        return [
            self._make_result(
                m.group(0),
                source,
                f"Source: {_highlight_match(source, m)}",
                file,
                resource,
                locale,
            )
            for m in pattern.finditer(source)
            if m.group(0)
        ]


class ResourceTargetChecker(DeclarativeResourceRule):
    """目标字符串中不允许出现匹配的文本。"""

    def check_string(self, pattern, source, target, file, resource, locale=None):
        return [
            self._make_result(
                m.group(0),
                source,
                f"Target: {_highlight_match(target, m)}",
                file,
                resource,
                locale,
            )
            for m in pattern.finditer(target)
            if m.group(0)
        ]
