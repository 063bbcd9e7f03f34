# lint_hub/plugins.py
"""
本模块负责加载插件，并持有解析器与规则的注册表。

插件是一个普通的 Python 模块，可以提供以下任意函数：

- `get_rules()`: 返回规则类或声明式规则定义的列表；
- `get_parsers()`: 返回解析器类或解析器实例的列表。
"""

import importlib
from typing import Any, Optional

import structlog

from lint_hub.interfaces import Parser
from lint_hub.rules.base import Rule
from lint_hub.rules.registry import RuleManager

log = structlog.get_logger(__name__)


class ParserManager:
    """按文件扩展名登记解析器。"""

    def __init__(self) -> None:
        self._by_extension: dict[str, list[Parser]] = {}

    def add(self, parser: Parser) -> None:
        for extension in parser.extensions:
            key = extension.lower().lstrip(".")
            self._by_extension.setdefault(key, []).append(parser)

    def get(self, extension: str) -> list[Parser]:
        return list(self._by_extension.get(extension.lower().lstrip("."), []))

    def get_extensions(self) -> list[str]:
        return sorted(self._by_extension)


class PluginManager:
    """插件管理器，是规则注册表与解析器注册表的持有者。"""

    def __init__(
        self,
        rule_manager: Optional[RuleManager] = None,
        parser_manager: Optional[ParserManager] = None,
    ) -> None:
        self.rule_manager = rule_manager or RuleManager()
        self.parser_manager = parser_manager or ParserManager()
        self.loaded: list[str] = []

    def get_rule_manager(self) -> RuleManager:
        return self.rule_manager

    def get_parser_manager(self) -> ParserManager:
        return self.parser_manager

    async def load(self, names: list[str]) -> None:
        """
        依次导入并注册插件。

        无法导入的插件会被记录并跳过；插件提供的规则定义无效时，
        ConfigurationError 会直接抛出。
        """
        successful: list[str] = []
        skipped: list[dict[str, str]] = []

        for name in names:
            if name in self.loaded:
                continue
            try:
                module = importlib.import_module(name)
            except ImportError as e:
                skipped.append({"plugin": name, "missing_dependency": str(e.name)})
                continue

            self._register(module)
            self.loaded.append(name)
            successful.append(name)

        log_payload: dict[str, Any] = {}
        if successful:
            log_payload["loaded"] = successful
        if skipped:
            log_payload["skipped"] = skipped
            log.warning("部分插件无法加载，已跳过。", **log_payload)
        else:
            log.info("插件加载完成。", **log_payload)

    def _register(self, module: Any) -> None:
        get_rules = getattr(module, "get_rules", None)
        if callable(get_rules):
            definitions = []
            for rule in get_rules():
                if isinstance(rule, type) and issubclass(rule, Rule):
                    self.rule_manager.add_rule_class(rule)
                else:
                    definitions.append(rule)
            self.rule_manager.add(definitions)

        get_parsers = getattr(module, "get_parsers", None)
        if callable(get_parsers):
            for parser in get_parsers():
                self.parser_manager.add(parser() if isinstance(parser, type) else parser)
