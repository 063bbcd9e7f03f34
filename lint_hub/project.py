# lint_hub/project.py
"""
本模块定义 Lint-Hub 项目：一个根目录加上告诉检查器如何处理其中文件的配置。

项目负责把配置中的路径映射、规则集与文件类型组合为可查询的解析面，
并驱动对所有已知文件的问题检查。
"""

import re
from typing import Any, Optional, Union

import structlog

from lint_hub.config import (
    FileTypeDefinition,
    LintHubSettings,
    ProjectConfig,
    parse_project_config,
)
from lint_hub.exceptions import ConfigurationError
from lint_hub.filetype import FileType
from lint_hub.interfaces import DirItem
from lint_hub.plugins import ParserManager, PluginManager
from lint_hub.rules.builtin import RULESET_DEFINITIONS
from lint_hub.rules.registry import RuleManager
from lint_hub.types import Result
from lint_hub.utils import compile_glob, glob_match, normalize_path

logger = structlog.get_logger(__name__)

XLIFF_FILE_TYPE = FileTypeDefinition(
    name="xliff", glob="**/*.xliff", ruleset=["resource-check-all"]
)
UNKNOWN_FILE_TYPE = FileTypeDefinition(name="unknown", glob="**/*")


class Project:
    """
    一个 Lint-Hub 项目。

    无论配置如何，项目总是包含两个内置文件类型：

    - xliff: 处理所有 *.xliff 文件，使用默认的 `resource-check-all` 规则集。
      该规则集中的 resource-icu-plurals、resource-quote-style 与
      resource-unique-keys 没有内置实现，除非由插件注册，否则会被跳过并记录警告，
      实际只运行 resource-url-match 与 resource-named-params；
    - unknown: 处理所有未被映射的文件，不执行任何检查。
    """

    def __init__(
        self,
        root: str,
        config: Union[ProjectConfig, dict[str, Any], None],
        plugin_manager: Optional[PluginManager] = None,
        options: Optional[LintHubSettings] = None,
        log: Any = None,
    ):
        """
        构造一个项目。

        Args:
            root: 项目的根目录。
            config: 项目配置文件的内容。
            plugin_manager: 持有规则与解析器注册表的插件管理器。
            options: 本次运行的选项，例如覆盖配置的区域设置列表。
            log: 诊断输出，默认使用模块级的 structlog 记录器。
        """
        if not root or config is None:
            raise ConfigurationError("Project 构造参数不足: 需要 root 与 config")

        self.root = root
        self.config = parse_project_config(config)
        self.options = options
        self.plugin_manager = plugin_manager or PluginManager()
        self.log = log or logger
        self.files: list[DirItem] = []

        self.name = self.config.name
        self.mappings: dict[str, Union[str, FileTypeDefinition]] = dict(
            self.config.paths or {}
        )
        self.includes = list(self.mappings) if self.config.paths else ["**"]
        self.excludes = list(self.config.excludes)

        rule_manager = self.get_rule_manager()
        if self.config.rules:
            rule_manager.add(self.config.rules)
        rule_manager.add_rule_set_definitions(RULESET_DEFINITIONS)
        if self.config.rulesets:
            rule_manager.add_rule_set_definitions(self.config.rulesets)

        self.filetypes: dict[str, FileType] = {}
        for definition in (XLIFF_FILE_TYPE, UNKNOWN_FILE_TYPE):
            self.filetypes[definition.name] = self._make_file_type(
                definition.name, definition
            )
        for name, definition in self.config.filetypes.items():
            if name in ("xliff", "unknown"):
                self.log.warning("配置不能覆盖内置文件类型，已忽略。", file_type=name)
                continue
            self.filetypes[name] = self._make_file_type(name, definition)
        for glob, value in self.mappings.items():
            if isinstance(value, FileTypeDefinition):
                # 内联定义的文件类型以其 glob 命名
                self.filetypes[glob] = self._make_file_type(
                    glob, value.model_copy(update={"glob": value.glob or glob})
                )

        for glob in [*self.mappings, *self.excludes]:
            self._validate_glob(glob)

    def _make_file_type(self, name: str, definition: FileTypeDefinition) -> FileType:
        return FileType.from_definition(self, name, definition, log=self.log)

    @staticmethod
    def _validate_glob(glob: str) -> None:
        try:
            compile_glob(glob)
        except (ValueError, re.error) as e:
            raise ConfigurationError(f"路径模式 '{glob}' 无效: {e}") from e

    async def initialize(self) -> None:
        """先加载插件，再按添加顺序初始化带有 `initialize` 方法的条目。"""
        if self.config.plugins:
            await self.plugin_manager.load(self.config.plugins)

        for item in self.files:
            initialize = getattr(item, "initialize", None)
            if callable(initialize):
                await initialize()

    def get_name(self) -> Optional[str]:
        return self.name

    def get_root(self) -> str:
        return self.root

    def get_includes(self) -> list[str]:
        return self.includes

    def get_excludes(self) -> list[str]:
        return self.excludes

    def get_options(self) -> Optional[LintHubSettings]:
        return self.options

    def get_locales(self) -> list[str]:
        if self.options is not None and self.options.locales:
            return self.options.locales
        return self.config.locales

    def get_plugin_manager(self) -> PluginManager:
        return self.plugin_manager

    def get_parser_manager(self) -> ParserManager:
        return self.plugin_manager.get_parser_manager()

    def get_rule_manager(self) -> RuleManager:
        return self.plugin_manager.get_rule_manager()

    def get_file_type(self, name: str) -> Optional[FileType]:
        """按名称（或内联文件类型的 glob）返回文件类型，不存在时返回 None。"""
        return self.filetypes.get(name)

    def get_file_type_for_path(self, path_name: str) -> FileType:
        """
        根据路径映射找到适用于给定路径的文件类型。

        映射按声明顺序逐一匹配，第一个匹配的 glob 胜出，而不是最具体的那个。
        引用了不存在的文件类型或没有任何映射匹配时，返回 "unknown"。
        """
        path_name = normalize_path(path_name)
        for glob, value in self.mappings.items():
            if glob_match(path_name, glob):
                name = value if isinstance(value, str) else glob
                file_type = self.filetypes.get(name)
                if file_type is None:
                    self.log.warning(
                        "路径映射引用了未定义的文件类型。", glob=glob, file_type=name
                    )
                    return self.filetypes["unknown"]
                return file_type
        return self.filetypes["unknown"]

    def get_rule_set(self, glob: str) -> Optional[dict[str, Any]]:
        """返回绑定到某个映射 glob 的文件类型的有效规则集；glob 未映射时返回 None。"""
        value = self.mappings.get(glob)
        if value is None:
            return None
        file_type = self.filetypes.get(value if isinstance(value, str) else glob)
        return file_type.get_rule_set() if file_type is not None else None

    def get_config(self) -> ProjectConfig:
        return self.config

    def get_settings(self, glob: str) -> dict[str, Any]:
        value = self.mappings.get(glob)
        if isinstance(value, FileTypeDefinition):
            return value.model_dump(exclude_none=True)
        return {}

    def is_excluded(self, path_name: str) -> bool:
        return any(glob_match(path_name, glob) for glob in self.excludes)

    def add(self, item: DirItem) -> None:
        self.files.append(item)

    def get(self) -> list[DirItem]:
        return self.files

    def find_issues(self, locales: Optional[list[str]] = None) -> list[Result]:
        """解析并检查项目中的所有条目，返回展平后的结果列表。"""
        results: list[Result] = []
        for item in self.files:
            self.log.debug("正在检查文件。", file=item.file_path)
            item.parse()
            results.extend(item.find_issues(locales))
        return results

    def clear(self) -> None:
        self.files = []
