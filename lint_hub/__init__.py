# lint_hub/__init__.py
"""Lint-Hub: 一个可配置的本地化资源规则匹配引擎。

给定双语资源（源字符串及其译文），按配置的规则集检查内容，
并以结构化的结果报告发现的问题。
"""

__version__ = "1.0.0"

from .config import LintHubSettings, ProjectConfig, load_project_config
from .exceptions import ConfigurationError, LintHubError, RuleNotFoundError
from .filetype import FileType
from .plugins import ParserManager, PluginManager
from .project import Project
from .rules import DeclarativeResourceRule, ResourceDNTTerms, ResourceRule, Rule, RuleManager
from .source_file import SourceFile
from .types import Resource, ResourceType, Result, Severity

__all__ = [
    "__version__",
    "ConfigurationError",
    "DeclarativeResourceRule",
    "FileType",
    "LintHubError",
    "LintHubSettings",
    "ParserManager",
    "PluginManager",
    "Project",
    "ProjectConfig",
    "Resource",
    "ResourceDNTTerms",
    "ResourceRule",
    "ResourceType",
    "Result",
    "Rule",
    "RuleManager",
    "RuleNotFoundError",
    "Severity",
    "SourceFile",
    "load_project_config",
]
