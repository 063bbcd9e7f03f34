# lint_hub/source_file.py
"""本模块定义项目中的单个源文件：解析出资源，并对每个资源运行适用的规则。"""

from __future__ import annotations

import os
import posixpath
from typing import TYPE_CHECKING, Any, Optional

import structlog

from lint_hub.types import Resource, Result
from lint_hub.utils import normalize_path

if TYPE_CHECKING:
    from lint_hub.project import Project

logger = structlog.get_logger(__name__)


class SourceFile:
    """项目中的一个源文件。"""

    def __init__(self, file_path: str, project: "Project", log: Any = None):
        self.file_path = normalize_path(file_path)
        self.project = project
        self.log = log or logger
        self.resources: list[Resource] = []
        self.file_type = project.get_file_type_for_path(self.file_path)

    def get_file_path(self) -> str:
        return self.file_path

    def get_full_path(self) -> str:
        """相对路径基于项目根目录，绝对路径原样返回。"""
        return os.path.join(self.project.get_root(), self.file_path)

    def parse(self) -> None:
        """用扩展名对应的第一个解析器解析文件，没有解析器时资源列表为空。"""
        extension = posixpath.splitext(self.file_path)[1]
        parsers = self.project.get_parser_manager().get(extension)
        if not parsers:
            self.log.debug("没有可用的解析器，跳过该文件。", file=self.file_path)
            self.resources = []
            return
        self.resources = list(parsers[0].parse(self.get_full_path()))

    def find_issues(self, locales: Optional[list[str]] = None) -> list[Result]:
        """
        对每个资源依次运行文件类型启用的资源规则，并将结果展平。

        Args:
            locales: 若提供，仅检查目标区域设置在此列表中的资源。
        """
        rules = [
            rule for rule in self.file_type.get_rules() if rule.get_rule_type() == "resource"
        ]
        results: list[Result] = []
        for resource in self.resources:
            if locales and resource.target_locale not in locales:
                continue
            for rule in rules:
                found = rule.match(resource, file=self.file_path, locale=resource.target_locale)
                if found:
                    results.extend(found)
        return results

    def __repr__(self) -> str:
        return f"<SourceFile {self.file_path!r} type={self.file_type.name!r}>"
