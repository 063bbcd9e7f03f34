# lint_hub/filetype.py
"""本模块定义文件类型：路径模式与该类文件所使用的规则集之间的绑定。"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Optional, Union

import structlog

from lint_hub.config import FileTypeDefinition
from lint_hub.exceptions import ConfigurationError
from lint_hub.rules.base import Rule

if TYPE_CHECKING:
    from lint_hub.project import Project

logger = structlog.get_logger(__name__)


class FileType:
    """
    一个具名的文件类型。

    `ruleset` 可以是规则集名称、名称列表或内联的规则集定义。
    有效规则集按引用顺序合并，同名规则后者覆盖前者，值为 False 的规则被禁用。
    """

    def __init__(
        self,
        project: "Project",
        name: Optional[str] = None,
        glob: Optional[str] = None,
        ruleset: Union[str, list[str], dict[str, Any], None] = None,
        log: Any = None,
    ):
        if project is None or not name:
            raise ConfigurationError("FileType 缺少必需的参数: project, name")
        self.project = project
        self.name = name
        self.glob = glob
        self.log = log or logger

        if ruleset is None:
            self.ruleset: tuple[Union[str, dict[str, Any]], ...] = ()
        elif isinstance(ruleset, (str, dict)):
            self.ruleset = (ruleset,)
        else:
            self.ruleset = tuple(ruleset)

        self._rules: Optional[list[Rule]] = None

    @classmethod
    def from_definition(
        cls, project: "Project", name: str, definition: FileTypeDefinition, log: Any = None
    ) -> "FileType":
        return cls(
            project=project,
            name=name,
            glob=definition.glob,
            ruleset=definition.ruleset,
            log=log,
        )

    def get_name(self) -> str:
        return self.name

    def get_glob(self) -> Optional[str]:
        return self.glob

    def get_rule_set_names(self) -> list[str]:
        return [ref for ref in self.ruleset if isinstance(ref, str)]

    def get_rule_set(self) -> dict[str, Any]:
        """返回合并后的有效规则集。"""
        rule_manager = self.project.get_rule_manager()
        merged: dict[str, Any] = {}
        for ref in self.ruleset:
            if isinstance(ref, dict):
                definition: Optional[dict[str, Any]] = dict(ref)
            else:
                definition = rule_manager.get_rule_set_definition(ref)
                if definition is None:
                    self.log.warning(
                        "文件类型引用了未定义的规则集，已跳过。",
                        file_type=self.name,
                        ruleset=ref,
                    )
                    continue
            merged.update(definition)
        return merged

    def get_rules(self) -> list[Rule]:
        """返回该文件类型启用的规则实例，首次调用后缓存。"""
        if self._rules is None:
            self._rules = self.project.get_rule_manager().get_rules(self.get_rule_set())
        return self._rules

    def __repr__(self) -> str:
        return f"<FileType {self.name!r} glob={self.glob!r}>"
