# lint_hub/interfaces.py
"""
本模块使用 typing.Protocol 定义了外部协作组件的接口协议。

解析器由插件提供，Lint-Hub 本身不解析任何文件格式。
"""

from typing import Protocol, runtime_checkable

from lint_hub.types import Resource


@runtime_checkable
class Parser(Protocol):
    """将一个文件解析为资源列表的解析器。"""

    name: str
    extensions: list[str]

    def parse(self, path_name: str) -> list[Resource]: ...


@runtime_checkable
class DirItem(Protocol):
    """项目中的一个条目（源文件或子项目）。"""

    file_path: str

    def parse(self) -> None: ...

    def find_issues(self, locales: list[str] | None = None) -> list: ...
