# lint_hub/cli.py
"""Lint-Hub CLI 的主入口点。"""

import asyncio
import os
import re
from pathlib import Path
from typing import Annotated, Optional

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

import lint_hub
from lint_hub.config import LintHubSettings, ProjectConfig, load_project_config
from lint_hub.exceptions import ConfigurationError
from lint_hub.logging_config import setup_logging
from lint_hub.project import Project
from lint_hub.source_file import SourceFile
from lint_hub.types import Result, Severity
from lint_hub.utils import glob_match

log = structlog.get_logger("lint_hub.cli")
console = Console()

app = typer.Typer(
    name="lint-hub",
    help="🔍 Lint-Hub: 检查本地化资源的双语一致性。",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """处理 --version 选项的回调函数。"""
    if value:
        console.print(f"Lint-Hub [bold cyan]v{lint_hub.__version__}[/bold cyan]")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="显示版本信息并退出。",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Lint-Hub 命令行工具。"""


def render_highlight(highlight: str) -> str:
    """把 `<eN>…</eN>` 标记转换为 Rich 的强调样式。"""
    text = escape(highlight)
    text = re.sub(r"<e\d+></e\d+>", "[bold red]>> <<[/bold red]", text)
    text = re.sub(r"<e\d+>", "[bold red]", text)
    return re.sub(r"</e\d+>", "[/bold red]", text)


def print_result(result: Result) -> None:
    color = "red" if result.severity is Severity.ERROR else "yellow"
    location = result.path_name or ""
    if result.line_number is not None:
        location += f"({result.line_number})"
    console.print(f"{escape(location)}:")
    console.print(f"  [{color}]{escape(result.description)}[/{color}]")
    if result.id:
        console.print(f"  Key: {escape(result.id)}")
    if result.source:
        console.print(f"  Source: {escape(result.source)}")
    console.print(f"  {render_highlight(result.highlight)}")
    console.print(f"  Rule ({escape(result.rule_name)}): {escape(result.rule.description)}")


def collect_files(project: Project) -> list[str]:
    """返回根目录下匹配 includes 且不匹配 excludes 的文件（相对路径）。"""
    root = Path(project.get_root())
    found: list[str] = []
    for dirpath, _, filenames in os.walk(root):
        for filename in sorted(filenames):
            relative = (Path(dirpath) / filename).relative_to(root).as_posix()
            if project.is_excluded(relative):
                continue
            if any(glob_match(relative, glob) for glob in project.get_includes()):
                found.append(relative)
    return sorted(found)


@app.command()
def lint(
    root: Annotated[Path, typer.Argument(help="项目根目录。")] = Path("."),
    config_file: Annotated[
        Optional[Path], typer.Option("--config", "-c", help="项目配置文件路径。")
    ] = None,
    locales: Annotated[
        Optional[str], typer.Option("--locales", "-l", help="逗号分隔的区域设置列表。")
    ] = None,
) -> None:
    """检查项目中的所有文件并打印发现的问题。"""
    try:
        settings = LintHubSettings(
            locales=[code.strip() for code in locales.split(",")] if locales else None
        )
    except ValidationError as e:
        console.print(f"[bold red]❌ 参数无效：[/bold red]{escape(str(e))}")
        raise typer.Exit(code=2) from e

    setup_logging(log_level=settings.logging.level, log_format=settings.logging.format)

    try:
        config_path = config_file or root / settings.config_file
        config = (
            load_project_config(config_path) if config_path.exists() else ProjectConfig()
        )
        project = Project(str(root), config, options=settings)
        for relative in collect_files(project):
            project.add(SourceFile(relative, project))
        asyncio.run(project.initialize())
        results = project.find_issues(project.get_locales())
        log.debug("检查完成。", files=len(project.get()), results=len(results))
    except ConfigurationError as e:
        console.print(f"[bold red]❌ 配置错误：[/bold red]{escape(str(e))}")
        raise typer.Exit(code=2) from e

    for result in results:
        print_result(result)

    errors = sum(1 for r in results if r.severity is Severity.ERROR)
    warnings = len(results) - errors
    if not results:
        console.print("[green]✅ 没有发现问题。[/green]")
        return
    console.print(f"[bold]共 {len(results)} 个问题：{errors} 个错误，{warnings} 个警告。[/bold]")
    if errors:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
