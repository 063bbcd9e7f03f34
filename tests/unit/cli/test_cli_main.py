# tests/unit/cli/test_cli_main.py
"""针对 Lint-Hub CLI 主入口的单元测试。"""

import json
from pathlib import Path

import pytest
from pytest_mock import MockerFixture
from typer.testing import CliRunner

import lint_hub
from lint_hub.cli import app, collect_files, render_highlight
from lint_hub.project import Project
from tests.helpers import fake_plugin
from tests.helpers.factories import make_string

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_global_logging(mocker: MockerFixture) -> None:
    """CLI 测试不修改全局日志配置。"""
    mocker.patch("lint_hub.cli.setup_logging")


@pytest.fixture(autouse=True)
def clear_resources():
    fake_plugin.RESOURCES.clear()
    yield
    fake_plugin.RESOURCES.clear()


def write_config(root: Path, config: dict) -> None:
    (root / "lint-hub-config.json").write_text(json.dumps(config), encoding="utf-8")


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert lint_hub.__version__ in result.output


def test_render_highlight() -> None:
    assert render_highlight("Missing term: <e0>OAuth</e0>") == (
        "Missing term: [bold red]OAuth[/bold red]"
    )
    assert render_highlight("Target: abc<e0></e0>") == "Target: abc[bold red]>> <<[/bold red]"


def test_collect_files_respects_includes_and_excludes(tmp_path: Path) -> None:
    (tmp_path / "res").mkdir()
    (tmp_path / "res" / "a.mem").write_text("", encoding="utf-8")
    (tmp_path / "res" / "b.txt").write_text("", encoding="utf-8")
    (tmp_path / "skip").mkdir()
    (tmp_path / "skip" / "c.mem").write_text("", encoding="utf-8")

    project = Project(
        str(tmp_path), {"paths": {"**/*.mem": "unknown"}, "excludes": ["skip/**"]}
    )

    assert collect_files(project) == ["res/a.mem"]


def test_collect_files_skips_dot_directories_by_default(tmp_path: Path) -> None:
    (tmp_path / ".git").mkdir()
    (tmp_path / ".git" / "config").write_text("", encoding="utf-8")
    (tmp_path / "res").mkdir()
    (tmp_path / "res" / "a.xliff").write_text("", encoding="utf-8")

    project = Project(str(tmp_path), {})

    assert project.get_includes() == ["**"]
    assert collect_files(project) == ["res/a.xliff"]


def test_lint_without_issues(tmp_path: Path) -> None:
    write_config(tmp_path, {"paths": {"**/*.txt": "unknown"}})
    (tmp_path / "notes.txt").write_text("hello", encoding="utf-8")

    result = runner.invoke(app, ["lint", str(tmp_path)])

    assert result.exit_code == 0, result.output
    assert "没有发现问题" in result.output


def test_lint_reports_issues_and_fails(tmp_path: Path) -> None:
    write_config(
        tmp_path,
        {
            "plugins": ["tests.helpers.fake_plugin"],
            "paths": {
                "**/*.mem": {
                    "ruleset": {
                        "resource-dnt-terms": {"terms": ["OAuth"]},
                        "source-no-todo": True,
                    }
                }
            },
        },
    )
    (tmp_path / "strings.mem").write_text("", encoding="utf-8")
    fake_plugin.RESOURCES[str(tmp_path / "strings.mem")] = [
        make_string("Sign in with OAuth TODO", "Connectez-vous TODO", key="login"),
    ]

    result = runner.invoke(app, ["lint", str(tmp_path)])

    assert result.exit_code == 1, result.output
    assert "A DNT term is missing in target string." in result.output
    assert "Key: login" in result.output
    assert "Remove 'TODO' from the source string" in result.output
    assert "Rule (resource-dnt-terms)" in result.output
    assert "共 2 个问题" in result.output


def test_lint_configuration_error_exits_2(tmp_path: Path) -> None:
    write_config(
        tmp_path,
        {
            "rules": [
                {
                    "type": "resource-unknown-kind",
                    "name": "x",
                    "description": "x",
                    "note": "x",
                    "regexps": ["x"],
                }
            ]
        },
    )

    result = runner.invoke(app, ["lint", str(tmp_path)])

    assert result.exit_code == 2
    assert "配置错误" in result.output


def test_lint_rejects_invalid_locales(tmp_path: Path) -> None:
    result = runner.invoke(app, ["lint", str(tmp_path), "--locales", "german"])
    assert result.exit_code == 2
