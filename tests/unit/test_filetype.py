# tests/unit/test_filetype.py
"""针对 `lint_hub.filetype.FileType` 的单元测试：规则集的组合与缓存。"""

from typing import Any
from unittest.mock import MagicMock

import pytest

from lint_hub.exceptions import ConfigurationError
from lint_hub.filetype import FileType
from lint_hub.plugins import PluginManager
from lint_hub.project import Project


@pytest.fixture
def project(null_log: Any) -> Project:
    return Project(
        "/tmp/demo",
        {
            "rulesets": {
                "base": {
                    "resource-url-match": True,
                    "resource-named-params": True,
                    "resource-dnt-terms": {"terms": ["OAuth"]},
                },
                "strict": {"resource-no-fullwidth-digits": True},
                "relaxed": {"resource-named-params": False},
                "dnt-override": {"resource-dnt-terms": {"terms": ["GitHub"]}},
            }
        },
        plugin_manager=PluginManager(),
        log=null_log,
    )


def test_single_rule_set_name(project: Project) -> None:
    file_type = FileType(project, name="json", ruleset="strict")
    assert file_type.get_rule_set() == {"resource-no-fullwidth-digits": True}
    assert [r.name for r in file_type.get_rules()] == ["resource-no-fullwidth-digits"]


def test_union_of_rule_sets(project: Project) -> None:
    file_type = FileType(project, name="json", ruleset=["base", "strict"])
    assert [r.name for r in file_type.get_rules()] == [
        "resource-url-match",
        "resource-named-params",
        "resource-dnt-terms",
        "resource-no-fullwidth-digits",
    ]


def test_false_overrides_inherited_enablement(project: Project) -> None:
    file_type = FileType(project, name="json", ruleset=["base", "relaxed"])
    assert file_type.get_rule_set()["resource-named-params"] is False
    assert "resource-named-params" not in [r.name for r in file_type.get_rules()]


def test_last_writer_wins_per_rule_name(project: Project) -> None:
    file_type = FileType(project, name="json", ruleset=["base", "dnt-override"])
    rules = {r.name: r for r in file_type.get_rules()}
    assert rules["resource-dnt-terms"].terms == ("GitHub",)  # type: ignore[attr-defined]
    # 其他规则仍然来自前一个规则集
    assert "resource-url-match" in rules

    reversed_order = FileType(project, name="json2", ruleset=["dnt-override", "base"])
    rules = {r.name: r for r in reversed_order.get_rules()}
    assert rules["resource-dnt-terms"].terms == ("OAuth",)  # type: ignore[attr-defined]


def test_inline_rule_set(project: Project) -> None:
    file_type = FileType(
        project, name="inline", ruleset={"resource-url-match": True, "resource-named-params": False}
    )
    assert [r.name for r in file_type.get_rules()] == ["resource-url-match"]


def test_undefined_rule_set_is_skipped_with_warning(project: Project) -> None:
    log = MagicMock()
    file_type = FileType(project, name="json", ruleset=["missing", "strict"], log=log)
    assert file_type.get_rule_set() == {"resource-no-fullwidth-digits": True}
    log.warning.assert_called_once()
    assert log.warning.call_args.kwargs["ruleset"] == "missing"


def test_no_rule_set_means_no_rules(project: Project) -> None:
    file_type = FileType(project, name="plain", glob="**/*.txt")
    assert file_type.get_rule_set() == {}
    assert file_type.get_rules() == []


def test_rules_are_built_once(project: Project) -> None:
    file_type = FileType(project, name="json", ruleset="base")
    assert file_type.get_rules() is file_type.get_rules()


def test_name_is_required(project: Project) -> None:
    with pytest.raises(ConfigurationError):
        FileType(project, name="")
