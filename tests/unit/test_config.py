# tests/unit/test_config.py
"""针对 `lint_hub.config` 模块的单元测试。"""

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from lint_hub.config import (
    FileTypeDefinition,
    LintHubSettings,
    ProjectConfig,
    load_project_config,
    parse_project_config,
)
from lint_hub.exceptions import ConfigurationError


def test_project_config_keeps_path_order_and_inline_definitions() -> None:
    config = parse_project_config(
        {
            "name": "demo",
            "locales": ["en-US", "fr-FR"],
            "paths": {
                "src/**": "A",
                "**/*.js": {"ruleset": {"resource-url-match": True}},
                "**/*": "unknown",
            },
        }
    )
    assert config.paths is not None
    assert list(config.paths) == ["src/**", "**/*.js", "**/*"]
    assert config.paths["src/**"] == "A"
    inline = config.paths["**/*.js"]
    assert isinstance(inline, FileTypeDefinition)
    assert inline.ruleset == {"resource-url-match": True}


def test_project_config_defaults() -> None:
    config = ProjectConfig()
    assert config.paths is None
    assert config.rulesets == {}
    assert config.filetypes == {}
    assert config.rules == []
    assert config.source_locale == "en-US"


def test_project_config_accepts_camel_case_aliases() -> None:
    config = parse_project_config(
        {
            "sourceLocale": "de-DE",
            "rules": [
                {
                    "type": "resource-matcher",
                    "name": "r",
                    "description": "d",
                    "note": "n",
                    "regexps": ["x"],
                    "sourceLocale": "de-DE",
                }
            ],
        }
    )
    assert config.source_locale == "de-DE"
    assert config.rules[0].source_locale == "de-DE"


@pytest.mark.parametrize(
    "data",
    [
        {"locales": ["german"]},
        {"paths": {"**/*": 42}},
        {"rules": [{"type": "resource-matcher", "name": "x"}]},
        {"rulesets": ["resource-check-all"]},
    ],
)
def test_invalid_project_config_raises_configuration_error(data: dict) -> None:
    with pytest.raises(ConfigurationError):
        parse_project_config(data)


def test_parse_project_config_passes_through_instances() -> None:
    config = ProjectConfig(name="x")
    assert parse_project_config(config) is config


def test_load_project_config_from_file(tmp_path: Path) -> None:
    config_file = tmp_path / "lint-hub-config.json"
    config_file.write_text(
        json.dumps({"name": "demo", "paths": {"**/*.xliff": "xliff"}}), encoding="utf-8"
    )
    config = load_project_config(config_file)
    assert config.name == "demo"
    assert config.paths == {"**/*.xliff": "xliff"}


def test_load_project_config_errors(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError):
        load_project_config(tmp_path / "missing.json")

    broken = tmp_path / "broken.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_project_config(broken)


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LH_LOGGING__FORMAT", "json")
    monkeypatch.setenv("LH_LOGGING__LEVEL", "DEBUG")
    monkeypatch.setenv("LH_CONFIG_FILE", "custom.json")

    settings = LintHubSettings()

    assert settings.logging.format == "json"
    assert settings.logging.level == "DEBUG"
    assert settings.config_file == "custom.json"
    assert settings.locales is None


def test_settings_validate_locales() -> None:
    assert LintHubSettings(locales=["fr-FR"]).locales == ["fr-FR"]
    with pytest.raises(ValidationError):
        LintHubSettings(locales=["german"])
