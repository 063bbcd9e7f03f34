# lint_hub/config.py
"""
本模块定义运行配置（来自环境变量）与项目配置（来自配置文件）的数据模型。
"""

import json
from pathlib import Path
from typing import Any, Literal, Optional, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

from lint_hub.exceptions import ConfigurationError
from lint_hub.types import Severity
from lint_hub.utils import validate_lang_codes

DEFAULT_CONFIG_FILE = "lint-hub-config.json"

RuleSetValue = Union[bool, str, int, float, list[Any], dict[str, Any]]
RuleSetDefinition = dict[str, RuleSetValue]


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: Literal["json", "console"] = "console"


class LintHubSettings(BaseSettings):
    """一次运行的选项，通常来自命令行与 `LH_` 前缀的环境变量。"""

    model_config = SettingsConfigDict(
        env_prefix="LH_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    config_file: str = DEFAULT_CONFIG_FILE
    locales: Optional[list[str]] = None
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("locales")
    @classmethod
    def validate_locales(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        if v is not None:
            validate_lang_codes(v)
        return v


class RuleDefinition(BaseModel):
    """一条声明式规则的定义，`type` 决定由哪一种规则类来实例化。"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    type: str
    name: str
    description: str
    note: str
    regexps: list[str] = Field(min_length=1)
    link: Optional[str] = None
    severity: Severity = Severity.ERROR
    source_locale: str = Field(default="en-US", alias="sourceLocale")


class FileTypeDefinition(BaseModel):
    """文件类型定义：名称、glob 以及引用的规则集（名称、名称列表或内联定义）。"""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: Optional[str] = None
    glob: Optional[str] = None
    ruleset: Union[str, list[str], RuleSetDefinition, None] = None


class ProjectConfig(BaseModel):
    """项目配置文件的内容。`paths` 的声明顺序决定文件类型的匹配顺序。"""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: Optional[str] = None
    locales: list[str] = Field(default_factory=list)
    source_locale: str = Field(default="en-US", alias="sourceLocale")
    paths: Optional[dict[str, Union[str, FileTypeDefinition]]] = None
    rulesets: dict[str, RuleSetDefinition] = Field(default_factory=dict)
    filetypes: dict[str, FileTypeDefinition] = Field(default_factory=dict)
    rules: list[RuleDefinition] = Field(default_factory=list)
    plugins: list[str] = Field(default_factory=list)
    excludes: list[str] = Field(default_factory=list)

    @field_validator("locales")
    @classmethod
    def validate_locales(cls, v: list[str]) -> list[str]:
        validate_lang_codes(v)
        return v


def parse_project_config(data: Any) -> ProjectConfig:
    """将普通映射校验为 `ProjectConfig`，校验失败时转换为 ConfigurationError。"""
    if isinstance(data, ProjectConfig):
        return data
    try:
        return ProjectConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError(f"项目配置无效: {e}") from e


def load_project_config(path: Union[str, Path]) -> ProjectConfig:
    """从 JSON 文件加载项目配置。"""
    config_path = Path(path)
    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"无法读取配置文件 '{config_path}': {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"配置文件 '{config_path}' 不是有效的 JSON: {e}") from e
    return parse_project_config(data)
