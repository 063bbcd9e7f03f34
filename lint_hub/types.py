# lint_hub/types.py
"""
本模块定义了 Lint-Hub 系统的核心数据类型。

资源（Resource）由外部解析器产生，规则只读取、不修改；
结果（Result）由规则产生，交给外部格式化器渲染。
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

PLURAL_CATEGORIES: tuple[str, ...] = ("zero", "one", "two", "few", "many", "other")
"""Unicode CLDR 复数类别的封闭集合。"""


class ResourceType(str, Enum):
    """资源的三种形态。"""

    STRING = "string"
    ARRAY = "array"
    PLURAL = "plural"


class Severity(str, Enum):
    """结果的严重程度。"""

    ERROR = "error"
    WARNING = "warning"
    SUGGESTION = "suggestion"


class Resource(BaseModel):
    """
    一个双语的可本地化单元。

    `source` 与 `target` 故意不做类型校验：声明的形态与实际内容不符时，
    资源并不报错，而是由规则视为“无法匹配”并静默跳过。
    """

    model_config = ConfigDict(frozen=True)

    key: str
    resource_type: str = ResourceType.STRING.value
    source: Any = None
    target: Any = None
    source_locale: Optional[str] = None
    target_locale: Optional[str] = None
    path: Optional[str] = None
    comment: Optional[str] = None


class Result(BaseModel):
    """规则针对某个资源、文件与区域设置报告的单个问题。"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    rule: Any
    severity: Severity = Severity.ERROR
    path_name: Optional[str] = None
    locale: Optional[str] = None
    id: Optional[str] = None
    description: str
    source: Optional[str] = None
    highlight: str
    line_number: Optional[int] = Field(default=None, ge=0)

    @model_validator(mode="after")
    def check_consistency(self) -> "Result":
        if not self.description:
            raise ValueError("Result 必须包含 description。")
        if self.rule is None:
            raise ValueError("Result 必须关联产生它的规则。")
        return self

    @property
    def rule_name(self) -> str:
        return getattr(self.rule, "name", str(self.rule))
