# lint_hub/rules/dnt_terms.py
"""
本模块实现“禁止翻译术语”（DNT）规则：出现在源字符串中的 DNT 术语
必须原样出现在目标字符串中。
"""

import json
import re
from pathlib import Path
from typing import Any, Optional

import structlog
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
    field_validator,
)

from lint_hub.exceptions import ConfigurationError
from lint_hub.rules.base import MatchResult, Rule
from lint_hub.shapes import ArrayPair, PluralPair, StringPair, narrow_resource
from lint_hub.types import Resource, Result, Severity

logger = structlog.get_logger(__name__)

PartialResult = dict[str, str]


class DNTTermsParams(BaseModel):
    """规则的构造参数：显式术语列表，或术语文件路径与文件格式。"""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    terms: Optional[list[StrictStr]] = None
    terms_file_path: Optional[str] = Field(default=None, alias="termsFilePath")
    terms_file_type: Optional[str] = Field(default=None, alias="termsFileType")

    @field_validator("terms", mode="before")
    @classmethod
    def reject_explicit_none(cls, v: Any) -> Any:
        # 未提供 terms 时不会进入校验器，显式给出的 None 视为格式错误
        if v is None:
            raise ValueError("terms 必须是字符串列表")
        return v


class ResourceDNTTerms(Rule):
    """确保 DNT 术语没有被翻译，即源中出现的术语在目标中也必须出现。"""

    name = "resource-dnt-terms"
    description = "Ensure that Do Not Translate terms have not been translated."
    link = "https://github.com/ilib-js/i18nlint/blob/main/docs/resource-dnt-terms.md"
    rule_type = "resource"

    def __init__(self, **params: Any):
        try:
            options = DNTTermsParams.model_validate(params)
        except ValidationError as e:
            raise ConfigurationError(
                f"DNT 术语的格式不符合预期，应为字符串列表: {e}"
            ) from e

        terms: list[str]
        if options.terms is not None:
            terms = list(options.terms)
        elif options.terms_file_path is not None:
            terms = self.parse_terms_from_file(
                options.terms_file_path, options.terms_file_type
            )
        else:
            terms = []

        self._dnt_terms: tuple[str, ...] = tuple(
            dict.fromkeys(term for term in terms if term)
        )
        logger.debug("DNT 术语已加载。", rule=self.name, term_count=len(self._dnt_terms))

    @property
    def terms(self) -> tuple[str, ...]:
        return self._dnt_terms

    def match(
        self, resource: Resource, file: str, locale: Optional[str] = None
    ) -> MatchResult:
        partial_results = self._match_resource(resource)
        if partial_results is None:
            return None

        return [
            Result(
                rule=self,
                severity=Severity.ERROR,
                id=resource.key,
                path_name=file,
                locale=locale or resource.target_locale,
                description="A DNT term is missing in target string.",
                **partial,
            )
            for partial in partial_results
        ]

    def _match_resource(self, resource: Resource) -> Optional[list[PartialResult]]:
        pair = narrow_resource(resource)
        if isinstance(pair, StringPair):
            return self._match_string(pair.source, pair.target)
        if isinstance(pair, ArrayPair):
            return self._match_array(pair.source, pair.target)
        if isinstance(pair, PluralPair):
            return self._match_plural(pair.source, pair.target)
        # 形态未知或内容与形态不符，不做检查
        return None

    def _match_string(self, source: str, target: str) -> list[PartialResult]:
        return [
            {"source": source, "highlight": f"Missing term: <e0>{term}</e0>"}
            for term in self._dnt_terms
            if term in source and term not in target
        ]

    def _match_array(
        self, source: tuple[str, ...], target: tuple[str, ...]
    ) -> list[PartialResult]:
        partial_results: list[PartialResult] = []
        for idx, source_item in enumerate(source):
            target_item = target[idx] if idx < len(target) else ""
            partial_results.extend(self._match_string(source_item, target_item))
        return partial_results

    def _match_plural(
        self, source: dict[str, str], target: dict[str, str]
    ) -> list[PartialResult]:
        # 任意一个源类别包含术语，则要求每一个目标类别都包含该术语
        partial_results: list[PartialResult] = []
        for term in self._dnt_terms:
            matching_source_item = next(
                (item for item in source.values() if term in item), None
            )
            if matching_source_item is None:
                continue
            if not all(term in item for item in target.values()):
                partial_results.append(
                    {
                        "source": matching_source_item,
                        "highlight": f"Missing term: <e0>{term}</e0>",
                    }
                )
        return partial_results

    @classmethod
    def parse_terms_from_file(
        cls, path: str, file_type: Optional[str]
    ) -> list[str]:
        if file_type == "json":
            return cls.parse_terms_from_json_file(path)
        if file_type == "txt":
            return cls.parse_terms_from_txt_file(path)
        raise ConfigurationError(f'"{file_type}" 不是有效的 DNT 术语文件类型')

    @staticmethod
    def _read_terms_file(path: str) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigurationError(f"无法读取 DNT 术语文件 '{path}': {e}") from e

    @classmethod
    def parse_terms_from_json_file(cls, path: str) -> list[str]:
        """从内容为 JSON 字符串数组的文件中解析 DNT 术语。"""
        text = cls._read_terms_file(path)
        try:
            content = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigurationError("无法将 DNT 术语文件解析为 JSON") from e
        if not isinstance(content, list) or not all(
            isinstance(term, str) for term in content
        ):
            raise ConfigurationError("DNT 术语 JSON 文件的内容不符合预期，应为字符串数组")
        return content

    @classmethod
    def parse_terms_from_txt_file(cls, path: str) -> list[str]:
        """
        从文本文件中解析 DNT 术语，每行一个术语。

        解析时会去掉空行，并去除每行首尾的空白。
        """
        text = cls._read_terms_file(path)
        return [line.strip() for line in re.split(r"[\r\n]+", text) if line.strip()]
