# lint_hub/utils.py
"""
本模块包含项目范围内的通用工具函数：语言代码校验、路径规范化与 glob 匹配。
"""

import functools
import posixpath
import re

from langcodes import Language
from langcodes.tag_parser import LanguageTagError

# 语言子标签应该由 2-3 个字母组成 (BCP 47)
LANGUAGE_SUBTAG_PATTERN = re.compile(r"^[a-zA-Z]{2,3}$")


def validate_lang_codes(lang_codes: list[str]) -> None:
    """使用 `langcodes` 库校验语言代码列表中的每个代码是否符合 BCP 47 规范。"""
    for code in lang_codes:
        try:
            lang = Language.get(code)
            if not lang.language or not LANGUAGE_SUBTAG_PATTERN.match(lang.language):
                raise LanguageTagError(
                    f"Tag '{code}' lacks a valid 2-3 letter language subtag."
                )
        except LanguageTagError as e:
            raise ValueError(f"提供的语言代码 '{code}' 格式无效。原因: {e}") from e


def normalize_path(path_name: str) -> str:
    """将路径统一为与平台无关的 '/' 分隔形式。"""
    normalized = posixpath.normpath(path_name.replace("\\", "/"))
    return "" if normalized == "." else normalized


# 不以 '.' 开头的单个路径段
_SEGMENT = r"(?!\.)[^/]*"


@functools.lru_cache(maxsize=512)
def compile_glob(glob: str) -> "re.Pattern[str]":
    """
    将 micromatch 风格的 glob 转换为正则表达式。

    支持 `*`（不跨目录）、`?`、`[...]`、`{a,b}` 与 `**`（任意层级，
    `**/` 也可匹配零层目录）。与 micromatch 的默认行为一致，通配符不匹配
    以 '.' 开头的文件或目录；不构成完整路径段的 `**` 等同于 `*`。

    Raises:
        ValueError: glob 中的括号不配对。
    """
    parts: list[str] = []
    brace_depth = 0
    i, n = 0, len(glob)
    while i < n:
        c = glob[i]
        at_segment_start = i == 0 or glob[i - 1] == "/"
        if c == "*":
            if glob.startswith("**", i):
                segment_end = i + 2 == n or glob[i + 2] == "/"
                if at_segment_start and segment_end:
                    if i + 2 < n:
                        parts.append(f"(?:{_SEGMENT}/)*")
                        i += 3
                    else:
                        parts.append(f"{_SEGMENT}(?:/{_SEGMENT})*")
                        i += 2
                    continue
                i += 1
            parts.append(_SEGMENT if at_segment_start else "[^/]*")
        elif c == "?":
            parts.append(r"(?!\.)[^/]" if at_segment_start else "[^/]")
        elif c == "[":
            end = glob.find("]", i + 1)
            if end == -1:
                raise ValueError(f"glob '{glob}' 中的 '[' 没有配对的 ']'")
            body = glob[i + 1 : end]
            if body.startswith("!"):
                body = "^" + body[1:]
            parts.append("[" + body.replace("\\", "\\\\") + "]")
            i = end + 1
            continue
        elif c == "{":
            brace_depth += 1
            parts.append("(?:")
        elif c == "," and brace_depth:
            parts.append("|")
        elif c == "}" and brace_depth:
            brace_depth -= 1
            parts.append(")")
        else:
            parts.append(re.escape(c))
        i += 1

    if brace_depth:
        raise ValueError(f"glob '{glob}' 中的 '{{' 没有配对的 '}}'")
    return re.compile("".join(parts))


def glob_match(path_name: str, glob: str) -> bool:
    """判断规范化后的路径是否完整匹配给定的 glob。"""
    return compile_glob(glob).fullmatch(normalize_path(path_name)) is not None
