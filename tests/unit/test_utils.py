# tests/unit/test_utils.py
"""针对 `lint_hub.utils` 模块的单元测试。"""

import pytest

from lint_hub.utils import compile_glob, glob_match, normalize_path, validate_lang_codes


@pytest.mark.parametrize(
    "valid_codes",
    [
        ["en"],
        ["zh-CN"],
        ["de", "fr", "es-419"],
        ["en-US"],
        ["en_GB"],
        ["zh-Hant"],
    ],
)
def test_validate_lang_codes_accepts_valid_tags(valid_codes: list[str]) -> None:
    """测试有效的和可标准化的语言代码都能通过校验，不引发异常。"""
    try:
        validate_lang_codes(valid_codes)
    except ValueError as e:
        pytest.fail(
            f"validate_lang_codes() 错误地对有效代码 {valid_codes} 引发了异常: {e}"
        )


@pytest.mark.parametrize("invalid_code", ["german", "e", "123", "zh-CN-"])
def test_validate_lang_codes_rejects_invalid_tags(invalid_code: str) -> None:
    with pytest.raises(ValueError) as excinfo:
        validate_lang_codes([invalid_code])
    assert f"提供的语言代码 '{invalid_code}' 格式无效" in str(excinfo.value)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("a/b.xliff", "a/b.xliff"),
        ("./a/./b.xliff", "a/b.xliff"),
        ("a\\b\\c.json", "a/b/c.json"),
        ("a/x/../b.xliff", "a/b.xliff"),
        (".", ""),
    ],
)
def test_normalize_path(raw: str, expected: str) -> None:
    assert normalize_path(raw) == expected


@pytest.mark.parametrize(
    "glob, path, expected",
    [
        ("**/*.xliff", "a/b.xliff", True),
        ("**/*.xliff", "b.xliff", True),
        ("**/*.xliff", "a/b.xliff.bak", False),
        ("**/*", "a/b.txt", True),
        ("**", "a/b/c", True),
        ("src/**", "src/x.js", True),
        ("src/**", "lib/src/x.js", False),
        ("*.json", "a/b.json", False),
        ("*.json", "b.json", True),
        ("res/**/strings.json", "res/strings.json", True),
        ("res/**/strings.json", "res/fr/FR/strings.json", True),
        ("res/?.json", "res/a.json", True),
        ("res/?.json", "res/ab.json", False),
        ("**/*.{json,yml}", "config/app.yml", True),
        ("**/*.{json,yml}", "config/app.xml", False),
        ("res/[a-c]*.json", "res/b1.json", True),
        ("res/[!a-c]*.json", "res/b1.json", False),
        ("a+b/*.txt", "a+b/c.txt", True),
        ("**/*.xliff", "a\\b.xliff", True),
        # 通配符不匹配以 "." 开头的文件或目录
        ("**/*.xliff", ".github/a.xliff", False),
        ("**/*.xliff", "a/.hidden.xliff", False),
        ("**/*.xliff", "a/.cache/b/x.xliff", False),
        ("**", ".git/config", False),
        ("src/**", "src/.env", False),
        ("res/?env", "res/.env", False),
        (".github/**", ".github/a.xliff", True),
        ("**/.eslintrc", "a/.eslintrc", True),
        # 不构成完整路径段的 ** 等同于 *
        ("a**", "a/b/c", False),
        ("a**", "abc", True),
        ("**b", "a/b", False),
    ],
)
def test_glob_match(glob: str, path: str, expected: bool) -> None:
    assert glob_match(path, glob) is expected


@pytest.mark.parametrize("glob", ["res/{a,b.json", "res/[abc.json"])
def test_compile_glob_rejects_unbalanced(glob: str) -> None:
    with pytest.raises(ValueError):
        compile_glob(glob)
