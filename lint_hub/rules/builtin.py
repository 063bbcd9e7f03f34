# lint_hub/rules/builtin.py
"""本模块列出随 Lint-Hub 一起提供的内置规则与内置规则集。"""

from typing import Any

from lint_hub.rules.base import Rule
from lint_hub.rules.declarative import (
    DeclarativeResourceRule,
    ResourceMatcher,
    ResourceSourceChecker,
    ResourceTargetChecker,
)
from lint_hub.rules.dnt_terms import ResourceDNTTerms

DOCS_URL = "https://github.com/ilib-js/i18nlint/blob/main/docs"

RULE_CLASSES: dict[str, type[Rule]] = {
    ResourceDNTTerms.name: ResourceDNTTerms,
}

DECLARATIVE_RULE_TYPES: dict[str, type[DeclarativeResourceRule]] = {
    "resource-matcher": ResourceMatcher,
    "resource-source-checker": ResourceSourceChecker,
    "resource-target-checker": ResourceTargetChecker,
}

BUILTIN_RULE_DEFINITIONS: list[dict[str, Any]] = [
    {
        "type": "resource-matcher",
        "name": "resource-url-match",
        "description": "Ensure that URLs that appear in the source string are also used in the translated string",
        "note": "URL '{matchString}' from the source string does not appear in the target string",
        "regexps": [
            r"((https?|github|ftps?|mailto|file|data|irc)://)?([\da-zA-Z.-]+)\.([a-zA-Z.]{2,6})([/\w.-]*)/?"
        ],
        "link": f"{DOCS_URL}/resource-url-match.md",
    },
    {
        "type": "resource-matcher",
        "name": "resource-named-params",
        "description": "Ensure that named parameters that appear in the source string are also used in the translated string",
        "note": "The named parameter '{matchString}' from the source string does not appear in the target string",
        "regexps": [r"\{\w+\}"],
        "link": f"{DOCS_URL}/resource-named-params.md",
    },
    {
        "type": "resource-target-checker",
        "name": "resource-no-fullwidth-latin",
        "description": "Ensure that the target does not contain any full-width Latin characters.",
        "note": "The full-width characters '{matchString}' are not allowed in the target string. Use ASCII letters instead.",
        "regexps": [r"[Ａ-Ｚａ-ｚ]+"],
        "link": f"{DOCS_URL}/resource-no-fullwidth-latin.md",
    },
    {
        "type": "resource-target-checker",
        "name": "resource-no-fullwidth-digits",
        "description": "Ensure that the target does not contain any full-width digits.",
        "note": "The full-width characters '{matchString}' are not allowed in the target string. Use ASCII digits instead.",
        "regexps": [r"[０-９]+"],
        "link": f"{DOCS_URL}/resource-no-fullwidth-digits.md",
    },
]

RULESET_DEFINITIONS: dict[str, dict[str, Any]] = {
    "resource-check-all": {
        "resource-icu-plurals": True,
        "resource-quote-style": "localeOnly",
        "resource-unique-keys": True,
        "resource-url-match": True,
        "resource-named-params": True,
    }
}
