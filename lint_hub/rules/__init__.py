# lint_hub/rules/__init__.py
"""Lint-Hub 的规则实现与规则注册表。"""

from lint_hub.rules.base import ResourceRule, Rule
from lint_hub.rules.declarative import (
    DeclarativeResourceRule,
    ResourceMatcher,
    ResourceSourceChecker,
    ResourceTargetChecker,
)
from lint_hub.rules.dnt_terms import ResourceDNTTerms
from lint_hub.rules.registry import RuleManager

__all__ = [
    "Rule",
    "ResourceRule",
    "DeclarativeResourceRule",
    "ResourceMatcher",
    "ResourceSourceChecker",
    "ResourceTargetChecker",
    "ResourceDNTTerms",
    "RuleManager",
]
