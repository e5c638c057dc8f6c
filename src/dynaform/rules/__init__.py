"""Validation rules and the shared rule catalog."""

from dynaform.rules.catalog import RULE_CATALOG, get_rule, iter_rules
from dynaform.rules.rule import MESSAGE_PLACEHOLDER, Rule, title_case_subject

__all__ = [
    "MESSAGE_PLACEHOLDER",
    "RULE_CATALOG",
    "Rule",
    "get_rule",
    "iter_rules",
    "title_case_subject",
]
