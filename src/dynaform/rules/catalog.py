"""Shared catalog of pre-built rules, grouped by semantic category."""

from __future__ import annotations

from types import MappingProxyType
from typing import TYPE_CHECKING

from dynaform.exceptions import RuleNotFoundError
from dynaform.rules.rule import Rule
from dynaform.typing.enums import RuleCategory

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

NUMERIC = Rule.from_regex(
    r"\d+",
    "The field '%value%' only accepts numbers.",
    "Numeric Field",
)
NUMERIC_WITH_SPACES = Rule.from_regex(
    r"[\d\s]+",
    "The field '%value%' only accepts numbers and spaces.",
    "Numeric Field",
)
PHONE = Rule.from_regex(
    r"(\+?\d{1,3}[-\s]?)?(\(?\d+\)?[-\s]?)+",
    "The field '%value%' only accepts valid phone numbers.",
    "Phone Number",
)

SINGLE_WORD = Rule.from_regex(
    r"[a-zA-Z]+",
    "The field '%value%' only accepts letters.",
    "Word",
)
MULTIPLE_WORDS = Rule.from_regex(
    r"[a-zA-Z\s]+",
    "The field '%value%' only accepts letters and spaces.",
    "Words",
)
SENTENCE = Rule.from_regex(
    r"[A-Za-z0-9.,!?¿¡:;'\s-]+",
    "The field '%value%' contains invalid characters.",
    "Sentence",
)
PARAGRAPH = Rule.from_regex(
    r"[A-Za-z0-9.,!?¿¡:;'\s\n-]+",
    "The field '%value%' contains invalid characters.",
    "Paragraph",
)

PASSWORD_MEDIUM = Rule.from_regex(
    r"(?=.*[A-Z])(?=.*\d)[a-zA-Z\d]{8,}",
    "The field '%value%' must be at least 8 characters long, including an uppercase letter and a number.",
    "Password",
)
PASSWORD_STRONG = Rule.from_regex(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&]).{10,}",
    "The field '%value%' must be at least 10 characters long, including a lowercase letter, "
    "an uppercase letter, a number, and a special character.",
    "Password",
)

EMAIL = Rule.from_regex(
    r"[^\s@]+@[^\s@]+\.[^\s@]+",
    "The field '%value%' must be a valid email.",
    "Email",
)

RULE_CATALOG: Mapping[RuleCategory, Mapping[str, Rule]] = MappingProxyType(
    {
        RuleCategory.NUMERIC: MappingProxyType(
            {
                "numeric": NUMERIC,
                "numeric_with_spaces": NUMERIC_WITH_SPACES,
                "phone": PHONE,
            },
        ),
        RuleCategory.WORDS: MappingProxyType(
            {
                "single_word": SINGLE_WORD,
                "multiple_words": MULTIPLE_WORDS,
                "sentence": SENTENCE,
                "paragraph": PARAGRAPH,
            },
        ),
        RuleCategory.PASSWORD: MappingProxyType(
            {
                "medium": PASSWORD_MEDIUM,
                "strong": PASSWORD_STRONG,
            },
        ),
        RuleCategory.MISCELLANEOUS: MappingProxyType(
            {
                "email": EMAIL,
            },
        ),
    },
)


def get_rule(category: RuleCategory | str, name: str) -> Rule:
    """Look up a catalog rule by category and name.

    Args:
        category (RuleCategory | str): Rule category, as enum or raw value.
        name (str): Rule name within the category.

    Raises:
        RuleNotFoundError: If the category or the name is unknown.

    Returns:
        Rule: Shared rule instance.
    """
    try:
        resolved = RuleCategory(category)
    except ValueError as exc:
        raise RuleNotFoundError(category=str(category), name=name) from exc

    rules = RULE_CATALOG[resolved]
    if name not in rules:
        raise RuleNotFoundError(category=resolved.value, name=name)
    return rules[name]


def iter_rules() -> Iterator[tuple[RuleCategory, str, Rule]]:
    """Yield every catalog entry as `(category, name, rule)`."""
    for category, rules in RULE_CATALOG.items():
        for name, rule in rules.items():
            yield category, name, rule
