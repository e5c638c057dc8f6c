from __future__ import annotations

import pytest

from dynaform.exceptions import RuleNotFoundError
from dynaform.rules import RULE_CATALOG, get_rule, iter_rules
from dynaform.rules import catalog
from dynaform.typing.enums import RuleCategory


def test_catalog_groups_rules_by_category() -> None:
    assert set(RULE_CATALOG) == set(RuleCategory)
    assert set(RULE_CATALOG[RuleCategory.NUMERIC]) == {"numeric", "numeric_with_spaces", "phone"}
    assert set(RULE_CATALOG[RuleCategory.WORDS]) == {"single_word", "multiple_words", "sentence", "paragraph"}
    assert set(RULE_CATALOG[RuleCategory.PASSWORD]) == {"medium", "strong"}
    assert set(RULE_CATALOG[RuleCategory.MISCELLANEOUS]) == {"email"}


def test_catalog_is_read_only() -> None:
    with pytest.raises(TypeError):
        RULE_CATALOG[RuleCategory.NUMERIC]["custom"] = catalog.NUMERIC  # type: ignore[index]


def test_get_rule_accepts_raw_category() -> None:
    assert get_rule("words", "multiple_words") is catalog.MULTIPLE_WORDS
    assert get_rule(RuleCategory.MISCELLANEOUS, "email") is catalog.EMAIL


@pytest.mark.parametrize(("category", "name"), [("words", "missing"), ("unknown", "email")])
def test_get_rule_raises_for_unknown_entries(category: str, name: str) -> None:
    with pytest.raises(RuleNotFoundError, match=name):
        get_rule(category, name)


def test_iter_rules_yields_every_entry() -> None:
    entries = list(iter_rules())

    assert len(entries) == 10
    assert (RuleCategory.PASSWORD, "strong", catalog.PASSWORD_STRONG) in entries


@pytest.mark.parametrize(
    ("rule", "valid", "invalid"),
    [
        (catalog.NUMERIC, "0042", "42a"),
        (catalog.NUMERIC_WITH_SPACES, "12 34", "12-34"),
        (catalog.PHONE, "+34 (600) 123-456", "call me"),
        (catalog.SINGLE_WORD, "Jane", "Jane Doe"),
        (catalog.MULTIPLE_WORDS, "Jane Doe", "Jane1"),
        (catalog.SENTENCE, "Hello, world! Is it ok?", "50% off"),
        (catalog.PARAGRAPH, "First line.\nSecond line.", "a <b>"),
        (catalog.PASSWORD_MEDIUM, "Abcdefg1", "abcdefg1"),
        (catalog.PASSWORD_STRONG, "Abcdefgh1!", "Abcdefgh1"),
        (catalog.EMAIL, "jane@example.com", "jane@example"),
    ],
)
def test_catalog_rules_match_whole_values(rule, valid: str, invalid: str) -> None:
    assert rule.evaluate(valid, "field") is True
    assert rule.evaluate(invalid, "field") != True  # noqa: E712


def test_catalog_messages_are_stable() -> None:
    assert catalog.MULTIPLE_WORDS.evaluate("Jane1", "name") == (
        "The field 'Name' only accepts letters and spaces."
    )
    assert catalog.EMAIL.evaluate("nope", "email") == "The field 'Email' must be a valid email."
    assert catalog.PASSWORD_MEDIUM.evaluate("short", "password") == (
        "The field 'Password' must be at least 8 characters long, including an uppercase letter and a number."
    )
