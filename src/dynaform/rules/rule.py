"""Pattern-based validation rule."""

from __future__ import annotations

import re
from typing import Literal

from pydantic import BaseModel, ConfigDict

MESSAGE_PLACEHOLDER = "%value%"


def title_case_subject(subject: str) -> str:
    """Upper-case the first character of a subject name, leaving the rest untouched.

    Args:
        subject (str): Raw subject name, usually a control name.

    Returns:
        str: Subject with a capitalized first character.
    """
    return subject[:1].upper() + subject[1:]


class Rule(BaseModel):
    """Immutable full-string pattern check with a failure message template.

    Rules hold no mutable state, so a single instance can be shared by any
    number of fields and forms.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pattern: re.Pattern[str] | None = None
    message_template: str
    subject_label: str = ""

    @classmethod
    def from_regex(
        cls,
        regex: str,
        message_template: str,
        subject_label: str = "",
        *,
        flags: int = 0,
    ) -> Rule:
        """Build a rule from a raw regular expression.

        Args:
            regex (str): Regular expression, matched against the whole value.
            message_template (str): Message containing the `%value%` placeholder.
            subject_label (str): Default subject used when none is given at evaluation.
            flags (int): `re` flags used to compile the expression.

        Returns:
            Rule: Compiled rule.
        """
        return cls(
            pattern=re.compile(regex, flags),
            message_template=message_template,
            subject_label=subject_label,
        )

    def evaluate(self, value: str, subject: str | None = None) -> Literal[True] | str:
        """Check a value against the rule.

        Args:
            value (str): Current control value.
            subject (str | None): Subject name substituted in the message, defaults to `subject_label`.

        Returns:
            Literal[True] | str: True when the value matches entirely, else the formatted message.
        """
        if self.pattern is None:
            return True

        if self.pattern.fullmatch(value) is not None:
            return True

        name = subject if subject is not None else self.subject_label
        return self.message_template.replace(MESSAGE_PLACEHOLDER, title_case_subject(name))
