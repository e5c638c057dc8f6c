"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class FieldKind(_EnumMixin):
    """Supported form control kinds."""

    TEXT = "text"
    NUMBER = "number"
    TEXTAREA = "textarea"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    BUTTON = "button"


class TextInputType(_EnumMixin):
    """Native input types rendered for text-like fields."""

    TEXT = "text"
    EMAIL = "email"
    PASSWORD = "password"  # noqa: S105
    TEL = "tel"
    URL = "url"
    SEARCH = "search"
    DATE = "date"
    TIME = "time"
    COLOR = "color"


class ButtonType(_EnumMixin):
    """Native trigger type of an action button."""

    SUBMIT = "submit"
    BUTTON = "button"
    RESET = "reset"


class RuleCategory(_EnumMixin):
    """Semantic groups of the rule catalog."""

    NUMERIC = "numeric"
    WORDS = "words"
    PASSWORD = "password"  # noqa: S105
    MISCELLANEOUS = "miscellaneous"


class ValidationState(_EnumMixin):
    """Submission validation lifecycle."""

    IDLE = "idle"
    VALIDATING = "validating"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
