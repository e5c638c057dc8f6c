"""Field descriptor models, one variant per control kind."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

from dynaform.rules.rule import Rule
from dynaform.typing.enums import ButtonType, TextInputType


class FieldOption(BaseModel):
    """Single choice of a select, checkbox group or radio group."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    value: str
    text: str


class _FieldBase(BaseModel):
    """Attributes shared by every control kind."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    identifier: str = Field(min_length=1, description="Unique control id within one form.")
    control_name: str = Field(min_length=1, description="Key of the control in extracted values.")
    label: str | None = None
    style_hook: str | None = None
    is_required: bool = False
    visible: bool = True
    rule: Rule | None = None


class TextField(_FieldBase):
    """Single-line input (text, email, password, ...)."""

    kind: Literal["text"] = "text"
    input_type: TextInputType = TextInputType.TEXT
    placeholder: str | None = None
    default_value: str | None = None
    pattern: str | None = Field(default=None, description="Raw native pattern attribute.")


class NumberField(_FieldBase):
    """Numeric input with optional bounds."""

    kind: Literal["number"] = "number"
    placeholder: str | None = None
    default_value: str | None = None
    minimum: float | None = None
    maximum: float | None = None
    pattern: str | None = Field(default=None, description="Raw native pattern attribute.")

    @model_validator(mode="after")
    def _check_bounds(self) -> NumberField:
        """Ensure `minimum` does not exceed `maximum`.

        Raises:
            ValueError: If both bounds are set and inverted.

        Returns:
            NumberField: Validated field.
        """
        if self.minimum is not None and self.maximum is not None and self.minimum > self.maximum:
            raise ValueError("minimum must be lower than or equal to maximum")  # noqa: TRY003
        return self


class TextAreaField(_FieldBase):
    """Multi-line input."""

    kind: Literal["textarea"] = "textarea"
    placeholder: str | None = None
    default_value: str | None = None


class SelectField(_FieldBase):
    """Single-choice dropdown."""

    kind: Literal["select"] = "select"
    options: tuple[FieldOption, ...] = Field(min_length=1)
    default_value: str | None = None


class CheckboxGroupField(_FieldBase):
    """Checkbox per option, all sharing the control name."""

    kind: Literal["checkbox"] = "checkbox"
    options: tuple[FieldOption, ...] = Field(min_length=1)


class RadioGroupField(_FieldBase):
    """Radio button per option, all sharing the control name."""

    kind: Literal["radio"] = "radio"
    options: tuple[FieldOption, ...] = Field(min_length=1)


class ButtonField(_FieldBase):
    """Clickable action control."""

    kind: Literal["button"] = "button"
    text: str = "Click"
    button_type: ButtonType = ButtonType.SUBMIT


FieldDescriptor = Annotated[
    TextField
    | NumberField
    | TextAreaField
    | SelectField
    | CheckboxGroupField
    | RadioGroupField
    | ButtonField,
    Field(discriminator="kind"),
]

_FIELD_DESCRIPTOR_ADAPTER: TypeAdapter[FieldDescriptor] = TypeAdapter(FieldDescriptor)


def parse_field_descriptor(payload: Mapping[str, Any] | FieldDescriptor) -> FieldDescriptor:
    """Build a field descriptor from a mapping, or return an existing descriptor unchanged.

    Args:
        payload (Mapping[str, Any] | FieldDescriptor): Raw seed mapping or descriptor instance.

    Raises:
        pydantic.ValidationError: If the payload misses mandatory attributes or is invalid for its kind.

    Returns:
        FieldDescriptor: Typed descriptor.
    """
    if isinstance(payload, _FieldBase):
        return payload
    return _FIELD_DESCRIPTOR_ADAPTER.validate_python(dict(payload))
