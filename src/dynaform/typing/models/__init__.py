"""Core domain model exports."""

from dynaform.typing.models.config import (
    DEFAULT_FORM_STYLE_HOOK,
    DEFAULT_POPUP_STYLE_HOOK,
    FormConfig,
    FormConfigBuilder,
)
from dynaform.typing.models.fields import (
    ButtonField,
    CheckboxGroupField,
    FieldDescriptor,
    FieldOption,
    NumberField,
    RadioGroupField,
    SelectField,
    TextAreaField,
    TextField,
    parse_field_descriptor,
)
from dynaform.typing.models.outcome import Rect, ValidationOutcome

__all__ = [
    "DEFAULT_FORM_STYLE_HOOK",
    "DEFAULT_POPUP_STYLE_HOOK",
    "ButtonField",
    "CheckboxGroupField",
    "FieldDescriptor",
    "FieldOption",
    "FormConfig",
    "FormConfigBuilder",
    "NumberField",
    "RadioGroupField",
    "Rect",
    "SelectField",
    "TextAreaField",
    "TextField",
    "ValidationOutcome",
    "parse_field_descriptor",
]
