"""Typing-centric domain modules."""

from dynaform.typing.enums import ButtonType, FieldKind, RuleCategory, TextInputType, ValidationState
from dynaform.typing.models import (
    ButtonField,
    CheckboxGroupField,
    FieldDescriptor,
    FieldOption,
    FormConfig,
    FormConfigBuilder,
    NumberField,
    RadioGroupField,
    Rect,
    SelectField,
    TextAreaField,
    TextField,
    ValidationOutcome,
    parse_field_descriptor,
)
from dynaform.typing.protocol import DocumentHost, ElementHandle, EventHandle, Scheduler, ValueProvider

__all__ = [
    "ButtonField",
    "ButtonType",
    "CheckboxGroupField",
    "DocumentHost",
    "ElementHandle",
    "EventHandle",
    "FieldDescriptor",
    "FieldKind",
    "FieldOption",
    "FormConfig",
    "FormConfigBuilder",
    "NumberField",
    "RadioGroupField",
    "Rect",
    "RuleCategory",
    "Scheduler",
    "SelectField",
    "TextAreaField",
    "TextField",
    "TextInputType",
    "ValidationOutcome",
    "ValidationState",
    "ValueProvider",
    "parse_field_descriptor",
]
