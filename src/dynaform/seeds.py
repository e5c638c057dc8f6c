"""Reusable field descriptors for a registration form."""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import TYPE_CHECKING

from dynaform.rules import catalog
from dynaform.rules.rule import Rule
from dynaform.typing.enums import ButtonType, TextInputType
from dynaform.typing.models import (
    ButtonField,
    CheckboxGroupField,
    FieldOption,
    NumberField,
    SelectField,
    TextField,
)

if TYPE_CHECKING:
    from collections.abc import Mapping

    from dynaform.typing.models import FieldDescriptor

AGE_RULE = Rule.from_regex(
    r"(?:1[01][0-9]|120|[1-9]?[0-9])",
    "The field '%value%' must be a valid age between 0 and 120.",
    "Age",
)
GENDER_RULE = Rule.from_regex(
    r"(male|female|other)",
    "The field '%value%' must be 'male', 'female', or 'other'.",
    "Gender",
    flags=re.IGNORECASE,
)

REGISTRATION_SEED: Mapping[str, FieldDescriptor] = MappingProxyType(
    {
        "name": TextField(
            identifier="name",
            control_name="name",
            label="Name",
            style_hook="form_textbox",
            placeholder="Enter your name",
            is_required=True,
            rule=catalog.MULTIPLE_WORDS,
        ),
        "email": TextField(
            identifier="email",
            control_name="email",
            input_type=TextInputType.EMAIL,
            label="Email",
            style_hook="form_textbox",
            placeholder="Enter your email",
            is_required=True,
            rule=catalog.EMAIL,
        ),
        "password": TextField(
            identifier="password",
            control_name="password",
            input_type=TextInputType.PASSWORD,
            label="Password",
            style_hook="form_textbox",
            placeholder="Enter your password",
            is_required=True,
            rule=catalog.PASSWORD_STRONG,
        ),
        "age": NumberField(
            identifier="age",
            control_name="age",
            label="Age",
            style_hook="form_textbox",
            placeholder="Enter your age",
            minimum=0,
            maximum=120,
            is_required=True,
            rule=AGE_RULE,
        ),
        "gender": SelectField(
            identifier="gender",
            control_name="gender",
            label="Gender",
            style_hook="form_select",
            options=(
                FieldOption(value="", text="Select gender"),
                FieldOption(value="male", text="Male"),
                FieldOption(value="female", text="Female"),
                FieldOption(value="other", text="Other"),
            ),
            is_required=True,
            rule=GENDER_RULE,
        ),
        "terms": CheckboxGroupField(
            identifier="terms",
            control_name="terms",
            label="Accept the terms and conditions",
            style_hook="form_checkbox",
            options=(FieldOption(value="accepted", text="I accept"),),
            is_required=True,
        ),
        "submit": ButtonField(
            identifier="submit",
            control_name="submit",
            style_hook="form_button",
            text="Submit",
            button_type=ButtonType.SUBMIT,
        ),
    },
)


def registration_fields() -> list[FieldDescriptor]:
    """Return the registration seed descriptors in display order."""
    return list(REGISTRATION_SEED.values())
