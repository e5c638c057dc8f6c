"""Field validation pipeline, independent of any rendering technology."""

from __future__ import annotations

from typing import TYPE_CHECKING

from dynaform.typing.models import ValidationOutcome

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from dynaform.typing.models import FieldDescriptor
    from dynaform.typing.protocol import ElementHandle, ValueProvider

CONTROL_GROUP_ATTRIBUTE = "data-control-group"


class MappingValueProvider:
    """Value provider over a plain `identifier -> value` mapping."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = values

    def read_value(self, identifier: str) -> str | None:
        return self._values.get(identifier)


class TreeValueProvider:
    """Value provider reading live controls below a rendered root element.

    Checkbox and radio groups resolve to their checked values joined by commas.
    """

    def __init__(self, root: ElementHandle) -> None:
        self._root = root

    def locate(self, identifier: str) -> ElementHandle | None:
        return self._root.find_by_id(identifier)

    def read_value(self, identifier: str) -> str | None:
        control = self.locate(identifier)
        if control is None:
            return None
        if control.get_attribute(CONTROL_GROUP_ATTRIBUTE) is not None:
            checked = [
                element.value
                for element in control.iter_descendants()
                if element.tag == "input" and element.checked
            ]
            return ",".join(checked)
        return control.value


def validate_fields(fields: Iterable[FieldDescriptor], provider: ValueProvider) -> ValidationOutcome:
    """Evaluate field rules in order and stop at the first failure.

    Fields without a rule, and fields the provider has no value for, pass.
    The provider is only consulted for fields carrying a rule.

    Args:
        fields (Iterable[FieldDescriptor]): Fields in registration order.
        provider (ValueProvider): Source of current control values.

    Returns:
        ValidationOutcome: Accepted outcome, or the first failing field and its message.
    """
    for field in fields:
        if field.rule is None:
            continue

        value = provider.read_value(field.identifier)
        if value is None:
            continue

        result = field.rule.evaluate(value, field.control_name)
        if result is not True:
            return ValidationOutcome.reject(field.identifier, result)

    return ValidationOutcome.accept()
