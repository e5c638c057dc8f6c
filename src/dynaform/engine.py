"""Form engine: field registration, rendering, submit validation, popups and value extraction."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, assert_never

from pydantic import ValidationError

from dynaform.exceptions import ConfigurationError, MalformedFieldError
from dynaform.logging import get_engine_logger
from dynaform.settings import Settings, get_settings
from dynaform.typing.enums import FieldKind, ValidationState
from dynaform.typing.models import (
    ButtonField,
    CheckboxGroupField,
    FieldDescriptor,
    FormConfig,
    NumberField,
    RadioGroupField,
    SelectField,
    TextAreaField,
    TextField,
    ValidationOutcome,
    parse_field_descriptor,
)
from dynaform.validation import CONTROL_GROUP_ATTRIBUTE, TreeValueProvider, validate_fields

if TYPE_CHECKING:
    from dynaform.typing.protocol import DocumentHost, ElementHandle, EventHandle

FormValues = dict[str, str | list[str]]

FIELD_WRAPPER_CLASS = "form-field"
POPUP_STYLE = {
    "position": "absolute",
    "background": "#f44336",
    "color": "#fff",
    "padding": "10px 15px",
    "border-radius": "4px",
    "box-shadow": "0 2px 8px rgba(0,0,0,0.3)",
    "z-index": "9999",
}
_MANDATORY_KEYS = ("kind", "identifier", "control_name")


def _format_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts)


class FormEngine:
    """Owns the ordered fields of one form and drives its lifecycle.

    Registration order is both render order and validation order. The engine
    keeps the configuration it was built with; a different configuration means
    a different engine.
    """

    def __init__(
        self,
        config: FormConfig,
        document: DocumentHost,
        *,
        settings: Settings | None = None,
    ) -> None:
        self._config = config
        self._document = document
        self._settings = settings or get_settings()
        self._fields: list[FieldDescriptor] = []
        self._form: ElementHandle | None = None
        self._state = ValidationState.IDLE
        self._last_outcome: ValidationOutcome | None = None
        self._logger = get_engine_logger(config.mount_target_id)

    @property
    def configuration(self) -> FormConfig:
        return self._config

    @property
    def fields(self) -> tuple[FieldDescriptor, ...]:
        return tuple(self._fields)

    @property
    def rendered_root(self) -> ElementHandle | None:
        return self._form

    @property
    def state(self) -> ValidationState:
        return self._state

    @property
    def last_outcome(self) -> ValidationOutcome | None:
        return self._last_outcome

    def _diagnostic(self, level: str, event: str, **kwargs: Any) -> None:
        if self._config.diagnostics_enabled:
            getattr(self._logger, level)(event, **kwargs)

    # Registration

    def add_field(self, descriptor: FieldDescriptor | Mapping[str, Any]) -> bool:
        """Register a field after the ones already added.

        Descriptors lacking `kind`, `identifier` or `control_name`, or invalid
        for their kind, are logged and dropped. Identifiers are not de-duplicated.

        Args:
            descriptor (FieldDescriptor | Mapping[str, Any]): Descriptor or seed mapping.

        Returns:
            bool: True when the field was registered.
        """
        try:
            field = self._coerce_field(descriptor)
        except MalformedFieldError as exc:
            self._diagnostic("error", "Field rejected", error=str(exc))
            return False

        self._fields.append(field)
        self._diagnostic("debug", "Field registered", identifier=field.identifier, kind=field.kind)
        return True

    @staticmethod
    def _coerce_field(descriptor: FieldDescriptor | Mapping[str, Any]) -> FieldDescriptor:
        if isinstance(descriptor, Mapping):
            missing = [key for key in _MANDATORY_KEYS if not descriptor.get(key)]
            if missing:
                raise MalformedFieldError(
                    reason=f"missing {', '.join(missing)}",
                    identifier=descriptor.get("identifier") or None,
                )
        try:
            return parse_field_descriptor(descriptor)
        except ValidationError as exc:
            identifier = descriptor.get("identifier") if isinstance(descriptor, Mapping) else None
            raise MalformedFieldError(reason=_format_validation_error(exc), identifier=identifier) from exc
        except TypeError as exc:
            reason = f"unsupported descriptor type {type(descriptor).__name__}"
            raise MalformedFieldError(reason=reason) from exc

    # Rendering

    def render(self) -> ElementHandle | None:
        """Build the form tree and append it to the mount target.

        The tree is built detached and inserted once, so a missing mount target
        leaves the document untouched.

        Returns:
            ElementHandle | None: Rendered form element, or None when the mount target is missing.
        """
        parent = self._document.get_element_by_id(self._config.mount_target_id)
        if parent is None:
            error = ConfigurationError(mount_target_id=self._config.mount_target_id)
            self._diagnostic("error", "Render aborted", error=str(error))
            return None

        form = self._create_form()
        title = self._create_title()
        if title is not None:
            form.append_child(title)
        legend = self._create_legend()
        if legend is not None:
            form.append_child(legend)

        rendered_fields = 0
        for field in self._fields:
            if not field.visible:
                continue
            form.append_child(self._create_wrapper(field))
            rendered_fields += 1

        parent.append_child(form)
        self._form = form
        self._diagnostic("debug", "Form rendered", fields=rendered_fields, form_id=form.id)
        return form

    def _create_form(self) -> ElementHandle:
        form = self._document.create_element("form")
        form.id = f"form_{self._config.mount_target_id}"
        form.class_name = self._config.style_hook
        if self._config.form_name:
            form.set_attribute("name", self._config.form_name)
        form.set_attribute("novalidate", "")
        form.add_event_listener("submit", self._on_submit)
        return form

    def _create_title(self) -> ElementHandle | None:
        if not self._config.title_text:
            return None
        title = self._document.create_element("h2")
        title.text_content = self._config.title_text
        title.class_name = self._config.title_style_hook
        return title

    def _create_legend(self) -> ElementHandle | None:
        if not self._config.legend_text:
            return None
        legend = self._document.create_element("p")
        legend.text_content = self._config.legend_text
        legend.class_name = self._config.legend_style_hook
        return legend

    def _create_wrapper(self, field: FieldDescriptor) -> ElementHandle:
        wrapper = self._document.create_element("div")
        wrapper.class_name = FIELD_WRAPPER_CLASS
        if field.label:
            label = self._document.create_element("label")
            label.set_attribute("for", field.identifier)
            label.text_content = field.label
            wrapper.append_child(label)
        wrapper.append_child(self._create_control(field))
        return wrapper

    def _create_control(self, field: FieldDescriptor) -> ElementHandle:
        match field:
            case TextField() | NumberField():
                return self._create_input(field)
            case TextAreaField():
                return self._create_textarea(field)
            case SelectField():
                return self._create_select(field)
            case CheckboxGroupField() | RadioGroupField():
                return self._create_option_group(field)
            case ButtonField():
                return self._create_button(field)
            case _:
                assert_never(field)

    def _apply_common(self, element: ElementHandle, field: FieldDescriptor) -> None:
        element.id = field.identifier
        element.set_attribute("name", field.control_name)
        if field.style_hook:
            element.class_name = field.style_hook

    def _create_input(self, field: TextField | NumberField) -> ElementHandle:
        element = self._document.create_element("input")
        if isinstance(field, NumberField):
            element.set_attribute("type", FieldKind.NUMBER.value)
            if field.minimum is not None:
                element.set_attribute("min", f"{field.minimum:g}")
            if field.maximum is not None:
                element.set_attribute("max", f"{field.maximum:g}")
        else:
            element.set_attribute("type", field.input_type.value)
        element.set_attribute("value", field.default_value or "")
        if field.pattern:
            element.set_attribute("pattern", field.pattern)
        self._apply_common(element, field)
        if field.placeholder:
            element.set_attribute("placeholder", field.placeholder)
        if field.is_required:
            element.set_attribute("required", "")
        return element

    def _create_textarea(self, field: TextAreaField) -> ElementHandle:
        element = self._document.create_element("textarea")
        self._apply_common(element, field)
        if field.placeholder:
            element.set_attribute("placeholder", field.placeholder)
        if field.is_required:
            element.set_attribute("required", "")
        if field.default_value:
            element.text_content = field.default_value
        return element

    def _create_select(self, field: SelectField) -> ElementHandle:
        element = self._document.create_element("select")
        self._apply_common(element, field)
        if field.is_required:
            element.set_attribute("required", "")
        for choice in field.options:
            option = self._document.create_element("option")
            option.set_attribute("value", choice.value)
            option.text_content = choice.text
            if field.default_value is not None and choice.value == field.default_value:
                option.set_attribute("selected", "")
            element.append_child(option)
        return element

    def _create_option_group(self, field: CheckboxGroupField | RadioGroupField) -> ElementHandle:
        container = self._document.create_element("div")
        container.id = field.identifier
        container.set_attribute(CONTROL_GROUP_ATTRIBUTE, field.kind)
        if field.style_hook:
            container.class_name = field.style_hook
        for choice in field.options:
            option_label = self._document.create_element("label")
            option_label.style.update(
                {"display": "flex", "align-items": "center", "gap": "8px", "cursor": "pointer"},
            )
            control = self._document.create_element("input")
            control.set_attribute("type", field.kind)
            control.set_attribute("name", field.control_name)
            control.set_attribute("value", choice.value)
            if field.is_required:
                control.set_attribute("required", "")
            option_label.append_child(control)
            option_label.append_text(choice.text)
            container.append_child(option_label)
        return container

    def _create_button(self, field: ButtonField) -> ElementHandle:
        element = self._document.create_element("button")
        element.set_attribute("type", field.button_type.value)
        element.text_content = field.text
        self._apply_common(element, field)
        return element

    # Validation

    def _on_submit(self, event: EventHandle) -> None:
        outcome = self.validate()
        if not outcome.accepted:
            event.prevent_default()
            return
        self._config.on_valid_submit()

    def validate(self) -> ValidationOutcome:
        """Validate every field in registration order against the rendered controls.

        Stops at the first failing field and shows a popup anchored to its
        control. Before render, no control exists and every field passes.

        Returns:
            ValidationOutcome: Outcome of this attempt.
        """
        self._state = ValidationState.VALIDATING
        if self._form is None:
            outcome = ValidationOutcome.accept()
        else:
            provider = TreeValueProvider(self._form)
            outcome = validate_fields(self._fields, provider)
            if not outcome.accepted and outcome.identifier is not None and outcome.message is not None:
                anchor = provider.locate(outcome.identifier)
                if anchor is not None:
                    self.show_popup(outcome.message, anchor)

        self._state = ValidationState.ACCEPTED if outcome.accepted else ValidationState.REJECTED
        self._last_outcome = outcome
        self._diagnostic(
            "debug" if outcome.accepted else "warning",
            "Validation finished",
            state=self._state.value,
            identifier=outcome.identifier,
            message=outcome.message,
        )
        return outcome

    def submit(self) -> bool:
        """Submit the rendered form as if the user triggered it.

        Returns:
            bool: True when validation passed and the native submission proceeded.
        """
        if self._form is None:
            self._diagnostic("error", "Submit ignored", reason="form not rendered")
            return False
        return self._form.request_submit()

    # Popup

    def show_popup(self, message: str, anchor: ElementHandle) -> ElementHandle:
        """Show a floating error message above a control and focus it.

        Any popup already shown with the same style hook is removed first. The
        popup removes itself after the configured timeout.

        Args:
            message (str): Error message.
            anchor (ElementHandle): Control the popup points at.

        Returns:
            ElementHandle: Popup element.
        """
        popup_class = self._config.popup_style_hook
        for existing in self._document.get_elements_by_class_name(popup_class):
            existing.remove()

        popup = self._document.create_element("div")
        popup.class_name = popup_class
        popup.text_content = message
        popup.style.update(POPUP_STYLE)

        rect = anchor.get_bounding_client_rect()
        top = rect.top + self._document.scroll_top - rect.height - self._settings.popup_offset_px
        popup.style["top"] = f"{top:g}px"
        popup.style["left"] = f"{rect.left:g}px"

        self._document.body.append_child(popup)
        anchor.focus()

        self._document.scheduler.call_later(self._settings.popup_timeout_seconds, popup.remove)
        self._diagnostic("debug", "Popup shown", anchor=anchor.id, message=message)
        return popup

    # Extraction

    def get_values(self) -> FormValues | None:
        """Read current control values keyed by control name.

        Checkbox groups yield the ordered list of checked values, radio groups
        the checked value (omitted when none is checked), every other control
        its current string value. Buttons are not included.

        Returns:
            FormValues | None: Extracted values, or None before render.
        """
        if self._form is None:
            return None

        values: FormValues = {}
        for element in self._form.iter_descendants():
            name = element.get_attribute("name")
            if not name or element.tag not in {"input", "textarea", "select"}:
                continue
            input_type = element.get_attribute("type") if element.tag == "input" else None
            if input_type == FieldKind.CHECKBOX:
                checked = values.setdefault(name, [])
                if element.checked and isinstance(checked, list):
                    checked.append(element.value)
            elif input_type == FieldKind.RADIO:
                if element.checked:
                    values[name] = element.value
            else:
                values[name] = element.value
        return values
