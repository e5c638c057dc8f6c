"""Form configuration value and its builder."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_FORM_STYLE_HOOK = "dynamic_form"
DEFAULT_POPUP_STYLE_HOOK = "dynamic-form-popup"


def _no_op() -> None:
    """Default submission callback."""


class FormConfig(BaseModel):
    """Rendering and behavioral options of one form.

    The value is frozen: derive a new configuration with `with_changes` or the
    builder instead of mutating an existing one.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    mount_target_id: str
    form_name: str = ""
    style_hook: str = DEFAULT_FORM_STYLE_HOOK
    # single class token: existing popups are looked up by this class
    popup_style_hook: str = Field(default=DEFAULT_POPUP_STYLE_HOOK, pattern=r"^\S+$")
    diagnostics_enabled: bool = False
    title_text: str = ""
    title_style_hook: str = ""
    legend_text: str = ""
    legend_style_hook: str = ""
    on_valid_submit: Callable[[], Any] = Field(default=_no_op, exclude=True)

    @classmethod
    def builder(cls) -> FormConfigBuilder:
        """Return a fresh builder.

        Returns:
            FormConfigBuilder: Empty builder.
        """
        return FormConfigBuilder()

    def with_changes(self, **changes: Any) -> FormConfig:
        """Return a validated copy with the given attributes replaced.

        Args:
            **changes (Any): Attribute overrides.

        Returns:
            FormConfig: New configuration value.
        """
        return FormConfig.model_validate({**self._as_kwargs(), **changes})

    def _as_kwargs(self) -> dict[str, Any]:
        return {name: getattr(self, name) for name in type(self).model_fields}


class FormConfigBuilder:
    """Step-by-step construction of a `FormConfig`.

    Setters return the builder so calls can be chained; nothing is validated
    until `build`.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def mount_target(self, mount_target_id: str) -> FormConfigBuilder:
        """Set the id of the element the form is appended to.

        Args:
            mount_target_id (str): Mount target id.

        Returns:
            FormConfigBuilder: This builder.
        """
        self._values["mount_target_id"] = mount_target_id
        return self

    def name(self, form_name: str) -> FormConfigBuilder:
        """Set the `name` attribute of the form element.

        Args:
            form_name (str): Form name.

        Returns:
            FormConfigBuilder: This builder.
        """
        self._values["form_name"] = form_name
        return self

    def style(self, style_hook: str) -> FormConfigBuilder:
        """Set the class attribute of the form element.

        Args:
            style_hook (str): One or more class names.

        Returns:
            FormConfigBuilder: This builder.
        """
        self._values["style_hook"] = style_hook
        return self

    def popup_style(self, popup_style_hook: str) -> FormConfigBuilder:
        """Set the class of validation popups.

        Args:
            popup_style_hook (str): A single class name.

        Returns:
            FormConfigBuilder: This builder.
        """
        self._values["popup_style_hook"] = popup_style_hook
        return self

    def diagnostics(self, *, enabled: bool = True) -> FormConfigBuilder:
        """Toggle engine diagnostics logging.

        Args:
            enabled (bool): Whether diagnostics are emitted.

        Returns:
            FormConfigBuilder: This builder.
        """
        self._values["diagnostics_enabled"] = enabled
        return self

    def title(self, text: str, style_hook: str = "") -> FormConfigBuilder:
        """Set the heading rendered above the fields.

        Args:
            text (str): Title text; empty omits the heading.
            style_hook (str): Class of the heading element.

        Returns:
            FormConfigBuilder: This builder.
        """
        self._values["title_text"] = text
        self._values["title_style_hook"] = style_hook
        return self

    def legend(self, text: str, style_hook: str = "") -> FormConfigBuilder:
        """Set the explanatory paragraph rendered under the title.

        Args:
            text (str): Legend text; empty omits the paragraph.
            style_hook (str): Class of the paragraph element.

        Returns:
            FormConfigBuilder: This builder.
        """
        self._values["legend_text"] = text
        self._values["legend_style_hook"] = style_hook
        return self

    def on_valid_submit(self, callback: Callable[[], Any]) -> FormConfigBuilder:
        """Set the callback invoked after a submission passes validation.

        Args:
            callback (Callable[[], Any]): Zero-argument callable; its errors propagate.

        Returns:
            FormConfigBuilder: This builder.
        """
        self._values["on_valid_submit"] = callback
        return self

    def build(self) -> FormConfig:
        """Validate collected values into a frozen configuration.

        Raises:
            pydantic.ValidationError: If mandatory values are missing or invalid.

        Returns:
            FormConfig: Frozen configuration.
        """
        return FormConfig.model_validate(self._values)
