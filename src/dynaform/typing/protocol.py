"""Rendering-target and validation interfaces."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Callable

    from dynaform.typing.models import Rect


class EventHandle(Protocol):
    """Event dispatched to element listeners."""

    type: str

    def prevent_default(self) -> None:
        """Cancel the native action attached to the event."""


class ElementHandle(Protocol):
    """Element of the rendering target tree."""

    tag: str
    id: str
    class_name: str
    text_content: str
    style: dict[str, str]
    value: str
    checked: bool

    def set_attribute(self, name: str, value: str) -> None:
        """Set an attribute on the element."""

    def get_attribute(self, name: str) -> str | None:
        """Return an attribute value, or None when unset."""

    def append_child(self, child: ElementHandle) -> ElementHandle:
        """Insert a child at the end of the element."""

    def append_text(self, text: str) -> None:
        """Insert a text node at the end of the element."""

    def remove(self) -> None:
        """Detach the element from its parent; no-op when already detached."""

    def add_event_listener(self, event_type: str, listener: Callable[[EventHandle], None]) -> None:
        """Subscribe to an event type."""

    def dispatch_event(self, event: EventHandle) -> bool:
        """Run listeners; return False when the default action was prevented."""

    def find_by_id(self, element_id: str) -> ElementHandle | None:
        """Return the first descendant with the given id."""

    def iter_descendants(self) -> list[ElementHandle]:
        """Return all descendants in document order."""

    def focus(self) -> None:
        """Move input focus to the element."""

    def get_bounding_client_rect(self) -> Rect:
        """Return the element's viewport-relative box."""


class Scheduler(Protocol):
    """Deferred callback execution on the interface event loop."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        """Run `callback` once after `delay` seconds."""


class DocumentHost(Protocol):
    """Document owning the rendering tree."""

    body: ElementHandle
    scroll_top: float
    scheduler: Scheduler

    def create_element(self, tag: str) -> ElementHandle:
        """Create a detached element."""

    def get_element_by_id(self, element_id: str) -> ElementHandle | None:
        """Return the attached element with the given id."""

    def get_elements_by_class_name(self, class_name: str) -> list[ElementHandle]:
        """Return attached elements carrying the given class."""


class ValueProvider(Protocol):
    """Read access to current control values, keyed by field identifier."""

    def read_value(self, identifier: str) -> str | None:
        """Return the current value, or None when no control exists for the identifier."""
