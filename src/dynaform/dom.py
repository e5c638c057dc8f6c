"""In-memory element tree used as rendering target.

The tree mirrors the subset of a browser document the form engine relies on:
element creation, attributes, inline style, event listeners, insertion and
removal, focus, bounding boxes and deferred callbacks. It serialises to HTML so
rendered forms can be inspected or written to disk.
"""

from __future__ import annotations

import asyncio
import heapq
import itertools
from html import escape
from typing import TYPE_CHECKING

from dynaform.typing.models import Rect

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator

VOID_TAGS = frozenset({"input", "br", "hr", "img", "meta", "link"})
BOOLEAN_ATTRIBUTES = frozenset({"required", "novalidate", "selected", "checked", "disabled"})


class Event:
    """Cancelable event dispatched to element listeners."""

    def __init__(self, event_type: str, *, cancelable: bool = True) -> None:
        self.type = event_type
        self.cancelable = cancelable
        self.default_prevented = False
        self.target: Element | None = None

    def prevent_default(self) -> None:
        if self.cancelable:
            self.default_prevented = True


class TextNode:
    """Raw text child of an element."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.parent: Element | None = None

    def to_html(self) -> str:
        return escape(self.text, quote=False)


class Element:
    """Element node of an in-memory document."""

    def __init__(self, tag: str, document: Document) -> None:
        self.tag = tag.lower()
        self.document = document
        self.attributes: dict[str, str] = {}
        self.style: dict[str, str] = {}
        self.children: list[Element | TextNode] = []
        self.parent: Element | None = None
        self.rect = Rect()
        self._listeners: dict[str, list[Callable[[Event], None]]] = {}
        self._value: str | None = None
        self._checked: bool | None = None

    def __repr__(self) -> str:
        ident = f"#{self.id}" if self.id else ""
        return f"<Element {self.tag}{ident}>"

    @property
    def id(self) -> str:
        return self.attributes.get("id", "")

    @id.setter
    def id(self, value: str) -> None:
        self.attributes["id"] = value

    @property
    def class_name(self) -> str:
        return self.attributes.get("class", "")

    @class_name.setter
    def class_name(self, value: str) -> None:
        if value:
            self.attributes["class"] = value
        else:
            self.attributes.pop("class", None)

    def has_class(self, class_name: str) -> bool:
        return class_name in self.class_name.split()

    @property
    def text_content(self) -> str:
        parts: list[str] = []
        for child in self.children:
            parts.append(child.text if isinstance(child, TextNode) else child.text_content)
        return "".join(parts)

    @text_content.setter
    def text_content(self, value: str) -> None:
        for child in self.children:
            child.parent = None
        self.children = []
        if value:
            self.append_text(value)

    @property
    def value(self) -> str:
        """Live value of a form control.

        Inputs fall back to their `value` attribute, textareas to their text,
        selects to the selected option (or the first one), options to their text.
        """
        if self.tag == "select":
            options = [child for child in self.iter_descendants() if child.tag == "option"]
            selected = [option for option in options if option.selected]
            chosen = selected[-1] if selected else (options[0] if options else None)
            return chosen.value if chosen is not None else ""
        if self._value is not None:
            return self._value
        if self.tag == "textarea":
            return self.text_content
        if self.tag == "option":
            return self.attributes.get("value", self.text_content)
        if self.tag == "input" and self.attributes.get("type") in {"checkbox", "radio"}:
            return self.attributes.get("value", "on")
        return self.attributes.get("value", "")

    @value.setter
    def value(self, value: str) -> None:
        if self.tag == "select":
            for option in (child for child in self.iter_descendants() if child.tag == "option"):
                option.selected = option.value == value
            return
        self._value = value

    @property
    def checked(self) -> bool:
        if self._checked is None:
            return "checked" in self.attributes
        return self._checked

    @checked.setter
    def checked(self, value: bool) -> None:
        self._checked = value
        if value and self.attributes.get("type") == "radio":
            self._uncheck_radio_siblings()

    @property
    def selected(self) -> bool:
        return "selected" in self.attributes

    @selected.setter
    def selected(self, value: bool) -> None:
        if value:
            self.attributes["selected"] = ""
        else:
            self.attributes.pop("selected", None)

    @property
    def is_connected(self) -> bool:
        node: Element | None = self
        while node is not None:
            if node is self.document.root:
                return True
            node = node.parent
        return False

    def set_attribute(self, name: str, value: str) -> None:
        self.attributes[name] = value

    def get_attribute(self, name: str) -> str | None:
        return self.attributes.get(name)

    def remove_attribute(self, name: str) -> None:
        self.attributes.pop(name, None)

    def append_child(self, child: Element) -> Element:
        if child.parent is not None:
            child.remove()
        child.parent = self
        self.children.append(child)
        return child

    def append_text(self, text: str) -> None:
        node = TextNode(text)
        node.parent = self
        self.children.append(node)

    def remove(self) -> None:
        """Detach from the parent element; calling it again is a no-op."""
        parent = self.parent
        if parent is None:
            return
        parent.children = [child for child in parent.children if child is not self]
        self.parent = None
        if self.document.active_element is self:
            self.document.active_element = None

    def add_event_listener(self, event_type: str, listener: Callable[[Event], None]) -> None:
        self._listeners.setdefault(event_type, []).append(listener)

    def dispatch_event(self, event: Event) -> bool:
        """Run listeners registered for the event type.

        Returns:
            bool: False when a listener prevented the default action.
        """
        event.target = self
        for listener in list(self._listeners.get(event.type, [])):
            listener(event)
        return not event.default_prevented

    def request_submit(self) -> bool:
        """Dispatch a submit event on a form and record the native submission when allowed.

        Returns:
            bool: True when the submission went through.
        """
        if self.tag != "form":
            message = f"request_submit() requires a form element, got <{self.tag}>"
            raise TypeError(message)
        if not self.dispatch_event(Event("submit")):
            return False
        self.document.submissions.append(self)
        return True

    def click(self) -> None:
        """Activate the element; submit buttons submit their enclosing form."""
        self.dispatch_event(Event("click", cancelable=False))
        if self.tag != "button" or self.attributes.get("type", "submit") != "submit":
            return
        form = self.closest("form")
        if form is not None:
            form.request_submit()

    def closest(self, tag: str) -> Element | None:
        node: Element | None = self
        while node is not None:
            if node.tag == tag:
                return node
            node = node.parent
        return None

    def iter_descendants(self) -> list[Element]:
        return list(self._walk())

    def _walk(self) -> Iterator[Element]:
        for child in self.children:
            if isinstance(child, Element):
                yield child
                yield from child._walk()  # noqa: SLF001

    def find_by_id(self, element_id: str) -> Element | None:
        return next((element for element in self._walk() if element.id == element_id), None)

    def find_by_class_name(self, class_name: str) -> list[Element]:
        return [element for element in self._walk() if element.has_class(class_name)]

    def focus(self) -> None:
        self.document.active_element = self

    def get_bounding_client_rect(self) -> Rect:
        return self.rect

    def to_html(self) -> str:
        """Serialise the element and its subtree."""
        attributes = dict(self.attributes)
        if self.style:
            attributes["style"] = "; ".join(f"{key}: {value}" for key, value in self.style.items())
        if self._checked is not None:
            attributes.pop("checked", None)
            if self._checked:
                attributes["checked"] = ""
        rendered = "".join(_render_attribute(name, value) for name, value in attributes.items())
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{rendered}>"
        inner = "".join(child.to_html() for child in self.children)
        return f"<{self.tag}{rendered}>{inner}</{self.tag}>"

    def _uncheck_radio_siblings(self) -> None:
        name = self.attributes.get("name")
        scope = self.closest("form") or self.document.root
        for element in scope.iter_descendants():
            if (
                element is not self
                and element.tag == "input"
                and element.attributes.get("type") == "radio"
                and element.attributes.get("name") == name
            ):
                element._checked = False  # noqa: SLF001


def _render_attribute(name: str, value: str) -> str:
    if name in BOOLEAN_ATTRIBUTES:
        return f" {name}"
    return f' {name}="{escape(value, quote=True)}"'


class ManualScheduler:
    """Deterministic scheduler driven by `advance`."""

    def __init__(self) -> None:
        self.now = 0.0
        self._queue: list[tuple[float, int, Callable[[], None]]] = []
        self._sequence = itertools.count()

    @property
    def pending(self) -> int:
        return len(self._queue)

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        heapq.heappush(self._queue, (self.now + delay, next(self._sequence), callback))

    def advance(self, seconds: float) -> int:
        """Move the clock forward and run every callback that became due.

        Args:
            seconds (float): Elapsed time.

        Returns:
            int: Number of callbacks run.
        """
        self.now += seconds
        ran = 0
        while self._queue and self._queue[0][0] <= self.now:
            _, _, callback = heapq.heappop(self._queue)
            callback()
            ran += 1
        return ran


class AsyncioScheduler:
    """Scheduler backed by an asyncio event loop."""

    def __init__(self, loop: asyncio.AbstractEventLoop | None = None) -> None:
        self._loop = loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> None:
        loop = self._loop or asyncio.get_running_loop()
        loop.call_later(delay, callback)


class Document:
    """Root of an in-memory element tree."""

    def __init__(self, scheduler: ManualScheduler | AsyncioScheduler | None = None) -> None:
        self.scheduler = scheduler or ManualScheduler()
        self.scroll_top = 0.0
        self.active_element: Element | None = None
        self.submissions: list[Element] = []
        self.root = Element("html", self)
        self.body = self.root.append_child(Element("body", self))

    def create_element(self, tag: str) -> Element:
        return Element(tag, self)

    def get_element_by_id(self, element_id: str) -> Element | None:
        return self.root.find_by_id(element_id)

    def get_elements_by_class_name(self, class_name: str) -> list[Element]:
        return self.root.find_by_class_name(class_name)

    def mount_point(self, element_id: str) -> Element:
        """Create a `div` with the given id inside the body.

        Args:
            element_id (str): Id of the container.

        Returns:
            Element: Attached container.
        """
        container = self.create_element("div")
        container.id = element_id
        return self.body.append_child(container)

    def to_html(self) -> str:
        return "<!DOCTYPE html>" + self.root.to_html()
