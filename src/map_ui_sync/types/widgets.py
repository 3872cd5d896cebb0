"""Descriptors for state-having UI regions.

One parametrized descriptor per kind of widget (disclosure, toggle, selection)
replaces a hand-written class per popup. Controllers in
``map_ui_sync.controllers`` drive any instance of these.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .element import ElementDescriptor


class Disclosure(BaseModel):
    """A popup or menu whose content is hidden until its trigger is clicked.

    Attributes:
        name: Name used in logs, errors and the session's open-disclosure slot.
        trigger: Element whose click opens the disclosure.
        sentinel: Child element whose visibility means "open".
        content: Content region that must be hidden after a dismissal.
        busy_indicator: Elements whose count must reach zero before the opened
            disclosure is fully loaded (e.g. disabled toggles).
        ready_timeout_sec: Bound for the busy indicator to clear. Falls back to
            the popup ready timeout from settings.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    trigger: ElementDescriptor
    sentinel: ElementDescriptor
    content: ElementDescriptor
    busy_indicator: ElementDescriptor | None = None
    ready_timeout_sec: float | None = Field(default=None, gt=0)


class Toggle(BaseModel):
    """A two-state control whose state is carried by an attribute token.

    Attributes:
        name: Name used in logs and errors.
        element: The clickable control.
        state_attribute: Attribute holding the state (usually ``class``).
        on_token: Whitespace-separated token present when the control is on,
            e.g. ``Mui-checked`` for switches, ``Mui-selected`` for tabs.
        disclosure: Disclosure that must be open before the control is reachable.
        dismiss_first: Press the neutral dismissal before reading the state,
            for controls that a stray popup could cover.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    element: ElementDescriptor
    state_attribute: str = "class"
    on_token: str = "Mui-checked"
    disclosure: Disclosure | None = None
    dismiss_first: bool = False


class SelectionWidget(BaseModel):
    """A multi-item selection widget with a "N selected" readback.

    Attributes:
        name: Name used in logs and errors.
        count_label: Caption reporting the number of selected items.
        clear_action: "Unselect all" action, disabled when nothing is selected.
        disclosure: Disclosure that must be open before the widget is reachable.
        disabled_token: Class token marking the clear action as disabled.
        count_pattern: Regex with one group capturing the count in the caption.
        items: Selectable items by name.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    count_label: ElementDescriptor
    clear_action: ElementDescriptor | None = None
    disclosure: Disclosure | None = None
    disabled_token: str = "Mui-disabled"
    count_pattern: str = r"(\d+) selected"
    items: dict[str, ElementDescriptor] = Field(default_factory=dict)


__all__ = [
    "Disclosure",
    "SelectionWidget",
    "Toggle",
]
