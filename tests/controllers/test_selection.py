"""Tests for the selection controller."""

import pytest

from map_ui_sync.controllers import SelectionError
from map_ui_sync.types import Disclosure, ElementDescriptor, SelectionWidget
from tests.helpers.widgets import install_popup

POPOVER = ElementDescriptor(name="Popover", selector=".MuiPopover-paper")
CLEAR = POPOVER.child("button.MuiButton-disableElevation", name="Unselect All button")
CAPTION = POPOVER.child("button.MuiButton-disableElevation + p", name="Selected caption")
ITEM = ElementDescriptor(name="Pre-school", selector="div.MuiGrid-spacing-xs-1:first-child")


def _assets_widget() -> SelectionWidget:
    return SelectionWidget(
        name="HDOT Assets",
        count_label=CAPTION,
        clear_action=CLEAR,
        disclosure=Disclosure(
            name="HDOT Assets",
            trigger=ElementDescriptor(name="HDOT Assets button", selector="button[aria-controls='simple-menu']"),
            sentinel=CLEAR,
            content=POPOVER,
        ),
    )


def _install_assets(fake, widget: SelectionWidget, *, selected: int, clears: bool = True, stale_caption: bool = False):
    install_popup(fake, widget.disclosure)
    clear = fake.get_or_add(CLEAR)
    caption = fake.add(CAPTION, text=f"{selected} selected")
    clear.set_class("MuiButton-root", *(["Mui-disabled"] if selected == 0 else []))

    def _clear():
        if not clears:
            return
        clear.set_class("MuiButton-root", "Mui-disabled")
        if not stale_caption:
            fake.after(0.3, lambda: setattr(caption, "text", "0 selected"))

    clear.on_click = _clear
    return clear, caption


@pytest.fixture
def controller(session):
    return session.selections


def test_clear_four_selected_items(fake, controller):
    widget = _assets_widget()
    clear, caption = _install_assets(fake, widget, selected=4)

    assert controller.clear_selection(widget) == 0

    assert fake.clicks_on(CLEAR) == 1
    assert clear.has_class("Mui-disabled")
    assert caption.text == "0 selected"
    assert fake.clicks_on(widget.disclosure.trigger) == 1


def test_clear_empty_selection_does_not_click(fake, controller):
    widget = _assets_widget()
    _install_assets(fake, widget, selected=0)

    assert controller.clear_selection(widget) == 0
    assert fake.clicks_on(CLEAR) == 0


def test_stale_caption_fails_even_if_clear_is_disabled(fake, controller):
    widget = _assets_widget()
    _install_assets(fake, widget, selected=4, stale_caption=True)

    with pytest.raises(SelectionError, match="did not become empty") as exc_info:
        controller.clear_selection(widget)

    assert exc_info.value.last_observed == {"disabled": True, "count": 4}


def test_clear_action_without_effect_fails(fake, controller):
    widget = _assets_widget()
    _install_assets(fake, widget, selected=2, clears=False)

    with pytest.raises(SelectionError) as exc_info:
        controller.clear_selection(widget)

    assert exc_info.value.last_observed == {"disabled": False, "count": 2}
    assert fake.clicks_on(CLEAR) == 1


def test_clear_without_clear_action_is_rejected(controller):
    widget = SelectionWidget(name="Facilities", count_label=CAPTION)

    with pytest.raises(ValueError, match="has no clear action"):
        controller.clear_selection(widget)


def test_select_item_increments_count(fake, controller):
    widget = SelectionWidget(name="Facilities", count_label=CAPTION, items={"pre_school": ITEM})
    caption = fake.add(CAPTION, text="0 selected")
    fake.add(ITEM, on_click=lambda: fake.after(0.2, lambda: setattr(caption, "text", "1 selected")))

    assert controller.select_item(widget, "pre_school") == 1
    assert controller.selected_count(widget) == 1


def test_select_item_without_effect_fails(fake, controller):
    widget = SelectionWidget(name="Facilities", count_label=CAPTION, items={"pre_school": ITEM})
    fake.add(CAPTION, text="0 selected")
    fake.add(ITEM)

    with pytest.raises(SelectionError, match="did not reach 1") as exc_info:
        controller.select_item(widget, "pre_school")

    assert exc_info.value.last_observed == 0


def test_select_unknown_item(controller):
    widget = SelectionWidget(name="Facilities", count_label=CAPTION)

    with pytest.raises(KeyError):
        controller.select_item(widget, "hospital")
