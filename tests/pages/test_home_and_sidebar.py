"""Tests for the Home page and the Map page sidebar."""

import pytest

from map_ui_sync.controllers import DISMISS_KEY, ControllerError, WidgetLoadError
from map_ui_sync.core.utils import DisplayedValueError
from map_ui_sync.pages.home import NAV_BAR_SECTIONS
from tests.helpers.widgets import install_switch


def test_nav_bar_section_selection_is_idempotent(fake, home_page):
    nav_bar = home_page.nav_bar
    for key, toggle in nav_bar.tabs.items():
        install_switch(fake, toggle.element, on=key == "climate_resilience", token="Mui-selected")

    nav_bar.go_to_climate_resilience_section()
    nav_bar.go_to_hdot_map_section()
    nav_bar.go_to_hdot_map_section()

    assert fake.clicks_on(nav_bar.tabs["climate_resilience"].element) == 0
    assert fake.clicks_on(nav_bar.tabs["hdot_map"].element) == 1
    assert set(nav_bar.tabs) == set(NAV_BAR_SECTIONS)


def test_go_to_top_of_page(fake, home_page):
    btn = fake.add(home_page.nav_bar.back_to_top_btn)
    btn.on_click = lambda: fake.after(0.3, lambda: setattr(btn, "visible", False))

    home_page.nav_bar.go_to_top_of_page_via_btn()

    assert fake.clicks_on(home_page.nav_bar.back_to_top_btn) == 1


def test_open_map_via_explore_button(fake, home_page):
    btn = fake.add(home_page.top_section_explore_map_btn)
    btn.on_click = lambda: setattr(btn, "visible", False)

    home_page.open_map_via_top_section_explore_map_btn()

    assert not fake.is_visible(home_page.top_section_explore_map_btn)


def test_open_map_fails_if_home_page_stays(fake, home_page):
    fake.add(home_page.top_section_explore_map_btn)

    with pytest.raises(ControllerError, match="did not become hidden"):
        home_page.open_map_via_top_section_explore_map_btn()


def test_sidebar_tabs_dismiss_popups_first(fake, map_page):
    sidebar = map_page.sidebar
    install_switch(fake, sidebar.information_tab.element, on=True, token="Mui-selected")
    install_switch(fake, sidebar.insights_tab.element, on=False, token="Mui-selected")

    sidebar.go_to_insights_tab()

    assert fake.presses(DISMISS_KEY) == 1
    assert fake.element(sidebar.insights_tab.element).has_class("Mui-selected")


def test_open_thematic_indices(fake, map_page):
    bar = map_page.sidebar.categories_vertical_bar
    install_switch(fake, bar.thematic_indices_btn, on=False, token="Mui-selected")

    bar.open_thematic_indices()
    bar.open_thematic_indices()

    assert fake.clicks_on(bar.thematic_indices_btn) == 1


def test_click_logo_returns_home(fake, map_page):
    sidebar = map_page.sidebar
    tab = fake.add(sidebar.information_tab.element)

    def _go_home():
        tab.visible = False
        fake.url = "http://localhost:3000/#back-to-top-anchor"

    fake.add(sidebar.logo, on_click=_go_home)

    sidebar.click_logo()


def test_click_logo_wrong_url_fails(fake, map_page):
    sidebar = map_page.sidebar
    tab = fake.add(sidebar.information_tab.element)
    fake.add(sidebar.logo, on_click=lambda: setattr(tab, "visible", False))

    with pytest.raises(ControllerError, match="Did not return to the Home page"):
        sidebar.click_logo()


def _install_asset_types(fake, widget, counts, *, loading_sec=2.0):
    loader = fake.add(widget.loader, count=4)
    fake.after(loading_sec, lambda: setattr(loader, "count", 0))
    for asset_type, count in counts.items():
        row = widget.types[asset_type]
        fake.add(row.child("span"), text=str(count))


def test_asset_types_loaded(fake, map_page):
    widget = map_page.sidebar.hdot_assets_by_type_widget
    counts = {"bridge": 742, "roadway": 1203, "culvert": 88, "tunnel": 4}
    _install_asset_types(fake, widget, counts)

    assert widget.wait_until_types_have_loaded() == counts
    assert fake.now >= 2.0


def test_asset_type_with_single_asset_fails(fake, map_page):
    widget = map_page.sidebar.hdot_assets_by_type_widget
    _install_asset_types(fake, widget, {"bridge": 742, "roadway": 1203, "culvert": 88, "tunnel": 1})

    with pytest.raises(WidgetLoadError, match="more than one tunnel asset"):
        widget.wait_until_types_have_loaded()


def test_asset_types_still_loading_fails(fake, map_page):
    widget = map_page.sidebar.hdot_assets_by_type_widget
    _install_asset_types(fake, widget, {"bridge": 2, "roadway": 2, "culvert": 2, "tunnel": 2}, loading_sec=60)

    with pytest.raises(WidgetLoadError, match="placeholders still displayed"):
        widget.wait_until_types_have_loaded(timeout_sec=5)


def test_select_pre_school_type(fake, map_page):
    widget = map_page.sidebar.facilities_and_structures_widget
    caption = fake.add(widget.selected_msg, text="0 selected")
    fake.add(widget.pre_school_type, on_click=lambda: setattr(caption, "text", "1 selected"))

    assert widget.select_pre_school_type() == 1


def test_asset_types_wait_for_placeholders_that_render_late(fake, map_page):
    widget = map_page.sidebar.hdot_assets_by_type_widget
    counts = {"bridge": 742, "roadway": 1203, "culvert": 88, "tunnel": 4}
    loader = fake.add(widget.loader, count=0)
    labels = {asset_type: fake.add(row.child("span"), text="") for asset_type, row in widget.types.items()}

    def _fill_counts():
        loader.count = 0
        for asset_type, label in labels.items():
            label.text = str(counts[asset_type])

    fake.after(0.5, lambda: setattr(loader, "count", 4))
    fake.after(2.0, _fill_counts)

    assert widget.wait_until_types_have_loaded() == counts
    assert fake.now >= 2.0


def test_asset_type_label_never_numeric_fails(fake, map_page):
    widget = map_page.sidebar.hdot_assets_by_type_widget
    fake.add(widget.loader, count=0)
    for row in widget.types.values():
        fake.add(row.child("span"), text="")

    with pytest.raises(DisplayedValueError, match="Bridge type count"):
        widget.wait_until_types_have_loaded(timeout_sec=3)

    assert fake.now >= 3
