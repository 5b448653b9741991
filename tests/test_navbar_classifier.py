"""
Tests for the navbar child classifiers.
"""

import pytest

from layout_repair.repair.analyzers import (
    ClassifierStrategy,
    classify_navbar_children,
    find_links_container,
    find_logo,
    find_menu_button,
    is_links_container,
    run_chain,
)

from conftest import make_link, make_node, make_text


class TestLogoChain:
    """Logo strategies are tried in order; the first match wins."""

    def test_id_keyword_beats_leading_heading(self):
        heading = make_node("hero-title", "heading")
        brand = make_node("brand-mark", "image")
        children = [heading, make_text("a"), brand]

        assert find_logo(children) is brand

    def test_leading_heading_within_first_two(self):
        heading = make_node("title", "heading")
        assert find_logo([make_text("x"), heading]) is heading

    def test_heading_outside_window_ignored(self):
        children = [make_text("a"), make_text("b"), make_node("late", "heading")]
        assert find_logo(children) is None

    def test_leading_image_only_first(self):
        image = make_node("img-1", "image")
        assert find_logo([image, make_text("a")]) is image
        assert find_logo([make_text("a"), make_node("img-2", "image")]) is None

    @pytest.mark.parametrize("node_id", ["nav-title", "store-name", "company", "site-name"])
    def test_site_name_fallback(self, node_id):
        named = make_text(node_id, "Acme")
        children = [make_text("a"), make_text("b"), named]
        assert find_logo(children) is named

    def test_title_without_nav_is_not_name(self):
        assert find_logo([make_text("a"), make_text("b"), make_text("page-title")]) is None

    def test_id_match_is_case_insensitive(self):
        logo = make_node("Site-LOGO", "image")
        assert find_logo([make_text("a"), make_text("b"), logo]) is logo


class TestMenuButtonChain:

    @pytest.mark.parametrize("icon", ["menu", "Menu", "hamburger", "AlignJustify"])
    def test_menu_icon(self, icon):
        button = make_node("btn", "button", {"iconName": icon})
        assert find_menu_button([make_text("a"), button]) is button

    def test_icon_prop_fallback(self):
        button = make_node("btn", "icon", {"icon": "menu"})
        assert find_menu_button([button]) is button

    @pytest.mark.parametrize("node_id", ["mobile-nav-btn", "hamburger", "menu-toggle", "main-menu-button"])
    def test_id_keyword(self, node_id):
        button = make_node(node_id, "button")
        assert find_menu_button([make_text("a"), button]) is button

    def test_icon_beats_id_keyword(self):
        by_id = make_node("mobile-cta", "button")
        by_icon = make_node("x", "button", {"iconName": "menu"})
        assert find_menu_button([by_id, by_icon]) is by_icon

    def test_excluded_child_skipped(self):
        button = make_node("hamburger", "button")
        assert find_menu_button([button], exclude=[button]) is None

    def test_no_match(self):
        assert find_menu_button([make_text("a"), make_link("b")]) is None


class TestLinksContainer:

    @pytest.mark.parametrize("node", [
        make_node("nav-links", "div"),
        make_node("nav-links-main-nav", "div"),
        make_node("link-div", "div"),
        make_node("link-div-2", "div"),
        make_node("nav-right", "div"),
        make_node("links-container", "div"),
        make_node("NAV-LINKS", "div"),
    ])
    def test_recognised(self, node):
        assert is_links_container(node) is True

    @pytest.mark.parametrize("node", [
        make_node("nav-home", "text"),
        make_node("nav-linksy", "div"),
        make_node("nav-right", "text"),
        make_node("navigation", "div"),
        make_node(None, "div"),
    ])
    def test_not_recognised(self, node):
        assert is_links_container(node) is False

    def test_find_first(self):
        container = make_node("nav-links", "div")
        assert find_links_container([make_text("a"), container]) is container
        assert find_links_container([make_text("a")]) is None


class TestClassification:

    def test_acme_navbar(self, acme_navbar):
        children = acme_navbar["children"]
        result = classify_navbar_children(children)

        assert result.logo is children[0]
        assert result.logo_strategy == "leading-heading"
        assert result.menu_button is children[-1]
        assert result.menu_strategy == "menu-icon"
        assert [c["id"] for c in result.nav_items] == [
            "nav-home", "nav-pricing", "nav-docs", "nav-blog",
        ]

    def test_logo_never_doubles_as_menu_button(self):
        # Matches both the logo id keyword and the menu icon.
        both = make_node("brand", "button", {"iconName": "menu"})
        toggle = make_node("menu-toggle", "button")
        result = classify_navbar_children([both, make_text("a"), toggle])

        assert result.logo is both
        assert result.menu_button is toggle

    def test_equal_children_are_kept_apart(self):
        first = make_text("item", "Same")
        second = make_text("item", "Same")
        result = classify_navbar_children([first, second])

        assert len(result.nav_items) == 2
        assert result.nav_items[0] is first
        assert result.nav_items[1] is second

    def test_no_logo_no_menu(self):
        items = [make_link("a"), make_link("b"), make_link("c")]
        result = classify_navbar_children(items)

        assert result.logo is None
        assert result.menu_button is None
        assert result.nav_items == items


class TestRunChain:

    def test_custom_chain_reports_strategy(self):
        chain = (
            ClassifierStrategy("never", lambda c: False),
            ClassifierStrategy("texts", lambda c: c.get("type") == "text", window=1),
        )
        text = make_text("a")
        assert run_chain(chain, [text]) == (text, "texts")
        assert run_chain(chain, [make_link("b"), text]) == (None, None)
