"""
Tests for the context-threading tree walkers.
"""

from layout_repair.repair import FooterWalker, NavbarWalker, RestructureLedger
from layout_repair.repair.contracts import RuleFamily

from conftest import child_ids, make_acme_navbar, make_link, make_node, make_text


class TestFooterWalker:

    def test_context_opens_on_footer_id(self, default_engine):
        walker = FooterWalker(default_engine)
        assert walker.marks_context(make_node("site-footer")) is True
        assert walker.marks_context(make_node("x", "footer")) is True
        assert walker.marks_context(make_node("hero")) is False

    def test_links_outside_footer_untouched(self, default_engine):
        page = make_node("page-root", "div", children=[
            make_node("hero", "section", children=[make_link("cta", "Start")]),
        ])
        assert FooterWalker(default_engine).walk(page) is False
        assert page["children"][0]["children"][0]["props"] == {"text": "Start"}

    def test_context_flows_to_descendants(self, default_engine):
        deep_link = make_link("deep")
        root = make_node("page", "div", children=[
            make_node("site-footer", "div", children=[
                make_node("wrapper", "div", children=[deep_link]),
            ]),
        ])

        assert FooterWalker(default_engine).walk(root) is True
        assert deep_link["props"]["fontSize"] == "14px"

    def test_sibling_subtrees_do_not_share_context(self, default_engine):
        outside = make_link("outside")
        root = make_node("page", "div", children=[
            make_node("footer", "section", children=[make_link("inside")]),
            make_node("after", "div", children=[outside]),
        ])
        FooterWalker(default_engine).walk(root)
        assert "fontSize" not in outside["props"]

    def test_patches_recorded_under_family_source(self, default_engine, footer):
        walker = FooterWalker(default_engine)
        walker.walk(footer)

        assert walker.patch_set.source == RuleFamily.FOOTER.value
        assert walker.patch_set.get_for_node("footer-content") is not None

    def test_malformed_children_skipped(self, default_engine):
        root = make_node("footer", "section")
        root["children"] = ["junk", None, make_link("ok")]

        assert FooterWalker(default_engine).walk(root) is True
        assert root["children"][:2] == ["junk", None]
        assert root["children"][2]["props"]["fontSize"] == "14px"

    def test_non_dict_root(self, default_engine):
        assert FooterWalker(default_engine).walk("footer") is False
        assert FooterWalker(default_engine).walk(None) is False


class TestNavbarWalker:

    def test_nested_navbar_found(self, default_engine):
        navbar = make_acme_navbar()
        root = make_node("page", "div", children=[make_node("header", "div", children=[navbar])])
        walker = NavbarWalker(default_engine, ledger=RestructureLedger())

        assert walker.walk(root) is True
        assert walker.restructured == 1
        assert child_ids(navbar) == ["site-heading", "nav-links-main-nav", "nav-toggle"]
        assert navbar["props"]["position"] == "sticky"

    def test_styling_runs_when_not_restructured(self, default_engine):
        navbar = make_node("nav", "nav-horizontal", children=[make_text("a")])
        walker = NavbarWalker(default_engine)

        assert walker.walk(navbar) is True
        assert walker.restructured == 0
        assert navbar["props"]["display"] == "flex"

    def test_ledger_shared_across_walks(self, default_engine, ledger):
        walker = NavbarWalker(default_engine, ledger=ledger)
        walker.walk(make_acme_navbar())

        again = make_acme_navbar()
        walker.walk(again)

        assert walker.restructured == 1
        assert len(again["children"]) == 6
        assert walker.ledger is ledger

    def test_links_container_outside_navbar_untouched(self, default_engine):
        container = make_node("nav-links", "div", children=[
            make_link("a"), make_link("b"), make_link("c"),
        ])
        root = make_node("page", "div", children=[container])

        assert NavbarWalker(default_engine).walk(root) is False
        assert container["props"] == {}
        assert child_ids(container) == ["a", "b", "c"]
