"""
Test configuration and fixtures for pytest.

This module provides shared fixtures used across all tests:
- Node factories for building component trees
- Rule engines and walkers
- FastAPI TestClient
"""

from typing import Any, Dict, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

from layout_repair.main import app
from layout_repair.repair import RestructureLedger, reset_footer_indices, reset_navbar_indices
from layout_repair.repair.fixers import RuleEngine, create_default_engine


# ---------------------------------------------------------------------------
# NODE FACTORIES
# ---------------------------------------------------------------------------

def make_node(
    node_id: Optional[str],
    node_type: str = "div",
    props: Optional[Dict[str, Any]] = None,
    children: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Helper to create a component node."""
    node: Dict[str, Any] = {"type": node_type, "props": props if props is not None else {}}
    if node_id is not None:
        node["id"] = node_id
    if children is not None:
        node["children"] = children
    return node


def make_text(node_id: str, content: str = "", **props) -> Dict[str, Any]:
    return make_node(node_id, "text", {"content": content, **props})


def make_link(node_id: str, text: str = "", **props) -> Dict[str, Any]:
    return make_node(node_id, "link", {"text": text, **props})


def make_navbar(children: List[Dict[str, Any]], node_id: str = "main-nav", **props) -> Dict[str, Any]:
    return make_node(node_id, "nav-horizontal", dict(props), children)


def make_acme_navbar(node_id: str = "main-nav") -> Dict[str, Any]:
    """Flat navbar: heading, four text items, menu button."""
    return make_navbar(
        [
            make_node("site-heading", "heading", {"content": "Acme"}),
            make_text("nav-home", "Home"),
            make_text("nav-pricing", "Pricing"),
            make_text("nav-docs", "Docs"),
            make_text("nav-blog", "Blog"),
            make_node("nav-toggle", "button", {"iconName": "menu"}),
        ],
        node_id=node_id,
    )


def make_footer() -> Dict[str, Any]:
    """Typical generated footer: section > grid > brand + link columns."""
    return make_node(
        "footer-section",
        "section",
        {"backgroundColor": {"type": "solid", "value": "hsl(var(--background))"}},
        [
            make_node(
                "footer-content",
                "div",
                {"gridTemplateColumns": "1fr 1fr"},
                [
                    make_node("footer-brand", "div", {}, [
                        make_node("footer-logo", "heading", {"content": "Acme"}),
                        make_text("footer-tagline", "Build faster"),
                    ]),
                    make_node("footer-links-product", "div", {}, [
                        make_link("footer-link-features", "Features", color="hsl(var(--primary))"),
                        make_link("footer-link-pricing", "Pricing", textDecoration="underline"),
                    ]),
                    make_node("footer-col-company", "div", {}, [
                        make_text("footer-link-about", "About"),
                        make_text("footer-link-careers", "Careers"),
                    ]),
                ],
            ),
        ],
    )


def child_ids(node: Dict[str, Any]) -> List[str]:
    return [child.get("id") for child in node.get("children", [])]


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def fresh_session():
    """Clear session bookkeeping between tests."""
    reset_footer_indices()
    reset_navbar_indices()
    yield


@pytest.fixture
def engine() -> RuleEngine:
    """Empty RuleEngine instance."""
    return RuleEngine()


@pytest.fixture
def default_engine() -> RuleEngine:
    """RuleEngine with all default rules."""
    return create_default_engine()


@pytest.fixture
def ledger() -> RestructureLedger:
    return RestructureLedger()


@pytest.fixture
def acme_navbar() -> Dict[str, Any]:
    return make_acme_navbar()


@pytest.fixture
def footer() -> Dict[str, Any]:
    return make_footer()


@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """FastAPI test client."""
    with TestClient(app) as test_client:
        yield test_client
