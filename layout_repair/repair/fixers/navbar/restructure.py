"""
NavbarRestructurer - Group flat navbar children as [logo, links, menu].

Generators often emit a navbar as a flat row of logo, links and menu
button. This regroups the links into one container that hides on
mobile, and makes the menu button its mobile-only counterpart.

Per-node states:
- Unprocessed, <= 2 children or a links container already present:
  recorded as processed, children untouched.
- Unprocessed, >= 3 flat children: classified; restructured and
  recorded when at least two nav items remain, otherwise left
  unprocessed so a later run can retry.
- Processed (in the ledger): never restructured again in this run.
"""

import logging
from typing import List, Optional

from ...analyzers.navbar_classifier import (
    NavbarClassification,
    classify_navbar_children,
    find_links_container,
)
from ...contracts.nodes import (
    ComponentNode,
    is_node,
    node_type,
    raw_node_id,
    read_props,
)
from ...contracts.patches import PatchSet, PropPatch
from ...ledger import RestructureLedger
from ...style_defaults import LayoutDefaults
from ..patch_applier import PatchApplier


logger = logging.getLogger(__name__)

NOWRAP_ITEM_TYPES = frozenset({"link", "text"})


def links_container_id(navbar: ComponentNode) -> str:
    """Id for the synthesized container, recognisable on later passes."""
    navbar_id = raw_node_id(navbar)
    return f"nav-links-{navbar_id}" if navbar_id else "nav-links"


def build_links_container(
    navbar: ComponentNode, nav_items: List[ComponentNode]
) -> ComponentNode:
    """Horizontal flex row holding ``nav_items`` in order, hidden on mobile."""
    return {
        "id": links_container_id(navbar),
        "type": "div",
        "props": {
            "display": "flex",
            "flexDirection": "row",
            "alignItems": "center",
            "gap": LayoutDefaults.NAV_LINKS_GAP,
            "mobileStyles": {"display": "none"},
            LayoutDefaults.AI_GENERATED: True,
        },
        "children": list(nav_items),
    }


class NavbarRestructurer:
    """
    Structural repair for nav-horizontal nodes.

    The ledger is passed in per call; the restructurer itself holds no
    run state.
    """

    def __init__(self, applier: Optional[PatchApplier] = None):
        self._applier = applier or PatchApplier()

    def restructure(
        self,
        navbar: ComponentNode,
        ledger: RestructureLedger,
        patch_set: Optional[PatchSet] = None,
    ) -> bool:
        """
        Regroup a navbar's children if needed.

        Args:
            navbar: nav-horizontal node, mutated in place
            ledger: Ledger of the current run
            patch_set: Optional collector for applied prop patches

        Returns:
            True if the children were restructured
        """
        if node_type(navbar) != LayoutDefaults.NAV_TYPE or navbar in ledger:
            return False

        children = navbar.get("children")
        if not isinstance(children, list) or not all(is_node(c) for c in children):
            # Nothing safe to regroup; leave as-is without recording.
            return False

        if len(children) <= 2 or find_links_container(children) is not None:
            ledger.record(navbar)
            return False

        classification = classify_navbar_children(children)
        if len(classification.nav_items) < 2:
            logger.debug(
                f"Navbar {raw_node_id(navbar)!r}: only "
                f"{len(classification.nav_items)} nav item(s), not restructuring"
            )
            return False

        container = build_links_container(navbar, classification.nav_items)
        regrouped = [container]
        if classification.logo is not None:
            regrouped.insert(0, classification.logo)
        if classification.menu_button is not None:
            regrouped.append(classification.menu_button)
        children[:] = regrouped

        self._keep_items_on_one_line(classification, patch_set)
        if classification.menu_button is not None:
            self._make_mobile_only(classification.menu_button, patch_set)

        ledger.record(navbar)
        logger.info(
            f"Restructured navbar {raw_node_id(navbar)!r}: "
            f"logo={'yes' if classification.logo is not None else 'no'} "
            f"({classification.logo_strategy}), "
            f"{len(classification.nav_items)} items grouped in {container['id']!r}, "
            f"menu={'yes' if classification.menu_button is not None else 'no'} "
            f"({classification.menu_strategy})"
        )
        return True

    def _keep_items_on_one_line(
        self, classification: NavbarClassification, patch_set: Optional[PatchSet]
    ) -> None:
        for item in classification.nav_items:
            if node_type(item) not in NOWRAP_ITEM_TYPES:
                continue
            patch = PropPatch(
                node_id=raw_node_id(item),
                reason="Nav item stays on one line",
                rule=self.__class__.__name__,
            )
            patch.default(read_props(item), "whiteSpace", "nowrap")
            self._applier.apply(item, patch, patch_set)

    def _make_mobile_only(
        self, menu_button: ComponentNode, patch_set: Optional[PatchSet]
    ) -> None:
        props = read_props(menu_button)
        patch = PropPatch(
            node_id=raw_node_id(menu_button),
            reason="Menu button hidden on desktop, shown on mobile",
            rule=self.__class__.__name__,
        )
        patch.force(props, "display", "none")
        patch.force_nested(props, "mobileStyles", "display", "flex")
        self._applier.apply(menu_button, patch, patch_set)
