"""
FooterGridRule - Four-column grid for the footer content container.

Handles the common two-column mistake ("1fr 1fr") that squeezes the
brand column and three link columns into two rows, and adds the tablet
and mobile collapse the generator usually forgets.
"""

from typing import Any

from ...contracts.families import RuleFamily
from ...contracts.nodes import ComponentNode, node_id, node_type, read_props
from ...contracts.patches import PropPatch
from ...style_defaults import LayoutDefaults

from ..base_rule import RepairRule

GRID_ID_KEYWORDS = ("footer-content", "footer-grid", "footer-columns")


def is_footer_grid(node: ComponentNode) -> bool:
    """Check if a node is the footer's column container."""
    if node_type(node) != "div":
        return False
    nid = node_id(node)
    if any(keyword in nid for keyword in GRID_ID_KEYWORDS):
        return True
    return nid.endswith("-inner") and "footer" in nid


def _is_two_column_mistake(value: Any) -> bool:
    return isinstance(value, str) and value.strip() == LayoutDefaults.GRID_TWO_COLUMN_MISTAKE


class FooterGridRule(RepairRule):
    """
    Grid layout for the footer content container.

    Strategy:
    - display: grid and alignItems: start (forced)
    - Four equal columns when absent or the two-column mistake
    - gap / maxWidth only when absent
    - Tablet (2 columns) and mobile (1 column) overrides when absent
    """

    @property
    def family(self) -> RuleFamily:
        return RuleFamily.FOOTER

    @property
    def priority(self) -> int:
        return 20

    def applies_to(self, node: ComponentNode, in_context: bool) -> bool:
        return in_context and is_footer_grid(node)

    def generate_patch(self, node: ComponentNode) -> PropPatch:
        props = read_props(node)
        patch = self.new_patch(node, "Footer content grid")

        patch.force(props, "display", "grid")
        patch.default(
            props,
            "gridTemplateColumns",
            LayoutDefaults.GRID_COLUMNS,
            _is_two_column_mistake,
        )
        patch.force(props, "alignItems", "start")
        patch.default(props, "gap", LayoutDefaults.GRID_GAP)
        patch.default(props, "maxWidth", LayoutDefaults.GRID_MAX_WIDTH)
        patch.default(props, "width", "100%")

        patch.default_nested(
            props, "tabletStyles", "gridTemplateColumns", LayoutDefaults.GRID_COLUMNS_TABLET
        )
        patch.default_nested(
            props, "mobileStyles", "gridTemplateColumns", LayoutDefaults.GRID_COLUMNS_MOBILE
        )
        return patch
