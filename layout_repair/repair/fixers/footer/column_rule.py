"""
FooterColumnRule - Vertical layout and sizing for footer columns.
"""

from ...contracts.families import RuleFamily
from ...contracts.nodes import ComponentNode, get_children, node_id, node_type, read_props
from ...contracts.patches import PropPatch
from ...style_defaults import LayoutDefaults

from ..base_rule import RepairRule
from .grid_rule import is_footer_grid
from .section_rule import is_footer_section

COLUMN_ID_KEYWORDS = ("footer-brand", "footer-links", "footer-col")
COLUMN_CHILD_TYPES = frozenset({"link", "text"})


def is_footer_column(node: ComponentNode) -> bool:
    """
    Check if a div is a footer column.

    Either named like one, or holding at least two link/text children.
    The section and grid containers are never columns.
    """
    if node_type(node) != "div" or is_footer_section(node) or is_footer_grid(node):
        return False
    nid = node_id(node)
    if any(keyword in nid for keyword in COLUMN_ID_KEYWORDS):
        return True
    link_like = [c for c in get_children(node) if node_type(c) in COLUMN_CHILD_TYPES]
    return len(link_like) >= 2


class FooterColumnRule(RepairRule):
    """
    Column sizing inside the footer grid.

    The brand column takes a wider flex-basis than link columns; an
    existing basis always wins.
    """

    @property
    def family(self) -> RuleFamily:
        return RuleFamily.FOOTER

    @property
    def priority(self) -> int:
        return 25

    def applies_to(self, node: ComponentNode, in_context: bool) -> bool:
        return in_context and is_footer_column(node)

    def generate_patch(self, node: ComponentNode) -> PropPatch:
        props = read_props(node)
        patch = self.new_patch(node, "Footer column layout")

        patch.force(props, "display", "flex")
        patch.force(props, "flexDirection", "column")
        patch.default(props, "gap", LayoutDefaults.COLUMN_GAP)

        basis = (
            LayoutDefaults.BRAND_COLUMN_BASIS
            if "footer-brand" in node_id(node)
            else LayoutDefaults.LINK_COLUMN_BASIS
        )
        patch.default(props, "flexBasis", basis)
        patch.default(props, "minWidth", LayoutDefaults.COLUMN_MIN_WIDTH)
        return patch
