"""
NavbarStyleRule - Non-destructive styling enforcement for navbars.

Runs on every visit of a nav-horizontal node, whether or not the node
gets restructured. Every write is a fallback: creative layouts vary
justifyContent and backgrounds on purpose, so nothing already present
is replaced.
"""

from ...contracts.families import RuleFamily
from ...contracts.nodes import ComponentNode, node_type, read_props
from ...contracts.patches import PropPatch, is_empty_value
from ...style_defaults import LayoutDefaults

from ..base_rule import RepairRule


class NavbarStyleRule(RepairRule):
    """
    Sticky flex bar with a fallback background.

    Strategy:
    - position/top/zIndex/display/alignItems/width only when absent
    - justifyContent defaults to space-between, never overridden
    - Translucent blurred background only when the navbar has no
      background, gradient or backdrop filter of any kind
    - Horizontal padding block only when no padding block exists
    """

    @property
    def family(self) -> RuleFamily:
        return RuleFamily.NAVBAR

    @property
    def priority(self) -> int:
        return 50

    def applies_to(self, node: ComponentNode, in_context: bool) -> bool:
        return node_type(node) == LayoutDefaults.NAV_TYPE

    def generate_patch(self, node: ComponentNode) -> PropPatch:
        props = read_props(node)
        patch = self.new_patch(node, "Navbar styling fallback")

        patch.default(props, "position", "sticky")
        patch.default(props, "top", "0")
        patch.default(props, "zIndex", LayoutDefaults.NAV_Z_INDEX)
        patch.default(props, "display", "flex")
        patch.default(props, "alignItems", "center")
        patch.default(props, "justifyContent", "space-between")
        patch.default(props, "width", "100%")

        if all(is_empty_value(props.get(key)) for key in LayoutDefaults.NAV_BACKGROUND_KEYS):
            patch.default(props, "backgroundColor", LayoutDefaults.nav_background())
            patch.default(props, "backdropFilter", LayoutDefaults.NAV_BACKDROP_FILTER)

        patch.default_nested(props, "spacingControl", "padding", LayoutDefaults.nav_padding())
        return patch
