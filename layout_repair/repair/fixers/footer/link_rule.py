"""
FooterLinkRule - Contrast-safe colours for links on the dark footer.
"""

from typing import Any, Dict

from ...contracts.families import RuleFamily
from ...contracts.nodes import ComponentNode, node_type, read_props
from ...contracts.patches import PropPatch
from ...style_defaults import LayoutDefaults

from ..base_rule import RepairRule


def apply_link_contrast(patch: PropPatch, props: Dict[str, Any]) -> None:
    """
    Record link colour defaults on ``patch``.

    Colour is only replaced when unset or a primary/foreground theme
    placeholder; the hover state is only attached when none exists.
    """
    patch.default(
        props,
        "color",
        LayoutDefaults.LINK_COLOR,
        LayoutDefaults.is_link_color_placeholder,
    )
    patch.default_nested(
        props, "stateStyles", "hover", {"color": LayoutDefaults.LINK_HOVER_COLOR}
    )


def _is_underline(value: Any) -> bool:
    return isinstance(value, str) and value.strip().lower() == "underline"


class FooterLinkRule(RepairRule):
    """Link colour, decoration and size inside the footer."""

    @property
    def family(self) -> RuleFamily:
        return RuleFamily.FOOTER

    @property
    def priority(self) -> int:
        return 30

    def applies_to(self, node: ComponentNode, in_context: bool) -> bool:
        return in_context and node_type(node) == "link"

    def generate_patch(self, node: ComponentNode) -> PropPatch:
        props = read_props(node)
        patch = self.new_patch(node, "Footer link contrast")

        apply_link_contrast(patch, props)
        patch.default(props, "textDecoration", "none", _is_underline)
        patch.default(props, "fontSize", LayoutDefaults.LINK_FONT_SIZE)
        return patch
