"""
FooterSectionRule - Dark background and column layout for footer sections.

Generators often emit the footer section with a transparent or
theme-variable background, which leaves the light link colours the link
rules set unreadable. This rule gives the section a solid dark
background unless a deliberate one is already there.
"""

from ...contracts.families import RuleFamily
from ...contracts.nodes import ComponentNode, node_id, node_type, read_props
from ...contracts.patches import PropPatch, is_empty_value
from ...style_defaults import LayoutDefaults

from ..base_rule import RepairRule

SECTION_IDS = frozenset({"footer", "footer-section"})


def is_footer_section(node: ComponentNode) -> bool:
    """Check if a node is the footer section container itself."""
    nid = node_id(node)
    return nid in SECTION_IDS or (node_type(node) == "section" and "footer" in nid)


class FooterSectionRule(RepairRule):
    """
    Section-level defaults for the footer.

    Strategy:
    - Background: only when unset, transparent or a theme reference,
      and no gradient is present
    - Layout: centered vertical flex column at full width (forced)
    - Padding: top-heavy block, only when no padding block exists
    """

    @property
    def family(self) -> RuleFamily:
        return RuleFamily.FOOTER

    @property
    def priority(self) -> int:
        return 10

    def applies_to(self, node: ComponentNode, in_context: bool) -> bool:
        return in_context and is_footer_section(node)

    def generate_patch(self, node: ComponentNode) -> PropPatch:
        props = read_props(node)
        patch = self.new_patch(node, "Footer section background and layout")

        if is_empty_value(props.get("backgroundGradient")):
            patch.default(
                props,
                "backgroundColor",
                LayoutDefaults.footer_background(),
                LayoutDefaults.is_background_placeholder,
            )

        patch.force(props, "display", "flex")
        patch.force(props, "flexDirection", "column")
        patch.force(props, "alignItems", "center")
        patch.force(props, "width", "100%")

        patch.default_nested(props, "spacingControl", "padding", LayoutDefaults.footer_padding())

        patch.force(props, LayoutDefaults.AI_GENERATED, True)
        return patch
