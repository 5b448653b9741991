"""
FooterTextLinkRule - Text nodes styled as links inside the footer.

Generators sometimes emit footer links as ``text`` nodes with "link" in
their id; they need the same contrast treatment as real links.
"""

from ...contracts.families import RuleFamily
from ...contracts.nodes import ComponentNode, node_id, node_type, read_props
from ...contracts.patches import PropPatch

from ..base_rule import RepairRule
from .link_rule import apply_link_contrast


class FooterTextLinkRule(RepairRule):
    """Link colour defaults plus a pointer cursor for link-like text."""

    @property
    def family(self) -> RuleFamily:
        return RuleFamily.FOOTER

    @property
    def priority(self) -> int:
        return 35

    def applies_to(self, node: ComponentNode, in_context: bool) -> bool:
        return in_context and node_type(node) == "text" and "link" in node_id(node)

    def generate_patch(self, node: ComponentNode) -> PropPatch:
        props = read_props(node)
        patch = self.new_patch(node, "Footer text link contrast")

        apply_link_contrast(patch, props)
        patch.default(props, "cursor", "pointer")
        return patch
