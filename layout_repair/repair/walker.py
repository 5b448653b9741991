"""
TreeWalker - Depth-first traversal that drives the repair rules.

Each walk threads one context flag down the tree (e.g. "inside a
footer"), applies its rule family to every node under the updated flag,
and ORs the "changed" result back up. The footer and navbar walks key
off different markers and never share a flag.

Usage:
    walker = FooterWalker(engine)
    changed = walker.walk(root)

    walker = NavbarWalker(engine, ledger=RestructureLedger())
    changed = walker.walk(root)
"""

from abc import ABC, abstractmethod
from typing import Optional

from .contracts.families import RuleFamily
from .contracts.nodes import ComponentNode, get_children, is_node, node_id, node_type
from .contracts.patches import PatchSet
from .fixers.navbar.restructure import NavbarRestructurer
from .fixers.rule_engine import RuleEngine, create_default_engine
from .ledger import RestructureLedger
from .style_defaults import LayoutDefaults


class TreeWalker(ABC):
    """
    Base class for context-threading tree walks.

    Subclasses define the family, the context marker and, optionally,
    extra per-node work.
    """

    def __init__(
        self,
        engine: Optional[RuleEngine] = None,
        patch_set: Optional[PatchSet] = None,
    ):
        self._engine = engine or create_default_engine()
        self.patch_set = patch_set if patch_set is not None else PatchSet(
            source=self.family.value
        )

    @property
    @abstractmethod
    def family(self) -> RuleFamily:
        """Rule family applied by this walk."""
        pass

    @abstractmethod
    def marks_context(self, node: ComponentNode) -> bool:
        """Check if a node opens the walk's context for itself and descendants."""
        pass

    def visit(self, node: ComponentNode, in_context: bool) -> bool:
        """
        Apply this walk's repairs to one node.

        Args:
            node: Node being visited
            in_context: Updated context flag

        Returns:
            True if the node changed
        """
        return self._engine.apply(node, self.family, in_context, self.patch_set)

    def walk(self, node: ComponentNode, in_context: bool = False) -> bool:
        """
        Walk ``node`` and its descendants.

        Args:
            node: Root of the subtree
            in_context: Context flag inherited from the ancestors

        Returns:
            True if the node or any descendant changed
        """
        if not is_node(node):
            return False

        in_context = in_context or self.marks_context(node)
        changed = self.visit(node, in_context)

        for child in get_children(node):
            if self.walk(child, in_context):
                changed = True

        return changed


class FooterWalker(TreeWalker):
    """Applies the footer rules to every node inside a footer."""

    @property
    def family(self) -> RuleFamily:
        return RuleFamily.FOOTER

    def marks_context(self, node: ComponentNode) -> bool:
        return "footer" in node_id(node) or node_type(node) == "footer"


class NavbarWalker(TreeWalker):
    """
    Applies navbar styling and restructuring to nav-horizontal nodes.

    Styling runs on every visit; restructuring consults the ledger the
    walker was built with.
    """

    def __init__(
        self,
        engine: Optional[RuleEngine] = None,
        ledger: Optional[RestructureLedger] = None,
        patch_set: Optional[PatchSet] = None,
        restructurer: Optional[NavbarRestructurer] = None,
    ):
        super().__init__(engine, patch_set)
        self.ledger = ledger if ledger is not None else RestructureLedger()
        self._restructurer = restructurer or NavbarRestructurer(self._engine.applier)
        self.restructured = 0

    @property
    def family(self) -> RuleFamily:
        return RuleFamily.NAVBAR

    def marks_context(self, node: ComponentNode) -> bool:
        return node_type(node) == LayoutDefaults.NAV_TYPE

    def visit(self, node: ComponentNode, in_context: bool) -> bool:
        changed = super().visit(node, in_context)
        if node_type(node) == LayoutDefaults.NAV_TYPE:
            if self._restructurer.restructure(node, self.ledger, self.patch_set):
                self.restructured += 1
                changed = True
        return changed
