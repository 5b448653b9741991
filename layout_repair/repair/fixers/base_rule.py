"""
RepairRule - Abstract base class for layout repair rules.

Each rule recognises one structural pattern and builds a PropPatch that
normalizes it. Rules are pure: ``generate_patch`` reads the node and
returns a patch, the RuleEngine applies it.

Usage:
    class MyRepairRule(RepairRule):
        @property
        def family(self) -> RuleFamily:
            return RuleFamily.FOOTER

        @property
        def priority(self) -> int:
            return 10

        def applies_to(self, node, in_context: bool) -> bool:
            return in_context and node_type(node) == "div"

        def generate_patch(self, node) -> PropPatch:
            patch = self.new_patch(node, "Why the patch is needed")
            patch.default(read_props(node), "gap", "12px")
            return patch
"""

from abc import ABC, abstractmethod

from ..contracts.families import RuleFamily
from ..contracts.nodes import ComponentNode, raw_node_id
from ..contracts.patches import PropPatch


class RepairRule(ABC):
    """
    Abstract base class for repair rules.

    Subclasses must implement:
    - family: Which walk the rule runs in
    - priority: Execution order (lower = earlier)
    - applies_to(): Whether the rule targets a node
    - generate_patch(): Build the patch for a node

    Priority Ranges:
    - 10-19: Footer section containers
    - 20-29: Footer grid and columns
    - 30-39: Footer links
    - 50-59: Navbar styling
    """

    @property
    @abstractmethod
    def family(self) -> RuleFamily:
        """
        Repair pass this rule belongs to.

        Returns:
            RuleFamily enum value
        """
        pass

    @property
    @abstractmethod
    def priority(self) -> int:
        """
        Execution priority. Lower values run first.

        Returns:
            Integer priority value
        """
        pass

    @property
    def name(self) -> str:
        """Rule name for logging and debugging."""
        return self.__class__.__name__

    @abstractmethod
    def applies_to(self, node: ComponentNode, in_context: bool) -> bool:
        """
        Determine if this rule targets the given node.

        Args:
            node: Node being visited
            in_context: Context flag of the walk (already updated for this node)

        Returns:
            True if generate_patch should run
        """
        pass

    @abstractmethod
    def generate_patch(self, node: ComponentNode) -> PropPatch:
        """
        Build the patch for a node.

        Must not modify the node. An empty patch means nothing to repair.

        Args:
            node: Node the rule applies to

        Returns:
            PropPatch holding only keys whose write is a real change
        """
        pass

    def new_patch(self, node: ComponentNode, reason: str) -> PropPatch:
        """Empty patch addressed to ``node`` and tagged with this rule."""
        return PropPatch(node_id=raw_node_id(node), reason=reason, rule=self.name)

    def __repr__(self) -> str:
        return f"{self.name}(family={self.family.value}, priority={self.priority})"

    def __eq__(self, other: object) -> bool:
        """Equality check based on class type."""
        if not isinstance(other, RepairRule):
            return False
        return self.__class__ == other.__class__

    def __hash__(self) -> int:
        return hash(self.__class__.__name__)
