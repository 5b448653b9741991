"""
RuleEngine - Orchestrates repair rule execution.

Maintains a registry of rules and applies the ones targeting a node
during a tree walk.

Usage:
    from layout_repair.repair.fixers import RuleEngine, create_default_engine

    # Use default engine with all rules
    engine = create_default_engine()
    changed = engine.apply(node, RuleFamily.FOOTER, in_context=True)

    # Or build custom engine
    engine = RuleEngine()
    engine.register(FooterLinkRule())
    changed = engine.apply(node, RuleFamily.FOOTER, in_context=True)
"""

from typing import Dict, List, Optional, Type
import logging

from ..contracts.families import RuleFamily
from ..contracts.nodes import ComponentNode, has_writable_props, raw_node_id
from ..contracts.patches import PatchSet

from .base_rule import RepairRule
from .patch_applier import PatchApplier


logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Orchestrates repair rule execution.

    The engine maintains a registry of RepairRule instances, indexed by
    family. When applying rules to a node, it:
    1. Looks up the rules of the walk's family
    2. Asks each rule, in priority order, whether it targets the node
    3. Applies the generated patches
    4. Reports whether anything changed

    Rules write disjoint or idempotent keys, so priority only fixes the
    logging order, never the outcome.
    """

    def __init__(self, applier: Optional[PatchApplier] = None):
        """Initialize the rule engine."""
        self._rules: List[RepairRule] = []
        self._family_index: Dict[RuleFamily, List[RepairRule]] = {}
        self._applier = applier or PatchApplier()

    def register(self, rule: RepairRule) -> None:
        """
        Register a repair rule.

        Args:
            rule: RepairRule instance to register
        """
        self._rules.append(rule)
        self._rules.sort(key=lambda r: r.priority)
        self._rebuild_index()
        logger.debug(f"Registered rule: {rule.name}")

    def register_all(self, rules: List[RepairRule]) -> None:
        """Register multiple rules at once."""
        for rule in rules:
            self.register(rule)

    def unregister(self, rule_class: Type[RepairRule]) -> bool:
        """
        Unregister a rule by class.

        Args:
            rule_class: Class of rule to remove

        Returns:
            True if rule was found and removed
        """
        original_count = len(self._rules)
        self._rules = [r for r in self._rules if not isinstance(r, rule_class)]
        self._rebuild_index()
        removed = len(self._rules) < original_count
        if removed:
            logger.debug(f"Unregistered rule: {rule_class.__name__}")
        return removed

    def get_rules(self, family: RuleFamily) -> List[RepairRule]:
        """Rules of one family, sorted by priority."""
        return self._family_index.get(family, [])

    def apply(
        self,
        node: ComponentNode,
        family: RuleFamily,
        in_context: bool,
        patch_set: Optional[PatchSet] = None,
    ) -> bool:
        """
        Apply every rule of ``family`` that targets ``node``.

        Args:
            node: Node being visited, mutated in place
            family: Family of the current walk
            in_context: Context flag, already updated for this node
            patch_set: Optional collector for applied patches

        Returns:
            True if any rule changed the node
        """
        if not has_writable_props(node):
            return False

        changed = False
        for rule in self.get_rules(family):
            try:
                if not rule.applies_to(node, in_context):
                    continue
                patch = rule.generate_patch(node)
            except Exception as e:
                logger.error(f"Rule {rule.name} failed on {raw_node_id(node)!r}: {e}")
                continue

            if self._applier.apply(node, patch, patch_set):
                changed = True

        return changed

    def _rebuild_index(self) -> None:
        """Rebuild the family index."""
        self._family_index.clear()
        for rule in self._rules:
            self._family_index.setdefault(rule.family, []).append(rule)

    @property
    def rules(self) -> List[RepairRule]:
        """Get all registered rules (sorted by priority)."""
        return self._rules.copy()

    @property
    def applier(self) -> PatchApplier:
        return self._applier

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"RuleEngine({len(self._rules)} rules)"


def create_default_engine() -> RuleEngine:
    """
    Create a RuleEngine with all default rules registered.

    Returns:
        Configured RuleEngine ready to use
    """
    from .footer import (
        FooterSectionRule,
        FooterGridRule,
        FooterColumnRule,
        FooterLinkRule,
        FooterTextLinkRule,
    )
    from .navbar import NavbarStyleRule

    engine = RuleEngine()
    engine.register_all([
        FooterSectionRule(),    # Priority 10 - Section background and layout
        FooterGridRule(),       # Priority 20 - Column grid
        FooterColumnRule(),     # Priority 25 - Column sizing
        FooterLinkRule(),       # Priority 30 - Link contrast
        FooterTextLinkRule(),   # Priority 35 - Link-styled text contrast
        NavbarStyleRule(),      # Priority 50 - Navbar styling enforcement
    ])

    logger.debug(f"Created default engine with {len(engine)} rules")
    return engine
