"""
Fixers - Rule-based layout repairs.

Components:
- RepairRule: Abstract base class for all repair rules
- RuleEngine: Orchestrates rule execution per node
- PatchApplier: Merges rule patches into nodes
- Footer rules and navbar rules

Usage:
    from layout_repair.repair.fixers import create_default_engine

    engine = create_default_engine()
    changed = engine.apply(node, RuleFamily.FOOTER, in_context=True)
"""

from .base_rule import RepairRule
from .patch_applier import PatchApplier
from .rule_engine import RuleEngine, create_default_engine
from .footer import (
    FooterSectionRule,
    FooterGridRule,
    FooterColumnRule,
    FooterLinkRule,
    FooterTextLinkRule,
)
from .navbar import NavbarStyleRule, NavbarRestructurer


__all__ = [
    # Base
    "RepairRule",
    "PatchApplier",
    "RuleEngine",
    "create_default_engine",
    # Footer
    "FooterSectionRule",
    "FooterGridRule",
    "FooterColumnRule",
    "FooterLinkRule",
    "FooterTextLinkRule",
    # Navbar
    "NavbarStyleRule",
    "NavbarRestructurer",
]
