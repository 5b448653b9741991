"""
Layout Repair - Normalization pass over generated component trees.

Detects a small set of structural defects in generated UI trees
(flat navbars, footer grid and column layout, footer link contrast)
and rewrites the tree in place to a render-correct shape, keeping
every deliberate value the generator already set.
"""

from .style_defaults import LayoutDefaults
from .contracts import PropPatch, PatchSet, RepairReport, RuleFamily
from .ledger import RestructureLedger
from .walker import FooterWalker, NavbarWalker, TreeWalker
from .runner import (
    repair_component_layout,
    repair_footer_in_tree,
    repair_navbar_in_tree,
    repair_project_footer,
    repair_project_layout,
    repair_project_navbar,
    reset_footer_indices,
    reset_navbar_indices,
    session_counts,
)

__all__ = [
    "LayoutDefaults",
    "PropPatch",
    "PatchSet",
    "RepairReport",
    "RuleFamily",
    "RestructureLedger",
    "TreeWalker",
    "FooterWalker",
    "NavbarWalker",
    "repair_component_layout",
    "repair_footer_in_tree",
    "repair_navbar_in_tree",
    "repair_project_footer",
    "repair_project_layout",
    "repair_project_navbar",
    "reset_footer_indices",
    "reset_navbar_indices",
    "session_counts",
]
