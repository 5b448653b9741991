"""
Contracts - Data structures for the layout repair pass.

Provides:
- RuleFamily: Which repair pass a rule belongs to
- ComponentNode / Page: JSON-like tree shapes and safe accessors
- PropPatch / PatchSet: Prop modifications built by repair rules
- RepairReport: Result of a project-level run
"""

from .families import RuleFamily
from .nodes import ComponentNode, Page
from .patches import PropPatch, PatchSet, is_empty_value
from .report import RepairReport

__all__ = [
    "RuleFamily",
    "ComponentNode",
    "Page",
    "PropPatch",
    "PatchSet",
    "is_empty_value",
    "RepairReport",
]
